# StrokeForge - Stroke-to-fill outline generation
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Stroke style: line width, cap, join, mitre limit and dash pattern.

Defaults are those of a fresh PostScript graphics state. The dash pattern is
validated and carried with the style but is not applied by the stroker.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

from .. import error as sf_error
from .constants import (
    DEFAULT_LINE_WIDTH, DEFAULT_MITER_LIMIT,
    LINE_CAP_BUTT, LINE_CAP_ROUND, LINE_CAP_SQUARE,
    LINE_JOIN_MITER, LINE_JOIN_ROUND, LINE_JOIN_BEVEL,
)


class LineCap(IntEnum):
    BUTT = LINE_CAP_BUTT
    ROUND = LINE_CAP_ROUND
    SQUARE = LINE_CAP_SQUARE


class LineJoin(IntEnum):
    MITRE = LINE_JOIN_MITER
    ROUND = LINE_JOIN_ROUND
    BEVEL = LINE_JOIN_BEVEL


@dataclass(frozen=True)
class StrokeStyle:
    width: float = DEFAULT_LINE_WIDTH
    cap: LineCap = LineCap.BUTT
    join: LineJoin = LineJoin.MITRE
    mitre_limit: float = DEFAULT_MITER_LIMIT
    dash_array: tuple[float, ...] = field(default_factory=tuple)
    dash_offset: float = 0.0

    def __post_init__(self) -> None:
        # accept plain ints and lists from callers
        object.__setattr__(self, "cap", LineCap(self.cap))
        object.__setattr__(self, "join", LineJoin(self.join))
        object.__setattr__(self, "dash_array", tuple(float(d) for d in self.dash_array))

    @property
    def half_width(self) -> float:
        return self.width / 2.0

    def validate(self) -> None:
        """
        Check the style before stroking.

        Raises:
            StyleError: width not a positive finite number, mitre limit
                below 1, a negative dash length, or a dash array made only of
                zeros.
        """
        if not math.isfinite(self.width) or self.width <= 0.0:
            raise sf_error.StyleError("validate", f"line width must be positive, got {self.width}")
        if not math.isfinite(self.mitre_limit) or self.mitre_limit < 1.0:
            raise sf_error.StyleError("validate", f"mitre limit must be >= 1, got {self.mitre_limit}")
        if self.dash_array:
            if any(d < 0.0 or not math.isfinite(d) for d in self.dash_array):
                raise sf_error.StyleError("validate", "dash lengths must be non-negative")
            if sum(self.dash_array) == 0.0:
                raise sf_error.StyleError("validate", "dash array lengths are all zero")
        if not math.isfinite(self.dash_offset):
            raise sf_error.StyleError("validate", "dash offset must be finite")
