# StrokeForge - Stroke-to-fill outline generation
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

# error types
LIMITCHECK = 0
RANGECHECK = 1
TYPECHECK = 2
UNDEFINEDRESULT = 3
UNSUPPORTED = 4

error_names = [
    "limitcheck",
    "rangecheck",
    "typecheck",
    "undefinedresult",
    "unsupported",
]


class StrokeError(Exception):
    """Base class of every error raised while converting a stroke to a fill.

    A failure aborts the whole conversion for the path; there is no partial
    result.
    """

    code = UNDEFINEDRESULT

    def __init__(self, func_name: str, detail: str = "", code: int | None = None) -> None:
        if code is not None:
            self.code = code
        if func_name.startswith("sf_"):
            func_name = func_name[3:]
        self.func_name = func_name
        self.detail = detail
        super().__init__(self._format())

    @property
    def error_name(self) -> str:
        if 0 <= self.code < len(error_names):
            return error_names[self.code]
        return f"error#{self.code}"

    def _format(self) -> str:
        msg = f"/{self.error_name} in --{self.func_name}--"
        if self.detail:
            msg += f": {self.detail}"
        return msg


class GeometryError(StrokeError):
    """Degenerate geometry: a denominator that should never be zero was zero."""

    code = UNDEFINEDRESULT


class ZeroLengthSegmentError(GeometryError):
    """A segment whose two end points coincide has no normal."""


class ParallelLinesError(GeometryError):
    """Two offset lines that were expected to meet are parallel."""


class UnsupportedOperationError(StrokeError):
    """A curved operation reached the stroker; only flattened paths are handled."""

    code = UNSUPPORTED


class StyleError(StrokeError):
    """The stroke style carries an out-of-range value."""

    code = RANGECHECK
