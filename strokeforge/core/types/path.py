# StrokeForge - Stroke-to-fill outline generation
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Path operations, the Path container and the PathBuilder.

A Path is an ordered list of operations (MoveTo, LineTo, QuadTo, CurveTo,
ClosePath). The stroker consumes paths that contain only MoveTo, LineTo and
ClosePath and produces paths made of MoveTo, LineTo, CurveTo and ClosePath
through a PathBuilder.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .geometry import Point


@dataclass
class MoveTo:
    x: float
    y: float

@dataclass
class LineTo:
    x: float
    y: float

@dataclass
class QuadTo:
    x1: float; y1: float
    x: float; y: float

@dataclass
class CurveTo:
    x1: float; y1: float
    x2: float; y2: float
    x3: float; y3: float

@dataclass
class ClosePath:
    pass


PathOp = MoveTo | LineTo | QuadTo | CurveTo | ClosePath


def op_endpoint(op: PathOp) -> Point | None:
    """Return the point an operation leaves the pen at (None for ClosePath)."""
    if isinstance(op, (MoveTo, LineTo, QuadTo)):
        return Point(op.x, op.y)
    if isinstance(op, CurveTo):
        return Point(op.x3, op.y3)
    return None


def op_points(op: PathOp) -> list[Point]:
    """All points of an operation, control points included."""
    if isinstance(op, (MoveTo, LineTo)):
        return [Point(op.x, op.y)]
    if isinstance(op, QuadTo):
        return [Point(op.x1, op.y1), Point(op.x, op.y)]
    if isinstance(op, CurveTo):
        return [Point(op.x1, op.y1), Point(op.x2, op.y2), Point(op.x3, op.y3)]
    return []


class Path(list):
    """
    Ordered sequence of path operations.

    Subclasses list so that operations can be appended, iterated and compared
    directly; the helpers below give the subpath and contour views the
    stroker, the devices and the tests need.
    """

    def subpaths(self) -> Iterator[Path]:
        """Yield the subpaths of this path, split at each MoveTo.

        Operations that precede the first MoveTo form a subpath of their own
        (they start at the implicit origin).
        """
        current = Path()
        for op in self:
            if isinstance(op, MoveTo) and current:
                yield current
                current = Path()
            current.append(op)
        if current:
            yield current

    def contour_count(self) -> int:
        """Number of MoveTo-started contours."""
        return sum(1 for op in self if isinstance(op, MoveTo))

    def is_flat(self) -> bool:
        """True when the path holds no curved operations."""
        return not any(isinstance(op, (QuadTo, CurveTo)) for op in self)

    def bounds(self) -> tuple[float, float, float, float] | None:
        """Return (xmin, ymin, xmax, ymax) over all points, control points included."""
        points = [p for op in self for p in op_points(op)]
        if not points:
            return None
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return min(xs), min(ys), max(xs), max(ys)


class PathBuilder:
    """Accumulates move/line/curve/close operations into a Path.

    finish() hands the accumulated Path over and leaves the builder empty.
    """

    def __init__(self) -> None:
        self._path = Path()

    def move_to(self, x: float, y: float) -> None:
        self._path.append(MoveTo(x, y))

    def line_to(self, x: float, y: float) -> None:
        self._path.append(LineTo(x, y))

    def quad_to(self, x1: float, y1: float, x: float, y: float) -> None:
        self._path.append(QuadTo(x1, y1, x, y))

    def curve_to(self, x1: float, y1: float, x2: float, y2: float,
                 x3: float, y3: float) -> None:
        self._path.append(CurveTo(x1, y1, x2, y2, x3, y3))

    def close(self) -> None:
        self._path.append(ClosePath())

    def finish(self) -> Path:
        path = self._path
        self._path = Path()
        return path

    def __len__(self) -> int:
        return len(self._path)
