# StrokeForge - Stroke-to-fill outline generation
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Curve flattening ahead of stroking.

The stroker only handles straight segments. flatten_path() replaces every
QuadTo and CurveTo with LineTo operations by recursive de Casteljau
subdivision until each piece lies within the tolerance of its chord.
"""

from __future__ import annotations

import math

from ..core import error as sf_error
from ..core import types as sf
from ..core.types import Point, MAX_FLATTEN_DEPTH, DEFAULT_TOLERANCE


def _lerp(a: Point, b: Point, t: float) -> Point:
    return Point(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)


def split_cubic(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> tuple[tuple[Point, Point, Point, Point], tuple[Point, Point, Point, Point]]:
    """Split cubic Bézier at parameter t. Returns (left_cps, right_cps) each as 4 Points."""
    q0 = _lerp(p0, p1, t)
    q1 = _lerp(p1, p2, t)
    q2 = _lerp(p2, p3, t)
    r0 = _lerp(q0, q1, t)
    r1 = _lerp(q1, q2, t)
    s = _lerp(r0, r1, t)
    return (p0, q0, r0, s), (s, r1, q2, p3)


def quad_to_cubic(p0: Point, p1: Point, p2: Point) -> tuple[Point, Point, Point, Point]:
    """Degree-elevate a quadratic Bézier to the equivalent cubic."""
    c1 = Point(p0.x + 2.0 / 3.0 * (p1.x - p0.x), p0.y + 2.0 / 3.0 * (p1.y - p0.y))
    c2 = Point(p2.x + 2.0 / 3.0 * (p1.x - p2.x), p2.y + 2.0 / 3.0 * (p1.y - p2.y))
    return p0, c1, c2, p2


def cubic_is_flat(p0: Point, p1: Point, p2: Point, p3: Point, tol: float) -> bool:
    """True when both control points lie within tol of the chord p0→p3.

    The control points must also project onto the chord itself; a curve
    whose control points run past either end overshoots the chord.
    """
    cdx = p3.x - p0.x
    cdy = p3.y - p0.y
    cln = math.hypot(cdx, cdy)
    if cln < 1e-12:
        return p0.distance_to(p1) < tol and p0.distance_to(p2) < tol
    for p in (p1, p2):
        t = ((p.x - p0.x) * cdx + (p.y - p0.y) * cdy) / (cln * cln)
        if t < 0.0 or t > 1.0:
            return False
    nx = -cdy / cln
    ny = cdx / cln
    d1 = abs((p1.x - p0.x) * nx + (p1.y - p0.y) * ny)
    d2 = abs((p2.x - p0.x) * nx + (p2.y - p0.y) * ny)
    return max(d1, d2) < tol


def _flatten_cubic(p0: Point, p1: Point, p2: Point, p3: Point, tol: float,
                   depth: int, result: list[Point]) -> None:
    if depth >= MAX_FLATTEN_DEPTH or cubic_is_flat(p0, p1, p2, p3, tol):
        result.append(p3)
        return
    left, right = split_cubic(p0, p1, p2, p3, 0.5)
    _flatten_cubic(*left, tol, depth + 1, result)
    _flatten_cubic(*right, tol, depth + 1, result)


def flatten_path(path, tolerance: float = DEFAULT_TOLERANCE) -> sf.Path:
    """
    Return a copy of path with curves replaced by line segments.

    MoveTo, LineTo and ClosePath pass through unchanged. Flattened points that
    coincide with the previous point are dropped so the result never holds a
    zero-length segment introduced by flattening.

    Raises:
        StrokeError (rangecheck): tolerance is not positive.
    """
    if not tolerance > 0.0:
        raise sf_error.StrokeError(
            "flatten_path", f"tolerance must be positive, got {tolerance}", code=sf_error.RANGECHECK)

    result = sf.Path()
    current = Point(0.0, 0.0)
    origin = current
    for op in path:
        if isinstance(op, sf.MoveTo):
            current = origin = Point(op.x, op.y)
            result.append(sf.MoveTo(op.x, op.y))
        elif isinstance(op, sf.LineTo):
            current = Point(op.x, op.y)
            result.append(sf.LineTo(op.x, op.y))
        elif isinstance(op, sf.ClosePath):
            current = origin
            result.append(sf.ClosePath())
        else:
            if isinstance(op, sf.QuadTo):
                cps = quad_to_cubic(current, Point(op.x1, op.y1), Point(op.x, op.y))
            else:
                cps = (current, Point(op.x1, op.y1), Point(op.x2, op.y2), Point(op.x3, op.y3))
            points: list[Point] = []
            _flatten_cubic(*cps, tolerance, 0, points)
            for p in points:
                if p != current:
                    result.append(sf.LineTo(p.x, p.y))
                    current = p
    return result
