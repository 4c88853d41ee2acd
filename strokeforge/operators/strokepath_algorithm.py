# StrokeForge - Stroke-to-fill outline generation
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Stroke algorithm: converts a flattened path into the filled outline that
renders as its stroke.

Produces independent closed contours (moveto/lineto/curveto/closepath).
Contours overlap freely; the union under the non-zero winding rule is the
stroke shape.

Components:
1. Vector algebra (normals, perpendiculars, angle bisection)
2. Circular arcs as cubic Béziers (at most 90° per segment)
3. Line caps (butt/round/square)
4. Line joins (mitre/round/bevel)
5. Path walker (one quad per segment, joins between segments, caps at
   open ends)
"""

from __future__ import annotations

import logging
import math

from ..core import error as sf_error
from ..core import types as sf
from ..core.types import Point, Vector, PathBuilder, StrokeStyle, LineCap, LineJoin

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Vector algebra
# ---------------------------------------------------------------------------

def dot(a: Vector, b: Vector) -> float:
    return a.x * b.x + a.y * b.y


def perp(v: Vector) -> Vector:
    """Rotate a vector 90 degrees to the left."""
    return Vector(-v.y, v.x)


def swap(a: Vector) -> Vector:
    """Rotate a vector 90 degrees to the right.

    Period of 4: swap(swap(swap(swap(v)))) == v.
    """
    return Vector(a.y, -a.x)


def unperp(a: Vector) -> Vector:
    return swap(a)


def flip(v: Vector) -> Vector:
    return Vector(-v.x, -v.y)


def compute_normal(p0: Point, p1: Point) -> Vector:
    """Unit normal of the segment p0→p1, pointing left of travel.

    Raises:
        ZeroLengthSegmentError: p0 and p1 coincide.
    """
    ux = p1.x - p0.x
    uy = p1.y - p0.y
    ulen = math.hypot(ux, uy)
    if ulen == 0.0:
        raise sf_error.ZeroLengthSegmentError(
            "compute_normal", f"segment ({p0.x}, {p0.y}) -> ({p1.x}, {p1.y}) has no length")
    # perpendicular to the *unit* direction
    return Vector(-uy / ulen, ux / ulen)


def bisect(a: Vector, b: Vector) -> Vector:
    """Unit vector halfway between unit vectors a and b (angle <= 180°).

    For angles over 90° b must lie clockwise of a, as it does for every join
    and cap; a counter-clockwise b yields the opposite direction.
    """
    if dot(a, b) >= 0.0:
        # acute: the sum points along the bisector
        mid = a + b
    else:
        # obtuse: a + b nearly cancels, use the perpendicular of b - a
        mid = perp(flip(a) + b)

    # a and b are unit length so the range of mid is bounded; no hypot needed
    ln = math.sqrt(mid.x * mid.x + mid.y * mid.y)
    return mid / ln


# ---------------------------------------------------------------------------
# Arcs
# ---------------------------------------------------------------------------

def arc_segment(dest: PathBuilder, center: Point, radius: float,
                a: Vector, b: Vector) -> None:
    """
    Append one cubic approximating the arc around center from direction a to
    direction b. The angle between a and b must not exceed 90°.

    The control point distance is h = 4/3 * tan((B - A) / 4), computed
    without leaving cartesian coordinates: mid2 = a + bisector(a, b) is
    parallel to the direction at angle (B - A) / 4, so its perp-dot over dot
    with a is that tangent. This stays stable as the arc angle goes to zero,
    unlike formulations that divide by the perp-dot product of a and b.
    """
    r_sin_a = radius * a.y
    r_cos_a = radius * a.x
    r_sin_b = radius * b.y
    r_cos_b = radius * b.x

    mid = a + b
    mid = mid / mid.length()

    mid2 = a + mid

    h = (4.0 / 3.0) * dot(perp(a), mid2) / dot(a, mid2)

    dest.curve_to(
        center.x + r_cos_a - h * r_sin_a,
        center.y + r_sin_a + h * r_cos_a,
        center.x + r_cos_b + h * r_sin_b,
        center.y + r_sin_b - h * r_cos_b,
        center.x + r_cos_b,
        center.y + r_sin_b)


def arc(dest: PathBuilder, center: Point, radius: float, a: Vector, b: Vector) -> None:
    """Append the arc from a to b (angle <= 180°) as two cubic segments.

    Arcs over 90° must run clockwise from a to b; see bisect().
    """
    mid_v = bisect(a, b)
    arc_segment(dest, center, radius, a, mid_v)
    arc_segment(dest, center, radius, mid_v, b)


# ---------------------------------------------------------------------------
# Line caps
# ---------------------------------------------------------------------------

def cap_line(dest: PathBuilder, style: StrokeStyle, pt: Point, normal: Vector) -> None:
    """
    Append the cap contour for an open end at pt.

    normal is the unit normal of the end's segment oriented so that
    swap(normal) points away from the stroke; for a start cap pass the
    flipped normal of the first segment.
    """
    offset = style.width / 2.0

    if style.cap == LineCap.BUTT:
        return

    if style.cap == LineCap.ROUND:
        dest.move_to(pt.x + normal.x * offset, pt.y + normal.y * offset)
        arc(dest, pt, offset, normal, flip(normal))
        dest.close()
        return

    if style.cap == LineCap.SQUARE:
        # parallel vector
        v = Vector(normal.y, -normal.x)
        end = pt + v * offset
        dest.move_to(pt.x + normal.x * offset, pt.y + normal.y * offset)
        dest.line_to(end.x + normal.x * offset, end.y + normal.y * offset)
        dest.line_to(end.x - normal.x * offset, end.y - normal.y * offset)
        dest.line_to(pt.x - normal.x * offset, pt.y - normal.y * offset)
        dest.close()


# ---------------------------------------------------------------------------
# Line joins
# ---------------------------------------------------------------------------

def line_intersection(a_pt: Point, a_perp: Vector, b_pt: Point, b_perp: Vector) -> Point:
    """
    Intersect two lines, each given by a point and its normal.

    Uses the perp-dot product form from F. S. Hill, "The Pleasures of
    'Perp Dot' Products" (example 2).

    Raises:
        ParallelLinesError: the normals are parallel.
    """
    a = unperp(a_perp)
    c = b_pt - a_pt
    denom = dot(b_perp, a)
    if denom == 0.0:
        raise sf_error.ParallelLinesError(
            "line_intersection", f"lines through ({a_pt.x}, {a_pt.y}) and ({b_pt.x}, {b_pt.y}) are parallel")

    t = dot(b_perp, c) / denom
    return Point(a_pt.x + t * a.x, a_pt.y + t * a.y)


def is_interior_angle(a: Vector, b: Vector) -> bool:
    """True when the join side given by normals a, b is the inside of the turn.

    0° and 180° both have a zero perp-dot product: 0° counts as interior,
    180° as exterior.
    """
    return dot(perp(a), b) > 0.0 or a == b


def bevel(dest: PathBuilder, style: StrokeStyle, pt: Point,
          s1_normal: Vector, s2_normal: Vector) -> None:
    offset = style.width / 2.0
    dest.move_to(pt.x + s1_normal.x * offset, pt.y + s1_normal.y * offset)
    dest.line_to(pt.x + s2_normal.x * offset, pt.y + s2_normal.y * offset)
    dest.line_to(pt.x, pt.y)
    dest.close()


def mitre_fits(style: StrokeStyle, s1_normal: Vector, s2_normal: Vector) -> bool:
    """Mitre limit test on the outside normals of a join.

    The mitre is drawn when 2 <= limit² * (1 - cos θ), θ being the angle
    between the segments; equality draws the mitre.
    """
    in_dot_out = -s1_normal.x * s2_normal.x + -s1_normal.y * s2_normal.y
    return 2.0 <= style.mitre_limit * style.mitre_limit * (1.0 - in_dot_out)


def join_line(dest: PathBuilder, style: StrokeStyle, pt: Point,
              s1_normal: Vector, s2_normal: Vector) -> None:
    """
    Append the join contour at vertex pt between the incoming segment (normal
    s1_normal) and the outgoing segment (normal s2_normal).

    The join is always built on the outside of the turn: for an interior
    angle both normals are flipped and their roles swapped.
    """
    if is_interior_angle(s1_normal, s2_normal):
        s1_normal, s2_normal = flip(s2_normal), flip(s1_normal)

    offset = style.width / 2.0

    if style.join == LineJoin.ROUND:
        dest.move_to(pt.x + s1_normal.x * offset, pt.y + s1_normal.y * offset)
        arc(dest, pt, offset, s1_normal, s2_normal)
        dest.line_to(pt.x, pt.y)
        dest.close()
        return

    if style.join == LineJoin.MITRE and mitre_fits(style, s1_normal, s2_normal):
        start = pt + s1_normal * offset
        end = pt + s2_normal * offset
        try:
            intersection = line_intersection(start, s1_normal, end, s2_normal)
        except sf_error.ParallelLinesError:
            # collinear segments pass the limit test with cos θ = -1
            logger.debug("Collinear mitre join at (%g, %g), using bevel", pt.x, pt.y)
        else:
            dest.move_to(start.x, start.y)
            dest.line_to(intersection.x, intersection.y)
            dest.line_to(end.x, end.y)
            dest.line_to(pt.x, pt.y)
            dest.close()
            return

    bevel(dest, style, pt, s1_normal, s2_normal)


# ---------------------------------------------------------------------------
# Path walker
# ---------------------------------------------------------------------------

class _WalkerState:
    """Mutable state threaded through one pass over the input operations.

    start is None while the current subpath has no segment yet; otherwise it
    holds the first segment's start point and normal.
    """

    __slots__ = ("current", "origin", "last_normal", "start")

    def __init__(self) -> None:
        self.current = Point(0.0, 0.0)
        self.origin = Point(0.0, 0.0)
        self.last_normal = Vector.zero()
        self.start: tuple[Point, Vector] | None = None


def _emit_segment_quad(dest: PathBuilder, p0: Point, p1: Point,
                       normal: Vector, half_width: float) -> None:
    dest.move_to(p0.x + normal.x * half_width, p0.y + normal.y * half_width)
    dest.line_to(p1.x + normal.x * half_width, p1.y + normal.y * half_width)
    dest.line_to(p1.x - normal.x * half_width, p1.y - normal.y * half_width)
    dest.line_to(p0.x - normal.x * half_width, p0.y - normal.y * half_width)
    dest.close()


def _cap_open_subpath(dest: PathBuilder, style: StrokeStyle, state: _WalkerState) -> None:
    """Cap both ends of the current subpath if it is open and has a segment."""
    if state.start is None:
        return
    point, normal = state.start
    # cap end
    cap_line(dest, style, state.current, state.last_normal)
    # cap beginning
    cap_line(dest, style, point, flip(normal))
    state.start = None


def _move_to(dest, style, state, op, skip_degenerate):
    _cap_open_subpath(dest, style, state)
    state.current = Point(op.x, op.y)
    state.origin = state.current


def _line_to(dest, style, state, op, skip_degenerate):
    pt = Point(op.x, op.y)
    try:
        normal = compute_normal(state.current, pt)
    except sf_error.ZeroLengthSegmentError:
        if not skip_degenerate:
            raise
        logger.debug("Skipping zero-length segment at (%g, %g)", pt.x, pt.y)
        return

    if state.start is None:
        state.start = (state.current, normal)
    else:
        join_line(dest, style, state.current, state.last_normal, normal)

    _emit_segment_quad(dest, state.current, pt, normal, style.half_width)
    state.last_normal = normal
    state.current = pt


def _close_path(dest, style, state, op, skip_degenerate):
    if state.start is not None:
        point, normal = state.start
        if state.current == point:
            # the last segment already ends on the start point
            join_line(dest, style, point, state.last_normal, normal)
        else:
            closing_normal = compute_normal(state.current, point)
            join_line(dest, style, state.current, state.last_normal, closing_normal)
            _emit_segment_quad(dest, state.current, point, closing_normal, style.half_width)
            join_line(dest, style, point, closing_normal, normal)
        state.start = None
    state.current = state.origin


def _curve(dest, style, state, op, skip_degenerate):
    raise sf_error.UnsupportedOperationError(
        "stroke_to_path", f"only flattened paths are handled, got {type(op).__name__}")


_OP_HANDLERS = {
    sf.MoveTo: _move_to,
    sf.LineTo: _line_to,
    sf.ClosePath: _close_path,
    sf.QuadTo: _curve,
    sf.CurveTo: _curve,
}


def stroke_to_path(path, style: StrokeStyle, *, skip_degenerate: bool = False) -> sf.Path:
    """
    Convert a flattened path into the outline that renders as its stroke.

    Every segment becomes a closed quad, every interior vertex a closed join
    contour and every open end a closed cap contour. Fill the result with the
    non-zero winding rule; contours overlap and even-odd filling shows seams.

    Args:
        path: iterable of MoveTo / LineTo / ClosePath operations.
        style: stroke style; validated before any geometry is produced.
        skip_degenerate: drop zero-length segments instead of failing.

    Returns:
        A new Path of MoveTo, LineTo, CurveTo and ClosePath operations.

    Raises:
        StyleError: invalid style.
        ZeroLengthSegmentError: a segment with coincident end points (unless
            skip_degenerate is set).
        UnsupportedOperationError: a QuadTo or CurveTo operation.
    """
    style.validate()

    dest = PathBuilder()
    state = _WalkerState()
    for op in path:
        handler = _OP_HANDLERS.get(type(op))
        if handler is None:
            raise sf_error.StrokeError(
                "stroke_to_path", f"not a path operation: {op!r}", code=sf_error.TYPECHECK)
        handler(dest, style, state, op, skip_degenerate)

    _cap_open_subpath(dest, style, state)
    return dest.finish()
