# StrokeForge - Stroke-to-fill outline generation
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Stroking front end.

Wraps the stroke algorithm with per-subpath grouping, optional curve
flattening and affine transforms of the resulting outline.
"""

from __future__ import annotations

import logging

from ..core import types as sf
from ..core.types import StrokeStyle, DEFAULT_TOLERANCE
from . import flatten as sf_flatten
from . import strokepath_algorithm as algo

logger = logging.getLogger(__name__)


def strokepath_grouped(path, style: StrokeStyle, *, flatten: bool = False,
                       tolerance: float = DEFAULT_TOLERANCE,
                       skip_degenerate: bool = False) -> list[sf.Path]:
    """
    Stroke each subpath independently.

    A subpath's outline depends only on its own operations, so the groups can
    be filled, cached or computed separately. Subpaths that produce no
    geometry (a lone MoveTo, butt caps on nothing) are left out; the order of
    the remaining groups follows the input.

    Returns:
        List of outline Paths, one per stroked subpath.
    """
    style.validate()
    path = sf.Path(path)
    if flatten:
        path = sf_flatten.flatten_path(path, tolerance)

    groups: list[sf.Path] = []
    for sp in path.subpaths():
        outline = algo.stroke_to_path(sp, style, skip_degenerate=skip_degenerate)
        if outline:
            groups.append(outline)

    logger.info("Stroked %d subpath(s) into %d contour(s)",
                len(groups), sum(g.contour_count() for g in groups))
    return groups


def strokepath(path, style: StrokeStyle, *, flatten: bool = False,
               tolerance: float = DEFAULT_TOLERANCE,
               skip_degenerate: bool = False) -> sf.Path:
    """
    Convert a stroked path to a filled outline path.

    Returns the concatenation of strokepath_grouped().
    """
    groups = strokepath_grouped(path, style, flatten=flatten, tolerance=tolerance,
                                skip_degenerate=skip_degenerate)
    result = sf.Path()
    for group in groups:
        result.extend(group)
    return result


def transform_path(path, a: float, b: float, c: float, d: float,
                   tx: float, ty: float) -> sf.Path:
    """Apply the affine matrix [a b c d tx ty] to every point of a path."""
    result = sf.Path()
    for op in path:
        if isinstance(op, sf.MoveTo):
            result.append(sf.MoveTo(a * op.x + c * op.y + tx,
                                    b * op.x + d * op.y + ty))
        elif isinstance(op, sf.LineTo):
            result.append(sf.LineTo(a * op.x + c * op.y + tx,
                                    b * op.x + d * op.y + ty))
        elif isinstance(op, sf.QuadTo):
            result.append(sf.QuadTo(
                a * op.x1 + c * op.y1 + tx, b * op.x1 + d * op.y1 + ty,
                a * op.x + c * op.y + tx, b * op.x + d * op.y + ty))
        elif isinstance(op, sf.CurveTo):
            result.append(sf.CurveTo(
                a * op.x1 + c * op.y1 + tx, b * op.x1 + d * op.y1 + ty,
                a * op.x2 + c * op.y2 + tx, b * op.x2 + d * op.y2 + ty,
                a * op.x3 + c * op.y3 + tx, b * op.x3 + d * op.y3 + ty))
        elif isinstance(op, sf.ClosePath):
            result.append(sf.ClosePath())
    return result
