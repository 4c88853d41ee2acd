# StrokeForge - Stroke-to-fill outline generation
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
SVG Output Device

Renders stroke outlines to SVG files using Cairo's SVGSurface, and formats
paths as SVG path data for textual output.
"""

import logging
import os

import cairo

from ...core import types as sf
from ...operators.strokepath import transform_path
from ..common.cairo_renderer import fill_page

logger = logging.getLogger(__name__)


def _fmt(v: float) -> str:
    s = f"{v:.4f}".rstrip("0").rstrip(".")
    return "0" if s in ("-0", "") else s


def path_to_svg_data(path) -> str:
    """Format a path as SVG path data with absolute commands."""
    parts = []
    for op in path:
        if isinstance(op, sf.MoveTo):
            parts.append(f"M{_fmt(op.x)} {_fmt(op.y)}")
        elif isinstance(op, sf.LineTo):
            parts.append(f"L{_fmt(op.x)} {_fmt(op.y)}")
        elif isinstance(op, sf.QuadTo):
            parts.append(f"Q{_fmt(op.x1)} {_fmt(op.y1)} {_fmt(op.x)} {_fmt(op.y)}")
        elif isinstance(op, sf.CurveTo):
            parts.append(f"C{_fmt(op.x1)} {_fmt(op.y1)} {_fmt(op.x2)} {_fmt(op.y2)} "
                         f"{_fmt(op.x3)} {_fmt(op.y3)}")
        elif isinstance(op, sf.ClosePath):
            parts.append("Z")
    return " ".join(parts)


def render_svg(path, filename: str, width: int, height: int, scale: float = 1.0,
               origin: tuple = (0.0, 0.0),
               winding_rule: int = sf.WINDING_NON_ZERO) -> str:
    """Render the outline path to an SVG file and return the file name."""
    device_path = transform_path(path, scale, 0.0, 0.0, scale,
                                 -origin[0] * scale, -origin[1] * scale)

    out_dir = os.path.dirname(filename)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    surface = cairo.SVGSurface(filename, width, height)
    cc = cairo.Context(surface)
    fill_page(cc, device_path, width, height, winding_rule)
    surface.finish()
    logger.info("Wrote %s (%dx%d)", filename, width, height)
    return filename
