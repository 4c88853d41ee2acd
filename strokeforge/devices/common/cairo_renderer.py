# StrokeForge - Stroke-to-fill outline generation
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Shared Cairo Rendering Module

Feeds StrokeForge paths into a Cairo context and fills them. Used by the PNG
and SVG devices and by the rasterisation checks in the test suite.

Stroke outlines are unions of overlapping contours, so they must be filled
with the non-zero winding rule; even-odd filling leaves holes where an even
number of contours overlap.
"""

import cairo

from ...core import types as sf


def append_path(cairo_ctx, path) -> None:
    """Append every operation of path to the context's current path."""
    x, y = 0.0, 0.0
    for op in path:
        if isinstance(op, sf.MoveTo):
            cairo_ctx.move_to(op.x, op.y)
            x, y = op.x, op.y
        elif isinstance(op, sf.LineTo):
            cairo_ctx.line_to(op.x, op.y)
            x, y = op.x, op.y
        elif isinstance(op, sf.CurveTo):
            cairo_ctx.curve_to(op.x1, op.y1, op.x2, op.y2, op.x3, op.y3)
            x, y = op.x3, op.y3
        elif isinstance(op, sf.QuadTo):
            # Cairo has no quadratic segment; elevate to cubic
            cairo_ctx.curve_to(
                x + 2.0 / 3.0 * (op.x1 - x), y + 2.0 / 3.0 * (op.y1 - y),
                op.x + 2.0 / 3.0 * (op.x1 - op.x), op.y + 2.0 / 3.0 * (op.y1 - op.y),
                op.x, op.y)
            x, y = op.x, op.y
        elif isinstance(op, sf.ClosePath):
            cairo_ctx.close_path()


def render_path(cairo_ctx, path, winding_rule: int = sf.WINDING_NON_ZERO) -> None:
    """Fill path on cairo_ctx with the current source."""
    cairo_ctx.new_path()
    append_path(cairo_ctx, path)

    # Set fill rule based on winding rule
    if winding_rule == sf.WINDING_EVEN_ODD:
        cairo_ctx.set_fill_rule(cairo.FILL_RULE_EVEN_ODD)
    else:
        cairo_ctx.set_fill_rule(cairo.FILL_RULE_WINDING)

    cairo_ctx.fill()


def fill_page(cairo_ctx, path, width: int, height: int,
              winding_rule: int = sf.WINDING_NON_ZERO) -> None:
    """White background, black outline fill."""
    cairo_ctx.set_source_rgb(1.0, 1.0, 1.0)
    cairo_ctx.rectangle(0, 0, width, height)
    cairo_ctx.fill()

    cairo_ctx.set_source_rgb(0.0, 0.0, 0.0)
    render_path(cairo_ctx, path, winding_rule)
