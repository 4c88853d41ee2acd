# StrokeForge - Stroke-to-fill outline generation
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

"""
PNG Output Device

Renders stroke outlines to PNG image files using Cairo, and rasterises them
to numpy coverage masks for inspection.
"""

import logging
import os

import cairo
import numpy as np

from ...core import types as sf
from ...operators.strokepath import transform_path
from ..common.cairo_renderer import fill_page, render_path

logger = logging.getLogger(__name__)

# Anti-aliasing mode for Cairo rendering.
# Options: cairo.ANTIALIAS_NONE, ANTIALIAS_FAST, ANTIALIAS_GOOD,
#          ANTIALIAS_BEST, ANTIALIAS_GRAY, ANTIALIAS_SUBPIXEL
ANTIALIAS_MODE = cairo.ANTIALIAS_GRAY

ANTIALIAS_MAP = {
    "none": cairo.ANTIALIAS_NONE,
    "fast": cairo.ANTIALIAS_FAST,
    "good": cairo.ANTIALIAS_GOOD,
    "best": cairo.ANTIALIAS_BEST,
    "gray": cairo.ANTIALIAS_GRAY,
    "subpixel": cairo.ANTIALIAS_SUBPIXEL,
}


def render_png(path, filename: str, width: int, height: int, scale: float = 1.0,
               origin: tuple[float, float] = (0.0, 0.0), antialias: str = "gray",
               winding_rule: int = sf.WINDING_NON_ZERO) -> str:
    """
    Render the outline path to a PNG file.

    Args:
        path: outline path (user space)
        filename: output file name; missing directories are created
        width, height: image size in pixels
        scale: user units per pixel multiplier
        origin: user-space point mapped to pixel (0, 0)
        antialias: key of ANTIALIAS_MAP

    Returns:
        The file name written.
    """
    device_path = transform_path(path, scale, 0.0, 0.0, scale,
                                 -origin[0] * scale, -origin[1] * scale)

    surface = cairo.ImageSurface(cairo.FORMAT_RGB24, width, height)
    cc = cairo.Context(surface)
    cc.set_antialias(ANTIALIAS_MAP.get(antialias, ANTIALIAS_MODE))
    fill_page(cc, device_path, width, height, winding_rule)

    out_dir = os.path.dirname(filename)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    surface.write_to_png(filename)
    logger.info("Wrote %s (%dx%d)", filename, width, height)
    return filename


def rasterize(path, width: int, height: int, scale: float = 1.0,
              origin: tuple[float, float] = (0.0, 0.0),
              winding_rule: int = sf.WINDING_NON_ZERO) -> np.ndarray:
    """
    Rasterise the outline path without anti-aliasing.

    Returns:
        Boolean array of shape (height, width); True where the pixel center
        is covered.
    """
    device_path = transform_path(path, scale, 0.0, 0.0, scale,
                                 -origin[0] * scale, -origin[1] * scale)

    surface = cairo.ImageSurface(cairo.FORMAT_A8, width, height)
    cc = cairo.Context(surface)
    cc.set_antialias(cairo.ANTIALIAS_NONE)
    cc.set_source_rgba(0.0, 0.0, 0.0, 1.0)
    render_path(cc, device_path, winding_rule)
    surface.flush()

    stride = surface.get_stride()
    data = np.frombuffer(surface.get_data(), dtype=np.uint8).reshape(height, stride)
    return data[:, :width] > 127
