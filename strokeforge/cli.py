# StrokeForge - Stroke-to-fill outline generation
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
StrokeForge command line.

Strokes a path given as SVG path data and prints the outline as path data or
renders it to a PNG or SVG file.
"""

from __future__ import annotations

import logging
import sys

from . import cli_args
from .core import error as sf_error
from .core import types as sf
from .operators import strokepath as sf_strokepath

logger = logging.getLogger(__name__)


def _fit_origin(outline: sf.Path, size: tuple[int, int], scale: float) -> tuple[float, float]:
    """User-space origin that centers the outline's bounding box on the page."""
    bounds = outline.bounds()
    if bounds is None:
        return 0.0, 0.0
    xmin, ymin, xmax, ymax = bounds
    width, height = size
    cx = (xmin + xmax) / 2.0
    cy = (ymin + ymax) / 2.0
    return cx - width / (2.0 * scale), cy - height / (2.0 * scale)


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the StrokeForge command line.

    Returns:
        Exit code: 0 for success, 1 for error
    """
    parser = cli_args.build_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        path = cli_args.parse_path_data(args.pathdata)
        size = cli_args.parse_size(args.size)
        style = sf.StrokeStyle(
            width=args.width,
            cap=cli_args.CAP_NAMES[args.cap],
            join=cli_args.JOIN_NAMES[args.join],
            mitre_limit=args.mitre_limit,
            dash_array=cli_args.parse_dash(args.dash),
            dash_offset=args.dash_offset,
        )
        if args.scale <= 0:
            raise ValueError(f"Scale must be positive, got {args.scale}")
        if style.dash_array:
            logger.warning("Dash patterns are not applied; stroking solid")

        outline = sf_strokepath.strokepath(
            path, style, flatten=args.flatten, tolerance=args.tolerance,
            skip_degenerate=args.skip_degenerate)
    except (ValueError, sf_error.StrokeError) as e:
        print(f"strokeforge: {e}", file=sys.stderr)
        return 1

    if args.device == "text":
        from .devices.svg.svg import path_to_svg_data
        print(path_to_svg_data(outline))
        return 0

    origin = _fit_origin(outline, size, args.scale)
    try:
        if args.device == "png":
            from .devices.png.png import render_png
            filename = render_png(outline, args.outputfile or "outline.png",
                                  size[0], size[1], args.scale, origin, args.antialias)
        else:
            from .devices.svg.svg import render_svg
            filename = render_svg(outline, args.outputfile or "outline.svg",
                                  size[0], size[1], args.scale, origin)
    except OSError as e:
        print(f"strokeforge: cannot write output: {e}", file=sys.stderr)
        return 1

    print(filename)
    return 0


if __name__ == "__main__":
    sys.exit(main())
