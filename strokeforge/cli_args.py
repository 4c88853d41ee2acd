# StrokeForge - Stroke-to-fill outline generation
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CLI argument parsing for StrokeForge.

Handles command-line argument definition and the parsing of path data,
image sizes and dash lists.
"""

from __future__ import annotations

import argparse
import re

from .core import types as sf
from .core.types import DEFAULT_LINE_WIDTH, DEFAULT_MITER_LIMIT, DEFAULT_TOLERANCE

_TOKEN_RE = re.compile(r"[MLQCZmlqcz]|[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")

# command letter -> (number of operands, constructor)
_COMMANDS = {
    "M": (2, sf.MoveTo),
    "L": (2, sf.LineTo),
    "Q": (4, sf.QuadTo),
    "C": (6, sf.CurveTo),
    "Z": (0, None),
}

CAP_NAMES = {"butt": sf.LineCap.BUTT, "round": sf.LineCap.ROUND, "square": sf.LineCap.SQUARE}
JOIN_NAMES = {"mitre": sf.LineJoin.MITRE, "miter": sf.LineJoin.MITRE,
              "round": sf.LineJoin.ROUND, "bevel": sf.LineJoin.BEVEL}


def parse_path_data(spec: str) -> sf.Path:
    """Parse absolute SVG-style path data (``M``, ``L``, ``Q``, ``C``, ``Z``).

    A command letter may be followed by several operand groups, as in SVG:
    ``M 0 0 L 10 0 10 10 Z``. Extra groups after ``M`` are line segments.

    Raises:
        ValueError: unknown characters, a relative command, or a wrong
            number of operands.
    """
    stripped = re.sub(r"[\s,]+", " ", spec).strip()
    tokens = _TOKEN_RE.findall(stripped)
    if re.sub(r"\s", "", stripped) != "".join(tokens):
        raise ValueError(f"Invalid path data: '{spec}'")

    path = sf.Path()
    i = 0
    command = None
    # set while a command letter still waits for its first operand group
    pending = False
    while i < len(tokens):
        tok = tokens[i]
        if tok.isalpha():
            if tok.islower():
                raise ValueError(f"Relative command '{tok}' is not supported")
            if pending:
                raise ValueError(f"Command '{command}' expects {_COMMANDS[command][0]} numbers")
            command = tok
            i += 1
            if command == "Z":
                path.append(sf.ClosePath())
                command = None
            else:
                pending = True
            continue
        if command is None:
            raise ValueError(f"Number '{tok}' without a command")
        count, ctor = _COMMANDS[command]
        operands = tokens[i:i + count]
        if len(operands) < count or any(t.isalpha() for t in operands):
            raise ValueError(f"Command '{command}' expects {count} numbers")
        path.append(ctor(*(float(t) for t in operands)))
        i += count
        pending = False
        if command == "M":
            command = "L"
    if pending:
        raise ValueError(f"Command '{command}' expects {_COMMANDS[command][0]} numbers")
    if not path:
        raise ValueError("Empty path data")
    return path


def parse_size(spec: str) -> tuple[int, int]:
    """Parse ``WIDTHxHEIGHT`` into a pair of positive ints."""
    m = re.fullmatch(r"\s*(\d+)\s*[xX]\s*(\d+)\s*", spec)
    if not m:
        raise ValueError(f"Invalid size: '{spec}' (expected WIDTHxHEIGHT)")
    w, h = int(m.group(1)), int(m.group(2))
    if w < 1 or h < 1:
        raise ValueError(f"Size must be positive: '{spec}'")
    return w, h


def parse_dash(spec: str) -> tuple[float, ...]:
    """Parse a comma-separated dash list such as ``4,2``."""
    parts = [p.strip() for p in spec.split(",") if p.strip()]
    try:
        return tuple(float(p) for p in parts)
    except ValueError:
        raise ValueError(f"Invalid dash list: '{spec}'")


def build_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the StrokeForge argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="strokeforge",
        description="StrokeForge - convert a stroked path into its filled outline",
        epilog="Path data uses absolute SVG commands, e.g. 'M 0 0 L 100 0 L 100 50'.",
    )

    parser.add_argument("pathdata", help="Path to stroke, as SVG path data")
    parser.add_argument(
        "-w", "--width", type=float, default=DEFAULT_LINE_WIDTH,
        help=f"Line width (default: {DEFAULT_LINE_WIDTH})"
    )
    parser.add_argument(
        "--cap", choices=sorted(CAP_NAMES), default="butt",
        help="Line cap style (default: butt)"
    )
    parser.add_argument(
        "--join", choices=sorted(JOIN_NAMES), default="mitre",
        help="Line join style (default: mitre)"
    )
    parser.add_argument(
        "--mitre-limit", dest="mitre_limit", type=float, default=DEFAULT_MITER_LIMIT,
        help=f"Mitre limit (default: {DEFAULT_MITER_LIMIT})"
    )
    parser.add_argument(
        "--dash", default="",
        help="Dash lengths, comma separated (validated, not applied)"
    )
    parser.add_argument(
        "--dash-offset", dest="dash_offset", type=float, default=0.0,
        help="Dash offset (validated, not applied)"
    )
    parser.add_argument(
        "--flatten", action="store_true",
        help="Flatten Q/C curves into line segments before stroking"
    )
    parser.add_argument(
        "--tolerance", type=float, default=DEFAULT_TOLERANCE,
        help=f"Flattening tolerance (default: {DEFAULT_TOLERANCE})"
    )
    parser.add_argument(
        "--skip-degenerate", dest="skip_degenerate", action="store_true",
        help="Drop zero-length segments instead of failing"
    )
    parser.add_argument(
        "-d", "--device", choices=["png", "svg", "text"], default="text",
        help="Output device (default: text, prints the outline as SVG path data)"
    )
    parser.add_argument(
        "-o", "--output", dest="outputfile",
        help="Output filename (default: outline.png / outline.svg)"
    )
    parser.add_argument(
        "--size", default="256x256",
        help="Image size for png/svg output as WIDTHxHEIGHT (default: 256x256)"
    )
    parser.add_argument(
        "--scale", type=float, default=1.0,
        help="Scale from path units to pixels (default: 1.0)"
    )
    parser.add_argument(
        "--antialias",
        choices=["none", "fast", "good", "best", "gray", "subpixel"], default="gray",
        help="Anti-aliasing mode for PNG rendering (default: gray)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    return parser
