# StrokeForge - Stroke-to-fill outline generation
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
StrokeForge Types Package - Public API

Re-exports the value types used throughout StrokeForge so callers can use the
single import pattern `from strokeforge.core import types as sf`.

- constants.py: cap/join/winding numbering and graphics state defaults
- geometry.py: Point and Vector
- path.py: path operations, Path and PathBuilder
- style.py: LineCap, LineJoin and StrokeStyle
"""

from .constants import *
from .geometry import *
from .path import *
from .style import *
