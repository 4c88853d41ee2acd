# StrokeForge - Stroke-to-fill outline generation
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Constants shared by the stroker, the devices and the command line."""

# Winding Rule types
WINDING_NON_ZERO = 0
WINDING_EVEN_ODD = 1

# line cap types
LINE_CAP_BUTT = 0
LINE_CAP_ROUND = 1
LINE_CAP_SQUARE = 2

# line join types
LINE_JOIN_MITER = 0
LINE_JOIN_ROUND = 1
LINE_JOIN_BEVEL = 2

# graphics state defaults
DEFAULT_LINE_WIDTH = 1.0
DEFAULT_MITER_LIMIT = 10.0

# default flatness used when curves are flattened ahead of stroking
DEFAULT_TOLERANCE = 0.1

# de Casteljau recursion bound for the flattener
MAX_FLATTEN_DEPTH = 16
