"""Shared helpers for the StrokeForge test suite."""

import numpy as np
import pytest

from strokeforge.core import types as sf


def contours(path):
    """Split an outline path into its contours (lists of operations)."""
    return [list(sp) for sp in sf.Path(path).subpaths()]


def contour_points(contour):
    """End points of every operation of a contour."""
    return [(p.x, p.y) for p in (sf.op_endpoint(op) for op in contour) if p is not None]


def sample_cubic(p0, op, ts):
    """Evaluate the cubic starting at p0 (x, y) with CurveTo op at parameters ts."""
    t = np.asarray(ts, dtype=float)[:, None]
    pts = np.array([p0, (op.x1, op.y1), (op.x2, op.y2), (op.x3, op.y3)], dtype=float)
    mt = 1.0 - t
    return (mt ** 3) * pts[0] + 3 * (mt ** 2) * t * pts[1] + 3 * mt * (t ** 2) * pts[2] + (t ** 3) * pts[3]


def sample_contour_curves(contour, ts=np.linspace(0.0, 1.0, 33)):
    """Sample every CurveTo of a contour; returns an (N, 2) array."""
    samples = []
    current = None
    for op in contour:
        if isinstance(op, sf.CurveTo):
            samples.append(sample_cubic(current, op, ts))
        end = sf.op_endpoint(op)
        if end is not None:
            current = (end.x, end.y)
    return np.vstack(samples) if samples else np.zeros((0, 2))


@pytest.fixture
def builder():
    return sf.PathBuilder()
