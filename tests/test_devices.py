"""Rendering checks: outlines filled by Cairo cover the stroke they describe."""

import numpy as np
import pytest

from strokeforge.core import types as sf
from strokeforge.core.types import StrokeStyle, LineCap, LineJoin
from strokeforge.devices.png import png as sf_png
from strokeforge.devices.svg import svg as sf_svg
from strokeforge.operators import strokepath as sf_strokepath


def _pixel_centers(width, height):
    xs = np.arange(width) + 0.5
    ys = np.arange(height) + 0.5
    return np.meshgrid(xs, ys)


def _distance_to_segment(px, py, a, b):
    ax, ay = a
    bx, by = b
    dx, dy = bx - ax, by - ay
    t = np.clip(((px - ax) * dx + (py - ay) * dy) / (dx * dx + dy * dy), 0.0, 1.0)
    return np.hypot(px - (ax + t * dx), py - (ay + t * dy))


SQUARE = sf.Path([sf.MoveTo(10.0, 10.0), sf.LineTo(40.0, 10.0), sf.LineTo(40.0, 40.0),
                  sf.LineTo(10.0, 40.0), sf.ClosePath()])


class TestRasterize:
    def test_round_capped_segment_is_a_stadium(self):
        """Coverage matches the set of points within half the width of the segment."""
        path = sf.Path([sf.MoveTo(10.0, 20.0), sf.LineTo(40.0, 20.0)])
        outline = sf_strokepath.strokepath(path, StrokeStyle(width=10.0, cap=LineCap.ROUND))
        mask = sf_png.rasterize(outline, 64, 48)
        assert mask.shape == (48, 64)
        assert mask.dtype == bool

        px, py = _pixel_centers(64, 48)
        d = _distance_to_segment(px, py, (10.0, 20.0), (40.0, 20.0))
        decided = np.abs(d - 5.0) > 0.75
        expected = d < 5.0
        assert np.array_equal(mask[decided], expected[decided])

    def test_butt_capped_segment_stops_at_end_points(self):
        path = sf.Path([sf.MoveTo(10.0, 20.0), sf.LineTo(40.0, 20.0)])
        outline = sf_strokepath.strokepath(path, StrokeStyle(width=10.0))
        mask = sf_png.rasterize(outline, 64, 48)
        assert mask[20, 25]
        assert not mask[20, 8]
        assert not mask[20, 42]

    @pytest.mark.parametrize("join", [LineJoin.MITRE, LineJoin.ROUND, LineJoin.BEVEL])
    def test_closed_square_band_is_covered(self, join):
        outline = sf_strokepath.strokepath(SQUARE, StrokeStyle(width=4.0, join=join))
        mask = sf_png.rasterize(outline, 50, 50)
        px, py = _pixel_centers(50, 50)
        dx = np.abs(px - 25.0)
        dy = np.abs(py - 25.0)
        cheb = np.maximum(dx, dy)
        # the band along every side; the outer corner squares depend on the join
        outer_corner = (dx > 15.0) & (dy > 15.0)
        inside_band = (cheb >= 13.5) & (cheb <= 16.5) & ~outer_corner
        assert np.all(mask[inside_band])
        assert not np.any(mask[cheb <= 12.0])
        assert not np.any(mask[cheb >= 18.5])

    def test_mitre_fills_corner_bevel_does_not(self):
        mitre = sf_png.rasterize(
            sf_strokepath.strokepath(SQUARE, StrokeStyle(width=4.0, join=LineJoin.MITRE)), 50, 50)
        bevel = sf_png.rasterize(
            sf_strokepath.strokepath(SQUARE, StrokeStyle(width=4.0, join=LineJoin.BEVEL)), 50, 50)
        # pixel centred at (41.5, 8.5), near the outer corner (42, 8)
        assert mitre[8, 41]
        assert not bevel[8, 41]

    def test_even_odd_shows_overlap_seams(self):
        """Contours overlap; only the non-zero rule gives the stroke shape."""
        outline = sf_strokepath.strokepath(SQUARE, StrokeStyle(width=4.0, join=LineJoin.BEVEL))
        nonzero = sf_png.rasterize(outline, 50, 50)
        evenodd = sf_png.rasterize(outline, 50, 50, winding_rule=sf.WINDING_EVEN_ODD)
        # inner corner where the quads of two sides overlap
        assert nonzero[11, 38]
        assert not evenodd[11, 38]

    def test_scale_and_origin(self):
        path = sf.Path([sf.MoveTo(110.0, 105.0), sf.LineTo(120.0, 105.0)])
        outline = sf_strokepath.strokepath(path, StrokeStyle(width=2.0))
        mask = sf_png.rasterize(outline, 64, 32, scale=2.0, origin=(100.0, 100.0))
        # (110..120, 104..106) maps to pixels (20..40, 8..12)
        assert mask[10, 30]
        assert not mask[10, 15]
        assert not mask[14, 30]

    def test_quadratic_operations_are_filled(self):
        path = sf.Path([sf.MoveTo(10.0, 40.0), sf.QuadTo(32.0, -20.0, 54.0, 40.0), sf.ClosePath()])
        mask = sf_png.rasterize(path, 64, 48)
        # apex of the curve is at (32, 10)
        assert mask[20, 32]
        assert not mask[5, 32]


class TestFileOutput:
    def test_render_png(self, tmp_path):
        outline = sf_strokepath.strokepath(SQUARE, StrokeStyle(width=3.0))
        filename = str(tmp_path / "out" / "square.png")
        assert sf_png.render_png(outline, filename, 50, 50) == filename
        with open(filename, "rb") as f:
            assert f.read(8) == b"\x89PNG\r\n\x1a\n"

    def test_render_svg(self, tmp_path):
        outline = sf_strokepath.strokepath(SQUARE, StrokeStyle(width=3.0, join=LineJoin.ROUND))
        filename = str(tmp_path / "square.svg")
        sf_svg.render_svg(outline, filename, 50, 50, scale=2.0, origin=(0.0, 0.0))
        with open(filename) as f:
            text = f.read()
        assert "<svg" in text


class TestPathData:
    def test_unit_quad(self):
        outline = sf_strokepath.strokepath([sf.MoveTo(0.0, 0.0), sf.LineTo(10.0, 0.0)],
                                           StrokeStyle())
        assert sf_svg.path_to_svg_data(outline) == "M0 0.5 L10 0.5 L10 -0.5 L0 -0.5 Z"

    def test_curves_and_rounding(self):
        path = [sf.MoveTo(1.23456, -0.00001), sf.QuadTo(1.0, 2.0, 3.0, 4.0),
                sf.CurveTo(0.5, 0.25, 100.0, 1e-5, 7.0, -8.5)]
        assert sf_svg.path_to_svg_data(path) == "M1.2346 0 Q1 2 3 4 C0.5 0.25 100 0 7 -8.5"

    def test_empty(self):
        assert sf_svg.path_to_svg_data([]) == ""
