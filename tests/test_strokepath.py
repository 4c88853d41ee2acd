"""Tests for the stroking front end: grouping, flattening and transforms."""

import logging

import pytest

from strokeforge.core import error as sf_error
from strokeforge.core import types as sf
from strokeforge.core.types import StrokeStyle, LineCap, LineJoin
from strokeforge.operators import strokepath as sf_strokepath
from strokeforge.operators import strokepath_algorithm as algo

from conftest import contours


TWO_LINES = sf.Path([sf.MoveTo(0.0, 0.0), sf.LineTo(10.0, 0.0),
                     sf.MoveTo(20.0, 0.0), sf.LineTo(30.0, 5.0)])


class TestGrouped:
    def test_one_group_per_subpath(self):
        groups = sf_strokepath.strokepath_grouped(TWO_LINES, StrokeStyle(width=2.0))
        assert len(groups) == 2
        assert [g.contour_count() for g in groups] == [1, 1]
        assert groups[0][0] == sf.MoveTo(0.0, 1.0)

    def test_groups_concatenate_to_whole_outline(self):
        style = StrokeStyle(width=2.0, cap=LineCap.ROUND, join=LineJoin.ROUND)
        groups = sf_strokepath.strokepath_grouped(TWO_LINES, style)
        whole = sf_strokepath.strokepath(TWO_LINES, style)
        assert [op for g in groups for op in g] == list(whole)
        assert list(whole) == list(algo.stroke_to_path(TWO_LINES, style))

    def test_empty_subpaths_are_left_out(self):
        path = sf.Path([sf.MoveTo(5.0, 5.0), sf.MoveTo(0.0, 0.0), sf.LineTo(0.0, 3.0),
                        sf.MoveTo(9.0, 9.0)])
        groups = sf_strokepath.strokepath_grouped(path, StrokeStyle(cap=LineCap.ROUND))
        assert len(groups) == 1
        assert groups[0].contour_count() == 3

    def test_accepts_plain_list(self):
        outline = sf_strokepath.strokepath([sf.MoveTo(0.0, 0.0), sf.LineTo(0.0, 1.0)],
                                           StrokeStyle())
        assert isinstance(outline, sf.Path)
        assert outline.contour_count() == 1

    def test_style_checked_before_stroking(self):
        with pytest.raises(sf_error.StyleError):
            sf_strokepath.strokepath(sf.Path(), StrokeStyle(mitre_limit=0.5))

    def test_logs_summary(self, caplog):
        with caplog.at_level(logging.INFO, logger="strokeforge.operators.strokepath"):
            sf_strokepath.strokepath(TWO_LINES, StrokeStyle(cap=LineCap.SQUARE))
        assert "Stroked 2 subpath(s) into 6 contour(s)" in caplog.text


class TestFlattenOption:
    CURVE = sf.Path([sf.MoveTo(0.0, 0.0), sf.CurveTo(0.0, 20.0, 30.0, 20.0, 30.0, 0.0)])

    def test_curves_fail_without_flatten(self):
        with pytest.raises(sf_error.UnsupportedOperationError):
            sf_strokepath.strokepath(self.CURVE, StrokeStyle())

    def test_curves_stroke_with_flatten(self):
        outline = sf_strokepath.strokepath(self.CURVE, StrokeStyle(width=2.0), flatten=True)
        parts = contours(outline)
        # n segments give n quads and n - 1 joins
        assert len(parts) % 2 == 1
        assert len(parts) > 3
        for c in parts:
            assert isinstance(c[0], sf.MoveTo)
            assert isinstance(c[-1], sf.ClosePath)

    def test_finer_tolerance_gives_more_contours(self):
        coarse = sf_strokepath.strokepath(self.CURVE, StrokeStyle(), flatten=True, tolerance=1.0)
        fine = sf_strokepath.strokepath(self.CURVE, StrokeStyle(), flatten=True, tolerance=0.01)
        assert fine.contour_count() > coarse.contour_count()


class TestTransformPath:
    def test_identity(self):
        outline = sf_strokepath.strokepath(TWO_LINES, StrokeStyle(cap=LineCap.ROUND))
        assert list(sf_strokepath.transform_path(outline, 1, 0, 0, 1, 0, 0)) == list(outline)

    def test_scale_and_translate(self):
        path = sf.Path([sf.MoveTo(1.0, 2.0), sf.LineTo(3.0, 4.0),
                        sf.QuadTo(1.0, 1.0, 2.0, 2.0),
                        sf.CurveTo(1.0, 0.0, 0.0, 1.0, 1.0, 1.0), sf.ClosePath()])
        result = sf_strokepath.transform_path(path, 2.0, 0.0, 0.0, 3.0, 10.0, -1.0)
        assert list(result) == [
            sf.MoveTo(12.0, 5.0),
            sf.LineTo(16.0, 11.0),
            sf.QuadTo(12.0, 2.0, 14.0, 5.0),
            sf.CurveTo(12.0, -1.0, 10.0, 2.0, 12.0, 2.0),
            sf.ClosePath(),
        ]

    def test_rotation(self):
        result = sf_strokepath.transform_path([sf.MoveTo(1.0, 0.0)], 0.0, 1.0, -1.0, 0.0, 0.0, 0.0)
        assert result[0].x == pytest.approx(0.0)
        assert result[0].y == pytest.approx(1.0)
