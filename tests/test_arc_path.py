"""Tests for arc path descriptors."""

import math
import warnings

import pytest

from cadtraj.core.arc_path import ArcPathDescriptor, build_arc_path, build_arc_paths
from cadtraj.core.entities import Arc, Circle, Point2D, Segment


class TestBuildArcPath:
    def test_quarter_arc(self):
        desc = build_arc_path(Arc(Point2D(1.0, 1.0), 2.0, 0.0, 90.0))
        assert isinstance(desc, ArcPathDescriptor)
        assert desc.start_point.as_tuple() == pytest.approx((3.0, 1.0))
        assert desc.end_point.as_tuple() == pytest.approx((1.0, 3.0))
        assert desc.radius == 2.0
        assert desc.sweep_angle == pytest.approx(90.0)
        assert not desc.is_large_arc
        assert not desc.sweep_clockwise

    def test_half_circle_is_not_large(self):
        desc = build_arc_path(Arc(Point2D(0.0, 0.0), 1.0, 0.0, 180.0))
        assert desc.sweep_angle == 180.0
        assert desc.is_large_arc is False

    def test_over_half_is_large(self):
        desc = build_arc_path(Arc(Point2D(0.0, 0.0), 1.0, 0.0, 180.5))
        assert desc.is_large_arc is True

    def test_wrapped_sweep(self):
        # 300° → 60° is a 120° sweep, not -240°
        desc = build_arc_path(Arc(Point2D(0.0, 0.0), 1.0, 300.0, 60.0))
        assert desc.sweep_angle == pytest.approx(120.0)
        assert not desc.is_large_arc

    def test_wrapped_large_sweep(self):
        desc = build_arc_path(Arc(Point2D(0.0, 0.0), 1.0, 90.0, 0.0))
        assert desc.sweep_angle == pytest.approx(270.0)
        assert desc.is_large_arc

    def test_always_counter_clockwise(self):
        for start, end in [(0.0, 10.0), (200.0, 10.0), (10.0, 350.0)]:
            desc = build_arc_path(Arc(Point2D(0.0, 0.0), 1.0, start, end))
            assert desc.sweep_clockwise is False

    @pytest.mark.parametrize("bad", [math.nan, math.inf])
    def test_non_finite_returns_none(self, bad):
        with pytest.warns(RuntimeWarning, match="Arc path"):
            assert build_arc_path(Arc(Point2D(0.0, 0.0), 1.0, bad, 90.0)) is None

    def test_non_finite_center_returns_none(self):
        with pytest.warns(RuntimeWarning):
            assert build_arc_path(Arc(Point2D(math.nan, 0.0), 1.0, 0.0, 90.0)) is None

    def test_non_arc_returns_none(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert build_arc_path(Circle(Point2D(0.0, 0.0), 1.0)) is None


class TestBuildArcPaths:
    def test_bad_arc_skipped(self):
        entities = [
            Arc(Point2D(0.0, 0.0), 1.0, 0.0, 90.0),
            Segment(Point2D(0.0, 0.0), Point2D(1.0, 0.0)),
            Arc(Point2D(0.0, 0.0), 1.0, math.nan, 90.0),
            Arc(Point2D(5.0, 5.0), 2.0, 90.0, 270.0),
        ]
        with pytest.warns(RuntimeWarning):
            paths = build_arc_paths(entities)
        assert len(paths) == 2
        assert paths[1].start_point.as_tuple() == pytest.approx((5.0, 7.0))

    def test_empty(self):
        assert build_arc_paths([]) == []


class TestMultiTurnAngles:
    def test_start_past_full_turn_is_large(self):
        desc = build_arc_path(Arc(Point2D(0.0, 0.0), 1.0, 400.0, 10.0))
        assert desc.sweep_angle == pytest.approx(330.0)
        assert desc.is_large_arc
        assert desc.start_point.as_tuple() == pytest.approx(
            (math.cos(math.radians(40)), math.sin(math.radians(40))),
        )

    def test_end_more_than_a_turn_behind(self):
        desc = build_arc_path(Arc(Point2D(0.0, 0.0), 1.0, 10.0, -400.0))
        assert desc.sweep_angle == pytest.approx(310.0)
        assert desc.is_large_arc

    def test_end_more_than_a_turn_ahead(self):
        desc = build_arc_path(Arc(Point2D(0.0, 0.0), 1.0, 30.0, 820.0))
        assert desc.sweep_angle == pytest.approx(70.0)
        assert not desc.is_large_arc

    @pytest.mark.parametrize("start", [-725.0, -30.0, 0.0, 359.0, 400.0, 1090.0])
    @pytest.mark.parametrize("end", [-800.0, -10.0, 0.0, 180.0, 360.0, 725.0])
    def test_sweep_always_in_one_turn(self, start, end):
        desc = build_arc_path(Arc(Point2D(0.0, 0.0), 1.0, start, end))
        assert 0.0 <= desc.sweep_angle < 360.0
        assert desc.is_large_arc == (desc.sweep_angle > 180.0)
