"""Tests for vector and distance helpers."""

import pytest

from stellarforge.utils import euclidean_distance
from stellarforge.utils.distance import project_onto_segment, quadratic_bezier


class TestEuclideanDistance:
    """Test straight-line distance."""

    def test_distance_same_point(self):
        """Test distance from a point to itself."""
        assert euclidean_distance((5, 5, 5), (5, 5, 5)) == 0

    def test_distance_axis_aligned(self):
        """Test distance along each axis."""
        assert euclidean_distance((0, 0, 0), (7, 0, 0)) == 7
        assert euclidean_distance((0, 0, 0), (0, -3, 0)) == 3
        assert euclidean_distance((0, 0, 0), (0, 0, 2)) == 2

    def test_distance_3d(self):
        """Test a 2-3-6 right triangle in space."""
        assert euclidean_distance((1, 1, 1), (3, 4, 7)) == 7

    def test_distance_symmetric(self):
        """Test that distance does not depend on argument order."""
        a, b = (-120.5, 40.0, 9.0), (300.0, -22.0, 1.5)
        assert euclidean_distance(a, b) == euclidean_distance(b, a)


class TestQuadraticBezier:
    """Test curve evaluation."""

    def test_endpoints(self):
        """Curve starts and ends at its endpoints."""
        start, control, end = (0, 0, 0), (5, 10, 0), (10, 0, 0)
        assert quadratic_bezier(start, control, end, 0.0) == (0, 0, 0)
        assert quadratic_bezier(start, control, end, 1.0) == (10, 0, 0)

    def test_midpoint_pulled_toward_control(self):
        """At t=0.5 the curve is halfway between the chord midpoint and control."""
        point = quadratic_bezier((0, 0, 0), (5, 10, 0), (10, 0, 0), 0.5)
        assert point == pytest.approx((5.0, 5.0, 0.0))


class TestProjectOntoSegment:
    """Test projection used by warp lane refinement."""

    def test_point_beside_segment(self):
        """Test a point above the middle of the segment."""
        along, deviation = project_onto_segment((5, 3, 0), (0, 0, 0), (10, 0, 0))
        assert along == pytest.approx(5.0)
        assert deviation == pytest.approx(3.0)

    def test_point_behind_start(self):
        """Points behind the start project to a negative distance."""
        along, deviation = project_onto_segment((-4, 0, 2), (0, 0, 0), (10, 0, 0))
        assert along == pytest.approx(-4.0)
        assert deviation == pytest.approx(2.0)

    def test_point_past_end(self):
        """Points past the end project beyond the segment length."""
        along, _ = project_onto_segment((0, 0, 15), (0, 0, 0), (0, 0, 10))
        assert along == pytest.approx(15.0)

    def test_degenerate_segment(self):
        """A zero-length segment reports distance from its start."""
        assert project_onto_segment((3, 4, 0), (0, 0, 0), (0, 0, 0)) == (0.0, 5.0)
