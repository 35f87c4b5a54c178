"""Unit tests for arc length and polyline simplification."""

from math import cos, isclose, pi, sin

import pytest

from contour_geometry import (
    ContourTooShortError,
    InvalidEpsilonError,
    Point,
    approx_poly_dp,
    arc_length,
)


def wavy_curve(n=200):
    """A sine wave sampled at integer x, with integer y."""
    return [Point(x, int(round(20 * sin(x / 10.0)))) for x in range(n)]


@pytest.mark.unit
class TestArcLength:
    """Test cases for arc_length."""

    def test_single_segment(self):
        assert arc_length([Point(0, 0), Point(3, 4)], closed=False) == 5.0

    def test_two_points_closed_does_not_double_count(self):
        segment = [Point(0, 0), Point(3, 4)]
        assert arc_length(segment, closed=True) == arc_length(
            segment, closed=False
        )

    def test_short_arcs_have_zero_length(self):
        assert arc_length([]) == 0.0
        assert arc_length([Point(7, 7)], closed=True) == 0.0

    def test_open_square(self):
        square = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
        assert arc_length(square) == 30.0

    def test_closed_square(self):
        square = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
        assert arc_length(square, closed=True) == 40.0

    def test_accepts_float_points_and_tuples(self):
        assert arc_length([(0.0, 0.0), (0.5, 0.0), (0.5, 1.5)]) == 2.0

    def test_closed_circle_approximates_circumference(self):
        circle = [
            Point(100 * cos(2 * pi * i / 360), 100 * sin(2 * pi * i / 360))
            for i in range(360)
        ]
        assert isclose(
            arc_length(circle, closed=True), 2 * pi * 100, rel_tol=1e-4
        )


@pytest.mark.unit
class TestApproxPolyDp:
    """Test cases for Douglas-Peucker simplification."""

    def test_epsilon_must_be_positive(self):
        curve = [Point(0, 0), Point(1, 1)]
        with pytest.raises(InvalidEpsilonError, match="greater than 0.0"):
            approx_poly_dp(curve, 0.0)
        with pytest.raises(InvalidEpsilonError):
            approx_poly_dp(curve, -1.0)
        with pytest.raises(InvalidEpsilonError):
            approx_poly_dp(curve, float("nan"))

    def test_epsilon_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            approx_poly_dp([Point(0, 0), Point(1, 1)], 0.0)

    def test_requires_two_points(self):
        with pytest.raises(ContourTooShortError, match="at least 2 points"):
            approx_poly_dp([Point(0, 0)], 1.0)

    def test_straight_line_collapses_to_endpoints(self):
        line = [Point(x, 2 * x) for x in range(10)]
        assert approx_poly_dp(line, 0.5) == [Point(0, 0), Point(9, 18)]

    def test_keeps_corner_beyond_epsilon(self):
        curve = [
            Point(0, 0),
            Point(5, 1),
            Point(10, 10),
            Point(15, 1),
            Point(20, 0),
        ]
        assert approx_poly_dp(curve, 3.0) == [
            Point(0, 0),
            Point(10, 10),
            Point(20, 0),
        ]

    def test_drops_corner_within_epsilon(self):
        curve = [Point(0, 0), Point(5, 1), Point(10, 0)]
        assert approx_poly_dp(curve, 1.0) == [Point(0, 0), Point(10, 0)]

    def test_first_farthest_point_wins_ties(self):
        # Both interior points are 2 away from the chord; splitting at (1, 2)
        # leaves (2, 2) about 0.707 from the (1, 2)-(3, 0) chord.
        curve = [Point(0, 0), Point(1, 2), Point(2, 2), Point(3, 0)]
        assert approx_poly_dp(curve, 1.0) == [
            Point(0, 0),
            Point(1, 2),
            Point(3, 0),
        ]

    def test_epsilon_above_every_distance_keeps_endpoints(self):
        curve = [Point(0, 0), Point(3, 5), Point(6, 5), Point(9, 0)]
        assert approx_poly_dp(curve, 6.0) == [Point(0, 0), Point(9, 0)]

    def test_closed_drops_last_point(self):
        square = [
            Point(0, 0),
            Point(10, 0),
            Point(10, 10),
            Point(0, 10),
            Point(0, 0),
        ]
        assert approx_poly_dp(square, 1.0, closed=True) == [
            Point(0, 0),
            Point(10, 0),
            Point(10, 10),
            Point(0, 10),
        ]

    def test_preserves_endpoints(self):
        curve = wavy_curve()
        for epsilon in (0.5, 1.0, 3.0, 10.0, 50.0):
            result = approx_poly_dp(curve, epsilon)
            assert result[0] == curve[0]
            assert result[-1] == curve[-1]

    def test_result_is_subsequence_of_curve(self):
        curve = wavy_curve()
        result = approx_poly_dp(curve, 2.0)
        indices = [curve.index(p) for p in result]
        assert indices == sorted(indices)

    def test_point_count_does_not_grow_with_epsilon(self):
        curve = wavy_curve()
        counts = [
            len(approx_poly_dp(curve, epsilon))
            for epsilon in (0.25, 0.5, 1.0, 2.0, 4.0, 8.0, 16.0, 32.0, 64.0)
        ]
        assert counts == sorted(counts, reverse=True)
        assert counts[-1] == 2

    def test_is_deterministic(self):
        curve = wavy_curve()
        assert approx_poly_dp(curve, 1.5) == approx_poly_dp(curve, 1.5)

    def test_long_jagged_curve_does_not_hit_recursion_limit(self):
        # A zigzag splits off one point per range, deeper than the default
        # recursion limit, and every point stays.
        curve = [Point(x, (x % 2) * 10) for x in range(1200)]
        assert approx_poly_dp(curve, 0.1) == curve

    def test_closed_contour_with_repeated_start(self):
        # first == last makes the chord degenerate; distance falls back to
        # the distance from the start point
        triangle = [Point(0, 0), Point(10, 0), Point(5, 8), Point(0, 0)]
        assert approx_poly_dp(triangle, 1.0, closed=True) == [
            Point(0, 0),
            Point(10, 0),
            Point(5, 8),
        ]

    def test_accepts_tuples(self):
        assert approx_poly_dp([(0, 0), (1, 0), (2, 0)], 0.5) == [
            Point(0, 0),
            Point(2, 0),
        ]
