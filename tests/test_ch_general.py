"""Tests for the shared point primitives."""

import math

import numpy as np
import pytest

from ch_general import (
    CcwSorter,
    HullInputError,
    Point,
    as_points,
    distance_to_line,
    farthest_point,
    is_left_of,
    leftmost_index,
    length,
    orientation,
)


class TestOrientation:

    def test_counter_clockwise_is_positive(self):
        assert orientation((0, 0), (1, 0), (0, 1)) == 1

    def test_clockwise_is_negative(self):
        assert orientation((0, 0), (0, 1), (1, 0)) == -1

    def test_collinear_is_zero(self):
        assert orientation((0, 0), (1, 1), (3, 3)) == 0

    def test_value_is_twice_the_triangle_area(self):
        assert orientation((0, 0), (4, 0), (2, 3)) == 12

    def test_nan_propagates(self):
        assert math.isnan(orientation((0, 0), (1, 0), (float("nan"), 1)))


class TestIsLeftOf:

    def test_smaller_x_wins(self):
        assert is_left_of((0, 5), (1, -5))
        assert not is_left_of((1, -5), (0, 5))

    def test_equal_x_falls_back_to_y(self):
        assert is_left_of((1, 0), (1, 2))
        assert not is_left_of((1, 2), (1, 0))

    def test_equal_points_are_not_less(self):
        assert not is_left_of((1, 1), (1, 1))

    def test_matches_point_tuple_order(self):
        a, b = Point(1.0, 2.0), Point(1.0, 3.0)
        assert is_left_of(a, b) == (a < b)


class TestLeftmostIndex:

    def test_breaks_x_ties_by_y(self):
        assert leftmost_index([(1, 1), (0, 2), (0, -1), (3, 0)]) == 2

    def test_first_duplicate_wins(self):
        assert leftmost_index([(1, 1), (0, 2), (0, 2)]) == 1


class TestCcwSorter:

    def test_sorts_by_increasing_ccw_angle(self):
        sorter = CcwSorter((0, 0))
        points = [(1, 1), (1, -1), (0, 1), (1, 0)]
        assert sorted(points, key=sorter.key) == [(1, -1), (1, 0), (1, 1), (0, 1)]

    def test_call_is_strict(self):
        sorter = CcwSorter((0, 0))
        assert sorter((1, 0), (0, 1))
        assert not sorter((0, 1), (1, 0))
        # collinear with the pivot: neither precedes the other
        assert not sorter((1, 1), (2, 2))
        assert sorter.compare((1, 1), (2, 2)) == 0

    def test_pivot_is_copied(self):
        pivot = [0.0, 0.0]
        sorter = CcwSorter(pivot)
        pivot[0] = 10.0
        assert sorter.pivot == Point(0.0, 0.0)


class TestDistances:

    def test_length(self):
        assert length((0, 0), (3, 4)) == pytest.approx(5.0)

    def test_distance_to_line_is_unsigned(self):
        assert distance_to_line((0, 0), (2, 0), (1, 3)) == pytest.approx(3.0)
        assert distance_to_line((0, 0), (2, 0), (1, -3)) == pytest.approx(3.0)

    def test_distance_uses_the_infinite_line(self):
        assert distance_to_line((0, 0), (1, 0), (10, 2)) == pytest.approx(2.0)

    def test_zero_length_segment_is_not_finite(self):
        assert not np.isfinite(distance_to_line((1, 1), (1, 1), (2, 3)))

    def test_farthest_point_first_occurrence_wins(self):
        points = [(0, 1), (5, 2), (3, -2), (1, 2)]
        assert farthest_point((0, 0), (1, 0), points) == 1

    def test_farthest_point_accepts_numpy(self):
        points = np.array([[0.0, 1.0], [0.0, -4.0], [2.0, 3.0]])
        assert farthest_point((0, 0), (1, 0), points) == 1

    def test_farthest_point_needs_points(self):
        with pytest.raises(HullInputError):
            farthest_point((0, 0), (1, 0), [])


class TestAsPoints:

    def test_returns_fresh_points(self):
        raw = [[0, 0], [1, 0], [0, 1]]
        points = as_points(raw)
        assert points == [Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0)]
        assert all(isinstance(p, Point) for p in points)
        points.pop()
        assert len(raw) == 3

    def test_accepts_numpy_arrays(self):
        arr = np.array([[0.5, 1.5], [2.0, 3.0], [4.0, -1.0]])
        assert as_points(arr)[0] == Point(0.5, 1.5)

    @pytest.mark.parametrize("points", [[], [(0, 0)], [(0, 0), (1, 1)]])
    def test_too_few_points(self, points):
        with pytest.raises(HullInputError, match="at least 3 points"):
            as_points(points)

    def test_wrong_shape(self):
        with pytest.raises(HullInputError, match="shape"):
            as_points([(0, 0, 0), (1, 1, 1), (2, 2, 2)])

    def test_not_numeric(self):
        with pytest.raises(HullInputError):
            as_points([("a", "b"), ("c", "d"), ("e", "f")])

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            as_points([(0, 0)])
