"""Tests for layout quality metrics."""

import math

import pytest

from tagcloud.core import Point, Rectangle, Size
from tagcloud.layout import (
    cloud_bounds,
    find_intersections,
    max_distance_from_center,
    sort_largest_first,
    random_sizes,
    tightness_ratio,
)


def test_cloud_bounds():
    rects = [Rectangle(0, 0, 10, 10), Rectangle(-5, 20, 5, 5), Rectangle(30, -2, 1, 1)]
    assert cloud_bounds(rects) == Rectangle(-5, -2, 36, 27)


def test_cloud_bounds_rejects_empty():
    with pytest.raises(ValueError):
        cloud_bounds([])


def test_max_distance_uses_farthest_corner():
    rect = Rectangle(0, 0, 3, 4)
    assert max_distance_from_center(Point(0, 0), [rect]) == pytest.approx(5.0)
    assert max_distance_from_center(Point(3, 4), [rect]) == pytest.approx(5.0)
    assert max_distance_from_center(Point(0, 0), []) == 0.0


def test_tightness_ratio_of_square_around_center():
    # Square of side 2 centred on the origin: radius sqrt(2), area 4
    ratio = tightness_ratio(Point(0, 0), [Rectangle(-1, -1, 2, 2)])
    assert ratio == pytest.approx(math.pi * 2 / 4)


def test_tightness_ratio_rejects_empty():
    with pytest.raises(ValueError):
        tightness_ratio(Point(0, 0), [])


def test_find_intersections_lists_pairs():
    rects = [
        Rectangle(0, 0, 10, 10),
        Rectangle(10, 0, 10, 10),  # touches the first
        Rectangle(5, 5, 10, 10),   # overlaps both
    ]
    assert find_intersections(rects) == [(0, 2), (1, 2)]


def test_find_intersections_small_inputs():
    assert find_intersections([]) == []
    assert find_intersections([Rectangle(0, 0, 1, 1)]) == []


def test_random_sizes_are_reproducible_and_in_range():
    first = random_sizes(50, seed=1, min_size=3, max_size=9)
    assert first == random_sizes(50, seed=1, min_size=3, max_size=9)
    assert all(3 <= s.width <= 9 and 3 <= s.height <= 9 for s in first)


@pytest.mark.parametrize("count,min_size,max_size", [(-1, 1, 10), (5, 0, 10), (5, 10, 2)])
def test_random_sizes_rejects_bad_arguments(count, min_size, max_size):
    with pytest.raises(ValueError):
        random_sizes(count, min_size=min_size, max_size=max_size)


def test_sort_largest_first_is_stable():
    sizes = [Size(2, 2), Size(5, 5), Size(1, 4), Size(4, 1)]
    assert sort_largest_first(sizes) == [Size(5, 5), Size(2, 2), Size(1, 4), Size(4, 1)]
