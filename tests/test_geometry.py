"""Tests for the integer geometry value types."""

import pytest

from tagcloud.core import Point, Rectangle, Size


def test_rectangle_edges():
    rect = Rectangle(10, 20, 30, 40)
    assert (rect.left, rect.top, rect.right, rect.bottom) == (10, 20, 40, 60)
    assert rect.location == Point(10, 20)
    assert rect.size == Size(30, 40)
    assert rect.area == 1200


def test_rectangle_from_location():
    rect = Rectangle.from_location(Point(-5, 7), Size(3, 4))
    assert rect == Rectangle(-5, 7, 3, 4)


def test_rectangle_corners():
    corners = Rectangle(0, 0, 2, 3).corners()
    assert set(corners) == {Point(0, 0), Point(2, 0), Point(0, 3), Point(2, 3)}


def test_rectangle_offset_returns_copy():
    rect = Rectangle(1, 1, 5, 5)
    moved = rect.offset(2, -3)
    assert moved == Rectangle(3, -2, 5, 5)
    assert rect == Rectangle(1, 1, 5, 5)


@pytest.mark.parametrize(
    "other",
    [
        Rectangle(5, 5, 10, 10),    # partial overlap
        Rectangle(2, 2, 2, 2),      # contained
        Rectangle(-5, -5, 20, 20),  # containing
        Rectangle(9, 0, 5, 10),     # one unit of overlap
    ],
)
def test_overlapping_rectangles_intersect(other):
    rect = Rectangle(0, 0, 10, 10)
    assert rect.intersects(other)
    assert other.intersects(rect)


@pytest.mark.parametrize(
    "other",
    [
        Rectangle(10, 0, 5, 5),   # touches right edge
        Rectangle(0, 10, 5, 5),   # touches bottom edge
        Rectangle(-5, 0, 5, 5),   # touches left edge
        Rectangle(10, 10, 5, 5),  # touches corner
        Rectangle(20, 20, 5, 5),  # far away
    ],
)
def test_touching_or_separate_rectangles_do_not_intersect(other):
    rect = Rectangle(0, 0, 10, 10)
    assert not rect.intersects(other)
    assert not other.intersects(rect)


def test_contains_point_includes_border():
    rect = Rectangle(0, 0, 10, 10)
    assert rect.contains_point(Point(0, 0))
    assert rect.contains_point(Point(10, 10))
    assert rect.contains_point(Point(5, 5))
    assert not rect.contains_point(Point(11, 5))


def test_size_positivity():
    assert Size(1, 1).is_positive
    assert not Size(0, 5).is_positive
    assert not Size(3, -5).is_positive

