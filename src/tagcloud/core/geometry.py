"""Integer 2D value types used by the cloud layouter.

The coordinate convention follows raster images:

- X grows to the right, Y grows downwards
- A rectangle is stored as its top-left corner plus its size
- ``right`` and ``bottom`` are exclusive edges (``x + width``, ``y + height``)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class Point:
    """A point on the integer plane."""

    x: int
    y: int


@dataclass(frozen=True)
class Size:
    """Width and height of a rectangle.

    No validation happens here, so a Size can describe an invalid request
    that the layouter later rejects.
    """

    width: int
    height: int

    @property
    def is_positive(self) -> bool:
        return self.width > 0 and self.height > 0

    @property
    def area(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_location(cls, location: Point, size: Size) -> Self:
        """Create a rectangle with its top-left corner at ``location``."""
        return cls(location.x, location.y, size.width, size.height)

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def location(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def area(self) -> int:
        return self.width * self.height

    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Return the four corners (top-left, top-right, bottom-left, bottom-right)."""
        return (
            Point(self.left, self.top),
            Point(self.right, self.top),
            Point(self.left, self.bottom),
            Point(self.right, self.bottom),
        )

    def offset(self, dx: int, dy: int) -> Self:
        """Return a copy moved by (dx, dy)."""
        return type(self)(self.x + dx, self.y + dy, self.width, self.height)

    def intersects(self, other: Rectangle) -> bool:
        """Check whether two rectangles overlap by a positive area.

        Rectangles that only share an edge or a corner do not intersect.
        """
        return (
            other.x < self.right
            and self.x < other.right
            and other.y < self.bottom
            and self.y < other.bottom
        )

    def contains_point(self, point: Point) -> bool:
        """Check whether a point lies inside the rectangle or on its border."""
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom
