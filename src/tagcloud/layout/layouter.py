"""Circular cloud layouter: spiral search followed by compaction toward the center."""

from __future__ import annotations

import logging
from typing import Iterable

from ..core.geometry import Point, Rectangle, Size
from .index import BruteForceIndex, RectangleIndex
from .spiral import DEFAULT_ANGLE_STEP, ArchimedeanSpiral


log = logging.getLogger(__name__)


class InvalidSizeError(ValueError):
    """Raised when a rectangle size has a non-positive dimension."""

    def __init__(self, size: Size) -> None:
        super().__init__(
            f"Sizes of rectangle must be positive, got {size.width}x{size.height}"
        )
        self.size = size


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class CircularCloudLayouter:
    """Places rectangles one by one around a fixed center without overlaps.

    Each call to place_next() walks an Archimedean spiral outward from the
    last visited angle until the requested rectangle fits, then slides it
    toward the center one unit at a time, alternating X and Y, until neither
    axis can move.

    Example:
        layouter = CircularCloudLayouter(Point(400, 300))
        for size in sizes_largest_first:
            rect = layouter.place_next(size)
    """

    def __init__(
        self,
        center: Point,
        angle_step: float = DEFAULT_ANGLE_STEP,
        index: RectangleIndex | None = None,
    ) -> None:
        """Create a layouter around ``center``.

        Args:
            center: Fixed center of the cloud
            angle_step: Spiral angle increment per candidate, in radians
            index: Empty collision index to store placed rectangles in.
                Defaults to a BruteForceIndex.
        """
        self._center = center
        self._spiral = ArchimedeanSpiral(center, step=angle_step)
        self._placed = index if index is not None else BruteForceIndex()
        if len(self._placed) != 0:
            raise ValueError("Layouter index must start empty")

    @property
    def center(self) -> Point:
        return self._center

    @property
    def rectangles(self) -> tuple[Rectangle, ...]:
        """Placed rectangles in placement order."""
        return tuple(self._placed)

    @property
    def spiral_angle(self) -> float:
        return self._spiral.angle

    def __len__(self) -> int:
        return len(self._placed)

    def place_next(self, size: Size) -> Rectangle:
        """Place the next rectangle and return its final position.

        Args:
            size: Requested width and height, both must be positive

        Returns:
            The placed rectangle, which no earlier rectangle intersects

        Raises:
            InvalidSizeError: If width or height is not positive. The layouter
                state is left untouched.
        """
        if not size.is_positive:
            raise InvalidSizeError(size)

        candidate, probes = self._find_free_candidate(size)
        rect, moves = self._shift_to_center(candidate)
        self._placed.add(rect)

        log.debug(
            "Placed %dx%d at (%d, %d) after %d spiral probes and %d compaction moves",
            size.width, size.height, rect.x, rect.y, probes, moves,
        )
        return rect

    def _find_free_candidate(self, size: Size) -> tuple[Rectangle, int]:
        probes = 0
        while True:
            candidate = self._spiral.next_candidate(size)
            probes += 1
            if not self._placed.intersects_any(candidate):
                return candidate, probes

    def _shift_to_center(self, rect: Rectangle) -> tuple[Rectangle, int]:
        """Greedily move ``rect`` toward the center, one axis and one unit at a time.

        Step directions are fixed from the starting position; an axis stops
        moving once its coordinate reaches the center's.
        """
        step_x = _sign(self._center.x - rect.x)
        step_y = _sign(self._center.y - rect.y)
        moves = 0

        moved = True
        while moved:
            moved = False
            if rect.x != self._center.x:
                shifted = rect.offset(step_x, 0)
                if not self._placed.intersects_any(shifted):
                    rect = shifted
                    moved = True
                    moves += 1
            if rect.y != self._center.y:
                shifted = rect.offset(0, step_y)
                if not self._placed.intersects_any(shifted):
                    rect = shifted
                    moved = True
                    moves += 1

        return rect, moves


def layout_sizes(
    sizes: Iterable[Size],
    center: Point,
    angle_step: float = DEFAULT_ANGLE_STEP,
    index: RectangleIndex | None = None,
) -> list[Rectangle]:
    """Lay out ``sizes`` in the given order around ``center``.

    The returned rectangles line up positionally with the input sizes.
    """
    layouter = CircularCloudLayouter(center, angle_step=angle_step, index=index)
    return [layouter.place_next(size) for size in sizes]
