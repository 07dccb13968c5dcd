"""Collision indexes holding the placed rectangles.

Both indexes keep rectangles in insertion order and answer the same question:
does a rectangle overlap any placed one by a positive area? They return
identical answers, so swapping one for the other never changes a layout.
"""

from __future__ import annotations

from typing import Iterator, Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray

from ..core.geometry import Rectangle


@runtime_checkable
class RectangleIndex(Protocol):
    """Protocol for placed-rectangle stores."""

    def add(self, rect: Rectangle) -> None:
        ...

    def intersects_any(self, rect: Rectangle) -> bool:
        ...

    def __len__(self) -> int:
        ...

    def __iter__(self) -> Iterator[Rectangle]:
        ...


class BruteForceIndex:
    """Scans every placed rectangle for each query.

    Edges are kept in numpy arrays so the scan is one vectorized comparison.
    """

    _INITIAL_CAPACITY = 64

    def __init__(self) -> None:
        self._rects: list[Rectangle] = []
        # Columns: left, top, right, bottom
        self._edges: NDArray[np.int64] = np.empty((self._INITIAL_CAPACITY, 4), dtype=np.int64)

    def add(self, rect: Rectangle) -> None:
        count = len(self._rects)
        if count == len(self._edges):
            grown = np.empty((count * 2, 4), dtype=np.int64)
            grown[:count] = self._edges
            self._edges = grown
        self._edges[count] = (rect.left, rect.top, rect.right, rect.bottom)
        self._rects.append(rect)

    def intersects_any(self, rect: Rectangle) -> bool:
        count = len(self._rects)
        if count == 0:
            return False
        edges = self._edges[:count]
        hits = (
            (edges[:, 0] < rect.right)
            & (rect.left < edges[:, 2])
            & (edges[:, 1] < rect.bottom)
            & (rect.top < edges[:, 3])
        )
        return bool(hits.any())

    def __len__(self) -> int:
        return len(self._rects)

    def __iter__(self) -> Iterator[Rectangle]:
        return iter(self._rects)


class GridIndex:
    """Uniform hash grid over the plane.

    Each rectangle is registered in every cell its area touches. A query
    only tests rectangles registered in the cells the query covers.
    """

    def __init__(self, cell_size: int = 64) -> None:
        if cell_size <= 0:
            raise ValueError(f"Grid cell size must be positive, got {cell_size}")
        self._cell_size = cell_size
        self._rects: list[Rectangle] = []
        self._cells: dict[tuple[int, int], list[int]] = {}

    @property
    def cell_size(self) -> int:
        return self._cell_size

    def _cell_range(self, rect: Rectangle) -> Iterator[tuple[int, int]]:
        # right/bottom are exclusive, so the last covered unit is right - 1
        size = self._cell_size
        first_col = rect.left // size
        last_col = (rect.right - 1) // size
        first_row = rect.top // size
        last_row = (rect.bottom - 1) // size
        for col in range(first_col, last_col + 1):
            for row in range(first_row, last_row + 1):
                yield (col, row)

    def add(self, rect: Rectangle) -> None:
        slot = len(self._rects)
        self._rects.append(rect)
        for cell in self._cell_range(rect):
            self._cells.setdefault(cell, []).append(slot)

    def intersects_any(self, rect: Rectangle) -> bool:
        if not self._rects:
            return False
        checked: set[int] = set()
        for cell in self._cell_range(rect):
            for slot in self._cells.get(cell, ()):
                if slot in checked:
                    continue
                checked.add(slot)
                if self._rects[slot].intersects(rect):
                    return True
        return False

    def __len__(self) -> int:
        return len(self._rects)

    def __iter__(self) -> Iterator[Rectangle]:
        return iter(self._rects)


# Registry of available index kinds
INDEX_REGISTRY = {
    "brute": BruteForceIndex,
    "grid": GridIndex,
}

INDEX_KINDS = tuple(INDEX_REGISTRY)

# Constructor options each index kind accepts
INDEX_OPTIONS: dict[str, tuple[str, ...]] = {
    "brute": (),
    "grid": ("cell_size",),
}


def create_index(kind: str = "brute", **options) -> RectangleIndex:
    """Create an empty collision index by name.

    Args:
        kind: Registered index name ("brute" or "grid")
        **options: Constructor options for the index (e.g. ``cell_size``)

    Returns:
        A new, empty index
    """
    try:
        index_cls = INDEX_REGISTRY[kind]
    except KeyError:
        raise ValueError(f"Unknown index type: {kind}") from None
    unknown = set(options) - set(INDEX_OPTIONS[kind])
    if unknown:
        raise ValueError(f"Unsupported options for {kind} index: {sorted(unknown)}")
    return index_cls(**options)
