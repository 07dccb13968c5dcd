"""Helpers for producing the size sequences fed to the layouter."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from ..core.geometry import Size


def random_sizes(
    count: int,
    seed: int | None = None,
    min_size: int = 1,
    max_size: int = 1000,
) -> list[Size]:
    """Generate ``count`` sizes with width and height drawn uniformly from [min_size, max_size].

    The same seed always yields the same sequence.
    """
    if count < 0:
        raise ValueError(f"Size count must not be negative, got {count}")
    if min_size <= 0 or max_size < min_size:
        raise ValueError(f"Invalid size range [{min_size}, {max_size}]")
    rng = np.random.default_rng(seed)
    dims = rng.integers(min_size, max_size, size=(count, 2), endpoint=True)
    return [Size(int(w), int(h)) for w, h in dims]


def sort_largest_first(sizes: Iterable[Size]) -> list[Size]:
    """Order sizes by descending area; ties keep their input order."""
    return sorted(sizes, key=lambda s: s.area, reverse=True)
