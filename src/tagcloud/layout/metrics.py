"""Quality measures for a finished cloud layout."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from ..core.geometry import Point, Rectangle


def cloud_bounds(rectangles: Sequence[Rectangle]) -> Rectangle:
    """Smallest rectangle enclosing every rectangle of the cloud."""
    if not rectangles:
        raise ValueError("Cannot compute bounds of an empty cloud")
    left = min(r.left for r in rectangles)
    top = min(r.top for r in rectangles)
    right = max(r.right for r in rectangles)
    bottom = max(r.bottom for r in rectangles)
    return Rectangle(left, top, right - left, bottom - top)


def max_distance_from_center(center: Point, rectangles: Sequence[Rectangle]) -> float:
    """Largest distance from ``center`` to any rectangle corner (0.0 for no rectangles)."""
    if not rectangles:
        return 0.0
    edges = np.array(
        [(r.left, r.top, r.right, r.bottom) for r in rectangles], dtype=np.float64
    )
    # The farthest corner picks the farther edge on each axis independently
    dx = np.maximum(np.abs(edges[:, 0] - center.x), np.abs(edges[:, 2] - center.x))
    dy = np.maximum(np.abs(edges[:, 1] - center.y), np.abs(edges[:, 3] - center.y))
    return float(np.sqrt(dx * dx + dy * dy).max())


def tightness_ratio(center: Point, rectangles: Sequence[Rectangle]) -> float:
    """Area of the enclosing circle around ``center`` divided by the rectangles' total area.

    A perfectly packed disk scores 1.0; larger values mean more empty space.
    """
    total_area = sum(r.area for r in rectangles)
    if total_area == 0:
        raise ValueError("Cannot compute tightness of an empty cloud")
    radius = max_distance_from_center(center, rectangles)
    return math.pi * radius * radius / total_area


def find_intersections(rectangles: Sequence[Rectangle]) -> list[tuple[int, int]]:
    """Return every index pair (i, j), i < j, whose rectangles intersect."""
    if len(rectangles) < 2:
        return []
    edges = np.array(
        [(r.left, r.top, r.right, r.bottom) for r in rectangles], dtype=np.int64
    )
    left, top, right, bottom = edges.T
    overlap = (
        (left[:, None] < right[None, :])
        & (left[None, :] < right[:, None])
        & (top[:, None] < bottom[None, :])
        & (top[None, :] < bottom[:, None])
    )
    rows, cols = np.nonzero(np.triu(overlap, k=1))
    return [(int(i), int(j)) for i, j in zip(rows, cols)]
