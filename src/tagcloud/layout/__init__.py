"""Cloud layout: spiral placement, collision indexes and layout metrics."""

from .index import INDEX_KINDS, BruteForceIndex, GridIndex, RectangleIndex, create_index
from .layouter import CircularCloudLayouter, InvalidSizeError, layout_sizes
from .metrics import cloud_bounds, find_intersections, max_distance_from_center, tightness_ratio
from .sizes import random_sizes, sort_largest_first
from .spiral import ArchimedeanSpiral

__all__ = [
    "INDEX_KINDS",
    "ArchimedeanSpiral",
    "BruteForceIndex",
    "CircularCloudLayouter",
    "GridIndex",
    "InvalidSizeError",
    "RectangleIndex",
    "cloud_bounds",
    "create_index",
    "find_intersections",
    "layout_sizes",
    "max_distance_from_center",
    "random_sizes",
    "sort_largest_first",
    "tightness_ratio",
]
