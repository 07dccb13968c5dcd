"""Tagcloud - lays out rectangles in a dense circular cloud around a center."""

from .core import Point, Rectangle, Size
from .layout import CircularCloudLayouter, InvalidSizeError, layout_sizes

__all__ = [
    "CircularCloudLayouter",
    "InvalidSizeError",
    "Point",
    "Rectangle",
    "Size",
    "layout_sizes",
]
