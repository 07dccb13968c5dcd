"""Core geometry value types."""

from .geometry import Point, Rectangle, Size
from . import geometry

__all__ = ["Point", "Size", "Rectangle", "geometry"]
