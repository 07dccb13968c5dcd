"""Archimedean spiral used to generate candidate positions."""

from __future__ import annotations

import math

from ..core.geometry import Point, Rectangle, Size

DEFAULT_ANGLE_STEP = 0.1


class ArchimedeanSpiral:
    """Walks the spiral ``r = coefficient * theta`` around a center point.

    The angle only ever grows. Every generated candidate advances it by one
    step, so consecutive calls keep probing further out instead of restarting
    from the center.
    """

    def __init__(
        self,
        center: Point,
        step: float = DEFAULT_ANGLE_STEP,
        coefficient: float = 1.0,
    ) -> None:
        if step <= 0:
            raise ValueError(f"Spiral step must be positive, got {step}")
        self._center = center
        self._step = step
        self._coefficient = coefficient
        self._angle = 0.0

    @property
    def angle(self) -> float:
        return self._angle

    @property
    def step(self) -> float:
        return self._step

    def point_at(self, angle: float) -> tuple[float, float]:
        """Return the (unrounded) spiral point for an angle."""
        radius = self._coefficient * angle
        return (
            radius * math.cos(angle) + self._center.x,
            radius * math.sin(angle) + self._center.y,
        )

    def next_candidate(self, size: Size) -> Rectangle:
        """Centre a rectangle of ``size`` on the current spiral point and advance.

        Coordinates are truncated toward zero.
        """
        px, py = self.point_at(self._angle)
        x = int(px - size.width / 2.0)
        y = int(py - size.height / 2.0)
        self._angle += self._step
        return Rectangle.from_location(Point(x, y), size)
