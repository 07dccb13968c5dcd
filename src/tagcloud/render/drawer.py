"""Draw placed rectangles to an image for inspection."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from PIL import Image, ImageDraw

from ..core.geometry import Point, Rectangle
from ..layout.metrics import cloud_bounds


class CloudDrawer:
    """Renders a cloud layout as rectangle outlines on a plain canvas.

    The layout is scaled uniformly so that the whole cloud and its center fit
    inside the canvas minus ``margin`` on every side. Layouts that already
    fit are drawn 1:1 unless ``upscale`` is set.
    """

    def __init__(
        self,
        width: int = 800,
        height: int = 800,
        background: str = "white",
        outline: str = "black",
        center_color: str = "red",
        margin: int = 10,
        upscale: bool = False,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        if margin < 0 or 2 * margin >= min(width, height):
            raise ValueError(f"Margin {margin} does not fit a {width}x{height} canvas")
        self.width = width
        self.height = height
        self.background = background
        self.outline = outline
        self.center_color = center_color
        self.margin = margin
        self.upscale = upscale

    def _projection(
        self, rectangles: Sequence[Rectangle], center: Point
    ) -> tuple[float, float, float]:
        """Return (scale, offset_x, offset_y) mapping layout to canvas coordinates."""
        if rectangles:
            bounds = cloud_bounds(rectangles)
            left = min(bounds.left, center.x)
            top = min(bounds.top, center.y)
            right = max(bounds.right, center.x)
            bottom = max(bounds.bottom, center.y)
        else:
            left = right = center.x
            top = bottom = center.y

        span_x = max(right - left, 1)
        span_y = max(bottom - top, 1)
        scale = min(
            (self.width - 2 * self.margin) / span_x,
            (self.height - 2 * self.margin) / span_y,
        )
        if not self.upscale:
            scale = min(scale, 1.0)

        # Centre the scaled cloud on the canvas
        offset_x = (self.width - span_x * scale) / 2 - left * scale
        offset_y = (self.height - span_y * scale) / 2 - top * scale
        return scale, offset_x, offset_y

    def draw(self, rectangles: Sequence[Rectangle], center: Point) -> Image.Image:
        """Draw the rectangles and mark the center.

        Returns:
            PIL Image in RGB mode
        """
        image = Image.new("RGB", (self.width, self.height), self.background)
        draw = ImageDraw.Draw(image)
        scale, offset_x, offset_y = self._projection(rectangles, center)

        for rect in rectangles:
            x0 = round(rect.left * scale + offset_x)
            y0 = round(rect.top * scale + offset_y)
            # ImageDraw includes the end pixel, keep at least one pixel wide
            x1 = max(round(rect.right * scale + offset_x) - 1, x0)
            y1 = max(round(rect.bottom * scale + offset_y) - 1, y0)
            draw.rectangle((x0, y0, x1, y1), outline=self.outline)

        cx = round(center.x * scale + offset_x)
        cy = round(center.y * scale + offset_y)
        draw.line((cx - 3, cy, cx + 3, cy), fill=self.center_color)
        draw.line((cx, cy - 3, cx, cy + 3), fill=self.center_color)
        return image

    def save(
        self, rectangles: Sequence[Rectangle], center: Point, path: str | Path
    ) -> Path:
        """Draw the layout and write it to ``path``; the format follows the extension."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.draw(rectangles, center).save(str(path))
        return path
