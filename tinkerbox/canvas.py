"""An in-memory framebuffer drawn on in square logical pixels."""

from __future__ import annotations

from typing import Iterable, Optional

from tinkerbox import raster
from tinkerbox.palettes import TRANSPARENT, Color

_DEFAULT_COLOR = Color(0, 0, 0, 255)


class Canvas:
    """A ``width`` by ``height`` grid of device pixels.

    Drawing coordinates are logical: each logical point covers a
    ``pixel_size`` by ``pixel_size`` block of device pixels.  Points that fall
    outside the canvas are clipped.
    """

    def __init__(
        self,
        width: int,
        height: int,
        pixel_size: int = 4,
        background: Color = TRANSPARENT,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError("canvas size must not be negative")
        if pixel_size <= 0:
            raise ValueError("pixel size must be positive")
        self.width = width
        self.height = height
        self.pixel_size = pixel_size
        self.color = _DEFAULT_COLOR
        self._pixels = [[background] * width for _ in range(height)]

    def set_color(self, color: Color) -> None:
        """Set the colour used by every drawing call."""
        self.color = color

    def clear(self, color: Optional[Color] = None) -> None:
        """Fill the whole canvas with ``color``, or the current colour."""
        fill = self.color if color is None else color
        for row in self._pixels:
            row[:] = [fill] * self.width

    def _plot_all(self, points: Iterable[tuple[int, int]]) -> None:
        for x, y in points:
            self.draw_point(x, y)

    def draw_point(self, x: int, y: int) -> None:
        """Fill the block of logical point (x, y)."""
        size = self.pixel_size
        left, top = x * size, y * size
        xs = range(max(left, 0), min(left + size, self.width))
        for py in range(max(top, 0), min(top + size, self.height)):
            row = self._pixels[py]
            for px in xs:
                row[px] = self.color

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Draw a line between two logical points."""
        self._plot_all(raster.line_points(x1, y1, x2, y2))

    def draw_rect(self, x: int, y: int, w: int, h: int) -> None:
        """Draw the outline of a rectangle."""
        self._plot_all(raster.rect_outline_points(x, y, w, h))

    def fill_rect(self, x: int, y: int, w: int, h: int) -> None:
        """Fill a rectangle."""
        self._plot_all(raster.rect_fill_points(x, y, w, h))

    def draw_circle(self, x0: int, y0: int, r: int) -> None:
        """Draw the outline of a circle."""
        self._plot_all(raster.circle_points(x0, y0, r))

    def fill_circle(self, x: int, y: int, r: int) -> None:
        """Fill a disc."""
        self._plot_all(raster.filled_circle_points(x, y, r))

    def pixel(self, x: int, y: int) -> Color:
        """Return the colour of device pixel (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside the canvas")
        return self._pixels[y][x]