"""Touch widgets: toggle buttons, a palette picker and a scroll bar."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from tinkerbox.canvas import Canvas
from tinkerbox.palettes import GAMEBOY_GREENS, GAMEBOY_PALETTE, Color
from tinkerbox.raster import in_rect

SCREEN_WIDTH = 160
SCREEN_HEIGHT = 144
PIXEL_SIZE = 2


def _to_logical(value: float, pixel_size: int) -> int:
    if pixel_size <= 0:
        raise ValueError("pixel size must be positive")
    return int(value / pixel_size)


@dataclass
class Button:
    """A rectangle in logical pixels that is down while touched."""

    x: int
    y: int
    w: int
    h: int
    color: Color
    is_down: bool = False

    def handle_touch(self, tx: float, ty: float, pixel_size: int = PIXEL_SIZE) -> bool:
        """Update ``is_down`` from a touch in device pixels and return it."""
        lx, ly = _to_logical(tx, pixel_size), _to_logical(ty, pixel_size)
        self.is_down = in_rect(lx, ly, self.x, self.y, self.w, self.h)
        return self.is_down

    def draw(self, canvas: Canvas, palette: Sequence[Color] = GAMEBOY_PALETTE) -> None:
        """Draw a filled button, or a crossed outline while it is down."""
        right, bottom = self.x + self.w - 1, self.y + self.h - 1
        if self.is_down:
            canvas.set_color(palette[4])
            canvas.draw_line(self.x, self.y, right, bottom)
            canvas.draw_line(right, self.y, self.x, bottom)
            canvas.draw_rect(self.x, self.y, self.w, self.h)
        else:
            canvas.set_color(self.color)
            canvas.fill_rect(self.x, self.y, self.w, self.h)
            canvas.set_color(palette[0])
            canvas.draw_rect(self.x, self.y, self.w, self.h)


@dataclass
class ColorPicker:
    """A column of square colour buttons, one of which may be selected."""

    palette: Sequence[Color] = GAMEBOY_GREENS
    x: int = SCREEN_WIDTH - 16
    y: int = 0
    size: int = 16
    selected: Optional[int] = None
    buttons: list[Button] = field(init=False)

    def __post_init__(self) -> None:
        self.buttons = [
            Button(self.x, self.y + i * self.size, self.size, self.size, color)
            for i, color in enumerate(self.palette)
        ]

    @property
    def color(self) -> Optional[Color]:
        """The selected colour, or None before any selection."""
        return None if self.selected is None else self.palette[self.selected]

    def select(self, tx: float, ty: float, pixel_size: int = PIXEL_SIZE) -> Optional[int]:
        """Select the button under a touch; a miss keeps the old selection."""
        for index, button in enumerate(self.buttons):
            if button.handle_touch(tx, ty, pixel_size):
                self.selected = index
        for index, button in enumerate(self.buttons):
            button.is_down = index == self.selected
        return self.selected


@dataclass
class ScrollBar:
    """A track with a square thumb mapping its position to 0..maximum.

    A touch must first land on the track (edges included) to grab it; later
    drags move the thumb until the bar is released.
    """

    x: int
    y: int
    w: int
    h: int
    horizontal: bool = True
    thumb: int = 64
    maximum: int = 255
    thumb_pos: int = 0
    value: int = 0
    held: bool = False

    def __post_init__(self) -> None:
        if self.travel <= 0:
            raise ValueError("the track must be longer than the thumb")

    @property
    def travel(self) -> int:
        """How far the thumb can move along the track."""
        return (self.w if self.horizontal else self.h) - self.thumb

    def press(self, tx: int, ty: int) -> bool:
        """Grab the bar if the touch is on the track; return whether it is held."""
        if not self.held:
            self.held = (
                self.x <= tx <= self.x + self.w and self.y <= ty <= self.y + self.h
            )
        return self.held

    def drag(self, tx: int, ty: int) -> int:
        """Move the thumb to a held touch and return the value."""
        if self.held:
            offset = tx - self.x if self.horizontal else ty - self.y
            self.thumb_pos = min(max(offset, 0), self.travel)
            self.value = int(self.thumb_pos / self.travel * self.maximum)
        return self.value

    def release(self) -> None:
        """Let go of the bar."""
        self.held = False