"""Indexed-colour sprite sheets: tool icons, a blank figure and a walking man."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from tinkerbox.canvas import Canvas
from tinkerbox.palettes import GAMEBOY_PALETTE, Color

TRANSPARENT_INDEX = -1


@dataclass(frozen=True)
class Sprite:
    """``frames`` images of ``width`` by ``height`` palette indices, stored frame by frame.

    Negative indices are transparent and are skipped when drawing.
    """

    width: int
    height: int
    frames: int
    pixels: tuple[int, ...]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.frames <= 0:
            raise ValueError("sprite dimensions and frame count must be positive")
        object.__setattr__(self, "pixels", tuple(self.pixels))
        expected = self.width * self.height * self.frames
        if len(self.pixels) != expected:
            raise ValueError(f"expected {expected} pixels, got {len(self.pixels)}")

    def _check_frame(self, index: int) -> None:
        if not 0 <= index < self.frames:
            raise IndexError(f"frame {index} out of range 0..{self.frames - 1}")

    def frame(self, index: int) -> tuple[tuple[int, ...], ...]:
        """Return frame ``index`` as a tuple of rows, top row first."""
        self._check_frame(index)
        start = index * self.width * self.height
        return tuple(
            self.pixels[start + row * self.width:start + (row + 1) * self.width]
            for row in range(self.height)
        )

    def pixel(self, frame: int, x: int, y: int) -> int:
        """Return the palette index at column ``x``, row ``y`` of ``frame``."""
        self._check_frame(frame)
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside the sprite")
        return self.pixels[(frame * self.height + y) * self.width + x]

    def draw(
        self,
        canvas: Canvas,
        frame: int = 0,
        x: int = 0,
        y: int = 0,
        scale: int = 1,
        palette: Sequence[Color] = GAMEBOY_PALETTE,
    ) -> None:
        """Draw ``frame`` at (x, y), each sprite pixel a ``scale``-sized block."""
        if scale <= 0:
            raise ValueError("scale must be positive")
        for j, row in enumerate(self.frame(frame)):
            for i, value in enumerate(row):
                if value < 0:
                    continue
                canvas.set_color(palette[value])
                canvas.fill_rect(i * scale + x, j * scale + y, scale, scale)


def _parse(
    width: int,
    height: int,
    frames: Sequence[Sequence[str]],
    legend: Mapping[str, int],
) -> Sprite:
    pixels = [legend[char] for rows in frames for row in rows for char in row]
    return Sprite(width, height, len(frames), tuple(pixels))


_DIGITS = {str(d): d for d in range(10)}

_ICON_FRAMES = (
    ("22222221", "21111111", "21113111", "21133311",
     "21333111", "21331111", "21111111", "11111111"),
    ("22222221", "21111111", "21111111", "21333311",
     "21333311", "21111111", "21111111", "11111111"),
    ("22222221", "21111111", "21133111", "21333311",
     "21333311", "21133111", "21111111", "11111111"),
    ("22222221", "21111111", "21333331", "21313131",
     "21333331", "21313131", "21333331", "11111111"),
    ("22222221", "21111111", "21133311", "21313131",
     "21333331", "21313131", "21133311", "11111111"),
    ("22222221", "21131111", "21113111", "21131311",
     "21311131", "21131311", "21113111", "11111111"),
    ("22222221", "23111111", "21311111", "21131111",
     "21113111", "21111311", "21111131", "11111111"),
    ("22222221", "21333311", "23111131", "23111131",
     "23111131", "23111131", "21333311", "11111111"),
    ("22222221", "21111111", "21113111", "21133311",
     "21333331", "21133311", "21113111", "11111111"),
    ("22222221", "21111111", "21311131", "21131311",
     "21113111", "21131311", "21311131", "11111111"),
)

# Ten 8x8 tool icons drawn with the Game Boy palette.
ICON = _parse(8, 8, _ICON_FRAMES, _DIGITS)

# Four blank 16x16 frames.
MAN = Sprite(16, 16, 4, (0,) * (16 * 16 * 4))

_FIGURE_HEAD = (
    "................",
    "......WWWW......",
    ".....WWWWWW.....",
    ".....WWWWWW.....",
    "......WWWW......",
    ".......WW.......",
)

_FIGURE_STRIDE = _FIGURE_HEAD + (
    ".....WWWWWW.....",
    "...WW..WW.WW.WW.",
    "....WW.WW..WW...",
    ".......WW.......",
    ".....WW..WW.....",
    "....WW....WW....",
    "WWWWW......WW...",
    "...........WW...",
    "...........WW...",
    "................",
)

_FIGURE_RUN = _FIGURE_HEAD + (
    ".....WWWWWW.....",
    "....WW.WWWW.....",
    ".....WWWW.WW....",
    ".......WW..WW...",
    ".....WW..WW.....",
    ".....WW..WW.....",
    "...WW.....WWx...",
    "..WW.......WW...",
    ".WW.........WW..",
    "................",
)

_FIGURE_STAND = _FIGURE_HEAD + (".......WW.......",) * 9 + ("................",)

# A 16x16 stick figure in four animation frames, colour 12 of Sweetie 16.
BITMAP00 = _parse(
    16,
    16,
    (_FIGURE_STRIDE, _FIGURE_RUN, _FIGURE_STAND, _FIGURE_RUN),
    {".": TRANSPARENT_INDEX, "W": 12, "x": -2},
)