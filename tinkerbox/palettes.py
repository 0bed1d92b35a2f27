"""RGBA colours and the fixed palettes used by the drawing programs."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"colour component {name}={value} out of range 0..255")

    def hex(self) -> str:
        """Return ``#rrggbb``, with ``aa`` appended when not fully opaque."""
        text = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        return text if self.a == 255 else f"{text}{self.a:02x}"

    def with_alpha(self, alpha: int) -> "Color":
        """Return this colour with a different alpha."""
        return replace(self, a=alpha)


TRANSPARENT = Color(0x00, 0x00, 0x00, 0x00)

# Four Game Boy greens, darkest first, led by a transparent entry.
GAMEBOY_PALETTE: tuple[Color, ...] = (
    TRANSPARENT,
    Color(0x0F, 0x38, 0x0F),
    Color(0x30, 0x62, 0x30),
    Color(0x8B, 0xAC, 0x0F),
    Color(0x9B, 0xBC, 0x0F),
    Color(0xCA, 0xDC, 0x9F),
)

# The same greens without the transparent entry.
GAMEBOY_GREENS: tuple[Color, ...] = GAMEBOY_PALETTE[1:]

SWEETIE16: tuple[Color, ...] = (
    Color(26, 28, 44),
    Color(93, 39, 93),
    Color(177, 62, 83),
    Color(239, 125, 87),
    Color(255, 205, 117),
    Color(167, 240, 112),
    Color(56, 183, 100),
    Color(37, 113, 121),
    Color(41, 54, 111),
    Color(59, 93, 201),
    Color(65, 166, 246),
    Color(115, 239, 247),
    Color(244, 244, 244),
    Color(148, 176, 194),
    Color(86, 108, 134),
    Color(51, 60, 87),
)