"""A domino clock: hours and five-minute steps shown as four-dot patterns."""

from __future__ import annotations

from tinkerbox.canvas import Canvas

_PATTERNS: tuple[tuple[int, int, int, int], ...] = (
    (0, 0, 0, 0),
    (1, 0, 0, 0),
    (0, 1, 0, 0),
    (0, 0, 1, 0),
    (0, 0, 0, 1),
    (1, 1, 0, 0),
    (0, 1, 1, 0),
    (0, 0, 1, 1),
    (1, 0, 0, 1),
    (1, 0, 1, 0),
    (0, 1, 0, 1),
    (1, 1, 1, 1),
)

# Dot offsets: top-left, top-right, bottom-right, bottom-left.
_DX = (-1, 1, 1, -1)
_DY = (-1, -1, 1, 1)


def domino_pattern(n: int) -> tuple[int, int, int, int]:
    """Return which of the four dots are filled for a value from 0 to 11."""
    if not 0 <= n < len(_PATTERNS):
        raise ValueError(f"domino value {n} out of range 0..11")
    return _PATTERNS[n]


def domino_time(hour: int, minute: int) -> tuple[int, int]:
    """Return the two domino values for a time: hour mod 12 and minute // 5."""
    if not 0 <= hour <= 23:
        raise ValueError(f"invalid hour {hour}")
    if not 0 <= minute <= 59:
        raise ValueError(f"invalid minute {minute}")
    return hour % 12, minute // 5


def draw_domino(canvas: Canvas, n: int, x: int, y: int, r: int, gap: int) -> None:
    """Draw domino ``n`` centred on (x, y) with dots of radius ``r`` spaced by ``gap``."""
    for filled, dx, dy in zip(domino_pattern(n), _DX, _DY):
        cx, cy = dx * gap + x, dy * gap + y
        if filled:
            canvas.fill_circle(cx, cy, r)
        else:
            canvas.draw_circle(cx, cy, r)