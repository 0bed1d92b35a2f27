"""A zoomable pixel editor with pen, target, flood fill and clear tools."""

from __future__ import annotations

from enum import IntEnum
from typing import MutableSequence, Optional, Sequence

from tinkerbox.canvas import Canvas
from tinkerbox.palettes import GAMEBOY_PALETTE, TRANSPARENT, Color
from tinkerbox.sprites import ICON

COLUMNS = 32
ROWS = 32
SCREEN_WIDTH = 160
SCREEN_HEIGHT = 144
MIN_ZOOM = 1
MAX_ZOOM = 8
SWATCH = 16


class Tool(IntEnum):
    """The tools in the editor's tool column, by icon index."""

    PEN = 0
    ZOOM_OUT = 1
    ZOOM_IN = 2
    GRID = 3
    TARGET = 4
    FILL = 5
    CLEAR = 9


def flood_fill(
    grid: Sequence[MutableSequence[int]], x: int, y: int, replacement: int
) -> int:
    """Replace the 4-connected region of the colour at (x, y) with ``replacement``.

    ``grid`` is indexed as ``grid[y][x]``.  Returns the number of cells
    changed; a start outside the grid or a region already of the replacement
    colour changes nothing.
    """
    height = len(grid)
    if not (0 <= y < height and 0 <= x < len(grid[y])):
        return 0
    target = grid[y][x]
    if target == replacement:
        return 0
    changed = 0
    stack = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        if 0 <= cy < height and 0 <= cx < len(grid[cy]) and grid[cy][cx] == target:
            grid[cy][cx] = replacement
            changed += 1
            stack.extend(((cx, cy - 1), (cx, cy + 1), (cx - 1, cy), (cx + 1, cy)))
    return changed


class PixelEditor:
    """A grid of palette indices viewed at a zoom of 1 to 8 screen pixels per cell.

    Index 0 is the empty cell and is shown in the palette's lightest colour.
    """

    def __init__(
        self,
        columns: int = COLUMNS,
        rows: int = ROWS,
        screen_width: int = SCREEN_WIDTH,
        screen_height: int = SCREEN_HEIGHT,
        palette: Sequence[Color] = GAMEBOY_PALETTE,
        origin: tuple[int, int] = (0, 0),
    ) -> None:
        if columns <= 0 or rows <= 0:
            raise ValueError("the grid must have at least one cell")
        if len(palette) < 6:
            raise ValueError("the palette needs at least six colours")
        self.columns = columns
        self.rows = rows
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.palette = palette
        self.origin = origin
        self.zoom = MAX_ZOOM
        self.grid = True
        self.color = 1
        self.tool = Tool.PEN
        self.target = (columns // 2, rows // 2)
        self.cells = [[0] * columns for _ in range(rows)]

    @property
    def visible_size(self) -> tuple[int, int]:
        """Number of columns and rows that fit on screen at the current zoom."""
        return (
            min(self.screen_width // self.zoom, self.columns),
            min(self.screen_height // self.zoom, self.rows),
        )

    def _check_cell(self, x: int, y: int) -> None:
        if not (0 <= x < self.columns and 0 <= y < self.rows):
            raise IndexError(f"cell ({x}, {y}) outside the grid")

    def cell_at(self, px: int, py: int) -> Optional[tuple[int, int]]:
        """Return the visible cell under logical screen point (px, py), or None."""
        ox, oy = self.origin
        rx, ry = px - ox, py - oy
        if rx < 0 or ry < 0:
            return None
        x, y = rx // self.zoom, ry // self.zoom
        width, height = self.visible_size
        return (x, y) if x < width and y < height else None

    def select_color(self, index: int) -> None:
        """Choose the drawing colour by palette index."""
        if not 0 <= index < len(self.palette):
            raise ValueError(f"colour index {index} out of range")
        self.color = index

    def zoom_in(self) -> int:
        """Enlarge the cells by one pixel, up to the maximum; return the zoom."""
        self.zoom = min(self.zoom + 1, MAX_ZOOM)
        return self.zoom

    def zoom_out(self) -> int:
        """Shrink the cells by one pixel, down to the minimum; return the zoom."""
        self.zoom = max(self.zoom - 1, MIN_ZOOM)
        return self.zoom

    def toggle_grid(self) -> bool:
        """Switch the cell outlines on or off and return the new state."""
        self.grid = not self.grid
        return self.grid

    def paint(self, x: int, y: int) -> None:
        """Set cell (x, y) to the current colour."""
        self._check_cell(x, y)
        self.cells[y][x] = self.color

    def move_target(self, x: int, y: int) -> None:
        """Place the fill target on cell (x, y)."""
        self._check_cell(x, y)
        self.target = (x, y)

    def fill(self) -> int:
        """Flood-fill from the target with the current colour; return cells changed."""
        tx, ty = self.target
        return flood_fill(self.cells, tx, ty, self.color)

    def clear(self) -> None:
        """Empty every cell."""
        for row in self.cells:
            row[:] = [0] * self.columns

    def _cell_color(self, value: int) -> Color:
        return self.palette[5] if value == 0 else self.palette[value]

    def render(self, canvas: Canvas) -> None:
        """Draw the screen, cells, target, colour column and tool column."""
        ox, oy = self.origin
        canvas.clear(TRANSPARENT)
        canvas.set_color(self.palette[5])
        canvas.fill_rect(ox, oy, self.screen_width, self.screen_height)
        self._draw_cells(canvas)
        self._draw_target(canvas)
        self._draw_palette(canvas)
        self._draw_tools(canvas)

    def _draw_cells(self, canvas: Canvas) -> None:
        ox, oy = self.origin
        zoom, pal = self.zoom, self.palette
        for j, row in enumerate(self.cells):
            y = j * zoom + oy + 1
            if y > self.screen_height + oy:
                break
            for i, value in enumerate(row):
                x = i * zoom + ox + 1
                if x > self.screen_width + ox:
                    break
                canvas.set_color(self._cell_color(value))
                canvas.fill_rect(x, y, zoom, zoom)
                if self.grid and zoom >= 4:
                    canvas.set_color(pal[1])
                    canvas.draw_rect(x, y, zoom, zoom)
        x1, y1 = ox, oy
        x2 = min(self.columns * zoom + ox, self.screen_width + ox)
        y2 = min(self.rows * zoom + oy, self.screen_height + oy)
        canvas.set_color(pal[1])
        canvas.draw_line(x1, y1, x1, y2)
        canvas.draw_line(x2, y1, x2, y2)
        canvas.draw_line(x1, y1, x2, y1)
        canvas.draw_line(x1, y2, x2, y2)

    def _draw_target(self, canvas: Canvas) -> None:
        ox, oy = self.origin
        tx, ty = self.target
        zoom = self.zoom
        left, top = tx * zoom + ox, ty * zoom + oy
        canvas.set_color(self.palette[5])
        canvas.draw_rect(left + 1, top + 1, zoom, zoom)
        canvas.set_color(self.palette[1])
        canvas.draw_line(left + zoom - 2, top + 3, left + 3, top + zoom - 2)
        canvas.draw_line(left + 3, top + 3, left + zoom - 2, top + zoom - 2)

    def _draw_palette(self, canvas: Canvas) -> None:
        ox, oy = self.origin
        pal = self.palette
        left = self.screen_width - SWATCH + ox
        for i in range(len(pal)):
            top = i * SWATCH + oy
            canvas.set_color(self._cell_color(i))
            canvas.fill_rect(left, top, SWATCH, SWATCH)
            if i == self.color:
                for x1, x2, y2 in ((left, left + 14, top + 14), (left + 14, left - 1, top + 15)):
                    canvas.set_color(pal[1])
                    canvas.draw_line(x1, top, x2, y2)
                    canvas.set_color(pal[5])
                    canvas.draw_line(x1 + 1, top, x2 + 1, y2)
            canvas.set_color(pal[1])
            canvas.draw_rect(left, top, SWATCH, SWATCH)

    def _draw_tools(self, canvas: Canvas) -> None:
        ox, oy = self.origin
        left = self.screen_width - 2 * SWATCH + ox
        for i in range(ICON.frames):
            ICON.draw(canvas, i, left, i * SWATCH + oy, 2, self.palette)
        canvas.set_color(self.palette[5])
        canvas.draw_rect(left, int(self.tool) * SWATCH + oy, SWATCH, SWATCH)