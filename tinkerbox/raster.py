"""Integer raster geometry: lines, rectangles, circles and polygons as point lists."""

from __future__ import annotations

from typing import Iterable, Sequence

Point = tuple[int, int]


def _unique(points: Iterable[Point]) -> list[Point]:
    return list(dict.fromkeys(points))


def sgn(x: float) -> int:
    """Return -1, 0 or 1 according to the sign of ``x``."""
    return int(x > 0) - int(x < 0)


def in_rect(x: int, y: int, rx: int, ry: int, rw: int, rh: int) -> bool:
    """Return True when (x, y) lies in the rectangle; right and bottom edges are open."""
    return rx <= x < rx + rw and ry <= y < ry + rh


def in_circle(x: int, y: int, cx: int, cy: int, cr: int) -> bool:
    """Return True when (x, y) lies within ``cr`` of (cx, cy), boundary included."""
    return (cx - x) ** 2 + (cy - y) ** 2 <= cr * cr


def line_points(x1: int, y1: int, x2: int, y2: int) -> list[Point]:
    """Return the points of the line from (x1, y1) to (x2, y2), start first."""
    dx, dy = x2 - x1, y2 - y1
    dxabs, dyabs = abs(dx), abs(dy)
    sdx, sdy = sgn(dx), sgn(dy)
    ex, ey = dyabs >> 1, dxabs >> 1
    px, py = x1, y1
    points = [(px, py)]
    if dxabs >= dyabs:
        for _ in range(dxabs):
            ey += dyabs
            if ey >= dxabs:
                ey -= dxabs
                py += sdy
            px += sdx
            points.append((px, py))
    else:
        for _ in range(dyabs):
            ex += dxabs
            if ex >= dyabs:
                ex -= dyabs
                px += sdx
            py += sdy
            points.append((px, py))
    return points


def rect_outline_points(x: int, y: int, w: int, h: int) -> list[Point]:
    """Return the border points of a ``w`` by ``h`` rectangle at (x, y)."""
    horizontal = ((x + i, row) for i in range(w) for row in (y, y + h - 1))
    vertical = ((col, y + j) for j in range(h) for col in (x, x + w - 1))
    return _unique([*horizontal, *vertical])


def rect_fill_points(x: int, y: int, w: int, h: int) -> list[Point]:
    """Return every point of a ``w`` by ``h`` rectangle at (x, y), row by row."""
    return [(x + i, y + j) for j in range(h) for i in range(w)]


def circle_points(x0: int, y0: int, radius: int) -> list[Point]:
    """Return the outline of a circle by the midpoint algorithm."""
    if radius < 0:
        raise ValueError("radius must not be negative")
    points = [
        (x0, y0 + radius),
        (x0, y0 - radius),
        (x0 + radius, y0),
        (x0 - radius, y0),
    ]
    f = 1 - radius
    ddf_x = 0
    ddf_y = -2 * radius
    x, y = 0, radius
    while x < y:
        if f >= 0:
            y -= 1
            ddf_y += 2
            f += ddf_y
        x += 1
        ddf_x += 2
        f += ddf_x + 1
        points.extend(
            [
                (x0 + x, y0 + y),
                (x0 - x, y0 + y),
                (x0 + x, y0 - y),
                (x0 - x, y0 - y),
                (x0 + y, y0 + x),
                (x0 - y, y0 + x),
                (x0 + y, y0 - x),
                (x0 - y, y0 - x),
            ]
        )
    return _unique(points)


def filled_circle_points(x: int, y: int, r: int) -> list[Point]:
    """Return the points of a filled disc scanned over the square [-r, r) x [-r, r)."""
    if r < 0:
        raise ValueError("radius must not be negative")
    r2 = r * r
    return [
        (x + tx, y + ty)
        for ty in range(-r, r)
        for tx in range(-r, r)
        if tx * tx + ty * ty <= r2
    ]


def thick_line_points(x1: int, y1: int, x2: int, y2: int, size: int) -> list[Point]:
    """Return a line drawn with a filled disc of radius ``size`` at every step."""
    return _unique(
        point
        for px, py in line_points(x1, y1, x2, y2)
        for point in filled_circle_points(px, py, size)
    )


def polygon_points(vertices: Sequence[Point]) -> list[Point]:
    """Return the outline of a polygon, closed by a line from the first vertex to the last."""
    if not vertices:
        raise ValueError("a polygon needs at least one vertex")
    points: list[Point] = []
    for (ax, ay), (bx, by) in zip(vertices, vertices[1:]):
        points.extend(line_points(ax, ay, bx, by))
    (fx, fy), (lx, ly) = vertices[0], vertices[-1]
    points.extend(line_points(fx, fy, lx, ly))
    return _unique(points)