"""Bouncing things: a ball under gravity and a screensaver of drifting polygons."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from tinkerbox.palettes import Color

BALL_RADIUS = 64
COLOR_PERIOD = 100


def _random_color(rng) -> Color:
    return Color(rng.randrange(256), rng.randrange(256), rng.randrange(256), 255)


@dataclass
class Ball:
    """A ball falling under gravity and bouncing off the walls of a box."""

    x: int
    y: int
    r: int
    dx: int
    dy: int
    color: Color = field(default_factory=lambda: Color(255, 255, 255))

    @classmethod
    def spawn(cls, width: int, rng=None) -> "Ball":
        """Create a ball of the default radius at the top of a box ``width`` wide."""
        rng = rng if rng is not None else random.Random()
        r = BALL_RADIUS
        if width <= 2 * r:
            raise ValueError(f"box width must exceed {2 * r}")
        x = rng.randrange(width - 2 * r) + r
        color = _random_color(rng)
        dx = (-1 if rng.randrange(2) else 1) * (rng.randrange(10) + 5)
        dy = (-1 if rng.randrange(2) else 1) * (rng.randrange(10) + 5)
        return cls(x, r, r, dx, dy, color)

    def step(self, width: int, height: int) -> bool:
        """Advance one frame; return True when the ball has come to rest on the floor."""
        self.dy += 1
        self.x += self.dx
        self.y += self.dy
        if self.x + self.dx < self.r:
            self.x = self.r
            self.dx = abs(self.dx)
        if self.y + self.dy < self.r:
            self.y = self.r
            self.dy = abs(self.dy)
        if self.x + self.dx >= width - self.r:
            self.x = width - self.r
            self.dx = -abs(self.dx)
        if self.y + self.dy >= height - self.r:
            self.y = height - self.r
            self.dy = -abs(self.dy)
        return self.y == height - self.r and self.dy == 0


@dataclass
class _Vertex:
    x: int
    y: int
    dx: int
    dy: int


@dataclass
class _Polygon:
    color: Color
    vertices: list[_Vertex]


class BouncingPolygons:
    """Polygons whose vertices drift and bounce off the screen edges.

    Colours change every hundred steps.  A vertex leaving through the top or
    bottom takes the magnitude of its horizontal speed as its new vertical
    speed, which makes the shapes wander as the screensaver does.
    """

    def __init__(
        self,
        width: int,
        height: int,
        polygons: int = 4,
        vertices: int = 4,
        speed: int = 10,
        rng=None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("screen size must be positive")
        if polygons < 1 or vertices < 2:
            raise ValueError("need at least one polygon of two vertices")
        if speed <= 0:
            raise ValueError("speed must be positive")
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random()
        self.ticks = 0
        self.polygons: list[_Polygon] = []
        for _ in range(polygons):
            points = [self._vertex(speed) for _ in range(vertices)]
            self.polygons.append(_Polygon(_random_color(self._rng), points))

    def _vertex(self, speed: int) -> _Vertex:
        rng = self._rng
        x = rng.randrange(self.width)
        y = rng.randrange(self.height)
        dx = (1 if rng.randrange(2) else -1) * (rng.randrange(speed) + 10)
        dy = (1 if rng.randrange(2) else -1) * (rng.randrange(speed) + 10)
        return _Vertex(x, y, dx, dy)

    def step(self) -> None:
        """Advance every vertex one frame, recolouring every hundredth step."""
        self.ticks += 1
        if self.ticks == COLOR_PERIOD:
            self.ticks = 0
            for polygon in self.polygons:
                polygon.color = _random_color(self._rng)
        for polygon in self.polygons:
            for v in polygon.vertices:
                v.x += v.dx
                v.y += v.dy
                if v.x < 0:
                    v.dx = abs(v.dx)
                if v.y < 0:
                    v.dy = abs(v.dx)
                if v.x >= self.width:
                    v.dx = -abs(v.dx)
                if v.y >= self.height:
                    v.dy = -abs(v.dx)

    def lines(self) -> list[tuple[Color, list[tuple[int, int, int, int]]]]:
        """Return each polygon's colour and its closed outline as line segments."""
        result = []
        for polygon in self.polygons:
            pts = [(v.x, v.y) for v in polygon.vertices]
            segments = [
                (ax, ay, bx, by)
                for (ax, ay), (bx, by) in zip(pts, pts[1:] + pts[:1])
            ]
            result.append((polygon.color, segments))
        return result