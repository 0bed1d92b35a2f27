"""A random race between numbered lanes until two cross the finish line."""

from __future__ import annotations

import random


class Race:
    """Lanes advance one step at a time, chosen at random.

    Once a lane has won it no longer moves; the race ends when a second lane
    crosses the finish line at ``width - 1``.  Lanes are numbered from 0.
    """

    def __init__(self, width: int, lanes: int = 6, rng=None) -> None:
        if width < 2:
            raise ValueError("track width must be at least 2")
        if lanes < 2:
            raise ValueError("a race needs at least 2 lanes")
        self.width = width
        self.positions = [0] * lanes
        self.winners: list[int] = []
        self._rng = rng if rng is not None else random.Random()

    @property
    def finish_line(self) -> int:
        return self.width - 1

    def finished(self) -> bool:
        """Return True once two lanes have crossed the finish line."""
        return len(self.winners) >= 2

    def step(self) -> int:
        """Advance one random lane and return its number."""
        if self.finished():
            raise RuntimeError("the race is over")
        first = self.winners[0] if self.winners else None
        lane = self._rng.randrange(len(self.positions))
        while lane == first:
            lane = self._rng.randrange(len(self.positions))
        self.positions[lane] += 1
        if self.positions[lane] >= self.finish_line:
            self.winners.append(lane)
        return lane

    def run(self) -> tuple[int, int]:
        """Step until the race is over and return the first two lanes home."""
        while not self.finished():
            self.step()
        return self.winners[0], self.winners[1]