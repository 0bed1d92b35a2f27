"""Sorting, searching and shuffling demos, with a lotto simulator."""

from __future__ import annotations

import argparse
import random
from bisect import bisect_left
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterator, MutableSequence, Optional, Sequence

NAMES = (
    "voldemort",
    "harry",
    "ron",
    "hermione",
    "ginny",
    "fleur",
    "snape",
    "dumbledore",
    "hagrid",
    "luna",
)
FRUITS = ("banana", "grape", "pear", "apple", "orange")
DEFAULT_TICKET = (4, 1, 2, 40, 18, 3)
POOL = 42
PICK = 6

NO_PRIZE = "malaska"
PRIZES = {6: "jackpot", 5: "2nd prize", 4: "3rd prize", 3: "4th prize"}
PRIZE_ORDER = ("jackpot", "2nd prize", "3rd prize", "4th prize", NO_PRIZE)


def sort_descending(names: Sequence[str]) -> list[str]:
    """Return ``names`` sorted in reverse lexical order."""
    return sorted(names, reverse=True)


def find_sorted(items: Sequence[str], key: str) -> Optional[str]:
    """Sort ``items`` and binary-search them for ``key``; None when absent."""
    ordered = sorted(items)
    index = bisect_left(ordered, key)
    if index < len(ordered) and ordered[index] == key:
        return ordered[index]
    return None


def shuffle(items: MutableSequence, rng=None) -> None:
    """Shuffle ``items`` in place with the Fisher-Yates algorithm."""
    rng = rng if rng is not None else random
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]


def _shuffled_pool(rng, pool: int) -> list[int]:
    numbers = list(range(1, pool + 1))
    shuffle(numbers, rng)
    return numbers


def lucky_pick(rng=None, pool: int = POOL, rows: int = PICK) -> list[list[int]]:
    """Return ``rows`` lines of six distinct numbers drawn from 1..pool."""
    if rows < 0 or rows * PICK > pool:
        raise ValueError(f"cannot draw {rows} rows of {PICK} from {pool} numbers")
    numbers = _shuffled_pool(rng, pool)
    return [numbers[row * PICK:(row + 1) * PICK] for row in range(rows)]


def ticket_matches(draw: Sequence[int], ticket: Sequence[int]) -> int:
    """Count the simulator's matches between a draw and a ticket.

    Ticket number ``k`` (every one but the last) scores once for each time it
    appears in the draw at a position after ``k``, within the first
    ``len(ticket)`` numbers of the draw.
    """
    head = list(draw[: len(ticket)])
    return sum(head[k + 1:].count(number) for k, number in enumerate(ticket[:-1]))


def prize_for_matches(matches: int) -> str:
    """Name the prize won with ``matches`` matching numbers."""
    return PRIZES.get(matches, NO_PRIZE)


@dataclass
class LottoStats:
    """Tallies of drawn numbers and prizes over many draws."""

    pool: int = POOL
    pick: int = PICK
    draws: int = 0
    number_counts: Counter = field(default_factory=Counter)
    prize_counts: Counter = field(default_factory=Counter)

    def record(self, draw: Sequence[int], prize: str) -> None:
        """Add one draw and the prize it won."""
        self.draws += 1
        self.number_counts.update(draw)
        self.prize_counts[prize] += 1

    def ranking(self) -> list[tuple[int, int]]:
        """Return ``(number, count)`` pairs, most drawn first."""
        return sorted(
            ((n, self.number_counts[n]) for n in range(1, self.pool + 1)),
            key=lambda pair: (-pair[1], pair[0]),
        )

    def _ratio(self, count: int) -> float:
        return count / self.draws * 100 if self.draws else 0.0

    def report_lines(self) -> list[str]:
        """Format the number ranking and prize summary."""
        lines = [f"Top {self.pick} numbers:"]
        for position, (number, count) in enumerate(self.ranking()):
            lines.append(f"{number:2d} -> {count:7d} {self._ratio(count) * self.pick:8.4f}%")
            if position == self.pick - 1:
                lines.extend(["", "Other numbers:"])
        lines.append("")
        for prize in PRIZE_ORDER:
            count = self.prize_counts[prize]
            lines.append(f"{prize:<10}-> {count:7d} {self._ratio(count):8.4f}%")
        return lines


def _play(draws: int, ticket: Sequence[int], rng, pool: int) -> Iterator[tuple[list[int], str]]:
    if draws < 0:
        raise ValueError("number of draws must not be negative")
    if len(ticket) > pool:
        raise ValueError("ticket is larger than the pool")
    for _ in range(draws):
        draw = _shuffled_pool(rng, pool)[: len(ticket)]
        yield draw, prize_for_matches(ticket_matches(draw, ticket))


def simulate_lotto(draws: int, ticket: Sequence[int] = DEFAULT_TICKET, rng=None) -> LottoStats:
    """Play ``ticket`` against ``draws`` random draws and tally the results."""
    stats = LottoStats(pick=len(ticket))
    for draw, prize in _play(draws, ticket, rng, POOL):
        stats.record(draw, prize)
    return stats


def _balls(numbers: Sequence[int]) -> str:
    return "".join(f"( {n:2d} ) " for n in numbers)


def main(argv=None) -> int:
    """Run one of the sorting, searching, shuffling or lotto demos."""
    parser = argparse.ArgumentParser(prog="tinkerbox-sorting")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("sort", help="print names in descending order")
    search = commands.add_parser("search", help="binary-search the fruit list")
    search.add_argument("key", nargs="?", default="grape")
    for name in ("shuffle", "lotto", "simulate"):
        sub = commands.add_parser(name)
        sub.add_argument("--seed", type=int)
        if name == "simulate":
            sub.add_argument("--draws", type=int, default=1_000_000)
    args = parser.parse_args(argv)
    rng = random.Random(getattr(args, "seed", None))

    if args.command == "sort":
        for name in sort_descending(NAMES):
            print(name)
    elif args.command == "search":
        found = find_sorted(FRUITS, args.key)
        print(f"Found: {found}" if found is not None else "Not found.")
    elif args.command == "shuffle":
        numbers = list(range(10))
        shuffle(numbers, rng)
        print("".join(f"{n} " for n in numbers))
    elif args.command == "lotto":
        print(f"Lucky Pick Lotto {PICK}/{POOL}")
        for row in lucky_pick(rng):
            print(_balls(row))
    else:
        stats = LottoStats(pick=len(DEFAULT_TICKET))
        for index, (draw, prize) in enumerate(_play(args.draws, DEFAULT_TICKET, rng, POOL), 1):
            print(f"#{index:7d} {_balls(draw)}{prize}")
            stats.record(draw, prize)
        print()
        print("\n".join(stats.report_lines()))
        print()
    return 0