import random
from collections import Counter

import pytest

from tinkerbox.sorting import (
    DEFAULT_TICKET,
    FRUITS,
    NAMES,
    LottoStats,
    find_sorted,
    lucky_pick,
    main,
    prize_for_matches,
    shuffle,
    simulate_lotto,
    sort_descending,
    ticket_matches,
)


class _LastIndexRng:
    def randrange(self, n):
        return n - 1


def test_sort_descending_orders_and_keeps_items():
    result = sort_descending(NAMES)
    assert result[0] == "voldemort"
    assert all(a >= b for a, b in zip(result, result[1:]))
    assert Counter(result) == Counter(NAMES)


def test_find_sorted_hits_and_misses():
    assert find_sorted(FRUITS, "grape") == "grape"
    assert find_sorted(FRUITS, "kiwi") is None
    assert find_sorted([], "grape") is None


def test_shuffle_is_a_permutation():
    items = list(range(10))
    shuffle(items, random.Random(3))
    assert sorted(items) == list(range(10))


def test_shuffle_reproducible_with_seed():
    a, b = list(range(20)), list(range(20))
    shuffle(a, random.Random(42))
    shuffle(b, random.Random(42))
    assert a == b


def test_shuffle_swapping_with_itself_keeps_order():
    items = list(range(8))
    shuffle(items, _LastIndexRng())
    assert items == list(range(8))


def test_lucky_pick_rows_are_distinct_and_in_range():
    rows = lucky_pick(random.Random(1))
    assert len(rows) == 6
    assert all(len(row) == 6 for row in rows)
    flat = [n for row in rows for n in row]
    assert len(set(flat)) == len(flat)
    assert all(1 <= n <= 42 for n in flat)


def test_lucky_pick_too_many_rows():
    with pytest.raises(ValueError):
        lucky_pick(random.Random(1), pool=42, rows=8)


def test_ticket_matches_same_order_scores_nothing():
    assert ticket_matches(list(DEFAULT_TICKET), DEFAULT_TICKET) == 0


def test_ticket_matches_shifted_draw():
    draw = [30, 4, 1, 2, 40, 18]
    assert ticket_matches(draw, DEFAULT_TICKET) == 5


@pytest.mark.parametrize(
    "matches, prize",
    [(6, "jackpot"), (5, "2nd prize"), (4, "3rd prize"), (3, "4th prize"), (2, "malaska"), (0, "malaska")],
)
def test_prize_for_matches(matches, prize):
    assert prize_for_matches(matches) == prize


def test_simulate_lotto_tallies_are_consistent():
    stats = simulate_lotto(200, DEFAULT_TICKET, random.Random(5))
    assert stats.draws == 200
    assert sum(stats.prize_counts.values()) == 200
    assert sum(stats.number_counts.values()) == 6 * 200
    counts = [count for _, count in stats.ranking()]
    assert counts == sorted(counts, reverse=True)
    assert len(counts) == 42


def test_simulate_lotto_reproducible():
    a = simulate_lotto(50, DEFAULT_TICKET, random.Random(9))
    b = simulate_lotto(50, DEFAULT_TICKET, random.Random(9))
    assert a.number_counts == b.number_counts
    assert a.prize_counts == b.prize_counts


def test_simulate_lotto_negative_draws():
    with pytest.raises(ValueError):
        simulate_lotto(-1, DEFAULT_TICKET, random.Random(0))


def test_report_lines_sections():
    stats = LottoStats()
    stats.record([1, 2, 3, 4, 5, 6], "malaska")
    lines = stats.report_lines()
    assert lines[0] == "Top 6 numbers:"
    assert "Other numbers:" in lines
    assert lines[-1].startswith("malaska   ->")


def test_main_sort(capsys):
    assert main(["sort"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "voldemort"
    assert len(lines) == len(NAMES)


def test_main_search(capsys):
    main(["search"])
    assert capsys.readouterr().out.strip() == "Found: grape"
    main(["search", "kiwi"])
    assert capsys.readouterr().out.strip() == "Not found."


def test_main_simulate(capsys):
    main(["simulate", "--draws", "3", "--seed", "7"])
    out = capsys.readouterr().out
    assert out.startswith("#      1 ")
    assert "Top 6 numbers:" in out
    assert "jackpot   ->" in out