import pytest

from tinkerbox.canvas import Canvas
from tinkerbox.clocks import domino_pattern, domino_time, draw_domino
from tinkerbox.palettes import TRANSPARENT, Color

WHITE = Color(255, 255, 255)


def test_patterns_from_table():
    assert domino_pattern(0) == (0, 0, 0, 0)
    assert domino_pattern(5) == (1, 1, 0, 0)
    assert domino_pattern(11) == (1, 1, 1, 1)


def test_patterns_are_distinct():
    patterns = [domino_pattern(n) for n in range(12)]
    assert len(set(patterns)) == 12


def test_pattern_out_of_range():
    with pytest.raises(ValueError):
        domino_pattern(12)
    with pytest.raises(ValueError):
        domino_pattern(-1)


def test_domino_time_wraps_hours():
    assert domino_time(13, 47) == (1, 9)
    assert domino_time(0, 0) == (0, 0)
    assert domino_time(23, 59) == (11, 11)


def test_domino_time_rejects_bad_values():
    with pytest.raises(ValueError):
        domino_time(24, 0)
    with pytest.raises(ValueError):
        domino_time(10, 60)


def _canvas():
    canvas = Canvas(100, 100, pixel_size=1)
    canvas.set_color(WHITE)
    return canvas


def test_full_domino_fills_every_dot():
    canvas = _canvas()
    draw_domino(canvas, 11, 50, 50, 5, 10)
    for cx, cy in ((40, 40), (60, 40), (60, 60), (40, 60)):
        assert canvas.pixel(cx, cy) == WHITE


def test_empty_domino_draws_outlines_only():
    canvas = _canvas()
    draw_domino(canvas, 0, 50, 50, 5, 10)
    assert canvas.pixel(40, 40) == TRANSPARENT
    assert canvas.pixel(40, 45) == WHITE


def test_single_dot_domino():
    canvas = _canvas()
    draw_domino(canvas, 1, 50, 50, 5, 10)
    assert canvas.pixel(40, 40) == WHITE
    assert canvas.pixel(60, 40) == TRANSPARENT