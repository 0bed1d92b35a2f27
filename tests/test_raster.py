import math

import pytest

from tinkerbox.raster import (
    circle_points,
    filled_circle_points,
    in_circle,
    in_rect,
    line_points,
    polygon_points,
    rect_fill_points,
    rect_outline_points,
    sgn,
    thick_line_points,
)


def test_sgn_matches_sign():
    for x in range(-5, 6):
        assert sgn(x) in (-1, 0, 1)
        assert sgn(x) * abs(x) == x


def test_in_rect_edges():
    assert in_rect(2, 3, 2, 3, 4, 5)
    assert in_rect(5, 7, 2, 3, 4, 5)
    assert not in_rect(6, 3, 2, 3, 4, 5)
    assert not in_rect(2, 8, 2, 3, 4, 5)
    assert not in_rect(1, 3, 2, 3, 4, 5)


def test_in_circle_boundary():
    assert in_circle(13, 5, 10, 5, 3)
    assert in_circle(10, 5, 10, 5, 3)
    assert not in_circle(13, 6, 10, 5, 3)


@pytest.mark.parametrize(
    "x1,y1,x2,y2",
    [(0, 0, 7, 3), (5, 5, -2, 9), (1, 1, 1, 8), (3, 4, 3, 4), (0, 0, -6, -6)],
)
def test_line_invariants(x1, y1, x2, y2):
    points = line_points(x1, y1, x2, y2)
    assert points[0] == (x1, y1)
    assert points[-1] == (x2, y2)
    assert len(points) == max(abs(x2 - x1), abs(y2 - y1)) + 1
    for (ax, ay), (bx, by) in zip(points, points[1:]):
        assert max(abs(bx - ax), abs(by - ay)) == 1


def test_horizontal_line():
    assert line_points(2, 4, 6, 4) == [(x, 4) for x in range(2, 7)]


def test_rect_fill_covers_rect():
    points = rect_fill_points(1, 2, 4, 3)
    assert len(points) == len(set(points)) == 12
    assert all(in_rect(x, y, 1, 2, 4, 3) for x, y in points)


def test_rect_outline_is_border_of_fill():
    outline = set(rect_outline_points(1, 2, 5, 4))
    border = {
        (x, y)
        for x, y in rect_fill_points(1, 2, 5, 4)
        if x in (1, 5) or y in (2, 5)
    }
    assert outline == border


def test_rect_outline_unique():
    points = rect_outline_points(0, 0, 1, 1)
    assert points == [(0, 0)]


@pytest.mark.parametrize("radius", [1, 2, 5, 10])
def test_circle_symmetric_and_near_radius(radius):
    points = circle_points(20, 30, radius)
    seen = set(points)
    assert len(points) == len(seen)
    for x, y in points:
        assert (40 - x, y) in seen
        assert (x, 60 - y) in seen
        assert abs(math.hypot(x - 20, y - 30) - radius) < 1
    assert (20 + radius, 30) in seen
    assert (20, 30 - radius) in seen


def test_circle_negative_radius():
    with pytest.raises(ValueError):
        circle_points(0, 0, -1)


def test_filled_circle_within_radius():
    points = filled_circle_points(10, 10, 4)
    assert (10, 10) in points
    assert all(in_circle(x, y, 10, 10, 4) for x, y in points)
    assert all(x < 14 and y < 14 for x, y in points)


def test_filled_circle_zero_and_negative():
    assert filled_circle_points(3, 3, 0) == []
    with pytest.raises(ValueError):
        filled_circle_points(3, 3, -2)


def test_thick_line_contains_line():
    thick = set(thick_line_points(0, 0, 8, 3, 2))
    assert set(line_points(0, 0, 8, 3)) <= thick
    assert set(filled_circle_points(0, 0, 2)) <= thick
    assert thick_line_points(0, 0, 8, 3, 0) == []


def test_polygon_contains_edges():
    triangle = [(0, 0), (10, 0), (5, 8)]
    points = set(polygon_points(triangle))
    assert set(line_points(0, 0, 10, 0)) <= points
    assert set(line_points(10, 0, 5, 8)) <= points
    assert set(line_points(0, 0, 5, 8)) <= points


def test_polygon_needs_vertices():
    with pytest.raises(ValueError):
        polygon_points([])
    assert polygon_points([(4, 4)]) == [(4, 4)]