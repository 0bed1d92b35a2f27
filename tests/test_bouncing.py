import random

import pytest

from tinkerbox.bouncing import BALL_RADIUS, Ball, BouncingPolygons

WIDTH, HEIGHT = 720, 1292


def test_spawn_places_ball_at_top():
    rng = random.Random(3)
    for _ in range(50):
        ball = Ball.spawn(WIDTH, rng)
        assert ball.r == BALL_RADIUS
        assert ball.y == BALL_RADIUS
        assert BALL_RADIUS <= ball.x < WIDTH - BALL_RADIUS
        assert 5 <= abs(ball.dx) <= 14
        assert 5 <= abs(ball.dy) <= 14


def test_spawn_rejects_narrow_box():
    with pytest.raises(ValueError):
        Ball.spawn(2 * BALL_RADIUS)


def test_step_applies_gravity_then_moves():
    ball = Ball(x=300, y=300, r=64, dx=5, dy=0)
    settled = ball.step(WIDTH, HEIGHT)
    assert settled is False
    assert ball.dy == 1
    assert (ball.x, ball.y) == (305, 301)


def test_step_bounces_off_right_wall():
    ball = Ball(x=WIDTH - 64 - 2, y=300, r=64, dx=5, dy=0)
    ball.step(WIDTH, HEIGHT)
    assert ball.x == WIDTH - 64
    assert ball.dx == -5


def test_ball_comes_to_rest_on_floor():
    ball = Ball(x=300, y=HEIGHT - 64, r=64, dx=0, dy=-1)
    assert ball.step(WIDTH, HEIGHT) is True
    assert ball.y == HEIGHT - 64


def test_ball_stays_inside_box():
    ball = Ball.spawn(WIDTH, random.Random(7))
    for _ in range(2000):
        ball.step(WIDTH, HEIGHT)
        assert ball.r <= ball.x <= WIDTH - ball.r
        assert ball.r <= ball.y <= HEIGHT - ball.r


def test_polygon_lines_are_closed():
    scene = BouncingPolygons(400, 300, polygons=3, vertices=5, rng=random.Random(1))
    lines = scene.lines()
    assert len(lines) == 3
    for _color, segments in lines:
        assert len(segments) == 5
        assert segments[-1][2:] == segments[0][:2]
        for a, b in zip(segments, segments[1:]):
            assert a[2:] == b[:2]


def test_polygon_step_moves_vertices():
    scene = BouncingPolygons(400, 300, rng=random.Random(2))
    before = [(v.x, v.y, v.dx, v.dy) for p in scene.polygons for v in p.vertices]
    scene.step()
    after = [(v.x, v.y) for p in scene.polygons for v in p.vertices]
    assert after == [(x + dx, y + dy) for x, y, dx, dy in before]


def test_polygon_colours_change_every_hundred_steps():
    scene = BouncingPolygons(400, 300, rng=random.Random(5))
    first = [p.color for p in scene.polygons]
    for _ in range(99):
        scene.step()
    assert [p.color for p in scene.polygons] == first
    scene.step()
    assert scene.ticks == 0
    assert [p.color for p in scene.polygons] != first


def test_polygons_reject_bad_sizes():
    with pytest.raises(ValueError):
        BouncingPolygons(0, 100)
    with pytest.raises(ValueError):
        BouncingPolygons(100, 100, vertices=1)