import math

import pytest

from ballpit.app import BallPit
from ballpit.physics import PhysicsBall, Vec2


def test_drop_adds_ten_balls_at_position():
    game = BallPit(seed=1)
    game.drop((100, 50))
    balls = game.engine.objects()
    assert len(balls) == 10
    assert all(ball.position == Vec2(100.0, 50.0) for ball in balls)


def test_dropped_balls_have_properties_in_range():
    game = BallPit(seed=7)
    game.drop((200, 200))
    game.drop((300, 100))
    for ball in game.engine.objects():
        assert 2 <= ball.radius <= 10
        assert ball.weight == ball.radius * 2 + 1
        assert -1500.0 <= ball.velocity.x <= 1500.0
        assert -500.0 <= ball.velocity.y <= 500.0
        assert 0.1 <= ball.properties.friction <= 0.85
        assert ball.properties.stickyness == 0.0
        assert all(0 <= channel <= 255 for channel in ball.color)
        assert not ball.dead


def test_same_seed_gives_same_drop():
    first = BallPit(seed=42)
    second = BallPit(seed=42)
    first.drop((10, 10))
    second.drop((10, 10))
    summary = lambda game: [
        (b.velocity, b.color, b.radius, b.properties.friction) for b in game.engine.objects()
    ]
    assert summary(first) == summary(second)


def test_step_with_clear_removes_everything():
    game = BallPit(seed=3)
    game.drop((320, 240))
    game.step(0.016, clear=True)
    assert game.engine.objects() == ()
    assert game.alive_count() == 0


def test_step_without_clear_keeps_balls():
    game = BallPit(seed=5)
    game.drop((320, 240))
    game.step(0.016, clear=False)
    balls = game.engine.objects()
    assert len(balls) == 10
    assert all(math.isfinite(b.position.x) and math.isfinite(b.position.y) for b in balls)


def test_alive_count_ignores_dead_balls():
    game = BallPit(seed=9)
    game.drop((50, 50))
    game.engine.objects()[0].dead = True
    game.engine.objects()[3].dead = True
    assert game.alive_count() == 8


def test_step_applies_gravity_downwards():
    game = BallPit()
    ball = PhysicsBall(position=Vec2(320.0, 100.0), radius=5, weight=11)
    game.engine.add(ball)
    game.step(0.1)
    assert ball.position.y > 100.0
    assert ball.velocity.y > 0.0


def test_drop_after_clear_counts_new_balls():
    game = BallPit(seed=11)
    game.drop((100, 100))
    game.step(0.01, clear=True)
    game.drop((400, 300))
    assert game.alive_count() == 10


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0},
        {"height": -1},
        {"pixel_width": 0},
        {"pixel_height": -2},
    ],
)
def test_invalid_sizes_raise(kwargs):
    with pytest.raises(ValueError):
        BallPit(**kwargs)


def test_world_matches_requested_size():
    game = BallPit(width=320, height=200)
    assert (game.world.width, game.world.height) == (320, 200)
    assert game.show_grid is False