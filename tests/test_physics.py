"""Tests for the ball physics."""

import math
import pytest

from hexpong.types import Ball, BoundaryExit, Paddle, PaddleHit, Vec2, PLAYER
from hexpong.physics import (
    advance,
    check_boundary,
    deflect,
    move_ball,
    resolve_exit_side,
    resolve_paddle_hits,
)
from hexpong import arena

GUARDS = list(arena.OPPONENT_GUARD_ANGLES)


def _exit_side(degrees):
    return resolve_exit_side(math.radians(degrees), arena.PLAYER_GUARD_ANGLE, GUARDS)


def test_advance_moves_by_velocity():
    ball = Ball(pos=Vec2(400, 300), vel=Vec2(3, -2))
    advance(ball)
    assert (ball.pos.x, ball.pos.y) == (403, 298)


def test_straight_shot_exits_after_60_frames():
    """Center ball at (4, 0) reaches x=640 on frame 60 and exits on side 0."""
    ball = Ball(pos=Vec2(400, 300), vel=Vec2(4, 0))

    for frame in range(1, 60):
        event = move_ball(ball)
        assert event is None, f"Unexpected event on frame {frame}"

    event = move_ball(ball)
    assert isinstance(event, BoundaryExit)
    assert ball.pos.x == pytest.approx(640)
    assert arena.distance_from_center(ball.pos.x, ball.pos.y) == pytest.approx(240)
    assert event.side == 0


def test_ball_inside_radius_no_exit():
    ball = Ball(pos=Vec2(400 + 239.9, 300))
    assert check_boundary(ball) is None


def test_exit_on_player_side():
    ball = Ball(pos=Vec2(400, 300 + 241))
    event = check_boundary(ball)
    assert event.side == PLAYER
    assert event.angle == pytest.approx(math.pi / 2)


def test_overlapping_arcs_favour_player_then_lowest_index():
    """90 degrees is guarded by the player and opponent 2; the player wins."""
    assert _exit_side(90) == PLAYER
    assert _exit_side(100) == PLAYER
    # 40 degrees: only opponent 1 (60) is within 30 degrees
    assert _exit_side(40) == 1
    # 15 degrees: opponent 0 only
    assert _exit_side(15) == 0


def test_exit_across_seam_is_left_side():
    """-175 degrees is 5 degrees from the opponent guarding 180."""
    assert _exit_side(-175) == 4
    assert _exit_side(175) == 4


def test_unguarded_exit_goes_to_nearest_guard():
    """The top of the arena has no guard; the nearest side concedes."""
    assert _exit_side(-60) == 0
    assert _exit_side(-120) == 4


def test_deflect_points_away_from_paddle():
    paddle = Paddle(paddle_id=0, guard_angle=0.0, angle=0.0)  # at (640, 300)
    ball = Ball(pos=Vec2(600, 300), vel=Vec2(4, 0))

    assert deflect(ball, paddle)
    assert ball.vel.x == pytest.approx(-arena.HIT_SPEED)
    assert ball.vel.y == pytest.approx(0, abs=1e-12)


def test_deflect_requires_overlap():
    """Exactly PADDLE_REACH + BALL_RADIUS away is not a hit."""
    paddle = Paddle(paddle_id=0, guard_angle=0.0, angle=0.0)
    ball = Ball(pos=Vec2(640 - 48, 300), vel=Vec2(4, 0))

    assert not deflect(ball, paddle)
    assert (ball.vel.x, ball.vel.y) == (4, 0)


def test_hit_speed_is_fixed():
    """Outgoing speed is HIT_SPEED whatever the incoming speed."""
    paddle = Paddle(paddle_id=1, guard_angle=math.pi / 3, angle=math.pi / 3)
    p = paddle.pos
    ball = Ball(pos=Vec2(p.x - 20, p.y - 25), vel=Vec2(0.5, 0.1))

    resolve_paddle_hits(ball, [paddle], None)
    assert ball.vel.magnitude() == pytest.approx(arena.HIT_SPEED)


def test_last_paddle_checked_wins_the_touch():
    """Two opponents overlap the ball: the later index sets touch and velocity."""
    first = Paddle(paddle_id=0, guard_angle=0.0, angle=0.0)
    second = Paddle(paddle_id=1, guard_angle=0.0, angle=0.1)
    ball = Ball(pos=Vec2(620, 310), vel=Vec2(4, 0))

    hit = resolve_paddle_hits(ball, [first, second], None)

    assert hit == PaddleHit(paddle_id=1)
    sp = second.pos
    expected = math.atan2(310 - sp.y, 620 - sp.x)
    assert ball.vel.x == pytest.approx(arena.HIT_SPEED * math.cos(expected))
    assert ball.vel.y == pytest.approx(arena.HIT_SPEED * math.sin(expected))


def test_player_checked_after_opponents():
    """Player and opponent 2 share the bottom; the player is processed last."""
    stealth = Paddle(paddle_id=2, guard_angle=math.pi / 2, angle=math.pi / 2)
    player = Paddle(paddle_id=PLAYER, guard_angle=math.pi / 2, angle=math.pi / 2)
    ball = Ball(pos=Vec2(410, 510), vel=Vec2(0, 4))

    hit = resolve_paddle_hits(ball, [stealth], player)
    assert hit.paddle_id == PLAYER
