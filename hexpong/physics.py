"""Ball physics: straight-line motion, boundary exit and paddle deflection."""

import math
from typing import Optional

from hexpong.types import Ball, BoundaryExit, Paddle, PaddleHit, PLAYER
from hexpong import arena


def advance(ball: Ball) -> Ball:
    """Move the ball one frame along its velocity."""
    ball.pos.x += ball.vel.x
    ball.pos.y += ball.vel.y
    return ball


def resolve_exit_side(angle: float, player_guard: float, opponent_guards: list[float]) -> int:
    """Work out whose side the ball left through.

    The player's arc is checked first, then opponents in index order, and the
    first arc within GUARD_HALF_ARC wins. Overlapping arcs therefore favour the
    player, then the lowest opponent index. An exit through an unguarded arc
    is charged to the nearest guard.
    """
    if abs(arena.angle_between(angle, player_guard)) < arena.GUARD_HALF_ARC:
        return PLAYER
    for index, guard in enumerate(opponent_guards):
        if abs(arena.angle_between(angle, guard)) < arena.GUARD_HALF_ARC:
            return index

    side = PLAYER
    nearest = abs(arena.angle_between(angle, player_guard))
    for index, guard in enumerate(opponent_guards):
        gap = abs(arena.angle_between(angle, guard))
        if gap < nearest:
            side, nearest = index, gap
    return side


def check_boundary(
    ball: Ball,
    player_guard: float = arena.PLAYER_GUARD_ANGLE,
    opponent_guards=arena.OPPONENT_GUARD_ANGLES,
) -> Optional[BoundaryExit]:
    """Return a BoundaryExit once the ball reaches the play radius."""
    if arena.distance_from_center(ball.pos.x, ball.pos.y) < arena.PLAY_RADIUS:
        return None
    angle = arena.angle_from_center(ball.pos.x, ball.pos.y)
    side = resolve_exit_side(angle, player_guard, list(opponent_guards))
    return BoundaryExit(side=side, angle=angle)


def deflect(ball: Ball, paddle: Paddle) -> bool:
    """Bounce the ball off one paddle if they overlap.

    The new velocity points from the paddle center through the ball at
    HIT_SPEED, regardless of the incoming direction.
    """
    paddle_pos = paddle.pos
    dx = ball.pos.x - paddle_pos.x
    dy = ball.pos.y - paddle_pos.y
    if math.hypot(dx, dy) >= arena.PADDLE_REACH + ball.radius:
        return False
    angle = math.atan2(dy, dx)
    ball.vel.x = arena.HIT_SPEED * math.cos(angle)
    ball.vel.y = arena.HIT_SPEED * math.sin(angle)
    return True


def resolve_paddle_hits(ball: Ball, opponents: list[Paddle], player: Optional[Paddle]) -> Optional[PaddleHit]:
    """Check every paddle, opponents first and the player last.

    Every overlapping paddle rewrites the velocity and the touch, so with
    several hits in one frame the last one checked decides both.
    """
    hit = None
    order = list(opponents) + ([player] if player is not None else [])
    for paddle in order:
        if deflect(ball, paddle):
            hit = PaddleHit(paddle_id=paddle.paddle_id)
    return hit


def move_ball(
    ball: Ball,
    player_guard: float = arena.PLAYER_GUARD_ANGLE,
    opponent_guards=arena.OPPONENT_GUARD_ANGLES,
) -> Optional[BoundaryExit]:
    """Advance the ball one frame and report whether it left the arena.

    A non-None result ends the frame: no paddle collision is checked for a
    ball that has already gone out.
    """
    advance(ball)
    return check_boundary(ball, player_guard, opponent_guards)
