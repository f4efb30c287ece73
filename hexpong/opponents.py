"""Opponent policy engine: five computer paddles with distinct behaviours.

Each behaviour is a pure function of the ball, the paddle and the frame count
that returns a target angle. The paddle then turns toward that target at no
more than its own angular speed:

  - Aggressive: follows the ball directly
  - Predictive: follows where the ball will be 30 frames from now
  - Stealth:    sits at the center of its side until the ball is close
  - Chaotic:    follows the ball, with random twitches
  - Balanced:   leans toward the ball but keeps some weight on home
"""

import math
import random

from hexpong.types import Ball, Paddle, Vec2
from hexpong import arena


# Behaviour presets, in opponent order
BEHAVIORS = {
    "aggressive": {
        "label": "Aggressive",
        "anticipation": 0,
        "speed": 16.0,
        "color": (255, 68, 68),
    },
    "predictive": {
        "label": "Predictive",
        "anticipation": 30,
        "speed": 15.0,
        "color": (68, 255, 68),
    },
    "stealth": {
        "label": "Stealth",
        "anticipation": 0,
        "speed": 24.0,
        "color": (0, 0, 68),
    },
    "chaotic": {
        "label": "Chaotic",
        "anticipation": 5,
        "speed": 18.0,
        "color": (255, 68, 255),
    },
    "balanced": {
        "label": "Balanced",
        "anticipation": 15,
        "speed": 15.5,
        "color": (255, 255, 68),
    },
}

OPPONENT_ORDER = ("aggressive", "predictive", "stealth", "chaotic", "balanced")


def make_opponents() -> list[Paddle]:
    """Create the five opponents at the center of their sides."""
    paddles = []
    for index, (tag, guard) in enumerate(zip(OPPONENT_ORDER, arena.OPPONENT_GUARD_ANGLES)):
        paddles.append(Paddle(
            paddle_id=index,
            guard_angle=guard,
            angle=guard,
            speed=BEHAVIORS[tag]["speed"],
            behavior=tag,
        ))
    return paddles


def predict_ball(ball: Ball, frames: int) -> Vec2:
    """Linear extrapolation; ignores walls and paddles."""
    return Vec2(ball.pos.x + ball.vel.x * frames, ball.pos.y + ball.vel.y * frames)


def _follow(ball_angle: float, paddle: Paddle) -> float:
    return arena.clamp_to_arc(ball_angle, paddle.guard_angle)


def _aggressive(ball: Ball, paddle: Paddle, ball_angle: float, time: int, rng) -> float:
    return _follow(ball_angle, paddle)


def _predictive(ball: Ball, paddle: Paddle, ball_angle: float, time: int, rng) -> float:
    # ball_angle is already taken from the 30-frame prediction
    return _follow(ball_angle, paddle)


def _stealth(ball: Ball, paddle: Paddle, ball_angle: float, time: int, rng) -> float:
    paddle_pos = paddle.pos
    distance = math.hypot(ball.pos.x - paddle_pos.x, ball.pos.y - paddle_pos.y)
    if distance < arena.STEALTH_RANGE:
        return _follow(ball_angle, paddle)
    return paddle.guard_angle


def _chaotic(ball: Ball, paddle: Paddle, ball_angle: float, time: int, rng) -> float:
    if rng.random() < arena.CHAOS_PROBABILITY:
        return paddle.guard_angle + (rng.random() - 0.5) * 2 * arena.GUARD_HALF_ARC
    return _follow(ball_angle, paddle)


def _balanced(ball: Ball, paddle: Paddle, ball_angle: float, time: int, rng) -> float:
    offset = arena.angle_between(ball_angle, paddle.guard_angle)
    weighted = paddle.guard_angle + arena.BALANCED_BALL_WEIGHT * offset
    return arena.clamp_to_arc(weighted, paddle.guard_angle)


POLICIES = {
    "aggressive": _aggressive,
    "predictive": _predictive,
    "stealth": _stealth,
    "chaotic": _chaotic,
    "balanced": _balanced,
}


def target_angle(ball: Ball, paddle: Paddle, time: int = 0, rng=random) -> float:
    """Angle the paddle wants to reach this frame.

    Balls more than REACT_ARC away from the paddle's side (after the
    behaviour's look-ahead) send it back to the middle of its side.
    """
    profile = BEHAVIORS[paddle.behavior]
    predicted = predict_ball(ball, profile["anticipation"])
    ball_angle = arena.angle_from_center(predicted.x, predicted.y)

    if abs(arena.angle_between(ball_angle, paddle.guard_angle)) >= arena.REACT_ARC:
        return paddle.guard_angle
    return POLICIES[paddle.behavior](ball, paddle, ball_angle, time, rng)


def turn_toward(current: float, target: float, max_turn: float) -> float:
    """Step from current toward target the short way, at most max_turn radians."""
    diff = arena.angle_between(target, current)
    step = math.copysign(min(abs(diff), max_turn), diff)
    return current + step


def update_opponent(ball: Ball, paddle: Paddle, time: int = 0, rng=random) -> Paddle:
    """Move one opponent a single frame toward its behaviour's target."""
    target = target_angle(ball, paddle, time, rng)
    paddle.angle = turn_toward(paddle.angle, target, paddle.max_turn)
    return paddle


def update_opponents(ball: Ball, paddles: list[Paddle], time: int = 0, rng=random) -> list[Paddle]:
    for paddle in paddles:
        update_opponent(ball, paddle, time, rng)
    return paddles
