"""Simulation loop: owns all game state and advances it one frame at a time.

The renderer holds a Simulation and only talks to it through start(),
reset(), set_player_pointer(), step() and winner(). One frame does:

  1. place the player paddle from the latest pointer input
  2. move the ball, stop here if it left the arena (score + serve)
  3. move the five opponents
  4. bounce the ball off any paddle it touches
"""

import logging
import math
import numbers
import random
from dataclasses import dataclass, field
from typing import Optional

from hexpong.types import Ball, Match, Paddle, PaddleView, Snapshot, PLAYER
from hexpong.physics import move_ball, resolve_paddle_hits
from hexpong.opponents import BEHAVIORS, make_opponents, update_opponents
from hexpong import match as referee
from hexpong import arena

logger = logging.getLogger(__name__)

PLAYER_COLOR = (68, 68, 255)


def make_player() -> Paddle:
    return Paddle(
        paddle_id=PLAYER,
        guard_angle=arena.PLAYER_GUARD_ANGLE,
        angle=arena.PLAYER_GUARD_ANGLE,
    )


def pointer_to_angle(x: float) -> float:
    """Turn a horizontal pointer position into a player angle on its side."""
    angle = math.atan2(arena.POINTER_DEPTH, x - arena.CENTER_X)
    return arena.clamp_to_arc(angle, arena.PLAYER_GUARD_ANGLE)


@dataclass
class GameState:
    """The single mutable aggregate advanced by step()."""
    ball: Ball = field(default_factory=Ball)
    player: Paddle = field(default_factory=make_player)
    opponents: list = field(default_factory=make_opponents)
    match: Match = field(default_factory=referee.create_match)
    time: int = 0
    pointer_angle: Optional[float] = None


def step_state(state: GameState, rng=random) -> Optional[object]:
    """Advance an active game by one frame.

    Returns the frame's event (PaddleHit, BoundaryExit) or None.
    """
    if state.match.phase != referee.ACTIVE:
        return None

    state.time += 1
    if state.pointer_angle is not None:
        state.player.angle = state.pointer_angle

    exit_event = move_ball(
        state.ball,
        state.player.guard_angle,
        [p.guard_angle for p in state.opponents],
    )
    if exit_event is not None:
        referee.score_point(state.match, exit_event, state.time)
        if state.match.phase == referee.ACTIVE:
            referee.serve(state.ball, state.opponents, state.match, rng)
        return exit_event

    update_opponents(state.ball, state.opponents, state.time, rng)

    hit = resolve_paddle_hits(state.ball, state.opponents, state.player)
    if hit is not None:
        state.match.last_touch = hit.paddle_id
    return hit


def snapshot(state: GameState) -> Snapshot:
    views = [
        PaddleView(
            paddle_id=p.paddle_id,
            x=p.pos.x,
            y=p.pos.y,
            color=BEHAVIORS[p.behavior]["color"],
            behavior=p.behavior,
        )
        for p in state.opponents
    ]
    player_pos = state.player.pos
    views.append(PaddleView(
        paddle_id=PLAYER,
        x=player_pos.x,
        y=player_pos.y,
        color=PLAYER_COLOR,
        behavior=None,
    ))
    return Snapshot(
        ball=(state.ball.pos.x, state.ball.pos.y),
        paddles=views,
        hexagon=arena.HEXAGON,
        score=state.match.score.as_tuple(),
        phase=state.match.phase,
        time=state.time,
    )


class Simulation:
    """Entry points for a renderer driving one hexagon pong match."""

    def __init__(self, rng=None):
        """Create a simulation in the not-started phase.

        Args:
            rng: Uniform source with a random() method. Defaults to a fresh
                random.Random; tests pass a seeded or scripted one.
        """
        self.rng = rng if rng is not None else random.Random()
        self.state = GameState()

    @property
    def phase(self) -> str:
        return self.state.match.phase

    def start(self) -> Snapshot:
        """Begin a match from the not-started phase with the center serve."""
        if self.phase != referee.NOT_STARTED:
            logger.debug("start() ignored in phase %s", self.phase)
            return self.snapshot()
        self.state.match.phase = referee.ACTIVE
        referee.serve(self.state.ball, self.state.opponents, self.state.match, self.rng)
        logger.info("Match started")
        return self.snapshot()

    def reset(self) -> Snapshot:
        """Drop the current match and return to a fresh not-started state."""
        self.state = GameState()
        logger.info("Match reset")
        return self.snapshot()

    def set_player_pointer(self, x) -> None:
        """Record the latest horizontal pointer position.

        Missing or non-numeric input is ignored; the next step() uses the most
        recent valid value.
        """
        valid = isinstance(x, numbers.Real) and not isinstance(x, bool) and math.isfinite(x)
        if not valid:
            logger.debug("Ignoring pointer input %r", x)
            return
        self.state.pointer_angle = pointer_to_angle(float(x))

    def step(self) -> Snapshot:
        """Advance one frame while the match is active and return the snapshot."""
        step_state(self.state, self.rng)
        return self.snapshot()

    def winner(self) -> Optional[int]:
        """PLAYER or an opponent index once the match is over, else None."""
        return referee.winner(self.state.match)

    def winner_label(self) -> Optional[str]:
        champion = self.winner()
        if champion is None:
            return None
        return referee.label_for(champion)

    def snapshot(self) -> Snapshot:
        return snapshot(self.state)
