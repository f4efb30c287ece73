"""Match state machine: scoring, end of match, winner and serve reset.

First entity to WINNING_SCORE points ends the match. A point goes to whoever
touched the ball last; an untouched ball (or one last touched by the player)
scores for the player.
"""

import logging
import math
import random
from typing import Optional

from hexpong.types import (
    Ball, BoundaryExit, Match, Paddle, Score, Vec2, PLAYER,
    NOT_STARTED, ACTIVE, OVER,
)
from hexpong.opponents import BEHAVIORS, OPPONENT_ORDER
from hexpong import arena

logger = logging.getLogger(__name__)


def create_match() -> Match:
    """Create a new match with default state."""
    return Match()


def scorer_for(last_touch: Optional[int]) -> int:
    """Id of the entity credited with a point."""
    if last_touch is None or last_touch == PLAYER:
        return PLAYER
    return last_touch


def is_decided(score: Score) -> bool:
    return score.highest() >= arena.WINNING_SCORE


def score_point(match: Match, exit_event: BoundaryExit, frame: int = 0) -> Match:
    """Credit the point for a boundary exit and update the phase.

    Returns the same match object. A match that is already over is left
    untouched.
    """
    if match.phase == OVER:
        return match

    scorer = scorer_for(match.last_touch)
    if scorer == PLAYER:
        match.score.player += 1
    else:
        match.score.opponents[scorer] += 1

    match.history.append({
        "frame": frame,
        "scorer": scorer,
        "scored_against": exit_event.side,
        "player": match.score.player,
        "opponents": list(match.score.opponents),
    })
    logger.debug(
        "Point to %s through side %s at frame %d, score %s",
        label_for(scorer), label_for(exit_event.side), frame, match.score.as_tuple(),
    )

    if is_decided(match.score):
        match.phase = OVER
        logger.info("Match over, %s wins %s", label_for(winner(match)), match.score.as_tuple())
    else:
        match.last_scored = exit_event.side
    return match


def winner(match: Match) -> Optional[int]:
    """Winning entity once the match is over, otherwise None.

    The player wins at WINNING_SCORE; otherwise the best opponent wins, ties
    going to the lowest index.
    """
    if match.phase != OVER:
        return None
    if match.score.player >= arena.WINNING_SCORE:
        return PLAYER
    best = max(match.score.opponents)
    return match.score.opponents.index(best)


def label_for(entity: Optional[int]) -> str:
    if entity is None:
        return "nobody"
    if entity == PLAYER:
        return "Player"
    tag = OPPONENT_ORDER[entity]
    return BEHAVIORS[tag]["label"]


def guard_angle_for(side: int) -> float:
    if side == PLAYER:
        return arena.PLAYER_GUARD_ANGLE
    return arena.OPPONENT_GUARD_ANGLES[side]


def serve(ball: Ball, opponents: list[Paddle], match: Match, rng=random) -> Ball:
    """Reset opponents and put the ball back in play.

    The first serve of a match starts at the center in a random direction.
    Later serves start near the side that just conceded, heading back to the
    center with up to 30 degrees of jitter.
    """
    for paddle in opponents:
        paddle.angle = paddle.guard_angle

    if match.last_scored is None:
        ball.pos = Vec2(arena.CENTER_X, arena.CENTER_Y)
        direction = rng.random() * 2 * math.pi
    else:
        start = guard_angle_for(match.last_scored)
        x, y = arena.point_on_circle(start, arena.PLAY_RADIUS * arena.SERVE_DISTANCE)
        ball.pos = Vec2(x, y)
        direction = start + math.pi + (rng.random() - 0.5) * arena.SERVE_JITTER

    ball.vel = Vec2.polar(direction, arena.SERVE_SPEED)
    match.last_touch = None
    logger.debug("Serve from %s, heading %.3f rad", label_for(match.last_scored), direction)
    return ball
