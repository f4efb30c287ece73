"""Tests for the match state machine."""

import math
import pytest

from hexpong.types import Ball, BoundaryExit, Match, Score, Vec2, PLAYER
from hexpong.match import (
    ACTIVE,
    NOT_STARTED,
    OVER,
    create_match,
    label_for,
    score_point,
    serve,
    winner,
)
from hexpong.opponents import make_opponents
from hexpong import arena


class ScriptedRandom:
    """Returns a fixed sequence of values from random()."""

    def __init__(self, values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


def _active_match():
    match = create_match()
    match.phase = ACTIVE
    return match


def _exit(side):
    return BoundaryExit(side=side, angle=0.0)


def test_new_match_defaults():
    match = create_match()
    assert match.phase == NOT_STARTED
    assert match.score.as_tuple() == (0, (0, 0, 0, 0, 0))
    assert match.last_touch is None
    assert match.last_scored is None
    assert match.history == []


def test_phase_constants_shared_with_types():
    """The Match default and the state machine use the same phase names."""
    from hexpong import types

    assert (NOT_STARTED, ACTIVE, OVER) == types.PHASES
    assert Match().phase is types.NOT_STARTED
    assert len(set(types.PHASES)) == 3


def test_untouched_ball_scores_for_player():
    match = _active_match()
    score_point(match, _exit(3), frame=42)

    assert match.score.player == 1
    assert match.score.opponents == [0, 0, 0, 0, 0]
    assert match.last_scored == 3
    assert match.history == [{
        "frame": 42,
        "scorer": PLAYER,
        "scored_against": 3,
        "player": 1,
        "opponents": [0, 0, 0, 0, 0],
    }]


def test_player_touch_scores_for_player():
    match = _active_match()
    match.last_touch = PLAYER
    score_point(match, _exit(0))
    assert match.score.player == 1


def test_opponent_touch_scores_for_that_opponent():
    match = _active_match()
    match.last_touch = 2
    score_point(match, _exit(PLAYER))

    assert match.score.player == 0
    assert match.score.opponents == [0, 0, 1, 0, 0]
    assert match.last_scored == PLAYER


def test_fifteen_ends_the_match():
    """Phase flips to over exactly when a score first reaches 15."""
    match = _active_match()
    match.last_touch = 4
    for point in range(1, 16):
        assert match.phase == ACTIVE
        score_point(match, _exit(0))
        assert match.score.opponents[4] == point

    assert match.phase == OVER
    assert winner(match) == 4


def test_scoring_after_match_over_is_ignored():
    match = Match(phase=OVER, score=Score(player=15))
    score_point(match, _exit(1))
    assert match.score.player == 15
    assert match.history == []


def test_winner_only_when_over():
    match = _active_match()
    match.score.player = 14
    assert winner(match) is None


def test_player_wins_at_fifteen():
    match = Match(phase=OVER, score=Score(player=15, opponents=[3, 4, 0, 0, 1]))
    assert winner(match) == PLAYER


def test_best_opponent_wins_ties_to_lowest_index():
    match = Match(phase=OVER, score=Score(player=2, opponents=[4, 15, 2, 0, 1]))
    assert winner(match) == 1

    match = Match(phase=OVER, score=Score(player=2, opponents=[15, 4, 15, 0, 1]))
    assert winner(match) == 0


def test_labels():
    assert label_for(PLAYER) == "Player"
    assert label_for(2) == "Stealth"
    assert label_for(None) == "nobody"


def test_first_serve_from_center():
    match = _active_match()
    match.last_touch = 3
    ball = Ball(pos=Vec2(10, 10), vel=Vec2(1, 1))

    serve(ball, make_opponents(), match, rng=ScriptedRandom([0.25]))

    assert (ball.pos.x, ball.pos.y) == (arena.CENTER_X, arena.CENTER_Y)
    assert ball.vel.x == pytest.approx(0, abs=1e-12)
    assert ball.vel.y == pytest.approx(4)
    assert match.last_touch is None


def test_serve_from_conceding_side_toward_center():
    match = _active_match()
    match.last_scored = 0
    ball = Ball()

    serve(ball, make_opponents(), match, rng=ScriptedRandom([0.5]))

    assert ball.pos.x == pytest.approx(400 + 216)
    assert ball.pos.y == pytest.approx(300)
    assert ball.vel.x == pytest.approx(-4)
    assert ball.vel.y == pytest.approx(0, abs=1e-12)


def test_serve_jitter_is_within_30_degrees():
    for value in [0.0, 0.999999]:
        match = _active_match()
        match.last_scored = PLAYER
        ball = Ball()
        serve(ball, make_opponents(), match, rng=ScriptedRandom([value]))

        assert ball.pos.x == pytest.approx(400)
        assert ball.pos.y == pytest.approx(300 + 216)
        heading = math.atan2(ball.vel.y, ball.vel.x)
        toward_center = -math.pi / 2
        assert abs(arena.angle_between(heading, toward_center)) <= math.pi / 6 + 1e-9
        assert ball.vel.magnitude() == pytest.approx(arena.SERVE_SPEED)


def test_serve_restores_opponents_exactly():
    paddles = make_opponents()
    home = [(p.pos.x, p.pos.y) for p in paddles]
    for i, paddle in enumerate(paddles):
        paddle.angle += 0.2 * (-1) ** i

    match = _active_match()
    match.last_scored = 1
    serve(Ball(), paddles, match, rng=ScriptedRandom([0.3]))

    assert [(p.pos.x, p.pos.y) for p in paddles] == home
