"""Headless matches: an autopilot stands in for the human player.

The autopilot simply feeds the ball's x coordinate as the pointer every frame,
which is roughly what a person tracking the ball with a mouse does.
"""

import random
from dataclasses import dataclass, field

from hexpong.types import BoundaryExit, PaddleHit, PLAYER
from hexpong.simulation import Simulation, step_state
from hexpong.opponents import OPPONENT_ORDER
from hexpong import match as referee

MAX_FRAMES = 200_000

VALID_REASONS = [
    "finished",  # someone reached the winning score
    "timeout",   # safety: frame cap reached first
]


@dataclass
class MatchResult:
    """Outcome of one headless match."""
    simulation: Simulation
    frames: int
    reason: str  # see VALID_REASONS
    winner: object  # PLAYER, opponent index, or None on timeout
    stats: dict = field(default_factory=dict)


def simulate_match(rng=None, max_frames: int = MAX_FRAMES) -> MatchResult:
    """Play one match from start to finish with the autopilot.

    Args:
        rng: Uniform random source; a seeded random.Random gives repeatable runs.
        max_frames: Frame cap so a pathological rally cannot run forever.
    """
    sim = Simulation(rng=rng if rng is not None else random.Random())
    sim.start()

    touches = {PLAYER: 0, **{i: 0 for i in range(len(OPPONENT_ORDER))}}
    rally_lengths = []
    rally_start = 0
    frames = 0

    while sim.phase == referee.ACTIVE and frames < max_frames:
        sim.set_player_pointer(sim.state.ball.pos.x)
        event = step_state(sim.state, sim.rng)
        frames += 1
        if isinstance(event, PaddleHit):
            touches[event.paddle_id] += 1
        elif isinstance(event, BoundaryExit):
            rally_lengths.append(frames - rally_start)
            rally_start = frames

    reason = "finished" if sim.phase == referee.OVER else "timeout"
    stats = _compute_match_stats(sim, touches, rally_lengths)
    return MatchResult(
        simulation=sim,
        frames=frames,
        reason=reason,
        winner=sim.winner(),
        stats=stats,
    )


def _compute_match_stats(sim: Simulation, touches: dict, rally_lengths: list) -> dict:
    """Summaries used by the CLI and the analysis charts."""
    history = sim.state.match.history
    labels = {PLAYER: referee.label_for(PLAYER)}
    labels.update({i: referee.label_for(i) for i in range(len(OPPONENT_ORDER))})

    points = {label: 0 for label in labels.values()}
    conceded = {label: 0 for label in labels.values()}
    for entry in history:
        points[labels[entry["scorer"]]] += 1
        conceded[labels[entry["scored_against"]]] += 1

    avg_rally = sum(rally_lengths) / max(len(rally_lengths), 1)

    return {
        "points": points,
        "conceded": conceded,
        "touches": {labels[k]: v for k, v in touches.items()},
        "total_rallies": len(rally_lengths),
        "rally_lengths": list(rally_lengths),
        "avg_rally_frames": round(avg_rally, 1),
        "max_rally_frames": max(rally_lengths) if rally_lengths else 0,
        "winner_label": sim.winner_label(),
    }
