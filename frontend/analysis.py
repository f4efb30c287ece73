"""Matplotlib analysis charts: wins by robot, conceded sides, rally lengths, paddle tracking."""

import os
import random

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend
import matplotlib.pyplot as plt
import numpy as np

from hexpong.autoplay import simulate_match
from hexpong.simulation import Simulation, step_state
from hexpong.opponents import BEHAVIORS, OPPONENT_ORDER
from hexpong.types import PLAYER
from hexpong import match as referee
from hexpong import arena


def _hex(color):
    return "#{:02x}{:02x}{:02x}".format(*color)


ENTITY_LABELS = ["Player"] + [BEHAVIORS[tag]["label"] for tag in OPPONENT_ORDER]
ENTITY_COLORS = ["#4444ff"] + [_hex(BEHAVIORS[tag]["color"]) for tag in OPPONENT_ORDER]
ENTITY_COLORS[3] = "#64748b"  # stealth navy vanishes on the dark theme


def _style_chart(ax, title):
    """Apply dark theme styling to chart."""
    ax.set_facecolor("#0f0f1a")
    ax.set_title(title, color="#e0e0e0", fontsize=13, fontweight="bold", pad=12)
    ax.tick_params(colors="#888888", labelsize=9)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.spines["bottom"].set_color("#333333")
    ax.spines["left"].set_color("#333333")
    ax.xaxis.label.set_color("#aaaaaa")
    ax.yaxis.label.set_color("#aaaaaa")


def run_matches(n_matches=10, seed=0):
    """Play n headless matches with consecutive seeds."""
    return [simulate_match(rng=random.Random(seed + i)) for i in range(n_matches)]


def chart_wins(results, save_path=None):
    """Chart 1: Match wins per entity."""
    wins = np.zeros(len(ENTITY_LABELS), dtype=int)
    for result in results:
        if result.winner is None:
            continue
        wins[0 if result.winner == PLAYER else result.winner + 1] += 1

    fig, ax = plt.subplots(figsize=(8, 5))
    fig.set_facecolor("#0f0f1a")
    _style_chart(ax, f"Match Wins over {len(results)} Autoplay Matches")

    bars = ax.bar(ENTITY_LABELS, wins, color=ENTITY_COLORS, edgecolor="#333", alpha=0.85)
    for bar, count in zip(bars, wins):
        ax.text(bar.get_x() + bar.get_width() / 2, bar.get_height() + 0.1,
                str(count), ha="center", va="bottom", fontsize=10, color="#e0e0e0")

    ax.set_ylabel("Wins")
    ax.grid(True, alpha=0.15, axis="y")

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, facecolor=fig.get_facecolor())
    return fig


def chart_points_conceded(results, save_path=None):
    """Chart 2: Which sides let the ball through."""
    conceded = np.zeros(len(ENTITY_LABELS))
    scored = np.zeros(len(ENTITY_LABELS))
    for result in results:
        for i, label in enumerate(ENTITY_LABELS):
            conceded[i] += result.stats["conceded"][label]
            scored[i] += result.stats["points"][label]

    fig, ax = plt.subplots(figsize=(8, 5))
    fig.set_facecolor("#0f0f1a")
    _style_chart(ax, "Points Scored vs Conceded by Side")

    y = np.arange(len(ENTITY_LABELS))
    height = 0.38
    ax.barh(y - height / 2, scored, height, color="#28a745", label="Scored", alpha=0.85)
    ax.barh(y + height / 2, conceded, height, color="#e94560", label="Conceded", alpha=0.85)

    ax.set_yticks(y)
    ax.set_yticklabels(ENTITY_LABELS)
    ax.invert_yaxis()
    ax.set_xlabel("Points")
    ax.legend(facecolor="#1a1a2e", edgecolor="#333", labelcolor="#e0e0e0", fontsize=9)
    ax.grid(True, alpha=0.15, axis="x")

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, facecolor=fig.get_facecolor())
    return fig


def chart_rally_length_distribution(results, save_path=None):
    """Chart 3: Rally length in frames."""
    lengths = np.array([n for r in results for n in r.stats["rally_lengths"]])

    fig, ax = plt.subplots(figsize=(8, 5))
    fig.set_facecolor("#0f0f1a")
    _style_chart(ax, "Rally Length Distribution")

    if lengths.size:
        ax.hist(lengths, bins=30, alpha=0.7, color="#4ecdc4", edgecolor="#4ecdc4")
        mean = float(np.mean(lengths))
        ax.axvline(mean, color="#e94560", linestyle="--", linewidth=1.5, alpha=0.8)
        ax.text(mean, ax.get_ylim()[1] * 0.95, f" mean {mean:.0f}", color="#e94560", fontsize=9)

    ax.set_xlabel("Rally Length (frames)")
    ax.set_ylabel("Frequency")
    ax.grid(True, alpha=0.15, axis="y")

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, facecolor=fig.get_facecolor())
    return fig


def chart_paddle_tracking(frames=600, seed=0, save_path=None):
    """Chart 4: Each robot's offset from its guard angle over time.

    Shows the behaviours side by side: stealth sits still, chaotic twitches,
    balanced stops short of the ball.
    """
    sim = Simulation(rng=random.Random(seed))
    sim.start()
    offsets = np.zeros((frames, len(OPPONENT_ORDER)))
    for frame in range(frames):
        if sim.phase != referee.ACTIVE:
            offsets = offsets[:frame]
            break
        sim.set_player_pointer(sim.state.ball.pos.x)
        step_state(sim.state, sim.rng)
        for i, paddle in enumerate(sim.state.opponents):
            offsets[frame, i] = arena.angle_between(paddle.angle, paddle.guard_angle)

    fig, ax = plt.subplots(figsize=(10, 5))
    fig.set_facecolor("#0f0f1a")
    _style_chart(ax, "Robot Offset from Guard Angle")

    limit = np.degrees(arena.GUARD_HALF_ARC)
    for i, tag in enumerate(OPPONENT_ORDER):
        ax.plot(np.degrees(offsets[:, i]), color=ENTITY_COLORS[i + 1],
                linewidth=1.2, label=BEHAVIORS[tag]["label"])
    ax.axhline(limit, color="#888888", linestyle=":", linewidth=1)
    ax.axhline(-limit, color="#888888", linestyle=":", linewidth=1)

    ax.set_xlabel("Frame")
    ax.set_ylabel("Offset (degrees)")
    ax.set_ylim(-limit - 5, limit + 5)
    ax.legend(facecolor="#1a1a2e", edgecolor="#333", labelcolor="#e0e0e0", fontsize=9)
    ax.grid(True, alpha=0.15)

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, facecolor=fig.get_facecolor())
    return fig


def generate_all_charts(output_dir=".", n_matches=10):
    """Generate all analysis charts and save to output directory."""
    os.makedirs(output_dir, exist_ok=True)

    print(f"  Running {n_matches} autoplay matches...")
    results = run_matches(n_matches)
    paths = []

    charts = [
        ("chart_wins.png", lambda p: chart_wins(results, save_path=p)),
        ("chart_points_conceded.png", lambda p: chart_points_conceded(results, save_path=p)),
        ("chart_rally_distribution.png", lambda p: chart_rally_length_distribution(results, save_path=p)),
        ("chart_paddle_tracking.png", lambda p: chart_paddle_tracking(save_path=p)),
    ]
    for filename, draw in charts:
        path = os.path.join(output_dir, filename)
        draw(path)
        paths.append(path)
        print(f"  Saved: {path}")

    plt.close("all")
    return paths
