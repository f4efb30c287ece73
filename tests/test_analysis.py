"""Tests for the analysis charts."""

import os
import random

import matplotlib.pyplot as plt

from frontend.analysis import (
    ENTITY_LABELS,
    chart_paddle_tracking,
    chart_points_conceded,
    chart_rally_length_distribution,
    chart_wins,
)
from hexpong.autoplay import simulate_match


def _short_results():
    return [simulate_match(rng=random.Random(seed), max_frames=1500) for seed in range(2)]


def test_entity_labels_cover_all_paddles():
    assert ENTITY_LABELS == ["Player", "Aggressive", "Predictive", "Stealth", "Chaotic", "Balanced"]


def test_charts_render_and_save(tmp_path):
    results = _short_results()
    paths = []
    for name, draw in [
        ("wins.png", lambda p: chart_wins(results, save_path=p)),
        ("conceded.png", lambda p: chart_points_conceded(results, save_path=p)),
        ("rallies.png", lambda p: chart_rally_length_distribution(results, save_path=p)),
        ("tracking.png", lambda p: chart_paddle_tracking(frames=120, save_path=p)),
    ]:
        path = str(tmp_path / name)
        fig = draw(path)
        assert fig is not None
        paths.append(path)

    plt.close("all")
    for path in paths:
        assert os.path.getsize(path) > 0, f"{path} is empty"
