#!/usr/bin/env python3
"""CLI entry point for Hexagon Pong.

Usage:
    python main.py play              Launch the pygame game window
    python main.py match [seed]      Run an autoplay match (text mode) and print stats
    python main.py analyze [n]       Generate analysis charts over n autoplay matches
    python main.py test              Run all tests

Add -v / --verbose to any command for debug logging.
"""

import logging
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


def _int_arg(position, default):
    args = [a for a in sys.argv[2:] if not a.startswith("-")]
    if len(args) > position and args[position].isdigit():
        return int(args[position])
    return default


def cmd_play():
    """Launch the pygame game window."""
    print("Launching Hexagon Pong...")
    print("Controls: mouse=move  click/SPACE=start  R=reset  Q=quit")
    print("-" * 60)
    from frontend.visualizer import run_visualizer
    run_visualizer()


def cmd_match():
    """Run an autoplay match in text mode and print stats."""
    import random
    from hexpong.autoplay import simulate_match
    from hexpong.match import label_for

    seed = _int_arg(0, None)
    rng = random.Random(seed)

    print("=" * 60)
    print("  HEXAGON PONG — AUTOPLAY MATCH")
    print("=" * 60)
    print()

    result = simulate_match(rng=rng)
    history = result.simulation.state.match.history
    s = result.stats

    for i, point in enumerate(history):
        opponents = "-".join(str(v) for v in point["opponents"])
        print(f"  Point {i + 1:2d} @ frame {point['frame']:6d}: "
              f"{label_for(point['scorer']):10s} scores through "
              f"{label_for(point['scored_against']):10s} [{point['player']} | {opponents}]")

    player_score, robot_scores = result.simulation.state.match.score.as_tuple()
    print()
    print(f"  FINAL SCORE: You {player_score} | Robots {', '.join(map(str, robot_scores))}")
    if result.reason == "timeout":
        print(f"  NO WINNER: frame cap reached after {result.frames} frames")
    else:
        print(f"  WINNER: {s['winner_label']}")
    print()
    print(f"  Frames played: {result.frames}")
    print(f"  Total rallies: {s['total_rallies']}")
    print(f"  Avg rally length: {s['avg_rally_frames']} frames")
    print(f"  Max rally length: {s['max_rally_frames']} frames")
    print(f"  Touches: {s['touches']}")
    print(f"  Conceded: {s['conceded']}")
    print("=" * 60)


def cmd_analyze():
    """Generate all analysis charts."""
    print("Generating analysis charts...")
    print("-" * 60)
    from frontend.analysis import generate_all_charts
    output_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "output")
    paths = generate_all_charts(output_dir=output_dir, n_matches=_int_arg(0, 10))
    print(f"\nDone! {len(paths)} charts saved to {output_dir}/")


def cmd_test():
    """Run all tests."""
    import subprocess
    print("Running tests...")
    print("-" * 60)
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "tests/", "-v"],
        cwd=os.path.dirname(os.path.abspath(__file__)),
    )
    sys.exit(result.returncode)


COMMANDS = {
    "play": cmd_play,
    "match": cmd_match,
    "analyze": cmd_analyze,
    "test": cmd_test,
}


def main():
    verbose = "-v" in sys.argv or "--verbose" in sys.argv
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if len(sys.argv) < 2 or sys.argv[1] not in COMMANDS:
        print(__doc__)
        print("Available commands:")
        for name, func in COMMANDS.items():
            print(f"  {name:12s} {func.__doc__}")
        sys.exit(1)

    COMMANDS[sys.argv[1]]()


if __name__ == "__main__":
    main()
