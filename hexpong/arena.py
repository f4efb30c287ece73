"""Hexagonal arena geometry and gameplay constants.

Coordinates are canvas pixels (y grows downward), speeds are pixels per frame,
angles are radians measured from the arena center with atan2(dy, dx).
An angle of pi/2 therefore points at the bottom side, where the player sits.
"""

import math

# Arena
CENTER_X = 400.0
CENTER_Y = 300.0
WALL_RADIUS = 250.0  # hexagon outline
PLAY_RADIUS = 240.0  # paddles ride this circle, ball leaving it scores

# Ball
BALL_RADIUS = 8.0
SERVE_SPEED = 4.0
HIT_SPEED = 6.0
SERVE_DISTANCE = 0.9  # fraction of PLAY_RADIUS for a side serve
SERVE_JITTER = math.pi / 3  # full width, i.e. +/- 30 degrees

# Paddles
PADDLE_REACH = 40.0  # half of the 80px paddle, used for hit detection
PADDLE_DRAW_RADIUS = 10.0
GUARD_HALF_ARC = math.pi / 6  # each paddle owns guard +/- 30 degrees
REACT_ARC = math.pi / 3  # opponents ignore balls further than 60 degrees away

PLAYER_GUARD_ANGLE = math.pi / 2
OPPONENT_GUARD_ANGLES = (
    0.0,
    math.pi / 3,
    math.pi / 2,
    2 * math.pi / 3,
    math.pi,
)

# Pointer input: a screen x is turned into atan2(POINTER_DEPTH, x - CENTER_X)
POINTER_DEPTH = 200.0

# Behaviour tuning
STEALTH_RANGE = 150.0
CHAOS_PROBABILITY = 0.1
BALANCED_BALL_WEIGHT = 0.7

# Scoring
WINNING_SCORE = 15


def wrap_angle(angle: float) -> float:
    """Wrap an angle into [-pi, pi)."""
    return (angle + math.pi) % (2 * math.pi) - math.pi


def angle_between(a: float, b: float) -> float:
    """Shortest signed difference a - b."""
    return wrap_angle(a - b)


def clamp_to_arc(angle: float, center: float, half_width: float = GUARD_HALF_ARC) -> float:
    """Clamp ``angle`` into center +/- half_width, measured the short way round."""
    offset = angle_between(angle, center)
    offset = max(-half_width, min(half_width, offset))
    return center + offset


def angle_from_center(x: float, y: float) -> float:
    return math.atan2(y - CENTER_Y, x - CENTER_X)


def distance_from_center(x: float, y: float) -> float:
    return math.hypot(x - CENTER_X, y - CENTER_Y)


def point_on_circle(angle: float, radius: float = PLAY_RADIUS) -> tuple[float, float]:
    return (
        CENTER_X + radius * math.cos(angle),
        CENTER_Y + radius * math.sin(angle),
    )


def hexagon_vertices(radius: float = WALL_RADIUS) -> list[tuple[float, float]]:
    """Six wall vertices, flat side facing each axis, starting at -30 degrees."""
    return [point_on_circle(math.pi / 3 * i - math.pi / 6, radius) for i in range(6)]


HEXAGON = tuple(hexagon_vertices())
