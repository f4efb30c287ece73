"""Core data types for the hexagon pong simulation."""

import math
from dataclasses import dataclass, field
from typing import Optional

from hexpong import arena

# Paddle ids: opponents are 0-4, the human player has its own id.
PLAYER = -1

# Match phases
NOT_STARTED = "not_started"
ACTIVE = "active"
OVER = "over"

PHASES = (NOT_STARTED, ACTIVE, OVER)


@dataclass
class Vec2:
    """2D vector for positions and velocities."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vec2":
        return self.__mul__(scalar)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def copy(self) -> "Vec2":
        return Vec2(self.x, self.y)

    @classmethod
    def polar(cls, angle: float, length: float) -> "Vec2":
        return cls(length * math.cos(angle), length * math.sin(angle))


@dataclass
class Ball:
    """The single ball in play."""
    pos: Vec2 = field(default_factory=lambda: Vec2(arena.CENTER_X, arena.CENTER_Y))
    vel: Vec2 = field(default_factory=Vec2)
    radius: float = arena.BALL_RADIUS

    def copy(self) -> "Ball":
        return Ball(pos=self.pos.copy(), vel=self.vel.copy(), radius=self.radius)


@dataclass
class Paddle:
    """A paddle riding the play circle inside its guarded arc.

    The angle is the source of truth; the position is derived from it so the
    paddle can never leave the circle.
    """
    paddle_id: int
    guard_angle: float
    angle: float
    speed: float = 0.0  # arc length per frame, opponents only
    behavior: Optional[str] = None  # None for the player

    @property
    def pos(self) -> Vec2:
        x, y = arena.point_on_circle(self.angle)
        return Vec2(x, y)

    @property
    def max_turn(self) -> float:
        """Largest angular step per frame, in radians."""
        return self.speed / arena.PLAY_RADIUS

    def copy(self) -> "Paddle":
        return Paddle(
            paddle_id=self.paddle_id,
            guard_angle=self.guard_angle,
            angle=self.angle,
            speed=self.speed,
            behavior=self.behavior,
        )


@dataclass
class Score:
    """Player score plus one score per opponent, in opponent order."""
    player: int = 0
    opponents: list = field(default_factory=lambda: [0] * len(arena.OPPONENT_GUARD_ANGLES))

    def as_tuple(self) -> tuple[int, tuple[int, ...]]:
        return self.player, tuple(self.opponents)

    def highest(self) -> int:
        return max([self.player, *self.opponents])


@dataclass
class Match:
    """Current match state."""
    phase: str = NOT_STARTED  # one of PHASES
    score: Score = field(default_factory=Score)
    last_touch: Optional[int] = None  # PLAYER, opponent index, or None
    last_scored: Optional[int] = None  # side scored against; None before the first point
    history: list = field(default_factory=list)


@dataclass
class PaddleHit:
    """The ball was redirected by a paddle this frame."""
    paddle_id: int


@dataclass
class BoundaryExit:
    """The ball left the play circle through the given side."""
    side: int  # PLAYER or opponent index
    angle: float


@dataclass
class PaddleView:
    """Read-only paddle data for rendering."""
    paddle_id: int
    x: float
    y: float
    color: tuple[int, int, int]
    behavior: Optional[str]


@dataclass
class Snapshot:
    """Everything a renderer needs for one frame."""
    ball: tuple[float, float]
    paddles: list  # list[PaddleView], opponents first, then the player
    hexagon: tuple
    score: tuple[int, tuple[int, ...]]
    phase: str
    time: int
