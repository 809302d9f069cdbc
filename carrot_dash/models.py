"""Data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional

from .constants import START_DIRECTION, START_POSITION


class Position(NamedTuple):
    x: int
    y: int


class GamePhase(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    GAME_OVER = "gameOver"


class CollisionKind(Enum):
    WALL = "wall"
    SELF = "self"


@dataclass
class Creature:
    segments: list = field(default_factory=lambda: [Position(*START_POSITION)])
    direction: str = START_DIRECTION
    intent: Optional[str] = None

    def head(self):
        return self.segments[0] if self.segments else None


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    color: str
    life: int
    max_life: int

    @property
    def alpha(self) -> float:
        return max(0.0, self.life / self.max_life)


@dataclass
class Firework:
    x: float
    y: float
    color: str
    explode_at: float
    exploded: bool = False
    particles: list = field(default_factory=list)


@dataclass
class Progress:
    """Per-session counters. The high score survives restarts, nothing else does."""

    score: int = 0
    food_eaten: int = 0
    trigger_count: int = 0
    high_score: int = 0

    def reset(self):
        self.score = 0
        self.food_eaten = 0
        self.trigger_count = 0


# Read-only views handed to the renderer

@dataclass(frozen=True)
class ParticleView:
    x: float
    y: float
    color: str
    alpha: float


@dataclass(frozen=True)
class FireworkView:
    x: float
    y: float
    color: str
    exploded: bool
    particles: tuple = ()


@dataclass(frozen=True)
class Snapshot:
    phase: GamePhase
    segments: tuple
    direction: str
    food: Optional[Position]
    fireworks: tuple
    score: int
    food_eaten: int
    trigger_count: int
    high_score: int
    next_reward: int
    won: bool = False
