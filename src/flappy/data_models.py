"""
data_models.py: Data structures for the game state.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


@dataclass
class Vector2:
    x: float = 0.0
    y: float = 0.0

    def distance(self, other: "Vector2") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)


@dataclass
class Size:
    width: float = 0.0
    height: float = 0.0


@dataclass
class Entity:
    """Anything with a box: consumed by collision and geometry routines."""
    pos: Vector2 = field(default_factory=Vector2)
    size: Size = field(default_factory=Size)


@dataclass
class Hero(Entity):
    vel: Vector2 = field(default_factory=Vector2)


@dataclass
class Pipe(Entity):
    """One half of a top/bottom pair sharing an x-coordinate."""
    passed: bool = False


@dataclass
class Cloud:
    """A parallax cloud. Position is in screen space, size is its base radius."""
    pos: Vector2
    size: float
    speed: float
    opacity: float
    color: str
    puffiness: float
    stretch: float


@dataclass
class Building:
    """A skyline segment standing on the bottom edge of the viewport."""
    pos: Vector2
    size: Size
    color: str
    windows: bool
    antenna: bool
    speed: float


class GamePhase(str, Enum):
    TITLE = "title"
    INSTRUCTIONS = "instructions"
    PLAYING = "playing"
    GAMEOVER = "gameover"


@dataclass
class GameState:
    """
    The single mutable game object. Created once and soft-reset between
    plays so that every consumer can keep the same reference.
    """
    hero: Hero
    pipes: List[Pipe] = field(default_factory=list)
    clouds: List[Cloud] = field(default_factory=list)
    foreground_clouds: List[Cloud] = field(default_factory=list)
    skyline: List[Building] = field(default_factory=list)
    score: int = 0
    last_hole: Optional[float] = None
    state: GamePhase = GamePhase.TITLE
    is_game_over: bool = False
    pause: bool = False
    jump_requested: bool = False


@dataclass
class HighScore:
    score: int
    initials: str

    def to_dict(self):
        return {"score": self.score, "initials": self.initials}
