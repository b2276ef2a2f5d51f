"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .constants import (
    GAME_WIDTH, GAME_HEIGHT, BIRD_WIDTH, BIRD_HEIGHT, PIPE_WIDTH, PIPE_HEIGHT,
    PIPE_Y, PIPE_SPEED, PIPE_SPAWN_INTERVAL, GRAVITY, MAX_FALL_VELOCITY,
    JUMP_IMPULSE, RENDER_FPS
)


@dataclass(frozen=True)
class GameConfig:
    """Immutable world and physics settings for one session."""
    game_width: float = GAME_WIDTH
    game_height: float = GAME_HEIGHT
    bird_width: float = BIRD_WIDTH
    bird_height: float = BIRD_HEIGHT
    pipe_width: float = PIPE_WIDTH
    pipe_height: float = PIPE_HEIGHT
    pipe_y: float = PIPE_Y
    gravity: float = GRAVITY
    max_fall: float = MAX_FALL_VELOCITY
    flap_impulse: float = JUMP_IMPULSE
    scroll_speed: float = PIPE_SPEED
    spawn_interval: float = PIPE_SPAWN_INTERVAL
    fps: int = RENDER_FPS

    def __post_init__(self):
        for name in ("game_width", "game_height", "bird_width", "bird_height",
                     "pipe_width", "pipe_height", "spawn_interval", "fps"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")
        if self.gravity < 0:
            raise ValueError(f"gravity must not be negative, got {self.gravity!r}")
        if self.scroll_speed < 0:
            raise ValueError(f"scroll_speed must not be negative, got {self.scroll_speed!r}")

    @property
    def bird_start_x(self) -> float:
        return self.game_width / 8

    @property
    def bird_start_y(self) -> float:
        return self.game_height / 2

    @property
    def gap_size(self) -> float:
        """Vertical opening between the two pipes of a pair."""
        return self.game_height / 4


class PipeKind(Enum):
    UPPER = "upper"
    LOWER = "lower"


@dataclass
class Bird:
    """The player-controlled falling rectangle."""
    x: float
    y: float
    width: float = BIRD_WIDTH
    height: float = BIRD_HEIGHT
    velocity: float = 0.0


@dataclass
class Pipe:
    """One half of a scrolling pipe pair."""
    x: float
    y: float
    kind: PipeKind
    width: float = PIPE_WIDTH
    height: float = PIPE_HEIGHT
    passed: bool = False               # Has this pipe already been scored?


@dataclass
class GameState:
    """Mutable state of one play session, owned by the GameSession."""
    bird: Bird
    pipes: List[Pipe] = field(default_factory=list)
    score: int = 0
    best: int = 0
    over: bool = False
