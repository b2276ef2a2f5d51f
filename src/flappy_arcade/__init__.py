"""
Flappy Arcade: a single-screen flappy game with a display-independent
simulation core.
"""

from .data_models import Bird, GameConfig, GameState, Pipe, PipeKind
from .game_session import GameSession, RenderSurface
from .physics_core import PhysicsCore, overlaps
from .score_store import MemoryScoreStore, ScoreStore, SqliteScoreStore
from .simulation import SimulationEngine

__all__ = [
    "Bird",
    "GameConfig",
    "GameSession",
    "GameState",
    "MemoryScoreStore",
    "PhysicsCore",
    "Pipe",
    "PipeKind",
    "RenderSurface",
    "ScoreStore",
    "SimulationEngine",
    "SqliteScoreStore",
    "overlaps",
]

__version__ = "1.0.0"
