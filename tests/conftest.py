"""
Shared fixtures. pygame runs headless for the client tests.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from flappy_arcade.data_models import GameConfig
from flappy_arcade.game_session import GameSession
from flappy_arcade.score_store import MemoryScoreStore


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def store():
    return MemoryScoreStore()


@pytest.fixture
def session(config, store):
    return GameSession(config=config, store=store, seed=42)


class RecordingSurface:
    """Render surface that records draw requests in order."""

    def __init__(self):
        self.calls = []

    def draw_pipe(self, pipe):
        self.calls.append(("pipe", pipe))

    def draw_bird(self, bird):
        self.calls.append(("bird", bird))

    def draw_hud(self, score, best, over):
        self.calls.append(("hud", (score, best, over)))


@pytest.fixture
def surface():
    return RecordingSurface()
