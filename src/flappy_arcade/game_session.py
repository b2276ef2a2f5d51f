"""
game_session.py: Owns the state of one play session and exposes the
operations the driver calls: reset, flap, tick, spawn and render.
"""

import logging
import random
from typing import Optional, Protocol

from .data_models import Bird, GameConfig, GameState, Pipe
from .score_store import MemoryScoreStore, ScoreStore
from .simulation import SimulationEngine

logger = logging.getLogger(__name__)


class RenderSurface(Protocol):
    """Anything that can draw the game. The session never draws directly."""

    def draw_pipe(self, pipe: Pipe) -> None: ...

    def draw_bird(self, bird: Bird) -> None: ...

    def draw_hud(self, score: int, best: int, over: bool) -> None: ...


class GameSession:
    """
    Running/Over state machine around a single GameState.

    The only transition is Running -> Over (ground or pipe contact); reset()
    is the only way back.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        store: Optional[ScoreStore] = None,
        seed: Optional[int] = None,
    ):
        self.config = config if config is not None else GameConfig()
        self.store = store if store is not None else MemoryScoreStore()
        self.engine = SimulationEngine(self.config, rng=random.Random(seed), end_game=self._on_collision)
        self.state = GameState(bird=self._new_bird(), best=self.store.load())

    def _new_bird(self) -> Bird:
        return Bird(x=self.config.bird_start_x, y=self.config.bird_start_y,
                    width=self.config.bird_width, height=self.config.bird_height)

    # --- read-only views for the driver ---

    @property
    def bird(self) -> Bird:
        return self.state.bird

    @property
    def pipes(self):
        return self.state.pipes

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def best(self) -> int:
        return self.state.best

    @property
    def over(self) -> bool:
        return self.state.over

    # --- operations ---

    def reset(self):
        """Starts a fresh round. The best score is kept."""
        bird = self.state.bird
        bird.x = self.config.bird_start_x
        bird.y = self.config.bird_start_y
        bird.velocity = 0.0
        self.state.pipes.clear()
        self.state.score = 0
        self.state.over = False

    start = reset

    def flap(self):
        """
        Applies the flap impulse. After game over the same input first
        restarts the round, so the new round begins with an upward flap.
        """
        if self.state.over:
            self.reset()
        self.engine.flap(self.state.bird)

    restart_and_flap = flap

    def tick(self):
        self.engine.step(self.state)

    def spawn_pipes(self):
        return self.engine.spawn_pair(self.state)

    def end_game(self):
        """Moves to Over. Only the first call per round has any effect."""
        if self.state.over:
            return
        self.state.over = True

        if self.state.score > self.state.best:
            self.state.best = self.state.score
            self.store.save(self.state.best)
        logger.info("Round over: score %d, best %d", self.state.score, self.state.best)

    def _on_collision(self, state: GameState):
        self.end_game()

    def render(self, surface: RenderSurface):
        """Sends draw requests for the current frame, including the frozen game-over frame."""
        for pipe in self.state.pipes:
            surface.draw_pipe(pipe)
        surface.draw_bird(self.state.bird)
        surface.draw_hud(self.state.score, self.state.best, self.state.over)
