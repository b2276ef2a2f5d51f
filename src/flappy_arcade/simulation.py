"""
simulation.py: The per-frame world simulation and pipe spawner.
"""

import logging
import random
from typing import Callable, Optional, Tuple

from .data_models import GameConfig, GameState, Pipe, PipeKind
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


def _mark_over(state: GameState):
    state.over = True


class SimulationEngine(PhysicsCore):
    """
    Advances a GameState one tick at a time.
    Inherits physics and collision from PhysicsCore.

    ``end_game`` is called with the state whenever the bird touches the ground
    or a pipe; it is responsible for setting ``state.over``.
    """

    def __init__(
        self,
        config: GameConfig,
        rng: Optional[random.Random] = None,
        end_game: Optional[Callable[[GameState], None]] = None,
    ):
        super().__init__(config)
        self.rng = rng if rng is not None else random.Random()
        self.end_game = end_game if end_game is not None else _mark_over
        self.tick_count = 0

    def spawn_pair(self, state: GameState) -> Optional[Tuple[Pipe, Pipe]]:
        """Generates a new pipe pair off-screen to the right."""
        if state.over:
            return None

        cfg = self.config
        anchor_y = cfg.pipe_y - cfg.pipe_height / 4 - self.rng.random() * (cfg.pipe_height / 2)

        upper = Pipe(x=cfg.game_width, y=anchor_y, kind=PipeKind.UPPER,
                     width=cfg.pipe_width, height=cfg.pipe_height)
        lower = Pipe(x=cfg.game_width, y=anchor_y + cfg.pipe_height + cfg.gap_size,
                     kind=PipeKind.LOWER, width=cfg.pipe_width, height=cfg.pipe_height)
        state.pipes.append(upper)
        state.pipes.append(lower)

        logger.debug("Spawned pipe pair at tick %d, gap top %.1f", self.tick_count, upper.y + upper.height)
        return upper, lower

    def step(self, state: GameState):
        """
        The main simulation step. Mutates the bird, pipes and score.
        Does nothing once the round is over.
        """
        if state.over:
            return

        self.tick_count += 1
        bird = state.bird

        # 1. Gravity and movement
        self.apply_gravity_and_movement(bird)

        # 2. Ground
        if self.hits_ground(bird):
            bird.y = self.config.game_height - bird.height
            self.end_game(state)
            return

        # 3. Move pipes; score once per pair, on the upper pipe
        for pipe in state.pipes:
            pipe.x -= self.config.scroll_speed
            if pipe.kind is PipeKind.UPPER and not pipe.passed and pipe.x + pipe.width < bird.x:
                pipe.passed = True
                state.score += 1

        # 4. Pipe collisions
        if self.check_collision(bird, state.pipes):
            self.end_game(state)

        # 5. Drop pipes that left the screen
        self.prune_pipes(state)

    def prune_pipes(self, state: GameState) -> int:
        """
        Removes pipes from the front of the sequence while they are fully off
        the left edge. Spawn order is screen order, so the front is always the
        leftmost pipe. Returns how many were removed.
        """
        removed = 0
        while state.pipes and state.pipes[0].x + state.pipes[0].width < 0:
            state.pipes.pop(0)
            removed += 1
        return removed
