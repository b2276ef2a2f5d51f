"""
client.py

pygame driver: frame clock, spawn timer, keyboard/mouse/touch input and
rendering of a GameSession.
"""

import logging

import pygame

from .constants import (
    SKY_COLOR, PIPE_COLOR, BIRD_COLOR, TEXT_COLOR
)
from .data_models import Bird, Pipe
from .game_session import GameSession

logger = logging.getLogger(__name__)

FLAP_KEYS = (pygame.K_SPACE, pygame.K_UP, pygame.K_x)


# ----------------- Render surface -----------------

class PygameSurface:
    """Draws the session's requests onto a pygame surface in logical pixels."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self.large_font = pygame.font.Font(None, 54)
        self.font = pygame.font.Font(None, 28)

    def clear(self):
        self.screen.fill(SKY_COLOR)

    def draw_pipe(self, pipe: Pipe):
        pygame.draw.rect(self.screen, PIPE_COLOR, (pipe.x, pipe.y, pipe.width, pipe.height))

    def draw_bird(self, bird: Bird):
        pygame.draw.rect(self.screen, BIRD_COLOR, (bird.x, bird.y, bird.width, bird.height))

    def draw_hud(self, score: int, best: int, over: bool):
        width, height = self.screen.get_size()

        score_text = self.font.render(f"Score: {score}", True, TEXT_COLOR)
        self.screen.blit(score_text, (10, 10))
        best_text = self.font.render(f"Best: {best}", True, TEXT_COLOR)
        self.screen.blit(best_text, (width - best_text.get_width() - 10, 10))

        if over:
            over_text = self.large_font.render("GAME OVER", True, TEXT_COLOR)
            self.screen.blit(over_text, (width // 2 - over_text.get_width() // 2, height // 2 - 20))
            hint = self.font.render("Space / Click = Restart", True, TEXT_COLOR)
            self.screen.blit(hint, (width // 2 - hint.get_width() // 2, height // 2 + 30))


# ----------------- Game Client (rendering / input / timing) -----------------

class FlappyClient:
    def __init__(self, session: GameSession, scaled: bool = False):
        pygame.init()
        self.session = session
        config = session.config

        flags = pygame.SCALED if scaled else 0
        self.screen = pygame.display.set_mode((int(config.game_width), int(config.game_height)), flags)
        pygame.display.set_caption("Flappy Arcade")
        self.surface = PygameSurface(self.screen)

        # Time Management
        self.clock = pygame.time.Clock()
        self.spawn_timer = 0.0
        self.running = False

    def run(self):
        """The main client execution loop."""
        logger.info("Starting game loop at %d fps", self.session.config.fps)
        self.running = True
        try:
            while self.running:
                delta_time = self.clock.tick(self.session.config.fps) / 1000.0

                for event in pygame.event.get():
                    self.handle_event(event)

                self.step_frame(delta_time)
        finally:
            logger.info("Game loop stopped. Best score: %d", self.session.best)
            pygame.quit()

    def handle_event(self, event: pygame.event.Event):
        """Maps one pygame event onto the session."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key in FLAP_KEYS:
                self.session.flap()
            elif event.key == pygame.K_r:
                self.session.reset()
        elif event.type == pygame.MOUSEBUTTONDOWN:
            # Touches also arrive as FINGERDOWN
            if not getattr(event, "touch", False):
                self.session.flap()
        elif event.type == pygame.FINGERDOWN:
            self.session.flap()

    def advance_spawn_timer(self, delta_time: float) -> int:
        """
        Spawns one pipe pair per elapsed spawn interval, independently of
        the frame rate. Returns how many intervals elapsed.
        """
        interval = self.session.config.spawn_interval
        self.spawn_timer += delta_time
        spawned = 0
        while self.spawn_timer >= interval:
            self.spawn_timer -= interval
            self.session.spawn_pipes()
            spawned += 1
        return spawned

    def step_frame(self, delta_time: float):
        """One display frame: spawn timer, simulation tick, render."""
        self.advance_spawn_timer(delta_time)
        self.session.tick()
        self._draw_game()

    def _draw_game(self):
        self.surface.clear()
        self.session.render(self.surface)
        pygame.display.flip()
