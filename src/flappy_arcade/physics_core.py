"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from typing import Iterable

from .data_models import Bird, GameConfig, Pipe


def overlaps(a, b) -> bool:
    """
    Axis-aligned bounding-box test on anything with x, y, width and height.
    Rectangles that only share an edge do not overlap.
    """
    return (
        a.x < b.x + b.width and
        a.x + a.width > b.x and
        a.y < b.y + b.height and
        a.y + a.height > b.y
    )


class PhysicsCore:
    """
    Shared deterministic physics: gravity, fall cap, ceiling clamp and flap.
    """

    def __init__(self, config: GameConfig):
        self.config = config

    def apply_gravity_and_movement(self, bird: Bird) -> Bird:
        """
        Advances the bird by one tick. Mutates and returns the bird.
        """
        bird.velocity = min(bird.velocity + self.config.gravity, self.config.max_fall)
        bird.y = max(bird.y + bird.velocity, 0)
        return bird

    def flap(self, bird: Bird) -> Bird:
        """Sets the instantaneous velocity of a flap, replacing the current one."""
        bird.velocity = self.config.flap_impulse
        return bird

    def hits_ground(self, bird: Bird) -> bool:
        return bird.y + bird.height >= self.config.game_height

    def check_collision(self, bird: Bird, pipes: Iterable[Pipe]) -> bool:
        """Checks for collisions with any pipe."""
        return any(overlaps(bird, pipe) for pipe in pipes)
