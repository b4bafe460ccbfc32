"""
physics_core.py: The deterministic kinematic functions, collision and scoring logic.
"""

from typing import List

from .constants import (
    GRAVITY, JUMP_IMPULSE, GROUND_Y, BIRD_X, BIRD_SIZE, PIPE_WIDTH, PIPE_GAP
)
from .data_models import Bird, Pipe


class PhysicsCore:
    """
    Stateless physics shared by the game engine's per-state handlers.
    """

    def __init__(self, gravity: float = GRAVITY, jump_impulse: float = JUMP_IMPULSE):
        self.gravity = gravity
        self.jump_impulse = jump_impulse

    def apply_gravity_and_movement(self, y: float, velocity: float) -> tuple[float, float]:
        """
        Advances one tick: velocity first, then position from the new velocity.
        """
        velocity += self.gravity
        y += velocity
        return y, velocity

    def step_bird(self, bird: Bird):
        bird.y, bird.velocity = self.apply_gravity_and_movement(bird.y, bird.velocity)

    def flap(self, bird: Bird):
        """Replaces the bird's velocity with the jump impulse."""
        bird.velocity = self.jump_impulse

    def hits_pipe(self, y: float, pipe: Pipe) -> bool:
        if not (BIRD_X + BIRD_SIZE > pipe.x and BIRD_X < pipe.x + PIPE_WIDTH):
            return False
        # Gap edges are inclusive
        return y < pipe.gap_y or y + BIRD_SIZE > pipe.gap_y + PIPE_GAP

    def hits_bounds(self, y: float) -> bool:
        return y + BIRD_SIZE >= GROUND_Y or y < 0

    def check_collision(self, y: float, pipes: List[Pipe]) -> bool:
        """Checks for collisions with pipes, then the ground or ceiling."""
        if any(self.hits_pipe(y, pipe) for pipe in pipes):
            return True
        return self.hits_bounds(y)

    def is_grounded(self, y: float) -> bool:
        return y + BIRD_SIZE >= GROUND_Y

    def update_score(self, pipes: List[Pipe]) -> int:
        """Marks pipes whose trailing edge passed the bird. Returns how many."""
        passed = 0
        for pipe in pipes:
            if not pipe.scored and pipe.x + PIPE_WIDTH < BIRD_X:
                pipe.scored = True
                passed += 1
        return passed
