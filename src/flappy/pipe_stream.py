"""
pipe_stream.py: Spawns, scrolls and culls the pipe obstacles.
"""

import random
from dataclasses import dataclass, field
from typing import List

from .constants import (
    SCREEN_WIDTH, PIPE_WIDTH, PIPE_SPEED, PIPE_SPAWN_INTERVAL,
    PIPE_MARGIN, PIPE_GAP_RANGE
)
from .data_models import Pipe


@dataclass
class PipeStream:
    """
    Drives the pipe list owned by a session. All pipes share one speed, so
    spawn order stays equal to left-to-right order.
    """
    rng: random.Random = field(default_factory=random.Random)
    speed: float = PIPE_SPEED
    spawn_interval: int = PIPE_SPAWN_INTERVAL

    def spawn(self, pipes: List[Pipe]) -> Pipe:
        """Appends a new pipe at the right edge of the screen."""
        gap_y = PIPE_MARGIN + self.rng.randrange(PIPE_GAP_RANGE)
        pipe = Pipe(x=float(SCREEN_WIDTH), gap_y=float(gap_y))
        pipes.append(pipe)
        return pipe

    def advance(self, pipes: List[Pipe]):
        for pipe in pipes:
            pipe.x -= self.speed
        pipes[:] = [p for p in pipes if p.x + PIPE_WIDTH >= 0]

    def step(self, pipes: List[Pipe], frame_count: int):
        """One tick: spawn on the interval, then scroll everything."""
        if frame_count % self.spawn_interval == 0:
            self.spawn(pipes)
        self.advance(pipes)
