"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .constants import BIRD_X, RESPAWN_Y


class GameState(Enum):
    SPLASH = "splash"
    PLAY = "play"
    GAME_OVER = "game_over"


@dataclass
class Bird:
    """The player's bird. Only the vertical axis moves."""
    y: float = RESPAWN_Y
    velocity: float = 0.0
    frame: int = 0                  # Wing animation frame index
    x: int = BIRD_X


@dataclass
class Pipe:
    """A pipe pair; gap_y is the top edge of the opening."""
    x: float
    gap_y: float
    scored: bool = False


# -------- Intent events emitted by the engine --------

@dataclass(frozen=True)
class Flapped:
    pass


@dataclass(frozen=True)
class Collided:
    pass


@dataclass(frozen=True)
class NewHighScore:
    score: int


@dataclass
class Session:
    """Everything that changes while the game runs."""
    bird: Bird = field(default_factory=Bird)
    pipes: List[Pipe] = field(default_factory=list)
    score: int = 0
    high_score: int = 0
    frame_count: int = 0
    ground_x: float = 0.0
    state: GameState = GameState.SPLASH

    def reset(self):
        """Puts the bird back at the centre and clears the run. The high score
        and the ground scroll offset carry over."""
        self.bird.y = RESPAWN_Y
        self.bird.velocity = 0.0
        self.pipes.clear()
        self.score = 0
        self.frame_count = 0

    def to_render_state(self):
        """Prepares a minimal snapshot of what the renderer needs to draw."""
        return {
            "state": self.state,
            "bird_y": self.bird.y,
            "bird_frame": self.bird.frame,
            "pipes": [(p.x, p.gap_y) for p in self.pipes],
            "score": self.score,
            "high_score": self.high_score,
            "ground_x": self.ground_x,
        }
