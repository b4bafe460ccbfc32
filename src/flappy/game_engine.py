"""
game_engine.py: The game state machine.

One handler per state runs each tick and one handler per state reacts to the
flap input. Handlers mutate the owned Session and return the intent events
(Flapped, Collided, NewHighScore) for the presentation layer to act on. The
engine itself never touches the screen, the speakers or the disk.
"""

import logging
import math
from typing import Callable, Dict, List, Optional, Tuple, Union

from .constants import (
    RESPAWN_Y, SCREEN_WIDTH, GROUND_Y, BIRD_SIZE, PIPE_SPEED,
    BOB_FREQUENCY, BOB_AMPLITUDE, BIRD_FRAME_COUNT
)
from .data_models import Session, GameState, Flapped, Collided, NewHighScore
from .physics_core import PhysicsCore
from .pipe_stream import PipeStream

logger = logging.getLogger(__name__)

Event = Union[Flapped, Collided, NewHighScore]

# (current state, trigger) -> next state
TRANSITIONS: Dict[Tuple[GameState, str], GameState] = {
    (GameState.SPLASH, "start"): GameState.PLAY,
    (GameState.PLAY, "collide"): GameState.GAME_OVER,
    (GameState.GAME_OVER, "restart"): GameState.SPLASH,
}


class GameEngine:
    """Owns a Session and advances it one tick at a time."""

    def __init__(self, session: Optional[Session] = None,
                 physics: Optional[PhysicsCore] = None,
                 pipe_stream: Optional[PipeStream] = None):
        self.session = session or Session()
        self.physics = physics or PhysicsCore()
        self.pipe_stream = pipe_stream or PipeStream()

        self._tick_handlers: Dict[GameState, Callable[[], List[Event]]] = {
            GameState.SPLASH: self._tick_splash,
            GameState.PLAY: self._tick_play,
            GameState.GAME_OVER: self._tick_game_over,
        }
        self._flap_handlers: Dict[GameState, Callable[[], List[Event]]] = {
            GameState.SPLASH: self._flap_splash,
            GameState.PLAY: self._flap_play,
            GameState.GAME_OVER: self._flap_game_over,
        }

    @property
    def state(self) -> GameState:
        return self.session.state

    def step(self) -> List[Event]:
        """Runs one frame for the current state."""
        return self._tick_handlers[self.session.state]()

    def flap(self) -> List[Event]:
        """Applies the single logical input; its effect depends on the state."""
        return self._flap_handlers[self.session.state]()

    def _transition(self, trigger: str):
        current = self.session.state
        try:
            target = TRANSITIONS[(current, trigger)]
        except KeyError:
            raise ValueError(f"No transition from {current.name} on {trigger!r}") from None
        logger.debug("%s -> %s (%s)", current.name, target.name, trigger)
        self.session.state = target

    # -------- Tick handlers --------

    def _tick_splash(self) -> List[Event]:
        s = self.session
        s.bird.y = RESPAWN_Y + math.sin(s.frame_count * BOB_FREQUENCY) * BOB_AMPLITUDE
        s.frame_count += 1
        s.bird.frame = (s.bird.frame + 1) % BIRD_FRAME_COUNT
        return []

    def _tick_play(self) -> List[Event]:
        s = self.session
        self.physics.step_bird(s.bird)
        s.frame_count += 1

        s.ground_x -= PIPE_SPEED
        if s.ground_x <= -SCREEN_WIDTH:
            s.ground_x = 0.0

        self.pipe_stream.step(s.pipes, s.frame_count)
        s.score += self.physics.update_score(s.pipes)

        if self.physics.check_collision(s.bird.y, s.pipes):
            return self._game_over()
        return []

    def _tick_game_over(self) -> List[Event]:
        bird = self.session.bird
        if not self.physics.is_grounded(bird.y):
            self.physics.step_bird(bird)
        if self.physics.is_grounded(bird.y):
            bird.y = GROUND_Y - BIRD_SIZE
            bird.velocity = 0.0
        return []

    def _game_over(self) -> List[Event]:
        s = self.session
        self._transition("collide")
        logger.info("Game over with score %d", s.score)
        events: List[Event] = [Collided()]
        if s.score > s.high_score:
            s.high_score = s.score
            events.append(NewHighScore(s.score))
        return events

    # -------- Flap handlers --------

    def _flap_splash(self) -> List[Event]:
        self.session.bird.velocity = 0.0
        self._transition("start")
        return []

    def _flap_play(self) -> List[Event]:
        self.physics.flap(self.session.bird)
        return [Flapped()]

    def _flap_game_over(self) -> List[Event]:
        if not self.physics.is_grounded(self.session.bird.y):
            return []
        self.session.reset()
        self._transition("restart")
        return []
