"""
flappy_client.py

Pygame window, input mapping and rendering around the GameEngine.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

import pygame

from .audio import AudioPlayer
from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, GROUND_Y, GROUND_HEIGHT, BIRD_X, BIRD_SIZE,
    PIPE_WIDTH, PIPE_GAP, PIPE_SPRITE_HEIGHT, RENDER_FPS, ASSETS_DIR
)
from .data_models import GameState, NewHighScore
from .game_engine import GameEngine
from .score_store import ScoreStore

logger = logging.getLogger(__name__)

FLAP_KEYS = (pygame.K_SPACE, pygame.K_UP)

SPRITES = {
    "background": "sprites/background-day.png",
    "base": "sprites/base.png",
    "message": "sprites/message.png",
    "pipe": "sprites/pipe-green.png",
    "bird_up": "sprites/bluebird-upflap.png",
    "bird_mid": "sprites/bluebird-midflap.png",
    "bird_down": "sprites/bluebird-downflap.png",
}


def load_sprites(assets_dir: str) -> Dict[str, Optional[pygame.Surface]]:
    """Loads every sprite it can find; missing ones map to None."""
    sprites: Dict[str, Optional[pygame.Surface]] = {}
    for name, rel in SPRITES.items():
        path = Path(assets_dir) / rel
        try:
            sprites[name] = pygame.image.load(str(path)).convert_alpha()
        except (pygame.error, OSError) as e:
            logger.warning("Sprite %s unavailable, drawing shapes instead: %s", path, e)
            sprites[name] = None
    return sprites


class FlappyClient:
    def __init__(self, engine: GameEngine, store: ScoreStore, audio: AudioPlayer,
                 assets_dir: str = ASSETS_DIR, fps: int = RENDER_FPS):
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Flappy Bird")

        self.engine = engine
        self.store = store
        self.audio = audio
        self.fps = fps
        self.clock = pygame.time.Clock()

        self.sprites = load_sprites(assets_dir)
        self._prepare_sprites()

        self.large_font = pygame.font.SysFont("Arial", 28)
        self.font = pygame.font.SysFont("Arial", 20)
        self.banner_font = pygame.font.SysFont("Arial", 26)

    def _prepare_sprites(self):
        """Scales loaded sprites to their on-screen sizes."""
        s = self.sprites
        if s["background"]:
            s["background"] = pygame.transform.scale(s["background"], (SCREEN_WIDTH, SCREEN_HEIGHT))
        if s["base"]:
            s["base"] = pygame.transform.scale(s["base"], (SCREEN_WIDTH * 2, GROUND_HEIGHT))
        if s["pipe"]:
            s["pipe"] = pygame.transform.scale(s["pipe"], (PIPE_WIDTH, PIPE_SPRITE_HEIGHT))
            s["pipe_flipped"] = pygame.transform.flip(s["pipe"], False, True)
        else:
            s["pipe_flipped"] = None
        self.bird_frames = [
            pygame.transform.scale(img, (BIRD_SIZE, BIRD_SIZE)) if img else None
            for img in (s["bird_up"], s["bird_mid"], s["bird_down"])
        ]

    def run(self):
        """The main client execution loop."""
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key in FLAP_KEYS:
                    self._dispatch(self.engine.flap())

            self._dispatch(self.engine.step())
            self._draw_game()
            self.clock.tick(self.fps)

        pygame.quit()

    def _dispatch(self, events: List[object]):
        """Hands engine events to audio and persistence."""
        if not events:
            return
        self.audio.handle(events)
        for event in events:
            if isinstance(event, NewHighScore):
                self.store.save(event.score)

    def _draw_game(self):
        """Renders the current session using Pygame."""
        frame = self.engine.session.to_render_state()
        screen = self.screen
        white = (255, 255, 255)
        s = self.sprites

        if s["background"]:
            screen.blit(s["background"], (0, 0))
        else:
            screen.fill((78, 192, 202))

        for x, gap_y in frame["pipes"]:
            self._draw_pipe(x, gap_y)

        bird_img = self.bird_frames[frame["bird_frame"]]
        if bird_img:
            screen.blit(bird_img, (BIRD_X, frame["bird_y"]))
        else:
            pygame.draw.rect(screen, (255, 220, 0), (BIRD_X, frame["bird_y"], BIRD_SIZE, BIRD_SIZE))

        if s["base"]:
            screen.blit(s["base"], (frame["ground_x"], GROUND_Y))
        else:
            pygame.draw.rect(screen, (222, 216, 149), (0, GROUND_Y, SCREEN_WIDTH, GROUND_HEIGHT))

        # HUD
        screen.blit(self.large_font.render(f"Score: {frame['score']}", True, white), (15, 20))
        screen.blit(self.font.render(f"High: {frame['high_score']}", True, white), (15, 55))

        if frame["state"] is GameState.SPLASH:
            if s["message"]:
                screen.blit(s["message"], ((SCREEN_WIDTH - s["message"].get_width()) // 2, 200))
            else:
                prompt = self.banner_font.render("Press SPACE to start", True, white)
                screen.blit(prompt, (SCREEN_WIDTH // 2 - prompt.get_width() // 2, 200))
        elif frame["state"] is GameState.GAME_OVER:
            over = self.banner_font.render("Game Over! Press SPACE", True, white)
            screen.blit(over, (SCREEN_WIDTH // 2 - over.get_width() // 2, SCREEN_HEIGHT // 2))

        pygame.display.flip()

    def _draw_pipe(self, x: float, gap_y: float):
        top_y = gap_y - PIPE_SPRITE_HEIGHT
        bottom_y = gap_y + PIPE_GAP
        if self.sprites["pipe"]:
            self.screen.blit(self.sprites["pipe_flipped"], (x, top_y))
            self.screen.blit(self.sprites["pipe"], (x, bottom_y))
        else:
            pipe_color = (0, 150, 0)
            pygame.draw.rect(self.screen, pipe_color, (x, 0, PIPE_WIDTH, gap_y))
            pygame.draw.rect(self.screen, pipe_color, (x, bottom_y, PIPE_WIDTH, GROUND_Y - bottom_y))
