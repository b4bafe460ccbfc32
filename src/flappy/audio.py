"""
audio.py: Fire-and-forget sound effects driven by engine events.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional

import pygame

from .constants import ASSETS_DIR, FLAP_SOUND, HIT_SOUND
from .data_models import Flapped, Collided

logger = logging.getLogger(__name__)


def default_sounds(assets_dir: str = ASSETS_DIR) -> Dict[type, Path]:
    root = Path(assets_dir)
    return {
        Flapped: root / FLAP_SOUND,
        Collided: root / HIT_SOUND,
    }


class AudioPlayer:
    """
    Plays the sound mapped to each event type. A failing mixer or sound file
    is logged and otherwise ignored.
    """

    def __init__(self, sounds: Dict[type, Path], enabled: bool = True):
        self.sounds = sounds
        self.enabled = enabled
        self._cache: Dict[Path, pygame.mixer.Sound] = {}

        if self.enabled:
            try:
                pygame.mixer.init()
            except pygame.error as e:
                logger.warning("Audio disabled, mixer unavailable: %s", e)
                self.enabled = False

    def play(self, path: Path) -> Optional[pygame.mixer.Sound]:
        if not self.enabled:
            return None
        try:
            sound = self._cache.get(path)
            if sound is None:
                sound = pygame.mixer.Sound(str(path))
                self._cache[path] = sound
            sound.play()
            return sound
        except (pygame.error, OSError) as e:
            logger.warning("Sound failed: %s (%s)", path, e)
            return None

    def handle(self, events: Iterable[object]):
        for event in events:
            path = self.sounds.get(type(event))
            if path is not None:
                self.play(path)
