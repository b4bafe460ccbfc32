"""
score_store.py: Persistence for the single high-score value.
"""

import logging
from pathlib import Path
from typing import Union

from .constants import HIGHSCORE_FILE

logger = logging.getLogger(__name__)


class ScoreStore:
    """Reads and writes a plain-text file holding one integer."""
    def __init__(self, path: Union[str, Path] = HIGHSCORE_FILE):
        self.path = Path(path)

    def load(self) -> int:
        """Returns the stored high score, or 0 if the file is missing or malformed."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            logger.debug("No high score at %s (%s)", self.path, e)
            return 0
        except UnicodeDecodeError:
            logger.debug("Ignoring undecodable high score file %s", self.path)
            return 0

        lines = text.splitlines()
        try:
            return int(lines[0].strip()) if lines else 0
        except ValueError:
            logger.debug("Ignoring malformed high score file %s", self.path)
            return 0

    def save(self, score: int) -> bool:
        """Writes the score. Failures are logged, never raised."""
        try:
            self.path.write_text(f"{score}\n", encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save high score to %s: %s", self.path, e)
            return False
        logger.info("Saved high score %d", score)
        return True
