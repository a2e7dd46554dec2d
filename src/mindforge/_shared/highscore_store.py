# Area: Shared
"""
mindforge._shared.highscore_store — High score persistence
===========================================================

Reads and writes the single durable integer of the game: the high
score, stored as a decimal string in the "mindforge_highscore" slot.

Both operations are best effort. Storage problems are logged and
reported as "no stored value" / "nothing written"; they never reach
the game.
"""

import logging
import sqlite3

from .database import DEFAULT_DB_PATH, KeyValueRepository, init_database

logger = logging.getLogger("mindforge.highscore")

HIGH_SCORE_KEY = "mindforge_highscore"


class HighScoreStore:
    """Durable high score with a monotonic write policy."""

    def __init__(self, db_path: str = DEFAULT_DB_PATH):
        self.db_path = db_path
        self._repo = KeyValueRepository(db_path)
        try:
            init_database(db_path)
        except sqlite3.Error as e:
            logger.warning(f"High score storage unavailable at {db_path}: {e}")

    def read_high_score(self) -> int:
        """Return the stored high score, or 0 if absent or unparsable."""
        try:
            raw = self._repo.get(HIGH_SCORE_KEY)
        except sqlite3.Error as e:
            logger.warning(f"Could not read high score: {e}")
            return 0

        if raw is None:
            return 0
        try:
            value = int(raw.strip())
        except ValueError:
            logger.warning(f"Ignoring unparsable stored high score: {raw!r}")
            return 0
        return value if value >= 0 else 0

    def write_high_score(self, value: int) -> bool:
        """
        Store a new high score.

        Only writes when value exceeds the stored score, so the stored
        value never decreases.

        Returns:
            True if the value was written
        """
        if value < 0:
            return False
        if value <= self.read_high_score():
            return False
        try:
            self._repo.put(HIGH_SCORE_KEY, str(int(value)))
        except sqlite3.Error as e:
            logger.warning(f"Could not save high score {value}: {e}")
            return False
        logger.info(f"New high score saved: {value}")
        return True
