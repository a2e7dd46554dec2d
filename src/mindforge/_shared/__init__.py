# Area: Shared
"""
Shared utilities: logging configuration and durable storage.
"""

from .logging_config import (
    setup_logging,
    log_generation_failure,
    enable_quiet_terminal,
    disable_quiet_terminal,
    is_quiet_terminal_enabled,
)
from .database import init_database, KeyValueRepository
from .highscore_store import HighScoreStore, HIGH_SCORE_KEY

__all__ = [
    "setup_logging",
    "log_generation_failure",
    "enable_quiet_terminal",
    "disable_quiet_terminal",
    "is_quiet_terminal_enabled",
    "init_database",
    "KeyValueRepository",
    "HighScoreStore",
    "HIGH_SCORE_KEY",
]
