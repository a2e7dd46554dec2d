# Area: Shared
"""
mindforge._shared.logging_config — Structured logging setup
============================================================

Configures dual logging: terminal (colored) + file (JSON).
Quiet terminal mode suppresses terminal logs while the game screen
is shown; the file log keeps everything.
"""

from __future__ import annotations
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..errors import QuestionGenerationError

# Package logger
logger = logging.getLogger("mindforge")

# Flag to control terminal output while the game screen is active
_quiet_terminal_enabled = False


class QuietTerminalFilter(logging.Filter):
    """Filter that suppresses terminal logs when quiet mode is enabled.

    While a game is running the screen belongs to the game display;
    log records still reach the file handler.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        return not _quiet_terminal_enabled


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        failure_kind = getattr(record, "failure_kind", None)
        if failure_kind:
            log_data["failure_kind"] = failure_kind
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(
    log_file_path: Optional[str] = "mindforge.log",
    level: int = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str or None
        Path to the log file. Defaults to 'mindforge.log' in current dir.
        None disables the file handler.
    level : int
        Logging level. Defaults to INFO.
    """
    pkg_logger = logging.getLogger("mindforge")
    pkg_logger.setLevel(level)

    # Remove existing handlers
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    # Terminal handler with colors
    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    terminal_handler.addFilter(QuietTerminalFilter())
    pkg_logger.addHandler(terminal_handler)

    # File handler with JSON
    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def log_generation_failure(
    error: "QuestionGenerationError",
    level: Optional[int] = None,
) -> None:
    """
    Log a question generation failure in the structured format.

    Parameters
    ----------
    error : QuestionGenerationError
        The failure that made the provider serve a fallback.
    level : int, optional
        The level the question was requested for.
    """
    logger.warning(
        f"Question generation failed: {error.__class__.__name__}: {error.message}",
        extra={"failure_kind": error.kind.value},
    )
    logger.debug(error.format_error_log(level))


def enable_quiet_terminal() -> None:
    """Suppress terminal log output (file logging is unchanged)."""
    global _quiet_terminal_enabled
    _quiet_terminal_enabled = True


def disable_quiet_terminal() -> None:
    """Restore terminal log output."""
    global _quiet_terminal_enabled
    _quiet_terminal_enabled = False


def is_quiet_terminal_enabled() -> bool:
    """Check if quiet terminal mode is enabled."""
    return _quiet_terminal_enabled
