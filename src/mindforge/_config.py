# Area: Shared
"""
mindforge._config — Game configuration
=======================================

Configuration is layered, later layers winning:
1. DEFAULT_CONFIG
2. JSON config file (optional)
3. Environment variables (ENV_MAPPINGS)
4. CLI flags (applied by cli.py)
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from ._provider.client import DEFAULT_MAX_TOKENS, DEFAULT_MODEL, DEFAULT_TIMEOUT_SECONDS
from ._shared.database import DEFAULT_DB_PATH

logger = logging.getLogger("mindforge")

DEFAULT_CONFIG: Dict[str, Any] = {
    "api_key": None,
    "model": DEFAULT_MODEL,
    "max_tokens": DEFAULT_MAX_TOKENS,
    "timeout_seconds": DEFAULT_TIMEOUT_SECONDS,
    "db_path": DEFAULT_DB_PATH,
    "log_file": "mindforge.log",
    "log_level": "INFO",
    "demo_mode": False,
}

# Environment variable → config key
ENV_MAPPINGS = {
    "ANTHROPIC_API_KEY": "api_key",
    "MINDFORGE_MODEL": "model",
    "MINDFORGE_MAX_TOKENS": "max_tokens",
    "MINDFORGE_TIMEOUT_SECONDS": "timeout_seconds",
    "MINDFORGE_DB_PATH": "db_path",
    "MINDFORGE_LOG_FILE": "log_file",
    "MINDFORGE_LOG_LEVEL": "log_level",
    "DEMO_MODE": "demo_mode",
}

INT_KEYS = {"max_tokens"}
FLOAT_KEYS = {"timeout_seconds"}
BOOL_KEYS = {"demo_mode"}
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _coerce(key: str, value: str) -> Any:
    """Convert an environment string to the config key's type."""
    if key in INT_KEYS:
        return int(value)
    if key in FLOAT_KEYS:
        return float(value)
    if key in BOOL_KEYS:
        return value.strip().lower() in ("true", "1", "yes")
    return value


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load config from defaults, file and environment.

    Args:
        config_path: Optional path to a JSON config file

    Returns:
        Merged configuration dict

    Raises:
        ValueError: If the file is not a JSON object or an environment
            value cannot be converted
    """
    config = dict(DEFAULT_CONFIG)

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError(f"Config file {config_path} must contain a JSON object")
            config.update(data)
        else:
            logger.warning(f"Config file not found: {config_path}")

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            try:
                config[config_key] = _coerce(config_key, os.environ[env_key])
            except ValueError:
                raise ValueError(
                    f"Invalid value for {env_key}: {os.environ[env_key]!r}"
                ) from None

    return config


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate configuration values.

    Args:
        config: Configuration dict

    Raises:
        ValueError: If a value is invalid
    """
    errors = []
    max_tokens = config.get("max_tokens")
    if not isinstance(max_tokens, int) or isinstance(max_tokens, bool) or max_tokens <= 0:
        errors.append(f"max_tokens must be a positive integer, got {max_tokens!r}")
    timeout = config.get("timeout_seconds")
    if not isinstance(timeout, (int, float)) or isinstance(timeout, bool) or timeout <= 0:
        errors.append(f"timeout_seconds must be a positive number, got {timeout!r}")
    if not config.get("model"):
        errors.append("model must be set")
    if not config.get("db_path"):
        errors.append("db_path must be set")
    if str(config.get("log_level", "")).upper() not in LOG_LEVELS:
        errors.append(f"log_level must be one of {sorted(LOG_LEVELS)}")
    if errors:
        raise ValueError("Invalid configuration: " + "; ".join(errors))
