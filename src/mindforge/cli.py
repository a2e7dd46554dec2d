# Area: Shared
"""
mindforge.cli — Command-line interface
=======================================

Provides the CLI entry point for playing MindForge in a terminal.

Usage:
    mindforge                           # Play with the Anthropic API
    mindforge --demo                    # Play offline with bundled puzzles
    python -m mindforge --config config.json

The API key is read from ANTHROPIC_API_KEY (environment or .env file)
or from the "api_key" config key. Without one the game still starts
and shows a fallback question with a configuration advisory.

Demo mode can be enabled via:
    1. CLI flag: --demo
    2. Config key: demo_mode: true
    3. Environment variable: DEMO_MODE=true
"""

import argparse
import logging
import sys
from typing import Any, Dict, Optional, Sequence

from dotenv import load_dotenv

from ._config import load_config, validate_config
from ._engine.lifecycle import QuestionLifecycle
from ._provider.client import AnthropicClient, BaseLLMClient, DemoLLMClient
from ._provider.provider import QuestionProvider
from ._shared.highscore_store import HighScoreStore
from ._shared.logging_config import setup_logging
from .runner import GameRunner

logger = logging.getLogger("mindforge")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="mindforge",
        description="MindForge - endless AI-generated logic puzzles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  mindforge
  mindforge --demo
  mindforge --config config.json --db-path ~/.mindforge.db
  DEMO_MODE=true mindforge
        """,
    )

    parser.add_argument(
        "--demo",
        action="store_true",
        help="Play offline with the bundled puzzles (no API key needed)",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--db-path",
        type=str,
        help="SQLite file holding the high score (default: mindforge.db)",
    )

    parser.add_argument(
        "--model",
        type=str,
        help="Anthropic model used to generate puzzles",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Log file path (default: mindforge.log)",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log at DEBUG level",
    )

    return parser.parse_args(argv)


def apply_args(config: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """Overlay CLI flags on the loaded config."""
    config = dict(config)
    if args.demo:
        config["demo_mode"] = True
    if args.db_path:
        config["db_path"] = args.db_path
    if args.model:
        config["model"] = args.model
    if args.log_file:
        config["log_file"] = args.log_file
    if args.verbose:
        config["log_level"] = "DEBUG"
    return config


def build_llm_client(config: Dict[str, Any]) -> BaseLLMClient:
    """Get the LLM client for the configured mode."""
    if config.get("demo_mode"):
        logger.info("Demo mode: serving bundled puzzles")
        return DemoLLMClient()
    client = AnthropicClient(
        model=config["model"],
        max_tokens=config["max_tokens"],
        api_key=config.get("api_key"),
        timeout=config["timeout_seconds"],
    )
    if not client.is_available():
        logger.warning("ANTHROPIC_API_KEY is not set; fallback questions will be served")
    return client


def build_lifecycle(config: Dict[str, Any]) -> QuestionLifecycle:
    """Wire provider, high score store and lifecycle from config."""
    provider = QuestionProvider(build_llm_client(config))
    store = HighScoreStore(config["db_path"])
    return QuestionLifecycle(provider, store)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    load_dotenv()

    try:
        config = apply_args(load_config(args.config), args)
        validate_config(config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(
        log_file_path=config.get("log_file"),
        level=getattr(logging, str(config["log_level"]).upper()),
    )

    GameRunner(build_lifecycle(config)).run()
    return 0
