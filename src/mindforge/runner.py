"""
mindforge.runner — Interactive game loop
=========================================

The GameRunner is the terminal front-end: it starts the lifecycle,
draws each screen, reads one command per prompt and forwards it as a
lifecycle action. It blocks until the player quits.

Usage
-----
    from mindforge import GameRunner, build_lifecycle, load_config

    lifecycle = build_lifecycle(load_config())
    GameRunner(lifecycle).run()
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, TextIO

from ._engine.enums import QuestionPhase
from ._engine.lifecycle import QuestionLifecycle
from ._shared.logging_config import disable_quiet_terminal, enable_quiet_terminal
from .display import option_for_key, render_screen, render_summary
from .types import GameState

logger = logging.getLogger("mindforge.runner")

QUIT_KEYS = {"Q", "QUIT", "EXIT"}
HINT_KEYS = {"H", "HINT"}
NEXT_KEYS = {"N", "NEXT", ""}


class GameRunner:
    """
    Plays one session in the terminal.

    Args:
        lifecycle: The session's question lifecycle
        input_fn: Reads one line from the player (defaults to input)
        output: Stream the screens are written to (defaults to stdout)
    """

    def __init__(
        self,
        lifecycle: QuestionLifecycle,
        input_fn: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
    ):
        self.lifecycle = lifecycle
        self._input = input_fn
        self._output = output or sys.stdout

    def run(self) -> GameState:
        """Play until the player quits; returns the final GameState."""
        enable_quiet_terminal()
        try:
            self._write("Forging your first puzzle...")
            self.lifecycle.start()
            while True:
                self._write(render_screen(self.lifecycle.view()))
                if not self.handle_command(self._input("> ")):
                    break
        except (EOFError, KeyboardInterrupt):
            # Ctrl+C at the prompt or during a model request
            logger.info("Session interrupted")
        finally:
            disable_quiet_terminal()

        state = self.lifecycle.game_state
        logger.info(
            f"Session ended: score={state.score} level={state.current_level} "
            f"high_score={state.high_score}"
        )
        self._write(render_summary(state))
        return state

    def handle_command(self, command: str) -> bool:
        """
        Apply one command. Returns False when the player quits.

        Commands that do not fit the current phase are ignored.
        """
        key = command.strip().upper()
        if key in QUIT_KEYS:
            return False

        phase = self.lifecycle.phase
        if phase == QuestionPhase.READY:
            if key in HINT_KEYS:
                self.lifecycle.toggle_hint()
                return True
            option = option_for_key(self.lifecycle.question, key)
            if option is None:
                self._write("Choose A, B, C or D (H for a hint, Q to quit).")
                return True
            self.lifecycle.select_option(option)
        elif phase == QuestionPhase.ANSWERED:
            if key in NEXT_KEYS:
                self._write("Forging the next puzzle...")
                self.lifecycle.advance()
            else:
                self._write("Press N (or Enter) for the next puzzle, Q to quit.")
        return True

    def _write(self, text: str) -> None:
        print(text, file=self._output)
