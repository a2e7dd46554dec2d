# Area: Engine
"""
mindforge._engine.lifecycle — Question Lifecycle
=================================================

Owns the GameState and the current question, and drives them through
the phases IDLE → LOADING → READY → ANSWERED → LOADING → ...

Actions made in the wrong phase are rejected (return False) and leave
everything unchanged. In particular a question can be answered at most
once, and nothing can be answered while a question is loading.

When the provider fails, the lifecycle substitutes the fallback
question and raises the error flag; the game carries on regardless.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .._provider.fallback import fallback_for
from .._provider.provider import QuestionProvider
from .._shared.highscore_store import HighScoreStore
from ..types import AnswerAttempt, FailureKind, GameState, Question
from .enums import LifecycleEvent, QuestionPhase
from .scoring import apply_answer, points_for_correct_answer
from .state_machine import QuestionStateMachine

logger = logging.getLogger("mindforge.engine.lifecycle")

START_LEVEL = 1

ADVISORIES = {
    FailureKind.CONFIGURATION: (
        "Question service is not configured (missing API key). "
        "Showing a fallback question."
    ),
}
DEFAULT_ADVISORY = "Question service error. Showing a fallback question."


@dataclass(frozen=True)
class LifecycleView:
    """Everything the presentation layer needs to draw one screen."""

    phase: QuestionPhase
    question: Optional[Question]
    is_loading: bool
    has_error: bool
    failure_reason: Optional[str]
    advisory: Optional[str]
    game_state: GameState
    selected_option: Optional[str]
    answered_correctly: Optional[bool]
    points_awarded: int
    hint_shown: bool


class QuestionLifecycle:
    """
    Question lifecycle for one game session.

    Args:
        provider: Source of questions
        high_score_store: Durable high score; read once here, written
            whenever an answer raises the high score
    """

    def __init__(self, provider: QuestionProvider, high_score_store: HighScoreStore):
        self._provider = provider
        self._store = high_score_store
        self.state_machine = QuestionStateMachine()

        self._game_state = GameState(
            current_level=START_LEVEL,
            high_score=high_score_store.read_high_score(),
        )
        self._question: Optional[Question] = None
        self._failure: Optional[FailureKind] = None
        self._failure_reason: Optional[str] = None
        self._selected_option: Optional[str] = None
        self._answered_correctly: Optional[bool] = None
        self._points_awarded = 0
        self._hint_shown = False

    # ── Read-only state ────────────────────────────────────────

    @property
    def phase(self) -> QuestionPhase:
        return self.state_machine.current_phase

    @property
    def game_state(self) -> GameState:
        return self._game_state

    @property
    def question(self) -> Optional[Question]:
        return self._question

    @property
    def is_loading(self) -> bool:
        return self.phase == QuestionPhase.LOADING

    @property
    def has_error(self) -> bool:
        return self._failure is not None

    def view(self) -> LifecycleView:
        """Snapshot for the presentation layer."""
        advisory = None
        if self._failure is not None:
            advisory = ADVISORIES.get(self._failure, DEFAULT_ADVISORY)
        return LifecycleView(
            phase=self.phase,
            question=self._question,
            is_loading=self.is_loading,
            has_error=self.has_error,
            failure_reason=self._failure_reason,
            advisory=advisory,
            game_state=self._game_state,
            selected_option=self._selected_option,
            answered_correctly=self._answered_correctly,
            points_awarded=self._points_awarded,
            hint_shown=self._hint_shown,
        )

    # ── Actions ────────────────────────────────────────────────

    def start(self) -> bool:
        """Load the first question. Returns False if already started."""
        if self.phase != QuestionPhase.IDLE:
            logger.debug(f"start() ignored in {self.phase.value}")
            return False
        self._load(START_LEVEL)
        return True

    def select_option(self, option: str) -> bool:
        """
        Answer the current question.

        Only the first selection on a READY question counts; anything
        else is ignored and returns False.
        """
        if not self.state_machine.can_transition(LifecycleEvent.OPTION_SELECTED):
            logger.debug(f"select_option() ignored in {self.phase.value}")
            return False
        if option not in self._question.options:
            logger.warning(f"select_option() ignored, not an option: {option!r}")
            return False

        attempt = AnswerAttempt(question=self._question, selected_option=option)
        correct = attempt.is_correct
        previous = self._game_state

        self._points_awarded = points_for_correct_answer(previous) if correct else 0
        self._game_state = apply_answer(previous, correct)
        self._selected_option = option
        self._answered_correctly = correct
        self.state_machine.transition(LifecycleEvent.OPTION_SELECTED)

        logger.info(
            f"Level {previous.current_level} answered "
            f"{'correctly' if correct else 'incorrectly'}: "
            f"score={self._game_state.score} streak={self._game_state.streak}"
        )

        if self._game_state.high_score > previous.high_score:
            self._store.write_high_score(self._game_state.high_score)
        return True

    def advance(self) -> bool:
        """Move on to the next question at the current level."""
        if self.phase != QuestionPhase.ANSWERED:
            logger.debug(f"advance() ignored in {self.phase.value}")
            return False
        self._load(self._game_state.current_level)
        return True

    def toggle_hint(self) -> bool:
        """Show or hide the hint of an unanswered question."""
        if self.phase != QuestionPhase.READY:
            return False
        self._hint_shown = not self._hint_shown
        return True

    # ── Internals ──────────────────────────────────────────────

    def _load(self, level: int) -> None:
        self.state_machine.transition(LifecycleEvent.FETCH_REQUESTED)
        self._selected_option = None
        self._answered_correctly = None
        self._points_awarded = 0
        self._hint_shown = False
        self._failure = None
        self._failure_reason = None

        result = self._provider.request_question(level)
        if result.is_ok:
            self._question = result.question
        else:
            self._question = fallback_for(result.failure)
            self._failure = result.failure
            self._failure_reason = result.reason
            logger.warning(
                f"Serving fallback question for level {level}: "
                f"{result.failure.value} ({result.reason})"
            )

        self.state_machine.transition(LifecycleEvent.QUESTION_RECEIVED)
