"""
mindforge — Endless AI-generated logic puzzles
===============================================

A hosted language model writes one multiple-choice reasoning puzzle at
a time, scaled to the player's level. Correct answers earn
10 × level + 5 × streak points and raise the level; a wrong answer
resets the streak. The best score is kept in a local SQLite file.

Quick Start (terminal):
    $ mindforge --demo            # offline, bundled puzzles
    $ ANTHROPIC_API_KEY=... mindforge

Embedding the engine:
    from mindforge import (
        AnthropicClient, HighScoreStore, QuestionLifecycle, QuestionProvider,
    )

    lifecycle = QuestionLifecycle(
        QuestionProvider(AnthropicClient()),
        HighScoreStore("mindforge.db"),
    )
    lifecycle.start()
    view = lifecycle.view()
    lifecycle.select_option(view.question.options[0])
    lifecycle.advance()

Generation never fails outward: when the model cannot be reached or
returns an unusable question, a fixed fallback question is shown and
``view().has_error`` is set.
"""

from ._engine import (
    QuestionPhase,
    LifecycleEvent,
    QuestionStateMachine,
    QuestionLifecycle,
    LifecycleView,
    apply_answer,
    points_for_correct_answer,
)
from ._provider import (
    BaseLLMClient,
    AnthropicClient,
    DemoLLMClient,
    MockLLMClient,
    QuestionProvider,
    CONFIGURATION_FALLBACK,
    GENERATION_FALLBACK,
)
from ._shared import HighScoreStore, setup_logging
from ._config import load_config, validate_config
from .cli import build_lifecycle
from .runner import GameRunner
from .errors import (
    MindForgeError,
    QuestionGenerationError,
    ConfigurationError,
    TransportError,
    MalformedResponseError,
    SchemaValidationError,
    InvalidTransitionError,
)
from .types import (
    Question,
    GameState,
    AnswerAttempt,
    FetchResult,
    FailureKind,
)

__all__ = [
    # Engine
    "QuestionPhase",
    "LifecycleEvent",
    "QuestionStateMachine",
    "QuestionLifecycle",
    "LifecycleView",
    "apply_answer",
    "points_for_correct_answer",
    # Provider
    "BaseLLMClient",
    "AnthropicClient",
    "DemoLLMClient",
    "MockLLMClient",
    "QuestionProvider",
    "CONFIGURATION_FALLBACK",
    "GENERATION_FALLBACK",
    # Storage, config, front-end
    "HighScoreStore",
    "setup_logging",
    "load_config",
    "validate_config",
    "build_lifecycle",
    "GameRunner",
    # Errors
    "MindForgeError",
    "QuestionGenerationError",
    "ConfigurationError",
    "TransportError",
    "MalformedResponseError",
    "SchemaValidationError",
    "InvalidTransitionError",
    # Types
    "Question",
    "GameState",
    "AnswerAttempt",
    "FetchResult",
    "FailureKind",
]
__version__ = "1.0.0"
