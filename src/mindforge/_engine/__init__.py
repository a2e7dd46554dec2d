# Area: Engine
"""
Game engine: the question lifecycle state machine and the scoring rules.

This package contains:
- Phase and event enums
- The lifecycle state machine
- Score / streak / level transition
- QuestionLifecycle, which ties them to the provider and the store
"""

from .enums import QuestionPhase, LifecycleEvent
from .state_machine import QuestionStateMachine
from .scoring import apply_answer, points_for_correct_answer
from .lifecycle import QuestionLifecycle, LifecycleView

__all__ = [
    "QuestionPhase",
    "LifecycleEvent",
    "QuestionStateMachine",
    "apply_answer",
    "points_for_correct_answer",
    "QuestionLifecycle",
    "LifecycleView",
]
