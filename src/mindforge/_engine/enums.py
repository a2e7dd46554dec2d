# Area: Engine
"""
mindforge._engine.enums — Question Lifecycle Enums
===================================================

Defines the phases and events of the question lifecycle state machine.
"""

from enum import Enum


class QuestionPhase(Enum):
    """
    Phases a question moves through.

    Phase transitions:
    IDLE -> LOADING (on FETCH_REQUESTED, game start)
    LOADING -> READY (on QUESTION_RECEIVED, generated or fallback)
    READY -> ANSWERED (on OPTION_SELECTED, first selection only)
    ANSWERED -> LOADING (on FETCH_REQUESTED, player advances)
    """
    IDLE = "IDLE"
    LOADING = "LOADING"
    READY = "READY"
    ANSWERED = "ANSWERED"


class LifecycleEvent(Enum):
    """
    Events that trigger phase transitions.

    Events are triggered by:
    - FETCH_REQUESTED: start() or advance()
    - QUESTION_RECEIVED: provider returned (question or failure)
    - OPTION_SELECTED: select_option() with a valid option
    """
    FETCH_REQUESTED = "FETCH_REQUESTED"
    QUESTION_RECEIVED = "QUESTION_RECEIVED"
    OPTION_SELECTED = "OPTION_SELECTED"
