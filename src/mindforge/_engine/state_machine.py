# Area: Engine
"""
mindforge._engine.state_machine — Question Lifecycle State Machine
===================================================================

Tracks which phase the current question is in and validates
transitions. Callers check can_transition() before acting so that
actions made in the wrong phase are rejected instead of applied.
"""

import logging

from ..errors import InvalidTransitionError
from .enums import QuestionPhase, LifecycleEvent

logger = logging.getLogger("mindforge.engine.state_machine")


# Valid transitions: {current_phase: {event: next_phase}}
TRANSITIONS = {
    QuestionPhase.IDLE: {
        LifecycleEvent.FETCH_REQUESTED: QuestionPhase.LOADING,
    },
    QuestionPhase.LOADING: {
        LifecycleEvent.QUESTION_RECEIVED: QuestionPhase.READY,
    },
    QuestionPhase.READY: {
        LifecycleEvent.OPTION_SELECTED: QuestionPhase.ANSWERED,
    },
    QuestionPhase.ANSWERED: {
        LifecycleEvent.FETCH_REQUESTED: QuestionPhase.LOADING,
    },
}


class QuestionStateMachine:
    """
    State machine for the question lifecycle.

    Attributes:
        current_phase: The phase of the current question
    """

    def __init__(self):
        """Initialize state machine in IDLE."""
        self.current_phase = QuestionPhase.IDLE

    def can_transition(self, event: LifecycleEvent) -> bool:
        """
        Check if a transition is valid from the current phase.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        return event in TRANSITIONS.get(self.current_phase, {})

    def transition(self, event: LifecycleEvent) -> QuestionPhase:
        """
        Execute a phase transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new phase after transition

        Raises:
            InvalidTransitionError: If the event is not valid in this phase
        """
        if not self.can_transition(event):
            raise InvalidTransitionError(event.value, self.current_phase.value)

        next_phase = TRANSITIONS[self.current_phase][event]
        logger.debug(
            f"{self.current_phase.value} --{event.value}--> {next_phase.value}"
        )
        self.current_phase = next_phase
        return next_phase
