# Area: Engine
"""
mindforge._engine.scoring — Score and streak rules
===================================================

Pure transition from one GameState to the next after an answer.

Correct answer:
    score      += 10 * current_level + 5 * streak
    high_score  = max(score, high_score)
    streak     += 1
    level      += 1

Wrong answer:
    streak = 0 (nothing else changes)
"""

from dataclasses import replace

from ..types import GameState

# Points per level and per streak step for a correct answer
LEVEL_POINTS = 10
STREAK_BONUS = 5


def points_for_correct_answer(state: GameState) -> int:
    """Points awarded if the current question is answered correctly."""
    return LEVEL_POINTS * state.current_level + STREAK_BONUS * state.streak


def apply_answer(state: GameState, correct: bool) -> GameState:
    """Return the state that follows answering a question."""
    if not correct:
        return replace(state, streak=0)

    new_score = state.score + points_for_correct_answer(state)
    return GameState(
        current_level=state.current_level + 1,
        score=new_score,
        streak=state.streak + 1,
        high_score=max(new_score, state.high_score),
    )
