"""
mindforge.types — Core value types
===================================

Question
    One quiz item as generated by the model. Built from the model's JSON
    (camelCase wire names) and validated on construction:

        >>> Question.model_validate({
        ...     "category": "Series Completion",
        ...     "questionText": "Which number comes next: 2, 4, 8, 16, ...?",
        ...     "options": ["20", "24", "32", "64"],
        ...     "correctAnswer": "32",
        ...     "explanation": "Each term doubles the previous one.",
        ...     "hint": "Multiply by 2.",
        ... }).correct_answer
        '32'

GameState
    Level, score, streak and high score for one session.

AnswerAttempt
    A selected option paired with the question it answers.

FetchResult
    The provider's explicit result: a question, or a failure kind + reason.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# Every question offers exactly this many options
OPTION_COUNT = 4


class FailureKind(Enum):
    """Why a question could not be generated."""
    CONFIGURATION = "configuration"   # Missing credential / client unavailable
    TRANSPORT = "transport"           # API error, timeout, empty response
    MALFORMED = "malformed"           # Not JSON, or not a JSON object
    INVALID = "invalid"               # JSON object failing the Question schema
    UNEXPECTED = "unexpected"         # Anything else raised while generating


class Question(BaseModel):
    """A multiple-choice reasoning question."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    category: str = Field(min_length=1)
    question_text: str = Field(alias="questionText", min_length=1)
    options: List[str] = Field(min_length=OPTION_COUNT, max_length=OPTION_COUNT)
    correct_answer: str = Field(alias="correctAnswer", min_length=1)
    explanation: str
    hint: str
    difficulty: int = Field(default=1, ge=1)
    visual_svg: Optional[str] = Field(default=None, alias="visualSVG")

    @field_validator("options")
    @classmethod
    def _options_distinct(cls, options: List[str]) -> List[str]:
        if any(not option for option in options):
            raise ValueError("options must be non-empty strings")
        if len(set(options)) != len(options):
            raise ValueError("options must be distinct")
        return options

    @field_validator("visual_svg")
    @classmethod
    def _empty_svg_is_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    @model_validator(mode="after")
    def _correct_answer_is_an_option(self) -> "Question":
        if self.correct_answer not in self.options:
            raise ValueError(
                f"correctAnswer {self.correct_answer!r} is not one of the options"
            )
        return self

    def to_wire(self) -> dict:
        """Serialize using the camelCase wire names."""
        return self.model_dump(by_alias=True, exclude_none=True)


@dataclass(frozen=True)
class GameState:
    """
    Score, level and streak for the running session.

    Attributes:
        current_level: Level of the next question (starts at 1)
        score: Total points this session
        streak: Consecutive correct answers since the last wrong one
        high_score: Best score ever, mirrors the persisted value
    """

    current_level: int = 1
    score: int = 0
    streak: int = 0
    high_score: int = 0

    def __post_init__(self):
        if self.current_level < 1:
            raise ValueError(f"current_level must be >= 1, got {self.current_level}")
        for name in ("score", "streak", "high_score"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")


@dataclass(frozen=True)
class AnswerAttempt:
    """A single answer given against a question."""

    question: Question
    selected_option: str

    @property
    def is_correct(self) -> bool:
        return self.selected_option == self.question.correct_answer


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one question request: a question or a failure."""

    question: Optional[Question] = None
    failure: Optional[FailureKind] = None
    reason: str = ""

    def __post_init__(self):
        if (self.question is None) == (self.failure is None):
            raise ValueError("FetchResult needs exactly one of question or failure")

    @classmethod
    def ok(cls, question: Question) -> "FetchResult":
        return cls(question=question)

    @classmethod
    def failed(cls, failure: FailureKind, reason: str) -> "FetchResult":
        return cls(failure=failure, reason=reason)

    @property
    def is_ok(self) -> bool:
        return self.question is not None and self.failure is None
