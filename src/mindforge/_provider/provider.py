# Area: Provider
"""
mindforge._provider.provider — QuestionProvider
================================================

Gets one question for a level from the LLM client. Each request:

1. Picks a category at random
2. Builds the prompt for the level
3. Makes exactly one client call (no retries, no caching), with a
   reasoning budget for visual puzzles and high levels
4. Parses and validates the reply

request_question() reports the outcome as a FetchResult and never
raises. fetch_question() resolves failures to the fallback question.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from .._shared.logging_config import log_generation_failure
from ..errors import ConfigurationError, QuestionGenerationError
from ..types import FailureKind, FetchResult, Question
from .client import BaseLLMClient
from .fallback import fallback_for
from .parsing import parse_question_payload
from .prompts import (
    CATEGORIES,
    SYSTEM_INSTRUCTION,
    build_question_prompt,
    category_name,
    thinking_budget_for,
)

logger = logging.getLogger("mindforge.provider")


class QuestionProvider:
    """
    Source of questions for the lifecycle.

    Args:
        llm_client: Client used for generation; None means unconfigured
        rng: Random source for category selection
    """

    def __init__(
        self,
        llm_client: Optional[BaseLLMClient],
        rng: Optional[random.Random] = None,
    ):
        self._llm_client = llm_client
        self._rng = rng or random.Random()

    def request_question(self, level: int) -> FetchResult:
        """Request a question for a level. Never raises."""
        level = max(1, int(level))
        try:
            question = self._generate(level)
        except QuestionGenerationError as e:
            log_generation_failure(e, level)
            return FetchResult.failed(e.kind, e.message)
        except Exception as e:
            logger.exception(f"Unexpected error generating level {level} question")
            return FetchResult.failed(
                FailureKind.UNEXPECTED, f"{e.__class__.__name__}: {e}"
            )

        logger.info(f"Generated level {level} question ({question.category})")
        return FetchResult.ok(question)

    def fetch_question(self, level: int) -> Question:
        """Return a question for a level, or the fallback on failure."""
        result = self.request_question(level)
        if result.is_ok:
            return result.question
        return fallback_for(result.failure)

    def _generate(self, level: int) -> Question:
        if self._llm_client is None or not self._llm_client.is_available():
            raise ConfigurationError("No LLM client is configured")

        category = self._rng.choice(CATEGORIES)
        prompt = build_question_prompt(level, category)
        logger.debug(f"Requesting level {level} question, category {category!r}")

        raw = self._llm_client.generate(
            prompt,
            system=SYSTEM_INSTRUCTION,
            thinking_budget=thinking_budget_for(level, category),
        )
        return parse_question_payload(raw, level, category_hint=category_name(category))
