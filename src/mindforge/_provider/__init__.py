# Area: Provider
"""
Question generation: LLM clients, prompts, reply parsing and fallbacks.
"""

from .client import (
    BaseLLMClient,
    AnthropicClient,
    DemoLLMClient,
    MockLLMClient,
)
from .fallback import CONFIGURATION_FALLBACK, GENERATION_FALLBACK, fallback_for
from .parsing import parse_question_payload
from .prompts import difficulty_label, build_question_prompt, thinking_budget_for
from .provider import QuestionProvider

__all__ = [
    "BaseLLMClient",
    "AnthropicClient",
    "DemoLLMClient",
    "MockLLMClient",
    "CONFIGURATION_FALLBACK",
    "GENERATION_FALLBACK",
    "fallback_for",
    "parse_question_payload",
    "difficulty_label",
    "build_question_prompt",
    "thinking_budget_for",
    "QuestionProvider",
]
