# Area: Provider
"""
mindforge._provider.client — LLM client abstraction
====================================================

Three clients share one interface:
  - AnthropicClient: Anthropic Messages API (needs ANTHROPIC_API_KEY)
  - DemoLLMClient: offline, serves the bundled puzzle bank
  - MockLLMClient: scripted replies for tests

generate() returns the model's raw text. Failures are raised as
ConfigurationError / TransportError so the provider can tell them apart.
"""

from __future__ import annotations

import json
import os
import random
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Union

import anthropic

from ..errors import ConfigurationError, TransportError
from .demo_bank import DEMO_QUESTIONS


# Default LLM settings
DEFAULT_MODEL = "claude-haiku-4-5"
DEFAULT_MAX_TOKENS = 2048
DEFAULT_TIMEOUT_SECONDS = 60.0


class BaseLLMClient(ABC):
    """Abstract base for LLM clients."""

    @abstractmethod
    def generate(
        self,
        prompt: str,
        system: Optional[str] = None,
        thinking_budget: int = 0,
    ) -> str:
        """Generate text from prompt.

        A positive thinking_budget asks the model to reason for up to
        that many tokens before answering. Clients without a reasoning
        mode ignore it.

        Raises:
            ConfigurationError: If the client is not configured
            TransportError: If the request fails or the reply is empty
        """
        ...

    @abstractmethod
    def is_available(self) -> bool:
        """Check if client is properly configured."""
        ...


class AnthropicClient(BaseLLMClient):
    """Anthropic Claude API client.

    One generate() call is exactly one HTTP request: the SDK's own
    retries are disabled.
    """

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        api_key: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.model = model
        self.max_tokens = max_tokens
        self.timeout = timeout
        self._client: Optional[anthropic.Anthropic] = None
        self._init_client(api_key or os.environ.get("ANTHROPIC_API_KEY"))

    def _init_client(self, api_key: Optional[str]) -> None:
        if api_key:
            self._client = anthropic.Anthropic(
                api_key=api_key,
                timeout=self.timeout,
                max_retries=0,
            )

    def is_available(self) -> bool:
        return self._client is not None

    def generate(
        self,
        prompt: str,
        system: Optional[str] = None,
        thinking_budget: int = 0,
    ) -> str:
        if not self._client:
            raise ConfigurationError(
                "ANTHROPIC_API_KEY is not set; cannot reach the question service"
            )

        kwargs: dict = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            kwargs["system"] = system
        if thinking_budget > 0:
            # max_tokens counts thinking too; the budget comes on top of the answer
            kwargs["max_tokens"] = self.max_tokens + thinking_budget
            kwargs["thinking"] = {"type": "enabled", "budget_tokens": thinking_budget}

        try:
            response = self._client.messages.create(**kwargs)
        except anthropic.APIError as e:
            raise TransportError(f"{e.__class__.__name__}: {e}") from e

        text = "".join(
            block.text for block in response.content
            if getattr(block, "type", None) == "text"
        )
        if not text.strip():
            raise TransportError("Empty response from model")
        return text


class DemoLLMClient(BaseLLMClient):
    """Offline client that replies with puzzles from the bundled bank."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def is_available(self) -> bool:
        return True

    def generate(
        self,
        prompt: str,
        system: Optional[str] = None,
        thinking_budget: int = 0,
    ) -> str:
        return json.dumps(self._rng.choice(DEMO_QUESTIONS))


class MockLLMClient(BaseLLMClient):
    """Mock client for testing.

    Replies are consumed in order. A reply that is an exception instance
    is raised instead of returned. Prompts are recorded in ``prompts``.
    """

    def __init__(
        self,
        responses: Optional[List[Union[str, BaseException]]] = None,
        available: bool = True,
    ):
        self._responses = list(responses or [])
        self._available = available
        self.prompts: List[str] = []
        self.systems: List[Any] = []
        self.thinking_budgets: List[int] = []

    def is_available(self) -> bool:
        return self._available

    def generate(
        self,
        prompt: str,
        system: Optional[str] = None,
        thinking_budget: int = 0,
    ) -> str:
        self.prompts.append(prompt)
        self.systems.append(system)
        self.thinking_budgets.append(thinking_budget)
        if not self._responses:
            raise TransportError("MockLLMClient has no scripted response left")
        response = self._responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response
