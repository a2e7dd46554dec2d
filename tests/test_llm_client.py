# Area: Provider Tests
"""Tests for the LLM clients."""

import json
import random
from types import SimpleNamespace

import anthropic
import httpx
import pytest
from unittest.mock import MagicMock, patch

from mindforge._provider.client import (
    AnthropicClient,
    DemoLLMClient,
    MockLLMClient,
)
from mindforge._provider.demo_bank import DEMO_QUESTIONS
from mindforge._provider.parsing import parse_question_payload
from mindforge.errors import ConfigurationError, TransportError


def text_response(*texts):
    return SimpleNamespace(content=[SimpleNamespace(type="text", text=t) for t in texts])


class TestAnthropicClient:
    """Tests for AnthropicClient."""

    @pytest.fixture(autouse=True)
    def no_env_key(self, monkeypatch):
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)

    def test_default_model_is_current_alias(self):
        assert AnthropicClient().model == "claude-haiku-4-5"

    def test_unavailable_without_key(self):
        client = AnthropicClient()
        assert client.is_available() is False

    def test_generate_without_key_raises_configuration_error(self):
        with pytest.raises(ConfigurationError):
            AnthropicClient().generate("prompt")

    def test_key_from_environment(self, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-env")
        with patch("mindforge._provider.client.anthropic.Anthropic") as sdk:
            client = AnthropicClient()
        assert client.is_available() is True
        assert sdk.call_args.kwargs["api_key"] == "sk-env"

    def test_sdk_retries_disabled(self):
        with patch("mindforge._provider.client.anthropic.Anthropic") as sdk:
            AnthropicClient(api_key="sk-test", timeout=12.0)
        sdk.assert_called_once_with(api_key="sk-test", timeout=12.0, max_retries=0)

    def test_generate_sends_one_request(self):
        with patch("mindforge._provider.client.anthropic.Anthropic") as sdk:
            sdk.return_value.messages.create.return_value = text_response('{"a": 1}')
            client = AnthropicClient(model="claude-test", max_tokens=300, api_key="sk-test")
            text = client.generate("make a puzzle", system="json only")

        assert text == '{"a": 1}'
        sdk.return_value.messages.create.assert_called_once_with(
            model="claude-test",
            max_tokens=300,
            messages=[{"role": "user", "content": "make a puzzle"}],
            system="json only",
        )

    def test_generate_without_system(self):
        with patch("mindforge._provider.client.anthropic.Anthropic") as sdk:
            sdk.return_value.messages.create.return_value = text_response("x")
            AnthropicClient(api_key="sk-test").generate("p")

        assert "system" not in sdk.return_value.messages.create.call_args.kwargs

    def test_thinking_budget_enables_extended_thinking(self):
        with patch("mindforge._provider.client.anthropic.Anthropic") as sdk:
            sdk.return_value.messages.create.return_value = text_response("x")
            AnthropicClient(max_tokens=2048, api_key="sk-test").generate(
                "p", thinking_budget=1024
            )

        kwargs = sdk.return_value.messages.create.call_args.kwargs
        assert kwargs["thinking"] == {"type": "enabled", "budget_tokens": 1024}
        assert kwargs["max_tokens"] == 3072
        assert kwargs["max_tokens"] > kwargs["thinking"]["budget_tokens"]

    def test_zero_budget_leaves_thinking_off(self):
        with patch("mindforge._provider.client.anthropic.Anthropic") as sdk:
            sdk.return_value.messages.create.return_value = text_response("x")
            AnthropicClient(api_key="sk-test").generate("p", thinking_budget=0)

        assert "thinking" not in sdk.return_value.messages.create.call_args.kwargs

    def test_text_blocks_joined_other_blocks_skipped(self):
        response = SimpleNamespace(content=[
            SimpleNamespace(type="thinking", thinking="hmm"),
            SimpleNamespace(type="text", text='{"a": '),
            SimpleNamespace(type="text", text="1}"),
        ])
        with patch("mindforge._provider.client.anthropic.Anthropic") as sdk:
            sdk.return_value.messages.create.return_value = response
            assert AnthropicClient(api_key="sk-test").generate("p") == '{"a": 1}'

    def test_empty_response_is_transport_error(self):
        with patch("mindforge._provider.client.anthropic.Anthropic") as sdk:
            sdk.return_value.messages.create.return_value = text_response("  ")
            with pytest.raises(TransportError):
                AnthropicClient(api_key="sk-test").generate("p")

    def test_api_error_is_transport_error(self):
        request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
        with patch("mindforge._provider.client.anthropic.Anthropic") as sdk:
            sdk.return_value.messages.create.side_effect = anthropic.APIConnectionError(
                request=request
            )
            with pytest.raises(TransportError) as exc_info:
                AnthropicClient(api_key="sk-test").generate("p")

        assert isinstance(exc_info.value.__cause__, anthropic.APIConnectionError)


class TestDemoLLMClient:
    """Tests for DemoLLMClient."""

    def test_always_available(self):
        assert DemoLLMClient().is_available() is True

    def test_returns_bank_entry_as_json(self):
        reply = DemoLLMClient(rng=random.Random(1)).generate("anything")
        assert json.loads(reply) in DEMO_QUESTIONS

    @pytest.mark.parametrize("entry", DEMO_QUESTIONS)
    def test_every_bank_entry_is_a_valid_question(self, entry):
        question = parse_question_payload(json.dumps(entry), level=1)
        assert question.correct_answer in question.options


class TestMockLLMClient:
    """Tests for MockLLMClient."""

    def test_replies_in_order_and_records_prompts(self):
        client = MockLLMClient(["one", "two"])
        assert client.generate("p1") == "one"
        assert client.generate("p2", system="s") == "two"
        assert client.prompts == ["p1", "p2"]
        assert client.systems == [None, "s"]

    def test_records_thinking_budget(self):
        client = MockLLMClient(["one"])
        client.generate("p", thinking_budget=1024)
        assert client.thinking_budgets == [1024]

    def test_exception_reply_raised(self):
        client = MockLLMClient([TransportError("down")])
        with pytest.raises(TransportError):
            client.generate("p")

    def test_exhausted(self):
        with pytest.raises(TransportError):
            MockLLMClient().generate("p")
