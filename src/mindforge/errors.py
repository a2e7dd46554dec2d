"""
mindforge.errors — Custom exception classes
============================================

Defines the exception hierarchy for question generation and the
lifecycle state machine. Generation errors carry enough context for
structured logging before the fallback question is served.
"""

from __future__ import annotations
from typing import List, Optional
import json

from .types import FailureKind


class MindForgeError(Exception):
    """Base exception for all MindForge package errors."""
    pass


class QuestionGenerationError(MindForgeError):
    """Raised when a question could not be generated.

    Subclasses set ``kind``; the provider turns every instance into a
    failed FetchResult of that kind.
    """

    kind: FailureKind = FailureKind.UNEXPECTED

    def __init__(
        self,
        message: str,
        raw_output: Optional[str] = None,
        validation_errors: Optional[List[str]] = None,
    ):
        self.message = message
        self.raw_output = raw_output
        self.validation_errors = validation_errors or []
        super().__init__(message)

    def format_error_log(self, level: Optional[int] = None) -> str:
        return _format_error_block(
            failure_kind=self.kind.value,
            error_type=self.__class__.__name__,
            message=self.message,
            level=level,
            raw_output=self.raw_output,
            validation_errors=self.validation_errors,
        )


class ConfigurationError(QuestionGenerationError):
    """Raised when the LLM client has no usable credential."""
    kind = FailureKind.CONFIGURATION


class TransportError(QuestionGenerationError):
    """Raised when the API call fails or returns nothing."""
    kind = FailureKind.TRANSPORT


class MalformedResponseError(QuestionGenerationError):
    """Raised when the response is not a JSON object."""
    kind = FailureKind.MALFORMED


class SchemaValidationError(QuestionGenerationError):
    """Raised when the JSON object does not describe a valid Question."""
    kind = FailureKind.INVALID


class InvalidTransitionError(MindForgeError, ValueError):
    """Raised when a lifecycle event is not allowed in the current phase."""

    def __init__(self, event: str, phase: str):
        self.event = event
        self.phase = phase
        super().__init__(f"Invalid transition: {event} from {phase}")


# Raw model output is truncated in logs
MAX_RAW_OUTPUT_CHARS = 500


def _format_error_block(
    failure_kind: str,
    error_type: str,
    message: str,
    level: Optional[int],
    raw_output: Optional[str],
    validation_errors: List[str],
) -> str:
    """Format a structured error block for the log file."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " QUESTION GENERATION FAILED — FALLBACK SERVED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Failure Kind: {failure_kind}",
        f" Error Type:   {error_type}",
        f" Reason:       {message}",
    ]

    if level is not None:
        lines.append(f" Level:        {level}")

    if raw_output is not None:
        lines.append("")
        lines.append(" ── RAW OUTPUT (from model) " + "─" * 36)
        lines.append(_indent_text(raw_output))

    if validation_errors:
        lines.append("")
        lines.append(" ── VALIDATION ERRORS " + "─" * 42)
        for error in validation_errors:
            lines.append(f" • {error}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_text(raw_output: str) -> str:
    """Pretty-print JSON output when possible, truncating long payloads."""
    text = raw_output
    try:
        text = json.dumps(json.loads(raw_output), indent=2)
    except ValueError:
        pass
    if len(text) > MAX_RAW_OUTPUT_CHARS:
        text = text[:MAX_RAW_OUTPUT_CHARS] + " …"
    return "\n".join(" " + line for line in text.split("\n"))
