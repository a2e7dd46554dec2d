# Area: Provider
"""
mindforge._provider.parsing — Model reply → Question
=====================================================

Turns the raw text of a model reply into a validated Question.

Steps:
1. Strip markdown code fences around the JSON
2. Parse JSON; it must be an object     (MalformedResponseError)
3. Fill category / difficulty defaults
4. Normalize the optional SVG
5. Validate against the Question model  (SchemaValidationError)
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict, Optional

from pydantic import ValidationError

from ..errors import MalformedResponseError, SchemaValidationError
from ..types import Question

_FENCE_RE = re.compile(r"^\s*```[a-zA-Z]*\s*\n?(.*?)\n?\s*```\s*$", re.DOTALL)


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ```json ... ``` block if present."""
    match = _FENCE_RE.match(text)
    if match:
        return match.group(1).strip()
    return text.strip()


def normalize_svg(value: Any) -> Optional[str]:
    """Return usable SVG markup or None."""
    if not isinstance(value, str):
        return None
    svg = strip_code_fences(value)
    if "<svg" not in svg:
        return None
    return svg


def parse_question_payload(
    raw: str,
    level: int,
    category_hint: Optional[str] = None,
) -> Question:
    """
    Parse and validate a model reply.

    Args:
        raw: Raw text returned by the model
        level: Level the question was requested for (default difficulty)
        category_hint: Category name used when the reply has none

    Returns:
        The validated Question

    Raises:
        MalformedResponseError: If the reply is not a JSON object
        SchemaValidationError: If the object is not a valid Question
    """
    text = strip_code_fences(raw or "")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedResponseError(
            f"Response is not valid JSON: {e.msg} (line {e.lineno}, column {e.colno})",
            raw_output=raw,
        ) from e

    if not isinstance(data, dict):
        raise MalformedResponseError(
            f"Expected a JSON object, got {type(data).__name__}",
            raw_output=raw,
        )

    payload: Dict[str, Any] = dict(data)
    if not payload.get("category") and category_hint:
        payload["category"] = category_hint
    if payload.get("difficulty") is None:
        payload["difficulty"] = max(1, level)
    payload["visualSVG"] = normalize_svg(payload.get("visualSVG"))

    try:
        return Question.model_validate(payload)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(p) for p in err['loc']) or 'question'}: {err['msg']}"
            for err in e.errors()
        ]
        raise SchemaValidationError(
            "Response does not describe a valid question",
            raw_output=raw,
            validation_errors=errors,
        ) from e
