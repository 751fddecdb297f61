"""Locate and decode a JSON object embedded in free-form model output."""

import json
from typing import Any

from ..errors import MalformedResponseError


def extract_json_span(text: str) -> str:
    """Return the text between the first ``{`` and the last ``}``.
    
    Models often wrap the payload in prose or markdown fences; everything
    outside the outermost braces is dropped.
    
    Raises:
        MalformedResponseError: if the text holds no brace-delimited span.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        raise MalformedResponseError("no JSON object found in model output")
    return text[start:end + 1]


def parse_embedded_json(text: str) -> dict[str, Any]:
    """Extract the embedded span and decode it as a JSON object."""
    span = extract_json_span(text)
    try:
        data = json.loads(span)
    except json.JSONDecodeError as e:
        raise MalformedResponseError(f"embedded payload is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise MalformedResponseError("embedded payload is not a JSON object")
    return data
