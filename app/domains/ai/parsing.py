"""Helpers for turning model replies into JSON documents."""

import json
import logging
import re
from typing import Any

from app.exceptions.ai import AIParsingError

logger = logging.getLogger(__name__)

# ```json ... ``` or ``` ... ``` wrapping the whole reply
CODE_FENCE_PATTERN = re.compile(r"^```[\w-]*[ \t]*\r?\n?(?P<body>.*?)\r?\n?```$", re.DOTALL)


def strip_code_fence(text: str) -> str:
    """Remove a markdown code fence wrapping the whole reply, if there is one."""
    stripped = text.strip()
    match = CODE_FENCE_PATTERN.match(stripped)
    if match:
        return match.group("body").strip()
    return stripped


def parse_json_document(text: str) -> dict[str, Any]:
    """Parse a (possibly fenced) reply as a JSON object."""
    body = strip_code_fence(text)
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse AI JSON: {str(e)}")
        raise AIParsingError() from e

    if not isinstance(data, dict):
        logger.error(f"AI reply is JSON but not an object: {type(data).__name__}")
        raise AIParsingError()
    return data
