"""Recover a JSON object from free-text language-model replies.

Handles only what free-text model output produces in practice: prose
around the object, trailing commas and embedded newlines. Unbalanced
braces, unquoted keys and truncated output are left as failures.
"""
from __future__ import annotations

import json
import logging
import re
from typing import Any, Callable, Dict, Sequence

from docsift.constants import DIAGNOSTIC_EXCERPT_CHARS
from docsift.domain.exceptions import EmptyOrMalformedReplyError, JSONRepairFailedError

logger = logging.getLogger(__name__)

_TRAILING_COMMA = re.compile(r",\s*([}\]])")
_NEWLINES = re.compile(r"[\r\n]+")
_WHITESPACE = re.compile(r"\s+")

Repair = Callable[[str], str]


def strip_trailing_commas(text: str) -> str:
    return _TRAILING_COMMA.sub(r"\1", text)


def collapse_newlines(text: str) -> str:
    return _NEWLINES.sub(" ", text)


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text)


DEFAULT_REPAIRS: Sequence[Repair] = (
    strip_trailing_commas,
    collapse_newlines,
    collapse_whitespace,
)


def slice_outer_object(raw: str | None, label: str) -> str:
    """Return the text from the first ``{`` to the last ``}`` inclusive."""

    text = raw or ""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        reason = "empty response" if not text.strip() else "no JSON object found"
        raise EmptyOrMalformedReplyError(f"{label}: {reason}")
    return text[start : end + 1]


def recover_json_object(
    raw: str | None,
    label: str,
    *,
    repairs: Sequence[Repair] = DEFAULT_REPAIRS,
) -> Dict[str, Any]:
    """Parse the JSON object embedded in ``raw`` after textual repair."""

    candidate = slice_outer_object(raw, label)
    for repair in repairs:
        candidate = repair(candidate)

    try:
        return json.loads(candidate)
    except json.JSONDecodeError as exc:
        excerpt = candidate[:DIAGNOSTIC_EXCERPT_CHARS]
        logger.error("%s: JSON parse error - %s; repaired text: %s...", label, exc.msg, excerpt)
        raise JSONRepairFailedError(label, str(exc), excerpt) from exc
