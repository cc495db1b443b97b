"""Utilities to pull a JSON object out of free-form LLM replies."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Callable

from resume_generator.errors import FormatError

logger = logging.getLogger(__name__)

REFUSAL_PREFIXES = ("i'm sorry", "i cannot", "i apologize")

_FENCE_RE = re.compile(r"```[A-Za-z0-9_+-]*\s*")
_LEAD_IN_RE = re.compile(r"^\s*(here is|here's|this is|the json is):?\s*", re.IGNORECASE)
_TRAILING_COMMA_RE = re.compile(r",(\s*[}\]])")

EXCERPT_LENGTH = 200


def is_refusal(text: str) -> bool:
    """True when the reply opens with an apology or capability disclaimer."""
    lowered = text.strip().lower().replace("’", "'")
    return lowered.startswith(REFUSAL_PREFIXES)


def strip_code_fences(text: str) -> str:
    """Remove markdown code fence markers, with or without a language tag."""
    return _FENCE_RE.sub("", text)


def strip_lead_in(text: str) -> str:
    """Remove a leading "Here is ..." style phrase."""
    return _LEAD_IN_RE.sub("", text, count=1)


def extract_object(text: str) -> str:
    """Return the span from the first '{' to the last '}', inclusive and trimmed."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        logger.error("No JSON object found in response: %s", text[:EXCERPT_LENGTH])
        raise FormatError(
            "Model did not return a JSON object",
            excerpt=text[:EXCERPT_LENGTH],
        )
    return text[start : end + 1].strip()


# --- repair passes -----------------------------------------------------------


def remove_trailing_commas(text: str) -> str:
    return _TRAILING_COMMA_RE.sub(r"\1", text)


def escape_embedded_quotes(text: str) -> str:
    """Escape quote characters that appear inside string values.

    A quote inside a string is treated as closing only when the next
    non-whitespace character could follow a JSON string (``, : } ]`` or end of
    input); any other quote is escaped.
    """
    out: list[str] = []
    in_string = False
    escaped = False
    n = len(text)
    for i, ch in enumerate(text):
        if not in_string:
            out.append(ch)
            if ch == '"':
                in_string = True
            continue
        if escaped:
            escaped = False
            out.append(ch)
            continue
        if ch == "\\":
            escaped = True
            out.append(ch)
            continue
        if ch == '"':
            j = i + 1
            while j < n and text[j] in " \t\r\n":
                j += 1
            if j >= n or text[j] in ",:}]":
                in_string = False
                out.append(ch)
            else:
                out.append('\\"')
            continue
        out.append(ch)
    return "".join(out)


def escape_control_characters(text: str) -> str:
    """Escape raw newlines and tabs that appear inside string values."""
    replacements = {"\n": "\\n", "\r": "\\r", "\t": "\\t"}
    out: list[str] = []
    in_string = False
    escaped = False
    for ch in text:
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            elif ch in replacements:
                out.append(replacements[ch])
                continue
        elif ch == '"':
            in_string = True
        out.append(ch)
    return "".join(out)


RepairPass = tuple[str, Callable[[str], str]]

REPAIR_PASSES: tuple[RepairPass, ...] = (
    ("trailing_commas", remove_trailing_commas),
    ("embedded_quotes", escape_embedded_quotes),
    ("control_characters", escape_control_characters),
)


def parse_json_object(text: str, passes: tuple[RepairPass, ...] = REPAIR_PASSES) -> dict:
    """Parse ``text`` as a JSON object, applying repair passes cumulatively on failure.

    The text is parsed strictly first. Each repair pass is then applied on top
    of the previous ones and the result parsed again, stopping at the first
    success.

    Raises:
        FormatError: every pass was tried and the text is still not valid JSON,
            or the JSON value is not an object.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as first_error:
        logger.error(
            "JSON parse error: %s (length=%d)\nFirst 1000 chars: %s\nLast 500 chars: %s",
            first_error,
            len(text),
            text[:1000],
            text[-500:],
        )
        data = _parse_with_repairs(text, passes, first_error)

    if not isinstance(data, dict):
        raise FormatError(
            f"Expected a JSON object, got {type(data).__name__}",
            excerpt=text[:EXCERPT_LENGTH],
        )
    return data


def _parse_with_repairs(
    text: str,
    passes: tuple[RepairPass, ...],
    first_error: json.JSONDecodeError,
):
    attempted: list[str] = []
    candidate = text
    for name, repair in passes:
        attempted.append(name)
        candidate = repair(candidate)
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        logger.info("Parsed JSON after repair passes: %s", ", ".join(attempted))
        return data

    logger.error("Failed to parse JSON even after repairs: %s", ", ".join(attempted))
    raise FormatError(
        f"Model returned invalid JSON: {first_error.msg}",
        diagnostic=str(first_error),
        excerpt=text[:EXCERPT_LENGTH],
        attempted_passes=tuple(attempted),
    )


def extract_json(text: str) -> dict:
    """Extract a JSON object from an LLM reply.

    Strips code fences and lead-in phrases, cuts the outermost brace span and
    parses it, repairing common defects when the strict parse fails.
    """
    cleaned = strip_lead_in(strip_code_fences(text.strip()))
    return parse_json_object(extract_object(cleaned))
