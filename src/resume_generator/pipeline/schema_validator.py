"""Shallow shape check for generated resume content."""

from __future__ import annotations

import logging
from typing import Any

from resume_generator.errors import SchemaError

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("title", "summary", "skills", "experience")


def validate_content(data: Any) -> dict:
    """Confirm the four required top-level keys are present and return ``data`` unchanged.

    Nested shapes (skill lists, bullet counts) are not checked here.
    """
    if not isinstance(data, dict):
        raise SchemaError(list(REQUIRED_KEYS))
    missing = [key for key in REQUIRED_KEYS if key not in data]
    if missing:
        logger.error("Missing required fields in model response: %s (got %s)", missing, list(data))
        raise SchemaError(missing)
    return data
