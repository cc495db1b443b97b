"""Download filename helpers."""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")
_UNSAFE_RE = re.compile(r"[^A-Za-z0-9_-]")


def sanitize_component(value: str) -> str:
    """Collapse whitespace to '_' and drop anything but letters, digits, '_' and '-'."""
    return _UNSAFE_RE.sub("", _WHITESPACE_RE.sub("_", value))


def applicant_base_name(full_name: str | None) -> str:
    """First and last name joined by '_', or the single name, or 'resume'."""
    parts = full_name.split() if full_name else []
    if not parts:
        return "resume"
    if len(parts) == 1:
        return parts[0]
    return f"{parts[0]}_{parts[-1]}"


def build_filename(full_name: str | None, company: str, role: str, ext: str = "pdf") -> str:
    """e.g. ``Jane_Doe_Acme_Corp_Backend_Engineer.pdf``"""
    base = sanitize_component(applicant_base_name(full_name))
    return (
        f"{base}_{sanitize_component(company.strip())}"
        f"_{sanitize_component(role.strip())}.{ext}"
    )
