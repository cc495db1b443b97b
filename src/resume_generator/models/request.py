"""Caller-supplied generation request."""

from __future__ import annotations

from pydantic import BaseModel, Field

# (attribute, name reported to the caller), in the order they are checked
REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
    ("profile", "profile"),
    ("company_name", "companyName"),
    ("role_name", "roleName"),
    ("jd", "jd"),
)


class GenerationRequest(BaseModel):
    profile: str | None = None
    jd: str | None = None
    company_name: str | None = Field(default=None, alias="companyName")
    role_name: str | None = Field(default=None, alias="roleName")
    template: str | None = None

    model_config = {"populate_by_name": True, "frozen": True}

    def missing_fields(self) -> list[str]:
        """Return the caller-facing names of mandatory fields that are absent or blank."""
        missing = []
        for attr, name in REQUIRED_FIELDS:
            value = getattr(self, attr)
            if value is None or not str(value).strip():
                missing.append(name)
        return missing
