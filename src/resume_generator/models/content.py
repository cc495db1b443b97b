"""Models for generated resume content and the render-ready record."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from resume_generator.models.profile import Education


class GeneratedExperience(BaseModel):
    id: str | None = None
    title: str | None = None
    details: list[str] = []


class GeneratedContent(BaseModel):
    title: str
    summary: str
    skills: dict[str, list[str]]
    experience: list[GeneratedExperience]

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> GeneratedContent:
        """Build from a schema-checked model payload, coercing loose nested shapes.

        Only the top-level keys are guaranteed at this point; nested values are
        taken as-is where they fit and dropped or stringified where they don't.
        Experience entries keep their position even when malformed.
        """
        skills: dict[str, list[str]] = {}
        raw_skills = data.get("skills")
        if isinstance(raw_skills, dict):
            for category, items in raw_skills.items():
                if isinstance(items, list):
                    skills[str(category)] = [str(i) for i in items]
                elif items is not None:
                    skills[str(category)] = [str(items)]

        experience: list[GeneratedExperience] = []
        raw_experience = data.get("experience")
        if isinstance(raw_experience, list):
            for entry in raw_experience:
                experience.append(_coerce_experience(entry))

        return cls(
            title=_as_text(data.get("title")),
            summary=_as_text(data.get("summary")),
            skills=skills,
            experience=experience,
        )


def _coerce_experience(entry: Any) -> GeneratedExperience:
    if not isinstance(entry, dict):
        return GeneratedExperience()
    bullets = entry.get("details")
    if bullets is None:
        bullets = entry.get("bullets")
    if not isinstance(bullets, list):
        bullets = []
    raw_id = entry.get("id")
    title = entry.get("title")
    return GeneratedExperience(
        id=str(raw_id) if raw_id is not None else None,
        title=str(title) if title else None,
        details=[str(b) for b in bullets],
    )


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(str(v) for v in value)
    return str(value)


class RenderExperience(BaseModel):
    title: str
    company: str
    location: str | None = None
    start_date: str
    end_date: str
    details: list[str]


class RenderRecord(BaseModel):
    """Everything the template renderer needs, and nothing else."""

    name: str
    title: str
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = None
    website: str | None = None
    summary: str
    skills: dict[str, list[str]]
    experience: list[RenderExperience]
    education: list[Education]
