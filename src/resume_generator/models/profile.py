"""Pydantic models for stored candidate profiles."""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class Experience(BaseModel):
    company: str
    title: str | None = None
    location: str | None = None
    start_date: str
    end_date: str = "present"


class Education(BaseModel):
    degree: str
    school: str
    start_year: str | None = None
    end_year: str | None = None
    grade: str | None = None

    @field_validator("start_year", "end_year", "grade", mode="before")
    @classmethod
    def _stringify(cls, value):
        # Profiles written by hand often store years and GPAs as numbers
        if isinstance(value, (int, float)):
            return str(value)
        return value


class Profile(BaseModel):
    name: str = ""
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = None
    website: str | None = None
    experience: list[Experience] = []
    education: list[Education] = []

    model_config = {"frozen": True}

    @property
    def contact_line(self) -> str:
        return " | ".join(p for p in (self.email, self.phone, self.location) if p)
