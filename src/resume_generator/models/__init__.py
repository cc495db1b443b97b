"""Data models for the resume generation pipeline."""

from resume_generator.models.content import (
    GeneratedContent,
    GeneratedExperience,
    RenderExperience,
    RenderRecord,
)
from resume_generator.models.profile import Education, Experience, Profile
from resume_generator.models.request import GenerationRequest

__all__ = [
    "Education",
    "Experience",
    "GeneratedContent",
    "GeneratedExperience",
    "GenerationRequest",
    "Profile",
    "RenderExperience",
    "RenderRecord",
]
