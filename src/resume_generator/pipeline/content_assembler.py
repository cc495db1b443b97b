"""Merges generated narrative with the profile's ground-truth structure."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from resume_generator.models.content import (
    GeneratedContent,
    GeneratedExperience,
    RenderExperience,
    RenderRecord,
)
from resume_generator.models.profile import Experience, Profile
from resume_generator.pipeline.prompt_builder import job_identifier

logger = logging.getLogger(__name__)

DEFAULT_GENERIC_TITLE = "Engineer"


def align_experience(
    jobs: Sequence[Experience],
    generated: Sequence[GeneratedExperience],
) -> list[GeneratedExperience | None]:
    """Pair each profile job with its generated entry.

    Entries that echo a known job id are matched by that id. A job without an
    id match takes the entry at the same position, unless that entry's id
    belongs to another job. Entries beyond the number of jobs are dropped.
    """
    known_ids = {job_identifier(i) for i in range(len(jobs))}
    by_id: dict[str, GeneratedExperience] = {}
    for entry in generated:
        if entry.id in known_ids:
            by_id.setdefault(entry.id, entry)

    aligned: list[GeneratedExperience | None] = []
    for idx in range(len(jobs)):
        entry = by_id.get(job_identifier(idx))
        if entry is None and idx < len(generated) and generated[idx].id not in known_ids:
            entry = generated[idx]
        aligned.append(entry)

    if len(generated) != len(jobs):
        logger.warning(
            "Generated %d experience entries for %d profile jobs", len(generated), len(jobs)
        )
    return aligned


def assemble_record(
    profile: Profile,
    content: GeneratedContent,
    generic_title: str = DEFAULT_GENERIC_TITLE,
) -> RenderRecord:
    """Build the render-ready record, one experience entry per profile job."""
    experience = []
    aligned = align_experience(profile.experience, content.experience)
    for idx, (job, entry) in enumerate(zip(profile.experience, aligned)):
        details = list(entry.details) if entry is not None else []
        title = entry.title if entry is not None and entry.title else generic_title
        logger.debug("Experience %d: %s - %d bullets", idx + 1, title, len(details))
        if not details:
            logger.warning("Experience entry %d (%s) has no bullets", idx + 1, job.company)
        experience.append(
            RenderExperience(
                title=title,
                company=job.company,
                location=job.location,
                start_date=job.start_date,
                end_date=job.end_date,
                details=details,
            )
        )

    return RenderRecord(
        name=profile.name,
        title=content.title,
        email=profile.email,
        phone=profile.phone,
        location=profile.location,
        linkedin=profile.linkedin,
        website=profile.website,
        summary=content.summary,
        skills=content.skills,
        experience=experience,
        education=list(profile.education),
    )
