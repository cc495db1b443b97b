"""Builds the resume generation instruction from a profile and a job description."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime

from resume_generator.models.profile import Education, Experience, Profile

DATE_FORMATS = ("%Y-%m-%d", "%Y-%m", "%Y/%m", "%m/%Y", "%b %Y", "%B %Y", "%Y")

OUTPUT_CONTRACT = (
    '{"title":"...","summary":"...","skills":{"Category":["Skill1","Skill2"]},'
    '"experience":[{"id":"job-1","title":"...","details":["bullet1","bullet2"]}]}'
)


@dataclass(frozen=True)
class PromptScope:
    """Requested output quantities. Smaller scopes keep the reply inside the token budget."""

    total_skills: str
    categories: str
    skills_per_category: str
    bullets_per_job: str
    words_per_bullet: str = "20-40"


DEFAULT_SCOPE = PromptScope(
    total_skills="60-75",
    categories="6-7",
    skills_per_category="8-12",
    bullets_per_job="6-8",
)

REDUCED_SCOPE = PromptScope(
    total_skills="45-55",
    categories="5-6",
    skills_per_category="6-9",
    bullets_per_job="4-5",
    words_per_bullet="15-30",
)


def parse_profile_date(value: str, today: date | None = None) -> date | None:
    """Parse a profile date; "present" is today. Returns None when unparseable."""
    today = today or date.today()
    text = value.strip()
    if text.lower() == "present":
        return today
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def years_of_experience(experience: Sequence[Experience], today: date | None = None) -> int:
    """Whole years between the earliest start date and today, rounded half up."""
    today = today or date.today()
    earliest = today
    for job in experience:
        started = parse_profile_date(job.start_date, today)
        if started is not None and started < earliest:
            earliest = started
    years = (today - earliest).days / 365
    return int(years + 0.5)


def job_identifier(index: int) -> str:
    """Stable id the model echoes back for the job at ``index`` (0-based)."""
    return f"job-{index + 1}"


def build_prompt(
    profile: Profile,
    jd_text: str,
    years: int,
    scope: PromptScope = DEFAULT_SCOPE,
) -> str:
    """Build the single instruction sent to the model."""
    job_count = len(profile.experience)
    return f"""You are a world-class ATS optimization expert. Create a resume that scores 95-100% on ATS.

**CRITICAL OUTPUT: Return ONLY a valid JSON object with the keys title, summary, skills and experience. No prose, no markdown, no code fences.**
Format: {OUTPUT_CONTRACT}

Wrap ONLY the first occurrence of critical JD keywords within each section in <strong> tags. Do NOT wrap metrics, verbs or filler terms.

## PROFILE DATA:
**Candidate:** {profile.name}
**Contact:** {profile.contact_line}
**Experience:** {years} years

**WORK HISTORY:**
{_format_work_history(profile.experience)}

**EDUCATION:**
{_format_education(profile.education)}

---

## JOB DESCRIPTION:
{jd_text}

---

## INSTRUCTIONS:

### 1. DOMAIN KEYWORDS
Identify 10-15 domain or compliance keywords specific to the company's product and industry.
Use 3-5 of them in the summary, give them a dedicated skills category, and work 2-3 of them into each role's bullets.

### 2. TITLE
Extract the core role from the JD and rephrase it naturally for a resume: remove dashes, roman numerals,
team names and parentheticals ("Software Engineer II (Platform)" -> "Software Engineer"). 2-4 words.

### 3. SUMMARY (5-6 lines)
Open with the title and {years}+ years of experience, then expertise in exact JD technologies,
a proven achievement with an approximate metric, further JD skills, a collaboration line,
and the key focus areas of the role.

### 4. SKILLS ({scope.total_skills} total skills across {scope.categories} categories)
- Categories follow the JD focus; {scope.skills_per_category} skills per category
- Skills must be technically correct for their category
- Capitalize the first letter of each skill; no version or database spam
- Group cloud services: "AWS (Lambda, S3, EC2)"
- Roughly 70% JD keywords, 30% complementary skills

### 5. EXPERIENCE ({job_count} entries, {scope.bullets_per_job} bullets each)
- Generate exactly {job_count} entries, one per work history line, in the same order
- Echo each job's id (e.g. "job-1") in the entry's "id" field
- {scope.bullets_per_job} bullets per job, {scope.words_per_bullet} words per bullet
- Only use technologies that were in common production use during that role's time period
- Include 2-4 JD keywords per bullet; at least half of the bullets carry an approximate metric
- Bullet structure: [Action verb] + [JD technology] + [what was built] + [business impact] + [metric]
- Avoid "Responsible for", "Duties included", "Tasked with", "Worked on"

---

Return ONLY valid JSON: {OUTPUT_CONTRACT}
"""


def _format_work_history(experience: Sequence[Experience]) -> str:
    lines = []
    for idx, job in enumerate(experience):
        parts = [f"{idx + 1}. [{job_identifier(idx)}] {job.company}"]
        if job.title:
            parts.append(job.title)
        if job.location:
            parts.append(job.location)
        parts.append(f"{job.start_date} - {job.end_date}")
        lines.append(" | ".join(parts))
    return "\n".join(lines) or "(none)"


def _format_education(education: Sequence[Education]) -> str:
    lines = []
    for edu in education:
        line = f"- {edu.degree}, {edu.school} ({edu.start_year or ''}-{edu.end_year or ''})"
        if edu.grade:
            line += f" | GPA: {edu.grade}"
        lines.append(line)
    return "\n".join(lines) or "(none)"
