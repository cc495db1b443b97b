"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from resume_generator.clients.llm_client import LLMClient, ModelResult
from resume_generator.models.profile import Education, Experience, Profile
from resume_generator.profiles.store import ProfileStore


def make_result(
    text: str,
    stop_reason: str = "end_turn",
    input_tokens: int = 1200,
    output_tokens: int = 900,
    model: str = "claude-3-5-sonnet-20241022",
) -> ModelResult:
    return ModelResult(
        text=text,
        stop_reason=stop_reason,
        input_tokens=input_tokens,
        output_tokens=output_tokens,
        model=model,
    )


@pytest.fixture
def sample_jd_text() -> str:
    return """Senior Backend Engineer - Payments Platform (II)

About us: we build payment infrastructure for online merchants. PCI-DSS and SOC 2 compliant.

Requirements:
- 5+ years building backend services in Python or Go
- PostgreSQL, Redis, Kafka
- AWS, Docker, Kubernetes

Nice to have:
- Fraud detection, KYC/AML experience
"""


@pytest.fixture
def sample_profile() -> Profile:
    return Profile(
        name="Jane Q Doe",
        email="jane@example.com",
        phone="+1 555 0100",
        location="Austin, TX",
        linkedin="linkedin.com/in/janedoe",
        experience=[
            Experience(
                company="Northwind Payments",
                title="Senior Software Engineer",
                location="Austin, TX",
                start_date="2021-03",
                end_date="present",
            ),
            Experience(
                company="Contoso Health",
                title="Software Engineer",
                start_date="2017-06",
                end_date="2021-02",
            ),
        ],
        education=[
            Education(
                degree="B.S. Computer Science",
                school="University of Texas",
                start_year="2013",
                end_year="2017",
                grade="3.8",
            )
        ],
    )


@pytest.fixture
def sample_payload() -> dict:
    return {
        "title": "Senior Backend Engineer",
        "summary": "Senior Backend Engineer with 8+ years in <strong>payment processing</strong>.",
        "skills": {
            "Backend": ["Python", "Go", "Kafka"],
            "Cloud": ["AWS (Lambda, S3)", "Docker", "Kubernetes"],
        },
        "experience": [
            {
                "id": "job-1",
                "title": "Senior Backend Engineer",
                "details": ["Architected PCI-DSS compliant ledger", "Cut p99 latency by ~40%"],
            },
            {
                "id": "job-2",
                "title": "Backend Engineer",
                "details": ["Built HIPAA-compliant FHIR APIs"],
            },
        ],
    }


@pytest.fixture
def profiles_dir(tmp_path: Path, sample_profile: Profile) -> Path:
    directory = tmp_path / "resumes"
    directory.mkdir()
    (directory / "jane.json").write_text(
        json.dumps(sample_profile.model_dump()), encoding="utf-8"
    )
    return directory


@pytest.fixture
def profile_store(profiles_dir: Path) -> ProfileStore:
    return ProfileStore(profiles_dir)


@pytest.fixture
def mock_llm_client(sample_payload) -> LLMClient:
    """Create a mock LLM client that returns the sample payload."""
    client = AsyncMock(spec=LLMClient)
    client.invoke = AsyncMock(return_value=make_result(json.dumps(sample_payload)))
    return client


@pytest.fixture
def result_factory():
    """Build ModelResult objects: ``result_factory(text, stop_reason=...)``."""
    return make_result
