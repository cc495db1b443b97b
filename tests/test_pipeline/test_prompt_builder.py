"""Tests for prompt construction and years-of-experience derivation."""

from __future__ import annotations

from datetime import date

import pytest

from resume_generator.models.profile import Experience, Profile
from resume_generator.pipeline.prompt_builder import (
    DEFAULT_SCOPE,
    REDUCED_SCOPE,
    build_prompt,
    job_identifier,
    parse_profile_date,
    years_of_experience,
)

TODAY = date(2025, 6, 1)


class TestParseProfileDate:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2020-03-15", date(2020, 3, 15)),
            ("2020-03", date(2020, 3, 1)),
            ("2020", date(2020, 1, 1)),
            ("Mar 2020", date(2020, 3, 1)),
            ("March 2020", date(2020, 3, 1)),
            ("Present", TODAY),
        ],
    )
    def test_formats(self, value, expected):
        assert parse_profile_date(value, TODAY) == expected

    def test_unparseable(self):
        assert parse_profile_date("sometime", TODAY) is None


class TestYearsOfExperience:
    def test_empty_is_zero(self):
        assert years_of_experience([], TODAY) == 0

    def test_uses_earliest_start(self):
        jobs = [
            Experience(company="B", start_date="2021-06", end_date="present"),
            Experience(company="A", start_date="2015-06", end_date="2021-05"),
        ]
        assert years_of_experience(jobs, TODAY) == 10

    def test_rounds_to_nearest_year(self):
        jobs = [Experience(company="A", start_date="2022-09")]
        # 2 years 9 months
        assert years_of_experience(jobs, TODAY) == 3

    def test_present_start_is_zero(self):
        assert years_of_experience([Experience(company="A", start_date="present")], TODAY) == 0

    def test_future_and_unparseable_dates_ignored(self):
        jobs = [
            Experience(company="A", start_date="2030-01"),
            Experience(company="B", start_date="unknown"),
        ]
        assert years_of_experience(jobs, TODAY) == 0


class TestBuildPrompt:
    def test_contains_profile_facts_and_jd(self, sample_profile, sample_jd_text):
        prompt = build_prompt(sample_profile, sample_jd_text, 8)
        assert "**Candidate:** Jane Q Doe" in prompt
        assert "jane@example.com | +1 555 0100 | Austin, TX" in prompt
        assert "**Experience:** 8 years" in prompt
        assert (
            "1. [job-1] Northwind Payments | Senior Software Engineer | Austin, TX | 2021-03 - present"
            in prompt
        )
        assert "2. [job-2] Contoso Health | Software Engineer | 2017-06 - 2021-02" in prompt
        assert "- B.S. Computer Science, University of Texas (2013-2017) | GPA: 3.8" in prompt
        assert sample_jd_text in prompt

    def test_output_contract(self, sample_profile):
        prompt = build_prompt(sample_profile, "JD", 1)
        assert "Return ONLY valid JSON" in prompt
        for key in ("title", "summary", "skills", "experience"):
            assert f'"{key}"' in prompt
        assert "no markdown" in prompt.lower()
        assert "Generate exactly 2 entries" in prompt

    def test_deterministic(self, sample_profile):
        assert build_prompt(sample_profile, "JD", 3) == build_prompt(sample_profile, "JD", 3)

    def test_reduced_scope_asks_for_less(self, sample_profile):
        full = build_prompt(sample_profile, "JD", 3, DEFAULT_SCOPE)
        reduced = build_prompt(sample_profile, "JD", 3, REDUCED_SCOPE)
        assert "60-75 total skills" in full
        assert "45-55 total skills" in reduced
        assert "4-5 bullets per job" in reduced
        assert "6-8 bullets" not in reduced

    def test_empty_history(self):
        prompt = build_prompt(Profile(name="New Grad"), "JD", 0)
        assert "(none)" in prompt
        assert "Generate exactly 0 entries" in prompt


def test_job_identifier():
    assert job_identifier(0) == "job-1"
    assert job_identifier(4) == "job-5"
