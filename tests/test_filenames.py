"""Tests for download filename helpers."""

import pytest

from resume_generator.utils.filenames import applicant_base_name, build_filename, sanitize_component


class TestSanitize:
    def test_whitespace_collapses_to_underscore(self):
        assert sanitize_component("Acme   Corp\tInc") == "Acme_Corp_Inc"

    def test_strips_unsafe_characters(self):
        assert sanitize_component("R&D / Platform (II)") == "RD__Platform_II"

    @pytest.mark.parametrize("value", ["Acme Corp!", "Sr. Engineer - Back End", "Über/Team", ""])
    def test_idempotent(self, value):
        once = sanitize_component(value)
        assert sanitize_component(once) == once


class TestBaseName:
    def test_first_and_last(self):
        assert applicant_base_name("Jane Q Doe") == "Jane_Doe"

    def test_single_name(self):
        assert applicant_base_name("Prince") == "Prince"

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_missing_name(self, name):
        assert applicant_base_name(name) == "resume"


def test_build_filename():
    assert (
        build_filename("Jane Q Doe", " Acme Corp ", "Senior Backend Engineer (II)")
        == "Jane_Doe_Acme_Corp_Senior_Backend_Engineer_II.pdf"
    )
