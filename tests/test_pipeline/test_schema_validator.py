"""Tests for the shallow schema check."""

import pytest

from resume_generator.errors import SchemaError
from resume_generator.pipeline.schema_validator import REQUIRED_KEYS, validate_content


def test_complete_payload_returned_unchanged(sample_payload):
    snapshot = dict(sample_payload)
    result = validate_content(sample_payload)
    assert result is sample_payload
    assert result == snapshot


def test_nested_shapes_not_checked():
    data = {"title": "", "summary": "", "skills": "not a mapping", "experience": 3}
    assert validate_content(data) is data


@pytest.mark.parametrize("key", REQUIRED_KEYS)
def test_missing_key(sample_payload, key):
    del sample_payload[key]
    with pytest.raises(SchemaError) as excinfo:
        validate_content(sample_payload)
    assert excinfo.value.missing == [key]
    assert key in str(excinfo.value)


def test_all_missing_keys_named():
    with pytest.raises(SchemaError) as excinfo:
        validate_content({"title": "SWE", "skills": {}})
    assert excinfo.value.missing == ["summary", "experience"]


def test_null_values_count_as_present():
    data = {"title": None, "summary": "s", "skills": {}, "experience": None}
    snapshot = dict(data)
    assert validate_content(data) is data
    assert data == snapshot


def test_non_object_rejected():
    with pytest.raises(SchemaError):
        validate_content(["title", "summary"])
