# SPDX-License-Identifier: MIT
"""Unit tests for the structured record form."""

import json

import pytest

from semver_core import (
    SemanticVersion,
    ValidationError,
    VersionRecord,
    from_record,
    parse_version,
    to_record,
)


class TestToDict:
    """Tests for SemanticVersion.to_dict."""

    def test_release(self):
        assert parse_version("1.0.0").to_dict() == {"major": 1, "minor": 0, "patch": 0}

    def test_prerelease(self):
        assert parse_version("1.0.0-alpha.1").to_dict() == {
            "major": 1,
            "minor": 0,
            "patch": 0,
            "prerelease": ["alpha", 1],
        }

    def test_build(self):
        assert parse_version("1.0.0+build.1").to_dict() == {
            "major": 1,
            "minor": 0,
            "patch": 0,
            "build": ["build", "1"],
        }


class TestToJson:
    """Tests for JSON serialization."""

    def test_omits_missing_fields(self):
        data = json.loads(parse_version("2.1.0").to_json())
        assert data == {"major": 2, "minor": 1, "patch": 0}

    def test_matches_to_dict(self):
        v = parse_version("1.2.3-rc.1+sha.abc")
        assert json.loads(v.to_json()) == v.to_dict()

    def test_from_json(self):
        v = SemanticVersion.from_json('{"major": 1, "minor": 2, "patch": 3, "prerelease": ["rc", 1]}')
        assert str(v) == "1.2.3-rc.1"

    def test_from_json_invalid(self):
        with pytest.raises(ValidationError):
            SemanticVersion.from_json("{not json")


class TestFromRecord:
    """Tests for building versions from records."""

    def test_round_trip(self):
        v = parse_version("1.0.0-x.7.z.92+exp.sha.5114f85")
        assert SemanticVersion.from_dict(v.to_dict()) == v

    def test_record_model(self):
        record = to_record(parse_version("3.0.0-beta"))
        assert isinstance(record, VersionRecord)
        assert record.prerelease == ["beta"]
        assert record.build is None
        assert from_record(record) == parse_version("3.0.0-beta")

    def test_missing_field(self):
        with pytest.raises(ValidationError) as exc_info:
            from_record({"major": 1, "minor": 0})
        assert exc_info.value.field == "patch"

    def test_extra_field(self):
        with pytest.raises(ValidationError):
            from_record({"major": 1, "minor": 0, "patch": 0, "epoch": 1})

    def test_negative_number(self):
        with pytest.raises(ValidationError) as exc_info:
            from_record({"major": -1, "minor": 0, "patch": 0})
        assert exc_info.value.field == "major"

    def test_string_number_not_coerced(self):
        with pytest.raises(ValidationError):
            from_record({"major": "1", "minor": 0, "patch": 0})

    def test_numeric_string_prerelease_rejected(self):
        """Test that identifier typing is enforced rather than inferred."""
        with pytest.raises(ValidationError):
            from_record({"major": 1, "minor": 0, "patch": 0, "prerelease": ["alpha", "1"]})

    def test_empty_prerelease_rejected(self):
        with pytest.raises(ValidationError):
            from_record({"major": 1, "minor": 0, "patch": 0, "prerelease": []})
