# SPDX-License-Identifier: MIT
"""Tests for release planning."""

from __future__ import annotations

import logging

import pytest
from hypothesis import given, strategies as st

from semver_core import ParseError, parse_version
from semver_cli.config import ReleaseConfig
from semver_cli.release import (
    ReleaseError,
    dist_tag_for,
    next_prerelease,
    publish_plan,
    release_plan,
)


class TestDistTag:
    """Tests for dist_tag_for."""

    def test_prerelease(self) -> None:
        assert dist_tag_for("1.0.0-beta.2") == "beta"
        assert dist_tag_for(parse_version("1.0.0-next")) == "next"

    def test_numeric_first_identifier(self) -> None:
        assert dist_tag_for("1.0.0-0.3.7") == "0"

    def test_release(self) -> None:
        assert dist_tag_for("1.0.0") is None
        assert dist_tag_for("1.0.0+build.1") is None


class TestPublishPlan:
    """Tests for publish_plan."""

    def test_prerelease(self) -> None:
        plan = publish_plan("1.2.0-beta.1")

        assert plan.dist_tag == "beta"
        assert plan.git_tag == "v1.2.0-beta.1"
        assert plan.tag_ref == "refs/tags/v1.2.0-beta.1"
        assert plan.tag_args == ["--tag", "beta"]

    def test_release(self) -> None:
        plan = publish_plan("1.2.0")

        assert plan.dist_tag is None
        assert plan.tag_args == []

    def test_custom_prefix(self) -> None:
        plan = publish_plan("1.2.0", ReleaseConfig(tag_prefix=""))

        assert plan.git_tag == "1.2.0"

    def test_invalid_version(self) -> None:
        with pytest.raises(ParseError):
            publish_plan("1.2")


class TestReleasePlan:
    """Tests for release_plan."""

    def test_plan(self) -> None:
        plan = release_plan("1.0.0-alpha.1")

        assert str(plan.prerelease_version) == "1.0.0-alpha.1"
        assert str(plan.release_version) == "1.0.0"
        assert plan.pending_branch == "pending-releases/v1.0.0-alpha.1"
        assert plan.pending_ref == "refs/heads/pending-releases/v1.0.0-alpha.1"
        assert plan.target_branch == "releases/v1.0.0"
        assert plan.target_ref == "refs/heads/releases/v1.0.0"
        assert plan.pull_request_title == "Release 1.0.0-alpha.1 as 1.0.0"
        assert plan.commit_message == "Release of version 1.0.0"

    def test_build_metadata_dropped_from_release(self) -> None:
        plan = release_plan("2.1.0-rc.3+sha.abc")

        assert str(plan.release_version) == "2.1.0"
        assert plan.pending_branch == "pending-releases/v2.1.0-rc.3+sha.abc"

    def test_release_rejected(self) -> None:
        with pytest.raises(ReleaseError, match="Use a prerelease version first"):
            release_plan("1.0.0")

    def test_custom_branches(self) -> None:
        config = ReleaseConfig(pending_branch_prefix="pending/", release_branch_prefix="rel/")
        plan = release_plan("1.0.0-rc.1", config)

        assert plan.pending_branch == "pending/v1.0.0-rc.1"
        assert plan.target_branch == "rel/v1.0.0"

    def test_to_dict(self) -> None:
        data = release_plan("1.0.0-rc.1").to_dict()

        assert data["release_version"] == "1.0.0"
        assert set(data) == {
            "prerelease_version",
            "release_version",
            "pending_branch",
            "pending_ref",
            "target_branch",
            "target_ref",
            "pull_request_title",
            "commit_message",
        }

    def test_logs_decision(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="semver_cli.release"):
            release_plan("1.0.0-rc.1")

        assert "Releasing 1.0.0-rc.1 as 1.0.0" in caplog.text


class TestNextPrerelease:
    """Tests for next_prerelease."""

    @pytest.mark.parametrize(
        "version,channel,expected",
        [
            ("1.0.0-alpha.1", "alpha", "1.0.0-alpha.2"),
            ("1.0.0-alpha.9+b", "alpha", "1.0.0-alpha.10"),
            ("1.0.0-alpha", "alpha", "1.0.0-alpha.1"),
            ("1.0.0-alpha.3", "beta", "1.0.0-beta.1"),
            ("1.0.0-rc.1", "beta", "1.0.1-beta.1"),
            ("1.0.0", "alpha", "1.0.1-alpha.1"),
            ("1.0.0-alpha.beta", "alpha", "1.0.1-alpha.1"),
        ],
    )
    def test_next(self, version: str, channel: str, expected: str) -> None:
        assert str(next_prerelease(version, channel)) == expected

    @given(
        version=st.sampled_from(
            ["0.1.0", "1.0.0-alpha", "1.0.0-alpha.1", "1.0.0-beta.2", "1.0.0-rc.1", "1.0.0-0.1"]
        ),
        channel=st.sampled_from(["alpha", "beta", "rc", "next"]),
    )
    def test_always_newer(self, version: str, channel: str) -> None:
        assert next_prerelease(version, channel).compare_to(parse_version(version)) == 1

    @pytest.mark.parametrize("channel", ["a.b", "1", "01", "al_pha", ""])
    def test_invalid_channel(self, channel: str) -> None:
        with pytest.raises(ReleaseError):
            next_prerelease("1.0.1-a.b.1", channel)
