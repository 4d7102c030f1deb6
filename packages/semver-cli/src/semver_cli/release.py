# SPDX-License-Identifier: MIT
"""Release planning for the release automation.

The automation reads a version from project metadata and either publishes it
(pre-releases go to a registry channel named after the first pre-release
identifier) or turns a pending pre-release into a release pull request.
This module computes the names and versions involved; creating refs, pull
requests and registry uploads is left to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from semver_core import INCREMENT, PreReleaseInfo, SemanticVersion, parse_version

from .config import ReleaseConfig, check_channel

logger = logging.getLogger(__name__)

VersionLike = Union[str, SemanticVersion]


class ReleaseError(Exception):
    """Raised when a version cannot be released as requested."""

    pass


@dataclass(frozen=True)
class PublishPlan:
    """What to publish for a version.

    Attributes:
        version: Version being published
        dist_tag: Registry channel, or None for the default channel
        git_tag: Tag name to create, e.g. v1.2.3-beta.1
        tag_ref: Fully qualified tag ref
    """

    version: SemanticVersion
    dist_tag: Optional[str]
    git_tag: str
    tag_ref: str

    @property
    def tag_args(self) -> list[str]:
        """Registry publish arguments selecting the channel."""
        return ["--tag", self.dist_tag] if self.dist_tag else []

    def to_dict(self) -> dict:
        return {
            "version": str(self.version),
            "dist_tag": self.dist_tag,
            "git_tag": self.git_tag,
            "tag_ref": self.tag_ref,
        }


@dataclass(frozen=True)
class ReleasePlan:
    """How to turn a pending pre-release into a release.

    Attributes:
        prerelease_version: The pre-release found in project metadata
        release_version: The release it becomes
        pending_branch: Branch marking the pre-release as pending
        pending_ref: Fully qualified ref of pending_branch
        target_branch: Branch the release pull request targets
        target_ref: Fully qualified ref of target_branch
        pull_request_title: Title of the release pull request
        commit_message: Message of the commit updating the changelog
    """

    prerelease_version: SemanticVersion
    release_version: SemanticVersion
    pending_branch: str
    pending_ref: str
    target_branch: str
    target_ref: str
    pull_request_title: str
    commit_message: str

    def to_dict(self) -> dict:
        return {
            "prerelease_version": str(self.prerelease_version),
            "release_version": str(self.release_version),
            "pending_branch": self.pending_branch,
            "pending_ref": self.pending_ref,
            "target_branch": self.target_branch,
            "target_ref": self.target_ref,
            "pull_request_title": self.pull_request_title,
            "commit_message": self.commit_message,
        }


def _as_version(version: VersionLike) -> SemanticVersion:
    return parse_version(version) if isinstance(version, str) else version


def dist_tag_for(version: VersionLike) -> Optional[str]:
    """Return the registry channel for a version.

    Examples:
        >>> dist_tag_for("1.0.0-beta.2")
        'beta'
        >>> dist_tag_for("1.0.0") is None
        True
    """
    v = _as_version(version)
    return v.prerelease.dist_tag if v.prerelease is not None else None


def publish_plan(version: VersionLike, config: Optional[ReleaseConfig] = None) -> PublishPlan:
    """Plan publishing ``version`` and tagging it."""
    config = config or ReleaseConfig()
    v = _as_version(version)

    dist_tag = dist_tag_for(v)
    git_tag = f"{config.tag_prefix}{v}"
    logger.debug("Publishing %s with dist-tag %s as %s", v, dist_tag or "<default>", git_tag)

    return PublishPlan(
        version=v,
        dist_tag=dist_tag,
        git_tag=git_tag,
        tag_ref=f"refs/tags/{git_tag}",
    )


def release_plan(version: VersionLike, config: Optional[ReleaseConfig] = None) -> ReleasePlan:
    """Plan releasing a pending pre-release.

    Raises:
        ReleaseError: If ``version`` is not a pre-release
    """
    config = config or ReleaseConfig()
    v = _as_version(version)

    if v.prerelease is None:
        raise ReleaseError("Cannot release directly! Use a prerelease version first!")

    release = v.replace(prerelease=None, build=None)
    pending_branch = f"{config.pending_branch_prefix}{config.tag_prefix}{v}"
    target_branch = f"{config.release_branch_prefix}{config.tag_prefix}{release}"
    logger.debug("Releasing %s as %s from %s into %s", v, release, pending_branch, target_branch)

    return ReleasePlan(
        prerelease_version=v,
        release_version=release,
        pending_branch=pending_branch,
        pending_ref=f"refs/heads/{pending_branch}",
        target_branch=target_branch,
        target_ref=f"refs/heads/{target_branch}",
        pull_request_title=f"Release {v} as {release}",
        commit_message=f"Release of version {release}",
    )


def next_prerelease(version: VersionLike, channel: str = "alpha") -> SemanticVersion:
    """Return the next pre-release on ``channel``; the result always has higher precedence.

    Examples:
        >>> str(next_prerelease("1.0.0-alpha.1"))
        '1.0.0-alpha.2'
        >>> str(next_prerelease("1.0.0-alpha.3", "beta"))
        '1.0.0-beta.1'
        >>> str(next_prerelease("1.0.0", "beta"))
        '1.0.1-beta.1'

    Raises:
        ReleaseError: If ``channel`` is not a single alphanumeric identifier
    """
    v = _as_version(version)
    try:
        channel = check_channel(channel)
    except ValueError as e:
        raise ReleaseError(str(e)) from e
    candidate = PreReleaseInfo([channel, 1])

    if v.prerelease is not None:
        parts = v.prerelease.parts
        if parts[0] == channel and isinstance(parts[-1], int) and len(parts) > 1:
            result = v.replace(prerelease=parts[:-1] + (parts[-1] + 1,), build=None)
        elif candidate > v.prerelease:
            result = v.replace(prerelease=candidate, build=None)
        else:
            result = v.replace(patch=INCREMENT, prerelease=candidate, build=None)
    else:
        result = v.replace(patch=INCREMENT, prerelease=candidate, build=None)

    logger.debug("Next %s pre-release after %s is %s", channel, v, result)
    return result
