# SPDX-License-Identifier: MIT
"""Release naming configuration."""

from __future__ import annotations

from dataclasses import dataclass

from semver_core import ParseError, PreReleaseInfo


class ConfigError(Exception):
    """Raised when configuration is invalid."""

    pass


def check_channel(channel: str) -> str:
    """Return ``channel`` if it is a single alphanumeric pre-release identifier.

    Raises:
        ValueError: If ``channel`` is not a valid identifier, is numeric, or
            contains more than one dot-separated identifier
    """
    try:
        info = PreReleaseInfo.parse(channel)
    except ParseError as e:
        raise ValueError(f"{channel!r} is not a valid pre-release identifier") from e
    if len(info.parts) != 1 or not isinstance(info.parts[0], str):
        raise ValueError(f"channel must be a single alphanumeric identifier, got {channel!r}")
    return info.parts[0]


@dataclass
class ReleaseConfig:
    """Naming conventions used when planning releases.

    Attributes:
        tag_prefix: Prefix of git tags, e.g. "v" for v1.2.3
        pending_branch_prefix: Branch prefix holding a pre-release awaiting release
        release_branch_prefix: Branch prefix that receives the release pull request
        default_channel: Pre-release channel used when starting a new pre-release
    """

    tag_prefix: str = "v"
    pending_branch_prefix: str = "pending-releases/"
    release_branch_prefix: str = "releases/"
    default_channel: str = "alpha"

    @classmethod
    def from_env(cls) -> "ReleaseConfig":
        """Create configuration from environment variables."""
        import os

        config = cls()

        if (tag_prefix := os.getenv("SEMVER_TAG_PREFIX")) is not None:
            config.tag_prefix = tag_prefix
        if pending := os.getenv("SEMVER_PENDING_BRANCH_PREFIX"):
            config.pending_branch_prefix = pending
        if release := os.getenv("SEMVER_RELEASE_BRANCH_PREFIX"):
            config.release_branch_prefix = release
        if channel := os.getenv("SEMVER_DEFAULT_CHANNEL"):
            config.default_channel = channel

        config.validate()
        return config

    def validate(self) -> None:
        """Check the configuration.

        Raises:
            ConfigError: If a branch prefix is empty or does not end in "/",
                or the channel is not an alphanumeric pre-release identifier
        """
        for name in ("pending_branch_prefix", "release_branch_prefix"):
            value = getattr(self, name)
            if not value:
                raise ConfigError(f"{name} must not be empty")
            if not value.endswith("/"):
                raise ConfigError(f"{name} must end with '/', got {value!r}")

        if self.pending_branch_prefix == self.release_branch_prefix:
            raise ConfigError("pending_branch_prefix and release_branch_prefix must differ")

        try:
            check_channel(self.default_channel)
        except ValueError as e:
            raise ConfigError(f"Invalid default_channel: {e}") from e
