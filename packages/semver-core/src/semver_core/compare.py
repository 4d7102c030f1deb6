# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

Pre-release ordering: numeric identifiers compare numerically, alphanumeric
identifiers compare in ASCII order, numeric < alphanumeric, and a shorter
run of identifiers sorts before a longer one it is a prefix of.
A release always sorts after its pre-releases.
Build metadata is ignored in comparisons.
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

from .semver import SemanticVersion, parse_version

VersionLike = Union[str, SemanticVersion]


def _as_version(version: VersionLike) -> SemanticVersion:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or SemanticVersion)
        version2: Second version (string or SemanticVersion)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        ParseError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+a", "1.0.0+b")
        0
        >>> compare_versions("1.0.0-alpha", "1.0.0-alpha.1")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
    """
    return _as_version(version1).compare_to(_as_version(version2))


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, consistent with compare_versions.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _as_version(version)

    # Release becomes (1,) to sort after every pre-release (0, ...).
    # Identifiers become (0, n) or (1, s) so numbers sort before strings;
    # tuple comparison already puts a prefix before its extensions.
    if v.prerelease is None:
        prerelease_key: tuple = (1,)
    else:
        parts = tuple(
            (0, part) if isinstance(part, int) else (1, part) for part in v.prerelease.parts
        )
        prerelease_key = (0, parts)

    return (v.major, v.minor, v.patch, prerelease_key)


def sort_versions(versions: Iterable[VersionLike], reverse: bool = False) -> list[SemanticVersion]:
    """Parse and sort versions by precedence.

    The sort is stable, so versions differing only in build metadata keep
    their input order.
    """
    return sorted((_as_version(v) for v in versions), key=version_key, reverse=reverse)


def max_version(versions: Iterable[VersionLike]) -> SemanticVersion:
    """Return the version with the highest precedence.

    Raises:
        ValueError: If ``versions`` is empty
    """
    parsed = [_as_version(v) for v in versions]
    if not parsed:
        raise ValueError("max_version() requires at least one version")
    return max(parsed, key=version_key)


def latest_stable(versions: Iterable[VersionLike]) -> Optional[SemanticVersion]:
    """Return the highest version that is not a pre-release, or None."""
    releases = [v for v in (_as_version(v) for v in versions) if v.prerelease is None]
    if not releases:
        return None
    return max(releases, key=version_key)
