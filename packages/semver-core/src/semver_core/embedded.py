# SPDX-License-Identifier: MIT
"""Locate semantic versions inside larger text such as tags and changelogs."""

from __future__ import annotations

import re

from .errors import ParseError
from .semver import SEMVER_REGEX, SemanticVersion

# A version must stand alone: not glued to other identifier characters on
# either side, except for a leading "v" that starts a word ("v1.2.3").
_EMBEDDED_PATTERN = re.compile(
    r"(?:(?<=\bv)|(?<![0-9A-Za-z._+-]))"
    + SEMVER_REGEX
    + r"(?![0-9A-Za-z_+-]|\.[0-9A-Za-z_-])"
)


def find_versions(text: str) -> list[SemanticVersion]:
    """Return every standalone semantic version found in ``text``, in order.

    Examples:
        >>> [str(v) for v in find_versions("## v1.2.0-rc.1 (2024-01-02), after 1.1.9.")]
        ['1.2.0-rc.1', '1.1.9']
        >>> find_versions("build 1.2.3.4")
        []
    """
    return [SemanticVersion.parse(match.group(0)) for match in _EMBEDDED_PATTERN.finditer(text)]


def version_from_tag(tag: str, prefix: str = "v") -> SemanticVersion:
    """Parse a git tag like ``v1.2.3`` into a version.

    Raises:
        ParseError: If the tag lacks ``prefix`` or the rest is not a version
    """
    if not tag.startswith(prefix):
        raise ParseError(tag, f"Tag {tag!r} does not start with {prefix!r}")
    return SemanticVersion.parse(tag[len(prefix) :])
