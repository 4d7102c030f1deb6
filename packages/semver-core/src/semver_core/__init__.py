# SPDX-License-Identifier: MIT
"""Semantic version value types following SemVer 2.0.0.

This package parses version text into immutable values, renders them back
in canonical form, orders them by SemVer precedence and derives modified
copies.

Example:
    >>> from semver_core import parse_version, compare_versions, INCREMENT
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease.parts
    ('alpha', 1)
    >>> str(version.replace(patch=INCREMENT, prerelease=None, build=None))
    '1.2.4'
    >>>
    >>> compare_versions("1.0.0", "1.0.0-rc.1")
    1
"""

__version__ = "0.1.0"

from .errors import (
    VersionError,
    ParseError,
    ValidationError,
)
from .identifiers import (
    PreReleaseInfo,
    BuildInfo,
)
from .semver import (
    SemanticVersion,
    parse_version,
    is_valid_semver,
    INCREMENT,
    SEMVER_PATTERN,
    SEMVER_REGEX,
)
from .compare import (
    compare_versions,
    version_key,
    sort_versions,
    max_version,
    latest_stable,
)
from .record import (
    VersionRecord,
    to_record,
    from_record,
)
from .embedded import (
    find_versions,
    version_from_tag,
)

__all__ = [
    # Errors
    "VersionError",
    "ParseError",
    "ValidationError",
    # Value types
    "PreReleaseInfo",
    "BuildInfo",
    "SemanticVersion",
    # Parsing
    "parse_version",
    "is_valid_semver",
    "INCREMENT",
    "SEMVER_PATTERN",
    "SEMVER_REGEX",
    # Comparison
    "compare_versions",
    "version_key",
    "sort_versions",
    "max_version",
    "latest_stable",
    # Structured record
    "VersionRecord",
    "to_record",
    "from_record",
    # Versions inside text
    "find_versions",
    "version_from_tag",
]
