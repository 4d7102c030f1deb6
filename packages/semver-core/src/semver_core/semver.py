# SPDX-License-Identifier: MIT
"""Semantic version parsing, rendering and derivation.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata
exactly as defined by SemVer 2.0.0:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92, -x-y-z.--
- Build metadata: +build, +build.123, +20240101, +exp.sha.5114f85
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Union

from .errors import ParseError, ValidationError
from .identifiers import BuildInfo, Identifier, PreReleaseInfo

# Semantic versioning regex (SemVer 2.0.0), without anchors so it can be
# embedded in larger patterns.
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_REGEX = (
    r"(?P<major>0|[1-9][0-9]*)"
    r"\.(?P<minor>0|[1-9][0-9]*)"
    r"\.(?P<patch>0|[1-9][0-9]*)"
    r"(?:-(?P<prerelease>(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
)

# Always used with fullmatch, so "1.0.0\n" is rejected
SEMVER_PATTERN = re.compile(SEMVER_REGEX)

# Directive for SemanticVersion.replace(): set the field to its current value + 1
INCREMENT = "increment"

_UNSET: Any = object()

NumberUpdate = Union[int, str]
PreReleaseUpdate = Union[PreReleaseInfo, str, Iterable[Identifier], None]
BuildUpdate = Union[BuildInfo, str, Iterable[str], None]


def _check_number(value: Any, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError(
            f"Invalid input. {value!r} is not valid for {name}: expected a non-negative integer",
            field=name,
        )


def _updated_number(update: NumberUpdate, current: int) -> int:
    if update is _UNSET:
        return current
    if update == INCREMENT:
        return current + 1
    return update  # type: ignore[return-value]


def _coerce_prerelease(update: PreReleaseUpdate) -> Optional[PreReleaseInfo]:
    if update is None or isinstance(update, PreReleaseInfo):
        return update
    if isinstance(update, str):
        return PreReleaseInfo.parse(update) if update else None
    parts = tuple(update)
    return PreReleaseInfo(parts) if parts else None


def _coerce_build(update: BuildUpdate) -> Optional[BuildInfo]:
    if update is None or isinstance(update, BuildInfo):
        return update
    if isinstance(update, str):
        return BuildInfo.parse(update) if update else None
    parts = tuple(update)
    return BuildInfo(parts) if parts else None


@dataclass(frozen=True, slots=True)
class SemanticVersion:
    """Represents a valid semantic version.

    Equality and hashing are structural and include build metadata. Ordering
    operators follow SemVer precedence, which ignores build metadata, so two
    versions can be neither ``<`` nor ``>`` each other and still differ.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Optional pre-release identifiers (e.g. alpha.1); None for a release
        build: Optional build metadata (e.g. build.123); never affects precedence
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[PreReleaseInfo] = None
    build: Optional[BuildInfo] = None

    def __post_init__(self) -> None:
        _check_number(self.major, "major")
        _check_number(self.minor, "minor")
        _check_number(self.patch, "patch")
        if self.prerelease is not None and not isinstance(self.prerelease, PreReleaseInfo):
            raise ValidationError(
                f"prerelease must be a PreReleaseInfo or None, got {type(self.prerelease).__name__}",
                field="prerelease",
            )
        if self.build is not None and not isinstance(self.build, BuildInfo):
            raise ValidationError(
                f"build must be a BuildInfo or None, got {type(self.build).__name__}",
                field="build",
            )

    @classmethod
    def parse(cls, text: str) -> SemanticVersion:
        """Parse a semantic version string. See :func:`parse_version`."""
        if not isinstance(text, str):
            raise ParseError(text, f"Version must be a string, got {type(text).__name__}")

        match = SEMVER_PATTERN.fullmatch(text)
        if not match:
            raise ParseError(text)

        prerelease = match.group("prerelease")
        build = match.group("buildmetadata")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=PreReleaseInfo.parse(prerelease) if prerelease is not None else None,
            build=BuildInfo.parse(build) if build is not None else None,
        )

    @classmethod
    def from_dict(cls, record: dict[str, Any]) -> SemanticVersion:
        """Build a version from its structured record. See :func:`semver_core.record.from_record`."""
        from .record import from_record

        return from_record(record)

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> SemanticVersion:
        from .record import from_json

        return from_json(text)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease is not None:
            version += f"-{self.prerelease}"
        if self.build is not None:
            version += f"+{self.build}"
        return version

    def __repr__(self) -> str:
        return f"SemanticVersion({str(self)!r})"

    @property
    def is_stable(self) -> bool:
        """Return True for 1.0.0 and above; 0.x versions are not stable yet."""
        return self.major > 0

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease is not None

    def compare_to(self, other: SemanticVersion) -> int:
        """Compare precedence with another version.

        Returns:
            -1 if this version is older than ``other``
            0 if both have the same precedence
            1 if this version is newer

        Build metadata is ignored.
        """
        if not isinstance(other, SemanticVersion):
            raise TypeError(
                f"Cannot compare SemanticVersion with {type(other).__name__}"
            )

        for attr in ("major", "minor", "patch"):
            val1 = getattr(self, attr)
            val2 = getattr(other, attr)
            if val1 != val2:
                return -1 if val1 < val2 else 1

        return PreReleaseInfo.compare(self.prerelease, other.prerelease)

    def has_same_precedence(self, other: SemanticVersion) -> bool:
        return self.compare_to(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare_to(other) >= 0

    def replace(
        self,
        *,
        major: NumberUpdate = _UNSET,
        minor: NumberUpdate = _UNSET,
        patch: NumberUpdate = _UNSET,
        prerelease: PreReleaseUpdate = _UNSET,
        build: BuildUpdate = _UNSET,
    ) -> SemanticVersion:
        """Return a new version with the given fields changed.

        Omitted fields keep their current value. ``major``, ``minor`` and
        ``patch`` take an int or :data:`INCREMENT`; only the named field is
        changed, so incrementing ``patch`` keeps the pre-release. Pass
        ``prerelease=None`` as well to get the release version.

        ``prerelease`` and ``build`` take None or an empty value to clear,
        an info object, dotted text, or a sequence of identifiers.

        Examples:
            >>> v = parse_version("1.0.0-alpha.1")
            >>> str(v.replace(patch=INCREMENT))
            '1.0.1-alpha.1'
            >>> str(v.replace(patch=INCREMENT, prerelease=None))
            '1.0.1'
        """
        return SemanticVersion(
            major=_updated_number(major, self.major),
            minor=_updated_number(minor, self.minor),
            patch=_updated_number(patch, self.patch),
            prerelease=self.prerelease if prerelease is _UNSET else _coerce_prerelease(prerelease),
            build=self.build if build is _UNSET else _coerce_build(build),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the structured record; ``prerelease``/``build`` only when set."""
        record: dict[str, Any] = {
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
        }
        if self.prerelease is not None:
            record["prerelease"] = list(self.prerelease.parts)
        if self.build is not None:
            record["build"] = list(self.build.parts)
        return record

    def to_json(self) -> str:
        from .record import to_json

        return to_json(self)


def parse_version(version_string: str) -> SemanticVersion:
    """Parse a semantic version string into a SemanticVersion object.

    The whole string must match the grammar: no surrounding whitespace and
    no ``v`` prefix.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A SemanticVersion with parsed components. Numeric pre-release
        identifiers become ints.

    Raises:
        ParseError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        SemanticVersion('1.2.3')

        >>> parse_version("1.0.0-alpha.1").prerelease.parts
        ('alpha', 1)

        >>> parse_version("2.0.0-rc.1+build.456").build.parts
        ('build', '456')
    """
    return SemanticVersion.parse(version_string)


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    if not isinstance(version_string, str):
        return False
    return SEMVER_PATTERN.fullmatch(version_string) is not None
