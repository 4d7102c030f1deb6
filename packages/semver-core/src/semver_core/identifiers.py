# SPDX-License-Identifier: MIT
"""Pre-release and build metadata identifiers.

A pre-release is an ordered list of identifiers where each identifier is
either numeric (stored as ``int``) or alphanumeric (stored as ``str``).
The Python type of a part is its tag: comparison depends on it, so numeric
text is always converted to ``int`` when parsing.

Build metadata is an ordered list of plain strings with no precedence.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from .errors import ParseError, ValidationError

Identifier = Union[int, str]

NUMERIC_IDENTIFIER = re.compile(r"0|[1-9][0-9]*")
ALPHANUMERIC_IDENTIFIER = re.compile(r"[0-9A-Za-z-]*[A-Za-z-][0-9A-Za-z-]*")
BUILD_IDENTIFIER = re.compile(r"[0-9A-Za-z-]+")


def _compare_parts(a: Identifier, b: Identifier) -> int:
    a_numeric = isinstance(a, int)
    b_numeric = isinstance(b, int)

    # Numeric identifiers always have lower precedence than alphanumeric ones
    if a_numeric and not b_numeric:
        return -1
    if b_numeric and not a_numeric:
        return 1

    if a == b:
        return 0
    return -1 if a < b else 1  # type: ignore[operator]


@dataclass(frozen=True, slots=True)
class PreReleaseInfo:
    """Pre-release identifiers of a version, e.g. ``alpha.1``.

    Attributes:
        parts: Identifiers in order; ints are numeric, strs alphanumeric
    """

    parts: tuple[Identifier, ...]

    def __init__(self, parts: Iterable[Identifier]):
        if isinstance(parts, (str, bytes)):
            raise ValidationError(
                "Pre-release parts must be a sequence of identifiers, not a string. "
                "Use PreReleaseInfo.parse() for dotted text.",
                field="prerelease",
            )
        parts = tuple(parts)
        if not parts:
            raise ValidationError("Pre-release must have at least one part", field="prerelease")

        for part in parts:
            if isinstance(part, bool) or not isinstance(part, (int, str)):
                raise ValidationError(
                    f"Pre-release identifier {part!r} must be an int or a str",
                    field="prerelease",
                )
            if isinstance(part, int):
                if part < 0:
                    raise ValidationError(
                        f"Numeric pre-release identifier {part} must not be negative",
                        field="prerelease",
                    )
            elif not ALPHANUMERIC_IDENTIFIER.fullmatch(part):
                raise ValidationError(
                    f"Invalid pre-release identifier {part!r}: non-number parts must "
                    "contain at least one non-digit and only [0-9A-Za-z-]",
                    field="prerelease",
                )

        object.__setattr__(self, "parts", parts)

    @classmethod
    def parse(cls, text: str) -> PreReleaseInfo:
        """Parse dotted pre-release text such as ``rc.1``.

        Raises:
            ParseError: If any identifier is empty, has a leading zero, or
                contains characters outside ``[0-9A-Za-z-]``
        """
        if not isinstance(text, str):
            raise ParseError(text, f"Pre-release must be a string, got {type(text).__name__}")

        parts: list[Identifier] = []
        for token in text.split("."):
            if NUMERIC_IDENTIFIER.fullmatch(token):
                parts.append(int(token))
            elif ALPHANUMERIC_IDENTIFIER.fullmatch(token):
                parts.append(token)
            else:
                raise ParseError(text, f"Invalid pre-release {text!r}: bad identifier {token!r}")
        return cls(parts)

    @staticmethod
    def compare(a: Optional[PreReleaseInfo], b: Optional[PreReleaseInfo]) -> int:
        """Compare two optional pre-releases.

        A missing pre-release means a release, which outranks any pre-release.
        """
        if a is None and b is None:
            return 0
        if a is None:
            return 1
        if b is None:
            return -1
        return a.compare_to(b)

    def compare_to(self, other: PreReleaseInfo) -> int:
        """Return -1, 0 or 1 as this pre-release is lower, equal or higher."""
        for a, b in zip(self.parts, other.parts):
            result = _compare_parts(a, b)
            if result:
                return result

        # Equal up to the shorter length: the longer one has higher precedence
        if len(self.parts) != len(other.parts):
            return -1 if len(self.parts) < len(other.parts) else 1
        return 0

    def is_newer(self, other: PreReleaseInfo) -> bool:
        return self.compare_to(other) == 1

    def is_older(self, other: PreReleaseInfo) -> bool:
        return self.compare_to(other) == -1

    @property
    def dist_tag(self) -> str:
        """First identifier as text, used to pick a registry channel."""
        return str(self.parts[0])

    def __str__(self) -> str:
        return ".".join(str(part) for part in self.parts)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PreReleaseInfo):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PreReleaseInfo):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PreReleaseInfo):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PreReleaseInfo):
            return NotImplemented
        return self.compare_to(other) >= 0


@dataclass(frozen=True, slots=True)
class BuildInfo:
    """Build metadata of a version, e.g. ``build.42``.

    Attributes:
        parts: Identifiers in order, kept verbatim as strings
    """

    parts: tuple[str, ...]

    def __init__(self, parts: Iterable[str]):
        if isinstance(parts, (str, bytes)):
            raise ValidationError(
                "Build parts must be a sequence of identifiers, not a string. "
                "Use BuildInfo.parse() for dotted text.",
                field="build",
            )
        parts = tuple(parts)
        if not parts:
            raise ValidationError("Build metadata must have at least one part", field="build")

        for part in parts:
            if not isinstance(part, str) or not BUILD_IDENTIFIER.fullmatch(part):
                raise ValidationError(
                    f"Invalid build identifier {part!r}: expected a non-empty string of [0-9A-Za-z-]",
                    field="build",
                )

        object.__setattr__(self, "parts", parts)

    @classmethod
    def parse(cls, text: str) -> BuildInfo:
        """Parse dotted build metadata text. Identifiers are not type-converted."""
        if not isinstance(text, str):
            raise ParseError(text, f"Build metadata must be a string, got {type(text).__name__}")

        tokens = text.split(".")
        for token in tokens:
            if not BUILD_IDENTIFIER.fullmatch(token):
                raise ParseError(text, f"Invalid build metadata {text!r}: bad identifier {token!r}")
        return cls(tokens)

    def __str__(self) -> str:
        return ".".join(self.parts)
