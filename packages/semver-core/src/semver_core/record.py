# SPDX-License-Identifier: MIT
"""Structured record form of a semantic version.

The record is ``{major, minor, patch, prerelease?, build?}`` where
``prerelease`` is a list of ints and strings and ``build`` a list of strings.
The optional keys are present only when the version has them.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError
from .identifiers import BuildInfo, PreReleaseInfo
from .semver import SemanticVersion


class VersionRecord(BaseModel):
    """Serializable record of a semantic version."""

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    major: int = Field(ge=0, description="Major version number")
    minor: int = Field(ge=0, description="Minor version number")
    patch: int = Field(ge=0, description="Patch version number")
    prerelease: Optional[list[Union[int, str]]] = Field(
        default=None,
        description="Pre-release identifiers; ints are numeric identifiers",
    )
    build: Optional[list[str]] = Field(default=None, description="Build metadata identifiers")


def _pydantic_message(error: PydanticValidationError) -> tuple[str, Optional[str]]:
    first = error.errors()[0]
    loc = first.get("loc", ())
    field = str(loc[0]) if loc else None
    where = ".".join(str(part) for part in loc)
    return f"Invalid version record at {where or '<root>'}: {first['msg']}", field


def to_record(version: SemanticVersion) -> VersionRecord:
    return VersionRecord(
        major=version.major,
        minor=version.minor,
        patch=version.patch,
        prerelease=list(version.prerelease.parts) if version.prerelease is not None else None,
        build=list(version.build.parts) if version.build is not None else None,
    )


def from_record(data: Union[VersionRecord, dict[str, Any]]) -> SemanticVersion:
    """Build a SemanticVersion from a record.

    Identifiers go through the same invariants as direct construction, so a
    purely numeric string in ``prerelease`` is rejected rather than converted.

    Raises:
        ValidationError: If the record has missing, extra or invalid fields
    """
    if isinstance(data, VersionRecord):
        record = data
    else:
        try:
            record = VersionRecord.model_validate(data)
        except PydanticValidationError as e:
            message, field = _pydantic_message(e)
            raise ValidationError(message, field=field) from e

    return SemanticVersion(
        major=record.major,
        minor=record.minor,
        patch=record.patch,
        prerelease=PreReleaseInfo(record.prerelease) if record.prerelease is not None else None,
        build=BuildInfo(record.build) if record.build is not None else None,
    )


def to_json(version: SemanticVersion) -> str:
    return to_record(version).model_dump_json(exclude_none=True)


def from_json(text: Union[str, bytes]) -> SemanticVersion:
    try:
        record = VersionRecord.model_validate_json(text)
    except PydanticValidationError as e:
        message, field = _pydantic_message(e)
        raise ValidationError(message, field=field) from e
    return from_record(record)
