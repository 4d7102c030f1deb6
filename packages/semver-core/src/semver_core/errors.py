# SPDX-License-Identifier: MIT
"""Exceptions raised by the semantic version core."""

from __future__ import annotations

from typing import Any, Optional


class VersionError(Exception):
    """Base class for all semantic version errors."""

    pass


class ParseError(VersionError):
    """Raised when text does not follow the SemVer 2.0.0 grammar."""

    def __init__(self, text: Any, message: str = ""):
        self.text = text
        self.message = message or f"Could not parse semantic version. {text!r} is not valid."
        super().__init__(self.message)


class ValidationError(VersionError):
    """Raised when a version value is constructed with invalid fields."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        self.message = message
        super().__init__(message)
