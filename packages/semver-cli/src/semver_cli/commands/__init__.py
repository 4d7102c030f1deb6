# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import parse, validate, compare, sort, bump, release

__all__ = ["parse", "validate", "compare", "sort", "bump", "release"]
