# SPDX-License-Identifier: MIT
"""Validate version strings."""

from __future__ import annotations

import click

from semver_core import is_valid_semver

from ..main import echo_error, echo_success


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option("--quiet", "-q", is_flag=True, help="Only set the exit status.")
def validate(versions: tuple[str, ...], quiet: bool) -> None:
    """Check that every VERSION follows SemVer 2.0.0.

    Exits with status 1 if any version is invalid.

    \b
    Examples:
        semver validate 1.0.0 2.0.0-rc.1
        semver validate -q "$VERSION" || exit 1
    """
    invalid = [v for v in versions if not is_valid_semver(v)]

    if not invalid:
        if not quiet:
            echo_success("Validation passed")
        return

    if not quiet:
        for version in invalid:
            echo_error(f"{version!r} is not a valid semantic version")
    raise SystemExit(1)
