# SPDX-License-Identifier: MIT
"""Show the components of a version."""

from __future__ import annotations

import click

from ..main import echo_info, parse_or_exit


@click.command()
@click.argument("version")
@click.option("--json", "as_json", is_flag=True, help="Print the structured record as JSON.")
def parse(version: str, as_json: bool) -> None:
    """Parse VERSION and print its components.

    \b
    Examples:
        semver parse 1.2.3-rc.1+build.5
        semver parse 1.2.3-rc.1 --json
    """
    v = parse_or_exit(version)

    if as_json:
        echo_info(v.to_json())
        return

    echo_info(f"major: {v.major}")
    echo_info(f"minor: {v.minor}")
    echo_info(f"patch: {v.patch}")
    if v.prerelease is not None:
        echo_info(f"prerelease: {v.prerelease}")
    if v.build is not None:
        echo_info(f"build: {v.build}")
    echo_info(f"stable: {'yes' if v.is_stable else 'no'}")
