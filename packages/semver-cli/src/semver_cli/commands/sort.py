# SPDX-License-Identifier: MIT
"""Sort versions by precedence."""

from __future__ import annotations

import click

from semver_core import sort_versions

from ..main import echo_info, parse_or_exit


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option("--reverse", "-r", is_flag=True, help="Newest first.")
@click.option("--stable-only", is_flag=True, help="Drop pre-release versions.")
def sort(versions: tuple[str, ...], reverse: bool, stable_only: bool) -> None:
    """Print VERSIONS sorted by precedence, one per line.

    \b
    Examples:
        semver sort 1.10.0 1.9.0 1.0.0-alpha
        semver sort --reverse --stable-only $(git tag --list | sed 's/^v//')
    """
    parsed = [parse_or_exit(v) for v in versions]
    if stable_only:
        parsed = [v for v in parsed if v.prerelease is None]

    for v in sort_versions(parsed, reverse=reverse):
        echo_info(str(v))
