# SPDX-License-Identifier: MIT
"""Compare two versions by precedence."""

from __future__ import annotations

import click

from ..main import echo_info, parse_or_exit


@click.command()
@click.argument("version1")
@click.argument("version2")
def compare(version1: str, version2: str) -> None:
    """Print -1, 0 or 1 as VERSION1 is older, equal or newer than VERSION2.

    Build metadata is ignored.

    \b
    Examples:
        semver compare 1.0.0 1.0.0-rc.1     # 1
        semver compare 1.0.0+a 1.0.0+b      # 0
    """
    v1 = parse_or_exit(version1)
    v2 = parse_or_exit(version2)
    echo_info(str(v1.compare_to(v2)))
