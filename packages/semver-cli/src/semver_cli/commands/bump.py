# SPDX-License-Identifier: MIT
"""Derive a new version from an existing one."""

from __future__ import annotations

from typing import Any, Optional

import click

from semver_core import INCREMENT, VersionError

from ..config import ConfigError
from ..main import Context, echo_error, echo_info, parse_or_exit, pass_context
from ..release import ReleaseError, next_prerelease


def _number_update(name: str, increment: bool, value: Optional[int], updates: dict[str, Any]) -> None:
    if increment and value is not None:
        raise click.UsageError(f"--{name} and --set-{name} are mutually exclusive")
    if increment:
        updates[name] = INCREMENT
    elif value is not None:
        updates[name] = value


@click.command()
@click.argument("version")
@click.option("--major", "inc_major", is_flag=True, help="Increment the major version.")
@click.option("--minor", "inc_minor", is_flag=True, help="Increment the minor version.")
@click.option("--patch", "inc_patch", is_flag=True, help="Increment the patch version.")
@click.option("--set-major", type=click.IntRange(min=0), help="Set the major version.")
@click.option("--set-minor", type=click.IntRange(min=0), help="Set the minor version.")
@click.option("--set-patch", type=click.IntRange(min=0), help="Set the patch version.")
@click.option("--prerelease", help="Set the pre-release, e.g. rc.1.")
@click.option("--no-prerelease", is_flag=True, help="Remove the pre-release.")
@click.option("--build", help="Set the build metadata, e.g. sha.5114f85.")
@click.option("--no-build", is_flag=True, help="Remove the build metadata.")
@click.option(
    "--next-prerelease",
    "advance",
    is_flag=True,
    help="Move to the next pre-release on --channel (applied after the other options).",
)
@click.option(
    "--channel",
    envvar="SEMVER_DEFAULT_CHANNEL",
    help="Pre-release channel for --next-prerelease (default: alpha).",
)
@pass_context
def bump(
    ctx: Context,
    version: str,
    inc_major: bool,
    inc_minor: bool,
    inc_patch: bool,
    set_major: Optional[int],
    set_minor: Optional[int],
    set_patch: Optional[int],
    prerelease: Optional[str],
    no_prerelease: bool,
    build: Optional[str],
    no_build: bool,
    advance: bool,
    channel: Optional[str],
) -> None:
    """Print VERSION with the requested changes.

    Only the named fields change: --patch keeps the pre-release, so combine
    it with --no-prerelease to cut a release.

    \b
    Examples:
        semver bump 1.0.0-alpha.1 --no-prerelease          # 1.0.0
        semver bump 1.0.0-alpha.1 --patch                  # 1.0.1-alpha.1
        semver bump 1.0.0-alpha.1 --patch --no-prerelease  # 1.0.1
        semver bump 1.0.0 --next-prerelease --channel beta # 1.0.1-beta.1
    """
    if prerelease is not None and no_prerelease:
        raise click.UsageError("--prerelease and --no-prerelease are mutually exclusive")
    if build is not None and no_build:
        raise click.UsageError("--build and --no-build are mutually exclusive")

    v = parse_or_exit(version)

    updates: dict[str, Any] = {}
    _number_update("major", inc_major, set_major, updates)
    _number_update("minor", inc_minor, set_minor, updates)
    _number_update("patch", inc_patch, set_patch, updates)
    if no_prerelease:
        updates["prerelease"] = None
    elif prerelease is not None:
        updates["prerelease"] = prerelease
    if no_build:
        updates["build"] = None
    elif build is not None:
        updates["build"] = build

    try:
        result = v.replace(**updates)
        if advance:
            result = next_prerelease(result, channel or ctx.load_config().default_channel)
    except (VersionError, ReleaseError, ConfigError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(str(result))
