# SPDX-License-Identifier: MIT
"""Plan publishing or releasing a version."""

from __future__ import annotations

import dataclasses
import json
from typing import Optional

import click

from ..config import ConfigError
from ..main import Context, echo_error, echo_info, parse_or_exit, pass_context
from ..release import ReleaseError, publish_plan, release_plan


@click.command("release-plan")
@click.argument("version")
@click.option(
    "--publish",
    "publish",
    is_flag=True,
    help="Plan publishing VERSION instead of releasing a pending pre-release.",
)
@click.option("--tag-prefix", help="Override the git tag prefix (default: v).")
@click.option("--json", "as_json", is_flag=True, help="Print the plan as JSON.")
@pass_context
def release_plan_command(
    ctx: Context,
    version: str,
    publish: bool,
    tag_prefix: Optional[str],
    as_json: bool,
) -> None:
    """Print the names and versions involved in releasing VERSION.

    By default VERSION must be a pre-release; the plan names the release it
    becomes and the branches and pull request used to get there. With
    --publish the plan names the registry dist-tag and git tag instead.

    \b
    Examples:
        semver release-plan 1.1.0-beta.2
        semver release-plan 1.1.0-beta.2 --publish --json
    """
    v = parse_or_exit(version)

    try:
        config = ctx.load_config()
        if tag_prefix is not None:
            config = dataclasses.replace(config, tag_prefix=tag_prefix)
        plan = publish_plan(v, config) if publish else release_plan(v, config)
    except (ReleaseError, ConfigError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    data = plan.to_dict()
    if as_json:
        echo_info(json.dumps(data, indent=2))
        return

    for key, value in data.items():
        echo_info(f"{key}: {'' if value is None else value}")
