# SPDX-License-Identifier: MIT
"""CLI entry point for the semver command."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from semver_core import ParseError, SemanticVersion, VersionError, parse_version

from .config import ConfigError, ReleaseConfig
from .release import ReleaseError


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[ReleaseConfig] = None
        self.verbose: bool = False

    def load_config(self) -> ReleaseConfig:
        """Load configuration from the environment, caching the result."""
        if self.config is None:
            self.config = ReleaseConfig.from_env()
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def parse_or_exit(text: str) -> SemanticVersion:
    """Parse a version argument, exiting with status 1 if it is invalid."""
    try:
        return parse_version(text)
    except ParseError as e:
        echo_error(str(e))
        raise SystemExit(1)


@click.group()
@click.version_option(package_name="semver-toolkit")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@pass_context
def cli(ctx: Context, verbose: bool) -> None:
    """Semantic version tool.

    Parse, validate, compare, sort and bump SemVer 2.0.0 versions, and plan
    releases from a version string.

    \b
    Examples:
        semver parse 1.2.3-rc.1+build.5 --json
        semver compare 1.0.0 1.0.0-rc.1
        semver sort 1.10.0 1.9.0 1.0.0-alpha
        semver bump 1.0.0-alpha.1 --patch --no-prerelease
        semver release-plan 1.1.0-beta.2
    """
    ctx.verbose = verbose
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register commands
from .commands import parse, validate, compare, sort, bump, release  # noqa: E402

cli.add_command(parse.parse)
cli.add_command(validate.validate)
cli.add_command(compare.compare)
cli.add_command(sort.sort)
cli.add_command(bump.bump)
cli.add_command(release.release_plan_command)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except (VersionError, ReleaseError, ConfigError) as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
