# SPDX-License-Identifier: MIT
"""CLI entry point for the semver command."""

from __future__ import annotations

import dataclasses
import logging
import sys
from typing import Optional

import click

from semver_core import InvalidVersionError, ParseOptions


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.options: Optional[ParseOptions] = None
        self.verbose: bool = False

    def load_options(self) -> ParseOptions:
        """Load parse options from the environment, caching the result."""
        if self.options is None:
            self.options = ParseOptions.from_env()
        return self.options


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


@click.group()
@click.version_option(package_name="semver-core")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "--no-v-prefix",
    is_flag=True,
    help="Reject versions with a leading 'v'.",
)
@click.option(
    "--strip-whitespace",
    is_flag=True,
    help="Ignore whitespace surrounding each version.",
)
@pass_context
def cli(ctx: Context, verbose: bool, no_v_prefix: bool, strip_whitespace: bool) -> None:
    """Semantic version inspection tool.

    Parse, validate, compare and sort SemVer 2.0.0 version strings.

    \b
    Examples:
        semver parse 1.2.3-rc.1+build.5
        semver validate 1.0.0 v2.0.0-beta
        semver compare 1.0.0-alpha 1.0.0
        semver sort 1.0.0 1.0.0-rc.1 0.9.0
    """
    ctx.verbose = verbose
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        options = ctx.load_options()
    except ValueError as e:
        echo_error(f"Invalid configuration: {e}")
        raise SystemExit(1)

    if no_v_prefix:
        options = dataclasses.replace(options, allow_v_prefix=False)
    if strip_whitespace:
        options = dataclasses.replace(options, strip_whitespace=True)
    ctx.options = options


# Import and register commands
from .commands import compare, parse, sort, validate

cli.add_command(parse.parse)
cli.add_command(validate.validate)
cli.add_command(compare.compare)
cli.add_command(sort.sort)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except InvalidVersionError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
