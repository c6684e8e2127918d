# SPDX-License-Identifier: MIT
"""Sort versions by precedence."""

from __future__ import annotations

import click

from semver_core import InvalidVersionError, parse_version, sort_versions

from ..main import Context, echo_error, echo_info, pass_context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Print the highest version first.",
)
@pass_context
def sort(ctx: Context, versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS ordered by SemVer precedence, one per line.

    \b
    Examples:
        semver sort 1.0.0 1.0.0-rc.1 1.0.0-beta.11 1.0.0-beta.2
        semver sort --reverse 0.9.0 1.0.0
    """
    options = ctx.load_options()
    try:
        parsed = [parse_version(version, options) for version in versions]
    except InvalidVersionError as e:
        echo_error(str(e))
        raise SystemExit(1)

    for version in sort_versions(parsed, reverse=reverse):
        echo_info(str(version))
