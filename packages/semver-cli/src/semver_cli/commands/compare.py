# SPDX-License-Identifier: MIT
"""Compare two versions by precedence."""

from __future__ import annotations

import click

from semver_core import InvalidVersionError, identical, parse_version
from semver_core import compare as compare_semver

from ..main import Context, echo_error, echo_info, pass_context


@click.command()
@click.argument("first")
@click.argument("second")
@click.option(
    "--identical",
    "check_identical",
    is_flag=True,
    help="Also require identical build metadata; prints true or false.",
)
@pass_context
def compare(ctx: Context, first: str, second: str, check_identical: bool) -> None:
    """Compare FIRST and SECOND by SemVer precedence.

    Prints -1 if FIRST is lower, 0 if equal and 1 if higher. Build metadata
    is ignored unless --identical is given.

    \b
    Examples:
        semver compare 1.0.0-alpha 1.0.0        # -1
        semver compare 1.0.0+a 1.0.0+b          # 0
        semver compare --identical 1.0.0+a 1.0.0+b  # false
    """
    options = ctx.load_options()
    try:
        v1 = parse_version(first, options)
        v2 = parse_version(second, options)
    except InvalidVersionError as e:
        echo_error(str(e))
        raise SystemExit(1)

    if ctx.verbose:
        echo_info(f"{v1} vs {v2}")

    if check_identical:
        echo_info("true" if identical(v1, v2) else "false")
        return

    echo_info(str(int(compare_semver(v1, v2))))
