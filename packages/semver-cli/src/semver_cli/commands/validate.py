# SPDX-License-Identifier: MIT
"""Validate version strings against SemVer 2.0.0."""

from __future__ import annotations

import click

from semver_core import parse as parse_semver

from ..main import Context, echo_error, echo_info, echo_success, pass_context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Only report invalid versions.",
)
@pass_context
def validate(ctx: Context, versions: tuple[str, ...], quiet: bool) -> None:
    """Check that each of VERSIONS is a valid semantic version.

    Exits with status 1 if any version is invalid.

    \b
    Examples:
        semver validate 1.0.0
        semver validate 1.0.0 1.2 01.0.0
    """
    options = ctx.load_options()
    errors: list[str] = []

    for version in versions:
        result = parse_semver(version, options)
        if result.error is not None:
            errors.append(f"{version!r}: {result.error.kind.value}: {result.error.message}")
        elif not quiet:
            echo_info(f"{version}: valid")

    if errors:
        echo_error(f"Errors ({len(errors)}):")
        for error in errors:
            echo_error(f"  - {error}")
        raise SystemExit(1)

    if not quiet:
        echo_success("Validation passed")
