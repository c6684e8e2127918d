# SPDX-License-Identifier: MIT
"""Parse a version and print its components."""

from __future__ import annotations

import json

import click

from semver_core import parse as parse_semver

from ..main import Context, echo_error, echo_info, pass_context


@click.command()
@click.argument("version")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the components as JSON.",
)
@pass_context
def parse(ctx: Context, version: str, as_json: bool) -> None:
    """Parse VERSION and print its components.

    \b
    Examples:
        semver parse 1.2.3
        semver parse v2.0.0-rc.1+build.5 --json
    """
    result = parse_semver(version, ctx.load_options())
    if result.error is not None:
        echo_error(f"{result.error.kind.value}: {result.error.message}")
        raise SystemExit(1)

    parsed = result.unwrap()
    if as_json:
        data = {
            "version": str(parsed),
            "major": parsed.major,
            "minor": parsed.minor,
            "patch": parsed.patch,
            "prerelease": list(parsed.prerelease),
            "build": list(parsed.build),
            "is_prerelease": parsed.is_prerelease,
        }
        echo_info(json.dumps(data, indent=2))
        return

    echo_info(f"version:    {parsed}")
    echo_info(f"major:      {parsed.major}")
    echo_info(f"minor:      {parsed.minor}")
    echo_info(f"patch:      {parsed.patch}")
    echo_info(f"prerelease: {parsed.prerelease_string or '-'}")
    echo_info(f"build:      {parsed.build_string or '-'}")
