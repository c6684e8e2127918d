# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove parser settings inherited from the calling environment."""
    for name in ("SEMVER_ALLOW_V_PREFIX", "SEMVER_STRIP_WHITESPACE", "SEMVER_MAX_COMPONENT"):
        monkeypatch.delenv(name, raising=False)
