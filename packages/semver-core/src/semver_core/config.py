# SPDX-License-Identifier: MIT
"""Parser configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

# Largest value accepted for major, minor and patch (signed 64-bit range)
MAX_COMPONENT = 2**63 - 1


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Options controlling how version strings are parsed.

    Attributes:
        allow_v_prefix: Accept and discard a single leading "v" (e.g. "v1.2.3")
        strip_whitespace: Strip surrounding whitespace before parsing
        max_component: Largest accepted value for major, minor and patch
    """

    allow_v_prefix: bool = True
    strip_whitespace: bool = False
    max_component: int = MAX_COMPONENT

    @classmethod
    def from_env(cls) -> "ParseOptions":
        """Create options from environment variables.

        Reads SEMVER_ALLOW_V_PREFIX, SEMVER_STRIP_WHITESPACE and
        SEMVER_MAX_COMPONENT, falling back to the defaults for unset values.

        Raises:
            ValueError: If SEMVER_MAX_COMPONENT is not a non-negative integer
        """
        max_component = MAX_COMPONENT
        if raw := os.getenv("SEMVER_MAX_COMPONENT"):
            max_component = int(raw)
            if max_component < 0:
                raise ValueError(f"SEMVER_MAX_COMPONENT must be non-negative, got {raw}")

        return cls(
            allow_v_prefix=_env_flag("SEMVER_ALLOW_V_PREFIX", True),
            strip_whitespace=_env_flag("SEMVER_STRIP_WHITESPACE", False),
            max_component=max_component,
        )


DEFAULT_OPTIONS = ParseOptions()
