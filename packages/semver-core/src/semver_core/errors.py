# SPDX-License-Identifier: MIT
"""Error values and exceptions for version parsing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ParseErrorKind(str, Enum):
    """Categories of version parse failure."""

    EMPTY_INPUT = "empty_input"
    MALFORMED_CORE = "malformed_core"
    INVALID_PRERELEASE_IDENTIFIER = "invalid_prerelease_identifier"
    INVALID_BUILD_IDENTIFIER = "invalid_build_identifier"
    NO_MATCH = "no_match"


@dataclass(frozen=True, slots=True)
class ParseError:
    """Details about why a version string was rejected.

    Attributes:
        kind: Failure category
        message: Human-readable description
        input: The rejected input as given by the caller
        segment: The offending part of the input (e.g. "01" or "alpha_beta"), if any
    """

    kind: ParseErrorKind
    message: str
    input: Any
    segment: Optional[str] = None

    def __str__(self) -> str:
        return self.message


class SemverError(Exception):
    """Base exception for semantic version errors."""

    pass


class InvalidVersionError(SemverError, ValueError):
    """Raised when a version string does not follow semantic versioning.

    Attributes:
        version: The rejected input
        error: Structured description of the failure
        message: Human-readable error message
    """

    def __init__(self, version: Any, error: Optional[ParseError] = None, message: str = ""):
        self.version = version
        self.error = error
        self.message = message or (
            f"Invalid semantic version {version!r}: {error.message}"
            if error is not None
            else f"Invalid semantic version: {version!r}"
        )
        super().__init__(self.message)

    @property
    def kind(self) -> Optional[ParseErrorKind]:
        """Failure category, if a structured error is attached."""
        return self.error.kind if self.error is not None else None
