# SPDX-License-Identifier: MIT
"""Dot-separated identifiers used in pre-release and build metadata segments.

A pre-release identifier is either numeric (digits only, no leading zero
unless it is exactly "0") or alphanumeric (at least one non-digit from
[0-9A-Za-z-]). Numeric identifiers compare by integer value, alphanumeric
identifiers by ASCII order, and numeric always sorts below alphanumeric.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

IDENTIFIER_PATTERN = re.compile(r"[0-9A-Za-z-]+")
NUMERIC_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class NumericIdentifier:
    """A digits-only pre-release identifier, compared by value.

    The digits are kept as text and ordered by magnitude (length, then
    lexicographically) so identifiers of any length compare exactly without
    going through int(), which refuses very long digit strings.
    """

    digits: str

    @property
    def value(self) -> int:
        return int(self.digits)

    @property
    def magnitude(self) -> tuple[int, str]:
        significant = self.digits.lstrip("0") or "0"
        return (len(significant), significant)

    def __str__(self) -> str:
        return self.digits


@dataclass(frozen=True, slots=True)
class AlphanumericIdentifier:
    """A pre-release identifier containing at least one non-digit."""

    value: str

    def __str__(self) -> str:
        return self.value


Identifier = Union[NumericIdentifier, AlphanumericIdentifier]


def is_numeric(part: str) -> bool:
    """Return True if the identifier consists only of ASCII digits."""
    return NUMERIC_PATTERN.fullmatch(part) is not None


def check_build_identifier(part: str) -> Optional[str]:
    """Return a reason the build identifier is invalid, or None if it is valid."""
    if not part:
        return "empty identifier"
    if IDENTIFIER_PATTERN.fullmatch(part) is None:
        return f"identifier {part!r} contains characters outside [0-9A-Za-z-]"
    return None


def check_prerelease_identifier(part: str) -> Optional[str]:
    """Return a reason the pre-release identifier is invalid, or None if it is valid.

    Pre-release identifiers follow the build rules plus the leading-zero
    restriction on numeric identifiers.
    """
    reason = check_build_identifier(part)
    if reason is not None:
        return reason
    if len(part) > 1 and part[0] == "0" and is_numeric(part):
        return f"numeric identifier {part!r} has a leading zero"
    return None


def parse_identifier(part: str) -> Identifier:
    """Classify a pre-release identifier.

    Args:
        part: A single identifier (no dots)

    Returns:
        NumericIdentifier or AlphanumericIdentifier

    Raises:
        ValueError: If the identifier is not a valid pre-release identifier

    Examples:
        >>> parse_identifier("11")
        NumericIdentifier(digits='11')
        >>> parse_identifier("rc")
        AlphanumericIdentifier(value='rc')
    """
    reason = check_prerelease_identifier(part)
    if reason is not None:
        raise ValueError(f"Invalid pre-release identifier: {reason}")
    return classify_identifier(part)


def classify_identifier(part: str) -> Identifier:
    """Classify an identifier as numeric or alphanumeric without validating it."""
    if is_numeric(part):
        return NumericIdentifier(part)
    return AlphanumericIdentifier(part)


def compare_identifiers(left: Identifier, right: Identifier) -> int:
    """Compare two pre-release identifiers by SemVer precedence.

    Returns:
        -1 if left < right
        0 if left == right
        1 if left > right
    """
    left_key, right_key = identifier_key(left), identifier_key(right)
    if left_key == right_key:
        return 0
    return -1 if left_key < right_key else 1


def identifier_key(identifier: Identifier) -> tuple:
    """Return the sort key that defines identifier precedence.

    Numeric identifiers rank first and order by magnitude. Alphanumeric
    identifiers order by str comparison, which is code point order and so
    ASCII order for this alphabet.
    """
    if isinstance(identifier, NumericIdentifier):
        return (0, identifier.magnitude, "")
    return (1, (0, ""), identifier.value)
