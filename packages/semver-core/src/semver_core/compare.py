# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

Pre-release ordering: identifiers are compared left to right, numeric
identifiers by value, alphanumeric identifiers in ASCII order, and numeric
always below alphanumeric. A release outranks any pre-release of the same core.
Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Union

from .semver import Version, parse_version


class Ordering(IntEnum):
    """Result of comparing two versions."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _coerce(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare(v1: Version, v2: Version) -> Ordering:
    """Compare two versions by SemVer precedence.

    Both sides are ordered by their precedence_key, the same key the
    comparison operators and hashing use.

    Examples:
        >>> compare(parse_version("1.0.0-1"), parse_version("1.0.0-alpha"))
        <Ordering.LESS: -1>
        >>> compare(parse_version("1.0.0+a"), parse_version("1.0.0+b"))
        <Ordering.EQUAL: 0>
    """
    key1, key2 = v1.precedence_key, v2.precedence_key
    if key1 == key2:
        return Ordering.EQUAL
    return Ordering.LESS if key1 < key2 else Ordering.GREATER


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Note:
        Build metadata is ignored in comparisons per SemVer specification.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0", "1.0.0+build.7")
        0
        >>> compare_versions("1.0.0-beta.11", "1.0.0-beta.2")
        1
    """
    return int(compare(_coerce(version1), _coerce(version2)))


def semantic_equals(version1: Union[str, Version], version2: Union[str, Version]) -> bool:
    """Return True if both versions have equal precedence (build metadata ignored)."""
    return compare(_coerce(version1), _coerce(version2)) is Ordering.EQUAL


def identical(version1: Union[str, Version], version2: Union[str, Version]) -> bool:
    """Return True if both versions are exactly the same, build metadata included."""
    return _coerce(version1).is_identical(_coerce(version2))


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string or Version object

    Returns:
        A tuple that can be used for sorting versions

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _coerce(version).precedence_key


def sort_versions(versions: Iterable[Union[str, Version]], reverse: bool = False) -> list[Version]:
    """Parse and sort versions by precedence.

    The sort is stable, so versions differing only in build metadata keep
    their input order.

    Raises:
        InvalidVersionError: If any version string is invalid
    """
    return sorted((_coerce(v) for v in versions), key=version_key, reverse=reverse)
