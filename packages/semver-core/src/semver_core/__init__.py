# SPDX-License-Identifier: MIT
"""Semantic version parsing and comparison.

This package provides utilities for parsing, validating, comparing and
rendering versions following the SemVer 2.0.0 specification.

Example:
    >>> from semver_core import parse, parse_version, compare_versions, is_valid_semver
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    ('alpha', '1')
    >>>
    >>> is_valid_semver("1.0.0")
    True
    >>>
    >>> parse("01.0.0").error.kind.value
    'malformed_core'
    >>>
    >>> compare_versions("1.0.0-1", "1.0.0-alpha")
    -1
"""

__version__ = "0.1.0"

from .config import (
    DEFAULT_OPTIONS,
    MAX_COMPONENT,
    ParseOptions,
)
from .errors import (
    InvalidVersionError,
    ParseError,
    ParseErrorKind,
    SemverError,
)
from .identifiers import (
    AlphanumericIdentifier,
    Identifier,
    NumericIdentifier,
    compare_identifiers,
    parse_identifier,
)
from .semver import (
    JSON_SCHEMA_PATTERN,
    SEMVER_PATTERN,
    ParseResult,
    Version,
    is_valid_semver,
    parse,
    parse_version,
)
from .compare import (
    Ordering,
    compare,
    compare_versions,
    identical,
    semantic_equals,
    sort_versions,
    version_key,
)

__all__ = [
    # Configuration
    "ParseOptions",
    "DEFAULT_OPTIONS",
    "MAX_COMPONENT",
    # Errors
    "SemverError",
    "InvalidVersionError",
    "ParseError",
    "ParseErrorKind",
    # Identifiers
    "Identifier",
    "NumericIdentifier",
    "AlphanumericIdentifier",
    "parse_identifier",
    "compare_identifiers",
    # Version parsing
    "Version",
    "ParseResult",
    "parse",
    "parse_version",
    "is_valid_semver",
    "SEMVER_PATTERN",
    "JSON_SCHEMA_PATTERN",
    # Version comparison
    "Ordering",
    "compare",
    "compare_versions",
    "semantic_equals",
    "identical",
    "version_key",
    "sort_versions",
]
