# SPDX-License-Identifier: MIT
"""Semantic version parsing.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata,
following SemVer 2.0.0, plus an optional leading "v":
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92, -x-y-z.--
- Build metadata: +build, +build.123, +20240101, +exp.sha.5114f85
"""

from __future__ import annotations

import dataclasses
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Union, cast

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from .config import DEFAULT_OPTIONS, MAX_COMPONENT, ParseOptions
from .errors import InvalidVersionError, ParseError, ParseErrorKind
from .identifiers import (
    Identifier,
    check_build_identifier,
    check_prerelease_identifier,
    classify_identifier,
    identifier_key,
    is_numeric,
)

logger = logging.getLogger(__name__)

# Semantic versioning regex pattern (SemVer 2.0.0 compliant, plus optional "v")
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
_PATTERN_BODY = (
    r"v?(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
)

# \Z rather than $, which would also match before a trailing newline
SEMVER_PATTERN = re.compile(r"^" + _PATTERN_BODY + r"\Z", re.ASCII)

# JSON Schema patterns are ECMA-262, where $ already means end of input
JSON_SCHEMA_PATTERN = "^" + _PATTERN_BODY.replace("(?P<", "(?<") + "$"


def _as_identifiers(value: Union[str, Iterable[str], None]) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(value.split(".")) if value else ()
    if isinstance(value, Iterable):
        return tuple(value)
    return (value,)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a semantic version.

    Equality, hashing and ordering follow SemVer precedence: build metadata is
    ignored. Use is_identical() when build metadata must match as well.

    Constructing a Version never raises; out-of-grammar components (negative
    numbers, bad identifiers, values of the wrong type) are reported by
    is_valid and validation_errors(). Identifiers of the wrong type take part
    in rendering and precedence through their str() form. Core components are
    compared as given, so ordering against a non-int core is only defined
    where the raw values are orderable.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g., ("alpha", "1")); empty for releases
        build: Build metadata identifiers (e.g., ("build", "123"))
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()
    _key: tuple = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "prerelease", _as_identifiers(self.prerelease))
        object.__setattr__(self, "build", _as_identifiers(self.build))
        object.__setattr__(self, "_key", self._build_key())

    def _build_key(self) -> tuple:
        if not self.prerelease:
            return (self.major, self.minor, self.patch, 1, ())
        return (
            self.major,
            self.minor,
            self.patch,
            0,
            tuple(identifier_key(identifier) for identifier in self.prerelease_identifiers),
        )

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += "-" + self.prerelease_string
        if self.build:
            version += "+" + self.build_string
        return version

    @classmethod
    def parse(
        cls, version_string: str, options: Optional[ParseOptions] = None
    ) -> Optional["Version"]:
        """Parse a version string, returning None if it is not a valid version."""
        return parse(version_string, options).version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def core(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    @property
    def prerelease_string(self) -> Optional[str]:
        return ".".join(map(str, self.prerelease)) if self.prerelease else None

    @property
    def build_string(self) -> Optional[str]:
        return ".".join(map(str, self.build)) if self.build else None

    @property
    def prerelease_identifiers(self) -> tuple[Identifier, ...]:
        """Pre-release identifiers classified as numeric or alphanumeric."""
        return tuple(classify_identifier(str(part)) for part in self.prerelease)

    @property
    def precedence_key(self) -> tuple:
        """Sort key consistent with SemVer precedence (build metadata excluded).

        Computed once at construction; equality, hashing, ordering and
        compare() all read it.
        """
        return self._key

    def validation_errors(self) -> list[str]:
        """Return the reasons this version falls outside the SemVer grammar."""
        errors: list[str] = []
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if not _is_int(value):
                errors.append(f"{name} must be an integer, got {type(value).__name__}")
            elif value < 0:
                errors.append(f"{name} must be non-negative, got {value}")
            elif value > MAX_COMPONENT:
                errors.append(f"{name} exceeds {MAX_COMPONENT}")
        for part in self.prerelease:
            reason = check_prerelease_identifier(part) if isinstance(part, str) else "not a string"
            if reason is not None:
                errors.append(f"pre-release {reason}")
        for part in self.build:
            reason = check_build_identifier(part) if isinstance(part, str) else "not a string"
            if reason is not None:
                errors.append(f"build {reason}")
        return errors

    @property
    def is_valid(self) -> bool:
        """Return True if every component satisfies the SemVer grammar."""
        return not self.validation_errors()

    def ensure_valid(self) -> "Version":
        """Return self, or raise InvalidVersionError if any component is invalid."""
        errors = self.validation_errors()
        if errors:
            raise InvalidVersionError(
                self, message=f"Invalid semantic version {self!r}: {'; '.join(errors)}"
            )
        return self

    def replace(self, **changes: Any) -> "Version":
        """Return a copy of this version with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def is_identical(self, other: "Version") -> bool:
        """Return True if both versions match exactly, build metadata included."""
        return (
            self.core == other.core
            and self.prerelease == other.prerelease
            and self.build == other.build
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.precedence_key == other.precedence_key

    def __hash__(self) -> int:
        return hash(self.precedence_key)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.precedence_key < other.precedence_key

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.precedence_key <= other.precedence_key

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.precedence_key > other.precedence_key

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.precedence_key >= other.precedence_key

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _validate_field,
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": JSON_SCHEMA_PATTERN, "examples": ["1.0.0"]}


def _validate_field(value: Any) -> Version:
    if isinstance(value, Version):
        return value.ensure_valid()
    return parse_version(value)


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of parsing a version string.

    Exactly one of version and error is set.
    """

    version: Optional[Version] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Version:
        """Return the parsed version or raise InvalidVersionError."""
        if self.error is not None:
            raise InvalidVersionError(self.error.input, self.error)
        return cast(Version, self.version)


def _fail(
    kind: ParseErrorKind, message: str, version_string: Any, segment: Optional[str] = None
) -> ParseResult:
    logger.debug("Rejected version %r (%s): %s", version_string, kind.value, message)
    return ParseResult(error=ParseError(kind, message, version_string, segment))


def _parse_core(core: str, max_component: int) -> Union[tuple[int, int, int], tuple[str, str]]:
    """Parse MAJOR.MINOR.PATCH, returning the numbers or (message, segment)."""
    parts = core.split(".")
    if len(parts) != 3:
        return (f"expected MAJOR.MINOR.PATCH, found {len(parts)} component(s)", core)

    numbers = []
    for name, part in zip(("major", "minor", "patch"), parts):
        if not part:
            return (f"{name} version is empty", part)
        if not is_numeric(part):
            return (f"{name} version {part!r} is not a number", part)
        if len(part) > 1 and part[0] == "0":
            return (f"{name} version {part!r} has a leading zero", part)
        # Length guard keeps int() away from huge digit strings
        if len(part) > len(str(max_component)) or int(part) > max_component:
            return (f"{name} version {part} exceeds {max_component}", part)
        numbers.append(int(part))
    return (numbers[0], numbers[1], numbers[2])


def parse(version_string: str, options: Optional[ParseOptions] = None) -> ParseResult:
    """Parse a semantic version string without raising.

    Args:
        version_string: A string following semantic versioning format
            ([v]MAJOR.MINOR.PATCH[-prerelease][+build])
        options: Parser options (defaults to DEFAULT_OPTIONS)

    Returns:
        A ParseResult holding either the Version or a ParseError

    Examples:
        >>> parse("1.0.0-alpha.1").version
        Version(major=1, minor=0, patch=0, prerelease=('alpha', '1'), build=())

        >>> parse("1.2").error.kind
        <ParseErrorKind.MALFORMED_CORE: 'malformed_core'>
    """
    options = options or DEFAULT_OPTIONS

    if not isinstance(version_string, str):
        return _fail(
            ParseErrorKind.NO_MATCH,
            f"Version must be a string, got {type(version_string).__name__}",
            version_string,
        )

    text = version_string.strip() if options.strip_whitespace else version_string
    if not text:
        return _fail(ParseErrorKind.EMPTY_INPUT, "Version string cannot be empty", version_string)

    if text[0] in "vV":
        if not options.allow_v_prefix or text[0] == "V":
            return _fail(
                ParseErrorKind.NO_MATCH, f"unexpected prefix {text[0]!r}", version_string, text[0]
            )
        text = text[1:]
        if not text:
            return _fail(ParseErrorKind.NO_MATCH, "nothing follows the 'v' prefix", version_string)

    head, has_build, build_text = text.partition("+")
    core_text, has_prerelease, prerelease_text = head.partition("-")

    if not core_text:
        return _fail(ParseErrorKind.NO_MATCH, "missing MAJOR.MINOR.PATCH", version_string)

    core = _parse_core(core_text, options.max_component)
    if isinstance(core[0], str):
        return _fail(ParseErrorKind.MALFORMED_CORE, core[0], version_string, core[1])

    prerelease: tuple[str, ...] = ()
    if has_prerelease:
        if not prerelease_text:
            return _fail(
                ParseErrorKind.INVALID_PRERELEASE_IDENTIFIER,
                "pre-release is empty after '-'",
                version_string,
                "",
            )
        prerelease = tuple(prerelease_text.split("."))
        for part in prerelease:
            reason = check_prerelease_identifier(part)
            if reason is not None:
                return _fail(
                    ParseErrorKind.INVALID_PRERELEASE_IDENTIFIER,
                    f"pre-release {reason}",
                    version_string,
                    part,
                )

    build: tuple[str, ...] = ()
    if has_build:
        if not build_text:
            return _fail(
                ParseErrorKind.INVALID_BUILD_IDENTIFIER,
                "build metadata is empty after '+'",
                version_string,
                "",
            )
        build = tuple(build_text.split("."))
        for part in build:
            reason = check_build_identifier(part)
            if reason is not None:
                return _fail(
                    ParseErrorKind.INVALID_BUILD_IDENTIFIER,
                    f"build {reason}",
                    version_string,
                    part,
                )

    major, minor, patch = core
    return ParseResult(version=Version(major, minor, patch, prerelease, build))


def parse_version(version_string: str, options: Optional[ParseOptions] = None) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            ([v]MAJOR.MINOR.PATCH[-prerelease][+build])
        options: Parser options (defaults to DEFAULT_OPTIONS)

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=(), build=())

        >>> str(parse_version("v2.0.0-rc.1+build.456"))
        '2.0.0-rc.1+build.456'
    """
    return parse(version_string, options).unwrap()


def is_valid_semver(version_string: str, options: Optional[ParseOptions] = None) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    return parse(version_string, options).ok
