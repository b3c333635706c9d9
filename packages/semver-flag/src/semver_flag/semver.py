# SPDX-License-Identifier: MIT
"""Semantic version parsing for command-line tools.

Supports the restricted MAJOR.MINOR.PATCH format only. Each field is a
non-negative decimal integer without leading zeroes that fits in 64 bits.
Pre-release and build metadata suffixes are rejected.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Largest value a single field may hold (unsigned 64-bit)
MAX_FIELD_VALUE = 2**64 - 1

FIELD_NAMES = ("major", "minor", "patch")

_DIGITS = re.compile(r"[0-9]+")
_MAX_FIELD_DIGITS = len(str(MAX_FIELD_VALUE))


class SemverError(Exception):
    """Base class for all errors raised by semver_flag."""

    pass


class InvalidVersionError(SemverError):
    """Raised when a version string does not follow MAJOR.MINOR.PATCH."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version!r}"
        super().__init__(self.message)


class EmptyVersionError(InvalidVersionError):
    """Raised when the version string is empty."""

    def __init__(self) -> None:
        super().__init__("", "Version string empty")


class WrongFieldCountError(InvalidVersionError):
    """Raised when the version does not split into major, minor and patch."""

    def __init__(self, version: str):
        super().__init__(version, f"Major.Minor.Patch elements not found in {version!r}")


class FieldError(InvalidVersionError):
    """Base class for errors tied to a single version field.

    Attributes:
        field: Which field failed ("major", "minor" or "patch")
        value: Raw text of the field
    """

    def __init__(self, version: str, field: str, value: str, message: str):
        self.field = field
        self.value = value
        super().__init__(version, message)


class InvalidCharactersError(FieldError):
    """Raised when a field contains anything but ASCII digits."""

    def __init__(self, version: str, field: str, value: str):
        super().__init__(
            version, field, value, f"Invalid character(s) found in {field} number {value!r}"
        )


class LeadingZeroError(FieldError):
    """Raised when a multi-digit field starts with '0'."""

    def __init__(self, version: str, field: str, value: str):
        super().__init__(
            version,
            field,
            value,
            f"{field.capitalize()} number must not contain leading zeroes {value!r}",
        )


class NumericOverflowError(FieldError):
    """Raised when a field does not fit in an unsigned 64-bit integer."""

    def __init__(self, version: str, field: str, value: str):
        super().__init__(
            version,
            field,
            value,
            f"{field.capitalize()} number {value!r} is out of range (max {MAX_FIELD_VALUE})",
        )


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed MAJOR.MINOR.PATCH version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
    """

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        for name in FIELD_NAMES:
            value = getattr(self, name)
            # bool is an int subclass but never a valid field
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if value < 0 or value > MAX_FIELD_VALUE:
                raise ValueError(f"{name} must be between 0 and {MAX_FIELD_VALUE}, got {value}")

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @classmethod
    def from_string(cls, version_string: str) -> "Version":
        """Parse a version string. See parse_version."""
        return parse_version(version_string)


def _parse_field(version_string: str, field: str, part: str) -> int:
    if not _DIGITS.fullmatch(part):
        raise InvalidCharactersError(version_string, field, part)
    if len(part) > 1 and part[0] == "0":
        raise LeadingZeroError(version_string, field, part)
    # Longer digit strings cannot fit, and int() refuses very long ones
    if len(part) > _MAX_FIELD_DIGITS:
        raise NumericOverflowError(version_string, field, part)
    value = int(part)
    if value > MAX_FIELD_VALUE:
        raise NumericOverflowError(version_string, field, part)
    return value


def parse_version(version_string: str) -> Version:
    """Parse a MAJOR.MINOR.PATCH string into a Version object.

    The string is split on the first two dots only, so any further dots end
    up inside the patch field and are rejected as invalid characters there.
    Checks run field by field and stop at the first failure.

    Args:
        version_string: A string of the form MAJOR.MINOR.PATCH

    Returns:
        A Version object with parsed components

    Raises:
        EmptyVersionError: If the string is empty
        WrongFieldCountError: If there are fewer than three fields
        InvalidCharactersError: If a field has non-digit characters
        LeadingZeroError: If a multi-digit field starts with '0'
        NumericOverflowError: If a field exceeds MAX_FIELD_VALUE
        InvalidVersionError: If the input is not a string

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3)

        >>> parse_version("1.2.3.4")
        Traceback (most recent call last):
            ...
        semver_flag.semver.InvalidCharactersError: Invalid character(s) found in patch number '3.4'
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    if not version_string:
        raise EmptyVersionError()

    parts = version_string.split(".", 2)
    if len(parts) != 3:
        raise WrongFieldCountError(version_string)

    major, minor, patch = (
        _parse_field(version_string, field, part) for field, part in zip(FIELD_NAMES, parts)
    )
    return Version(major=major, minor=minor, patch=patch)


def render_version(version: Version) -> str:
    """Render a Version as MAJOR.MINOR.PATCH.

    Examples:
        >>> render_version(Version(1, 2, 3))
        '1.2.3'
    """
    return str(version)


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid MAJOR.MINOR.PATCH version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        False
    """
    try:
        parse_version(version_string)
    except InvalidVersionError:
        return False
    return True
