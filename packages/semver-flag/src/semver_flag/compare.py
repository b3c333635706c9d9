# SPDX-License-Identifier: MIT
"""Version equality.

Only equality is defined: two versions are equal when major, minor and patch
are pairwise equal. There is no ordering.
"""

from __future__ import annotations

from .semver import InvalidVersionError, Version, parse_version


def versions_equal(version1: Version, version2: Version) -> bool:
    """Return True if both versions have the same major, minor and patch."""
    return (
        version1.major == version2.major
        and version1.minor == version2.minor
        and version1.patch == version2.patch
    )


def version_strings_equal(version1: str, version2: str) -> bool:
    """Parse two version strings and compare them.

    Args:
        version1: First version string
        version2: Second version string

    Returns:
        True only if both strings parse and the versions are equal. A string
        that fails to parse makes the result False rather than raising, so
        callers that need to tell malformed input apart from a real mismatch
        should call parse_version themselves.

    Examples:
        >>> version_strings_equal("1.2.3", "1.2.3")
        True
        >>> version_strings_equal("1.2.3", "1.2.4")
        False
        >>> version_strings_equal("bad", "1.2.3")
        False
    """
    try:
        v1 = parse_version(version1)
        v2 = parse_version(version2)
    except InvalidVersionError:
        return False

    return versions_equal(v1, v2)
