# SPDX-License-Identifier: MIT
"""MAJOR.MINOR.PATCH version parsing and a --version command-line flag.

This package parses and validates restricted semantic versions (no
pre-release or build metadata), compares them for equality, renders them
canonically, and registers a --version / -v flag that reports them.

Example:
    >>> from semver_flag import FlagSet, create_flag_and_parse
    >>> from semver_flag import parse_version, version_strings_equal
    >>>
    >>> version = parse_version("1.2.3")
    >>> version.minor
    2
    >>> str(version)
    '1.2.3'
    >>>
    >>> version_strings_equal("1.2.3", "bad")
    False
    >>>
    >>> create_flag_and_parse("1.2.3", FlagSet(), []).requested
    False
"""

__version__ = "0.1.0"

from .semver import (
    FIELD_NAMES,
    MAX_FIELD_VALUE,
    EmptyVersionError,
    FieldError,
    InvalidCharactersError,
    InvalidVersionError,
    LeadingZeroError,
    NumericOverflowError,
    SemverError,
    Version,
    WrongFieldCountError,
    is_valid_semver,
    parse_version,
    render_version,
)
from .compare import (
    version_strings_equal,
    versions_equal,
)
from .config import (
    ConfigError,
    FlagConfig,
    find_project_root,
    load_config,
)
from .flag import (
    AlreadyParsedError,
    FlagError,
    FlagSet,
    VersionFlagResult,
    command_line,
    create_flag,
    create_flag_and_parse,
    handle_version_flag,
    version_flag_option,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "render_version",
    "is_valid_semver",
    "FIELD_NAMES",
    "MAX_FIELD_VALUE",
    # Errors
    "SemverError",
    "InvalidVersionError",
    "EmptyVersionError",
    "WrongFieldCountError",
    "FieldError",
    "InvalidCharactersError",
    "LeadingZeroError",
    "NumericOverflowError",
    # Version comparison
    "versions_equal",
    "version_strings_equal",
    # Configuration
    "ConfigError",
    "FlagConfig",
    "find_project_root",
    "load_config",
    # Flag integration
    "FlagError",
    "AlreadyParsedError",
    "FlagSet",
    "VersionFlagResult",
    "command_line",
    "create_flag",
    "create_flag_and_parse",
    "handle_version_flag",
    "version_flag_option",
]
