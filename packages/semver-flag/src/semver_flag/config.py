# SPDX-License-Identifier: MIT
"""Version flag configuration, optionally loaded from pyproject.toml."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .semver import SemverError, Version

DEFAULT_FLAG_NAME = "version"
DEFAULT_SHORTHAND = "v"
DEFAULT_USAGE = "Prints current version: v. {version}"
SHORTHAND_SUFFIX = " (shorthand)"

# Section under [tool] holding flag overrides
TOOL_SECTION = "semver-flag"

_FLAG_NAME_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z0-9_-]*")


class ConfigError(SemverError):
    """Raised when configuration loading fails."""

    pass


@dataclass
class FlagConfig:
    """How the version flag is named and described.

    Attributes:
        name: Long flag name, registered as --NAME
        shorthand: One-character alias registered as -X, or "" for none
        usage: Help text template; "{version}" is replaced by the version
        version: Version string from [project].version, if loaded from a file
        project_dir: Directory containing pyproject.toml, if loaded from a file
    """

    name: str = DEFAULT_FLAG_NAME
    shorthand: str = DEFAULT_SHORTHAND
    usage: str = DEFAULT_USAGE
    version: str = ""
    project_dir: Optional[Path] = None

    def __post_init__(self) -> None:
        if len(self.name) < 2 or not _FLAG_NAME_PATTERN.fullmatch(self.name):
            raise ConfigError(f"Invalid flag name: {self.name!r}")
        if self.shorthand and (
            len(self.shorthand) != 1 or not _FLAG_NAME_PATTERN.fullmatch(self.shorthand)
        ):
            raise ConfigError(f"Flag shorthand must be a single letter: {self.shorthand!r}")
        try:
            self.usage.format(version=Version(0, 0, 0))
        except (AttributeError, KeyError, IndexError, ValueError) as e:
            raise ConfigError(f"Invalid usage template {self.usage!r}: {e}") from e

    def usage_for(self, version: object) -> str:
        """Return the long flag's help text for a version."""
        return self.usage.format(version=version)

    def shorthand_usage_for(self, version: object) -> str:
        """Return the shorthand flag's help text for a version."""
        return self.usage_for(version) + SHORTHAND_SUFFIX

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "FlagConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            FlagConfig instance

        Raises:
            ConfigError: If the file is invalid
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Optional[Path] = None,
    ) -> "FlagConfig":
        """Create FlagConfig from a parsed pyproject.toml dictionary.

        Args:
            pyproject: Parsed pyproject.toml as a dictionary
            project_dir: Directory containing pyproject.toml

        Returns:
            FlagConfig instance

        Raises:
            ConfigError: If a value has the wrong type or is invalid
        """
        project = pyproject.get("project", {})
        if not isinstance(project, dict):
            raise ConfigError("[project] must be a table")

        tool = pyproject.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError("[tool] must be a table")

        tool_section = tool.get(TOOL_SECTION, {})

        if not isinstance(tool_section, dict):
            raise ConfigError(f"[tool.{TOOL_SECTION}] must be a table")

        values = {
            "version": project.get("version", ""),
            "name": tool_section.get("name", DEFAULT_FLAG_NAME),
            "shorthand": tool_section.get("shorthand", DEFAULT_SHORTHAND),
            "usage": tool_section.get("usage", DEFAULT_USAGE),
        }
        for key, value in values.items():
            if not isinstance(value, str):
                raise ConfigError(f"{key} must be a string, got {type(value).__name__}")

        return cls(project_dir=project_dir, **values)


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the project root by looking for pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory

    Raises:
        ConfigError: If no project root is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    raise ConfigError("Could not find project root (no pyproject.toml found)")


def load_config(project_dir: Optional[str | Path] = None) -> FlagConfig:
    """Load flag configuration from the project directory.

    Args:
        project_dir: Directory to start searching from (defaults to cwd)

    Returns:
        FlagConfig instance

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    return FlagConfig.from_pyproject(find_project_root(project_dir))
