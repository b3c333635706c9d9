# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for semver-flag tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from semver_flag import FlagSet


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def flag_set() -> FlagSet:
    """Create a fresh, unparsed flag session."""
    return FlagSet("prog")


@pytest.fixture
def temp_project(tmp_path: Path) -> Path:
    """Create a temporary project directory with pyproject.toml."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "test-tool"
version = "2.4.6"
description = "Test project"

[tool.semver-flag]
name = "show-version"
shorthand = "V"
usage = "Show the version ({version})"
"""
    )

    return project_dir
