# SPDX-License-Identifier: MIT
"""CLI entry point for the semver-flag command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .compare import version_strings_equal
from .config import ConfigError, FlagConfig, load_config
from .flag import version_flag_option
from .semver import InvalidVersionError, parse_version


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[FlagConfig] = None
        self.project_dir: Optional[Path] = None

    def load_config(self) -> FlagConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


@click.group()
@version_flag_option(__version__)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Change to directory before running command.",
)
@pass_context
def cli(ctx: Context, directory: Optional[Path]) -> None:
    """Validate and compare MAJOR.MINOR.PATCH versions.

    \b
    Examples:
        semver-flag check 1.2.3
        semver-flag equal 1.2.3 1.2.3
        semver-flag -C my-project show
    """
    ctx.project_dir = directory


@cli.command()
@click.argument("versions", nargs=-1, required=True)
def check(versions: tuple[str, ...]) -> None:
    """Check that each VERSION is a valid MAJOR.MINOR.PATCH version.

    Prints the canonical form of every valid version. Exits with status 1 if
    any version is invalid. Put "--" before versions that start with "-".
    """
    failed = False
    for version_string in versions:
        try:
            version = parse_version(version_string)
        except InvalidVersionError as e:
            echo_error(str(e))
            failed = True
            continue
        echo_success(str(version))

    if failed:
        raise SystemExit(1)


@cli.command()
@click.argument("version1")
@click.argument("version2")
def equal(version1: str, version2: str) -> None:
    """Exit with status 0 if VERSION1 and VERSION2 are equal, 1 otherwise.

    A version that does not parse is never equal to anything.
    """
    if version_strings_equal(version1, version2):
        echo_success("equal")
        return

    echo_info("not equal")
    raise SystemExit(1)


@cli.command()
@pass_context
def show(ctx: Context) -> None:
    """Print the project version from the nearest pyproject.toml."""
    try:
        config = ctx.load_config()
    except (ConfigError, FileNotFoundError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    if not config.version:
        echo_error("Missing required field: [project].version")
        raise SystemExit(1)

    try:
        version = parse_version(config.version)
    except InvalidVersionError as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(str(version))


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except (ConfigError, InvalidVersionError) as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
