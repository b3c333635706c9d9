# SPDX-License-Identifier: MIT
"""Wire a version into a --version / -v command-line flag.

Flags are registered on a FlagSet, a one-shot command-line parsing session
built on click. A session starts unparsed, is parsed exactly once, and only
then can flags be queried. Registering flags on a parsed session is an error.

Example:
    >>> from semver_flag import FlagSet, create_flag_and_parse
    >>>
    >>> result = create_flag_and_parse("1.2.3", FlagSet(), ["--version"])
    >>> result.requested
    True
    >>> result.output
    '1.2.3\\n'
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, TypeVar

import click

from .config import FlagConfig
from .semver import SemverError, Version, parse_version

F = TypeVar("F", bound=Callable[..., Any])


class FlagError(SemverError):
    """Raised when flags are registered or queried incorrectly."""

    pass


class AlreadyParsedError(FlagError):
    """Raised when a flag session is used after it has been parsed."""

    def __init__(self, message: str = "Flags have been parsed"):
        super().__init__(message)


class FlagSet:
    """A set of boolean command-line flags parsed once.

    Several flag names may share one destination, so that a long name and its
    shorthand set the same value.
    """

    def __init__(self, prog_name: Optional[str] = None) -> None:
        self.prog_name = prog_name or os.path.basename(sys.argv[0])
        self.args: list[str] = []
        self._params: list[click.Option] = []
        self._flags: dict[str, str] = {}
        self._dests: dict[str, list[str]] = {}
        self._values: dict[str, bool] = {}
        self._parsed = False

    @property
    def parsed(self) -> bool:
        """Whether parse() has been called."""
        return self._parsed

    def bool_flag(self, name: str, usage: str, dest: Optional[str] = None) -> str:
        """Register a boolean flag.

        Args:
            name: Flag name; one character becomes -X, longer names --NAME
            usage: Help text shown for the flag
            dest: Destination shared with other flags (defaults to name)

        Returns:
            The destination to pass to is_set()

        Raises:
            AlreadyParsedError: If the set has already been parsed
            FlagError: If the name is already registered
        """
        if self._parsed:
            raise AlreadyParsedError()
        if name in self._flags:
            raise FlagError(f"Flag redefined: {name}")

        decl = f"-{name}" if len(name) == 1 else f"--{name}"
        param_name = f"flag_{len(self._params)}"
        self._params.append(
            click.Option([param_name, decl], is_flag=True, default=False, help=usage)
        )
        dest = dest or name
        self._flags[name] = dest
        self._dests.setdefault(dest, []).append(param_name)
        return dest

    def lookup(self, name: str) -> Optional[click.Option]:
        """Return the option registered under a flag name, if any."""
        decl = f"-{name}" if len(name) == 1 else f"--{name}"
        for param in self._params:
            if decl in param.opts:
                return param
        return None

    def parse(self, args: Optional[Sequence[str]] = None) -> list[str]:
        """Parse command-line arguments against the registered flags.

        Args:
            args: Arguments to parse (defaults to sys.argv[1:])

        Returns:
            Positional arguments left over after the flags

        Raises:
            AlreadyParsedError: If the set has already been parsed
            click.UsageError: If an unknown option is given
            click.exceptions.Exit: If help was requested
        """
        if self._parsed:
            raise AlreadyParsedError()
        self._parsed = True

        if args is None:
            args = sys.argv[1:]

        command = click.Command(
            self.prog_name,
            params=list(self._params),
            context_settings={
                "allow_extra_args": True,
                "allow_interspersed_args": False,
                "help_option_names": ["-h", "--help"],
            },
        )
        ctx = command.make_context(self.prog_name, list(args))
        self._values = {param.name: bool(ctx.params[param.name]) for param in self._params}
        self.args = list(ctx.args)
        return self.args

    def is_set(self, dest: str) -> bool:
        """Return True if any flag writing to dest was given.

        Raises:
            FlagError: If the set is not parsed yet or dest is unknown
        """
        if not self._parsed:
            raise FlagError("Flags have not been parsed")
        param_names = self._dests.get(dest)
        if not param_names:
            raise FlagError(f"No flag registered for {dest!r}")
        return any(self._values[param_name] for param_name in param_names)


# Process-wide default session, used when no FlagSet is passed
command_line = FlagSet()


@dataclass(frozen=True)
class VersionFlagResult:
    """Outcome of parsing the version flag.

    Attributes:
        version: The parsed version
        requested: True if --version or its shorthand was given
        args: Positional arguments left after flag parsing
    """

    version: Version
    requested: bool
    args: tuple[str, ...] = ()

    @property
    def output(self) -> str:
        """Text to print when the version was requested."""
        return f"{self.version}\n"

    def exit_if_requested(self) -> None:
        """Print the version and exit with status 0 if it was requested."""
        if self.requested:
            click.echo(self.output, nl=False)
            sys.exit(0)


def create_flag(
    version: Version,
    flag_set: Optional[FlagSet] = None,
    config: Optional[FlagConfig] = None,
) -> str:
    """Register the version flag and its shorthand on a flag set.

    Both flags share one destination. The shorthand's usage text ends with
    " (shorthand)".

    Returns:
        The destination to query with FlagSet.is_set()
    """
    flag_set = flag_set if flag_set is not None else command_line
    config = config or FlagConfig()

    dest = flag_set.bool_flag(config.name, config.usage_for(version))
    if config.shorthand:
        flag_set.bool_flag(config.shorthand, config.shorthand_usage_for(version), dest=dest)
    return dest


def create_flag_and_parse(
    version_string: str,
    flag_set: Optional[FlagSet] = None,
    args: Optional[Sequence[str]] = None,
    config: Optional[FlagConfig] = None,
) -> VersionFlagResult:
    """Parse a version, register the version flag and parse all flags.

    Args:
        version_string: Version to report, as MAJOR.MINOR.PATCH
        flag_set: Session to register on (defaults to command_line)
        args: Arguments to parse (defaults to sys.argv[1:])
        config: Flag names and usage text

    Returns:
        VersionFlagResult telling whether the version was requested

    Raises:
        AlreadyParsedError: If the flag set has already been parsed
        InvalidVersionError: If version_string is not a valid version
    """
    flag_set = flag_set if flag_set is not None else command_line
    if flag_set.parsed:
        raise AlreadyParsedError()

    version = parse_version(version_string)
    dest = create_flag(version, flag_set, config)
    remaining = flag_set.parse(args)

    return VersionFlagResult(
        version=version,
        requested=flag_set.is_set(dest),
        args=tuple(remaining),
    )


def handle_version_flag(
    version_string: str,
    flag_set: Optional[FlagSet] = None,
    args: Optional[Sequence[str]] = None,
    config: Optional[FlagConfig] = None,
) -> VersionFlagResult:
    """Like create_flag_and_parse, but print and exit if the version was requested.

    Meant for program entry points. Returns only when the flag was not given.
    """
    result = create_flag_and_parse(version_string, flag_set, args, config)
    result.exit_if_requested()
    return result


def version_flag_option(
    version_string: str,
    config: Optional[FlagConfig] = None,
) -> Callable[[F], F]:
    """Add an eager --version/-v option to a click command.

    The version is parsed when the decorator is applied, so an invalid
    version fails at import time rather than when the flag is used.

    Raises:
        InvalidVersionError: If version_string is not a valid version
    """
    version = parse_version(version_string)
    config = config or FlagConfig()

    decls = [f"--{config.name}"]
    if config.shorthand:
        decls.append(f"-{config.shorthand}")

    def callback(ctx: click.Context, param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(str(version), color=ctx.color)
        ctx.exit()

    return click.option(
        *decls,
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=callback,
        help=config.usage_for(version),
    )
