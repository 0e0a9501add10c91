"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final


@final
@dataclass(slots=True)
class ParseArgs:
    """Command line arguments for the ``parse`` subcommand."""

    command: Literal["parse"]
    paths: list[str]
    directory: bool
    absolute: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class LocationsArgs:
    """Command line arguments for the ``locations`` subcommand."""

    command: Literal["locations"]
    verbose: bool
    quiet: bool


CLIArgs = ParseArgs | LocationsArgs

__all__ = ["CLIArgs", "LocationsArgs", "ParseArgs"]
