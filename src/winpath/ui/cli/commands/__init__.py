"""CLI command implementations."""

from .executor import CommandExecutor
from .locations import LocationsCommand
from .parse import ParseCommand

__all__ = ["CommandExecutor", "LocationsCommand", "ParseCommand"]
