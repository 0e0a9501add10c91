"""Command line argument handling."""

from .options import CLIArgs, LocationsArgs, ParseArgs
from .parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "LocationsArgs", "ParseArgs"]
