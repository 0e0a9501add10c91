"""Rich renderers for CLI output."""

from .locations import LocationsDisplay
from .parsed_path import ParsedPathDisplay

__all__ = ["LocationsDisplay", "ParsedPathDisplay"]
