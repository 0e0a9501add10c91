"""Locations command implementation."""

from __future__ import annotations

from typing import final, override

from winpath.platform.windows import LocationResult, known_locations
from winpath.ui.cli.args.options import LocationsArgs
from winpath.ui.cli.display import LocationsDisplay

from .executor import CommandExecutor


@final
class LocationsCommand(CommandExecutor[LocationsArgs, dict[str, LocationResult]]):
    """Report the machine name and well-known directories."""

    @override
    def execute(self) -> dict[str, LocationResult]:
        locations = known_locations()
        LocationsDisplay(self.console).show(locations, quiet=self.args.quiet)
        return locations

    @override
    def failed(self, results: dict[str, LocationResult]) -> bool:
        return not all(result.ok for result in results.values())
