"""Render machine identity and well-known directory lookups."""

from __future__ import annotations

from collections.abc import Mapping
from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from winpath.platform.windows import LocationResult


@final
class LocationsDisplay:
    """Handles known location display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show(self, locations: Mapping[str, LocationResult], quiet: bool = False) -> None:
        """Display a table of lookups; failed lookups are always reported."""

        if not quiet:
            table = Table(title="Known locations")
            _ = table.add_column("Location", style="bold")
            _ = table.add_column("Value", style="cyan")
            _ = table.add_column("Status")
            for label, result in locations.items():
                status = "[green]ok[/green]" if result.ok else "[red]unavailable[/red]"
                table.add_row(label, escape(result.value), status)
            self.console.print(table)

        for label, result in locations.items():
            if not result.ok:
                self.console.print(f"[red]  • {label} could not be determined[/red]")
