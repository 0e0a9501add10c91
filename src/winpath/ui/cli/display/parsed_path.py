"""src/winpath/ui/cli/display/parsed_path.py
What: Render parsed path components and validation errors.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from winpath.features.path import ParsedPath


def _flag(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"


@final
class ParsedPathDisplay:
    """Handles parsed path display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show(self, raw: str, parsed: ParsedPath, quiet: bool = False) -> None:
        """Display one parsed path.

        Args:
            raw: The input string as given on the command line.
            parsed: Parse result (after any requested operations).
            quiet: Only print validation errors.
        """
        if not quiet:
            self.console.print(self._build_table(raw, parsed))

        if parsed.errors:
            self.console.print(f"[red]Validation errors: {len(parsed.errors)}[/red]")
            for error in parsed.errors:
                self.console.print(f"[red]  • {escape(str(error))}[/red]")

    def _build_table(self, raw: str, parsed: ParsedPath) -> Table:
        table = Table(title=escape(raw) or "(empty)", show_header=True)
        _ = table.add_column("Field", style="bold")
        _ = table.add_column("Value", style="cyan")

        table.add_row("Device", escape(parsed.device))
        table.add_row("Node", escape(parsed.node))
        table.add_row("Dirs", escape(" | ".join(parsed.dirs)))
        table.add_row("Name", escape(parsed.name))
        table.add_row("Absolute", _flag(parsed.absolute))
        table.add_row("Remote", _flag(parsed.remote))
        table.add_row("Extended length", _flag(parsed.extended_length))
        table.add_row("Canonical", escape(parsed.to_string()))
        table.add_row("Extended", escape(parsed.to_extended_unc()))
        return table


__all__ = ["ParsedPathDisplay"]
