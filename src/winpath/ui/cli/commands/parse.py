"""Parse command implementation."""

from __future__ import annotations

from typing import final, override

from rich.console import Console

from winpath.features.path import FullPathResolver, ParsedPath, make_absolute, parse
from winpath.platform.logging import logger
from winpath.ui.cli.args.options import ParseArgs
from winpath.ui.cli.display import ParsedPathDisplay

from .executor import CommandExecutor


@final
class ParseCommand(CommandExecutor[ParseArgs, list[ParsedPath]]):
    """Parse each path given on the command line and display it."""

    resolver: FullPathResolver | None
    display: ParsedPathDisplay

    def __init__(
        self,
        args: ParseArgs,
        console: Console | None = None,
        resolver: FullPathResolver | None = None,
    ) -> None:
        super().__init__(args, console)
        self.resolver = resolver
        self.display = ParsedPathDisplay(self.console)

    @override
    def execute(self) -> list[ParsedPath]:
        results: list[ParsedPath] = []
        for raw in self.args.paths:
            parsed = parse(raw)
            if self.args.absolute:
                resolved = make_absolute(parsed, self.resolver)
                if resolved is parsed and parsed.is_local() and parsed.is_relative():
                    logger.warning("Could not resolve '%s' to an absolute path", raw)
                parsed = resolved
            if self.args.directory:
                _ = parsed.make_directory()

            logger.debug("Parsed '%s' with %d validation errors", raw, len(parsed.errors))
            self.display.show(raw, parsed, quiet=self.args.quiet)
            results.append(parsed)
        return results

    @override
    def failed(self, results: list[ParsedPath]) -> bool:
        return any(result.errors for result in results)
