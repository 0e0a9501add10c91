"""src/winpath/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse presentation helpers across commands.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from rich.console import Console

ArgsT = TypeVar("ArgsT")
ResultT = TypeVar("ResultT")


class CommandExecutor(ABC, Generic[ArgsT, ResultT]):
    """Base class for command execution."""

    args: ArgsT
    console: Console

    def __init__(self, args: ArgsT, console: Console | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            console: Console used for rendering; stdout when omitted.
        """
        self.args = args
        self.console = console or Console()

    @abstractmethod
    def execute(self) -> ResultT:
        """Execute the command and return its results."""
        pass

    @abstractmethod
    def failed(self, results: ResultT) -> bool:
        """Return True when ``results`` should produce a non-zero exit status."""
        pass
