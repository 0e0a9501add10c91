"""Command line interface for winpath."""

import sys
from typing import final

from winpath.config.config import ConfigError
from winpath.platform.logging import logger
from winpath.ui.cli.args import ArgumentParser
from winpath.ui.cli.args.options import LocationsArgs, ParseArgs
from winpath.ui.cli.commands import LocationsCommand, ParseCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)

            if isinstance(args, ParseArgs):
                parse_command = ParseCommand(args)
                if parse_command.failed(parse_command.execute()):
                    sys.exit(1)
                return

            assert isinstance(args, LocationsArgs)
            locations_command = LocationsCommand(args)
            if locations_command.failed(locations_command.execute()):
                sys.exit(1)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except ConfigError as e:
            logger.error("Configuration error: %s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
