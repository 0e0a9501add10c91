"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from winpath.config.config import Config
from winpath.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from winpath.ui.cli.args.options import CLIArgs, LocationsArgs, ParseArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="winpath",
            description="winpath - Lexically decompose Windows path strings.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        parse_parser = subparsers.add_parser(
            "parse",
            help="Show the components, serializations and validation errors of paths",
        )
        _ = parse_parser.add_argument(
            "paths",
            nargs="+",
            type=str,
            help="Windows path strings to parse",
            metavar="PATH",
        )
        _ = parse_parser.add_argument(
            "--directory",
            action="store_true",
            help="Treat the trailing name as a directory",
        )
        _ = parse_parser.add_argument(
            "--absolute",
            action="store_true",
            help="Resolve relative local paths against the working directory",
        )
        ArgumentParser._add_verbosity_flags(parse_parser)

        locations_parser = subparsers.add_parser(
            "locations",
            help="Show the machine name and well-known directories",
        )
        ArgumentParser._add_verbosity_flags(locations_parser)

        return parser

    @staticmethod
    def _add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
        group = parser.add_mutually_exclusive_group()
        _ = group.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug logging",
        )
        _ = group.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        configuration = Config.load()

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = configuration.console_level

        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "parse":
            return ParseArgs(
                command="parse",
                paths=list(parsed_args.paths),
                directory=parsed_args.directory,
                absolute=parsed_args.absolute,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "locations":
            return LocationsArgs(command="locations", verbose=is_verbose, quiet=is_quiet)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)
