"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from typing import final

from mdfiles import __version__
from mdfiles.config.config import Config
from mdfiles.platform.logging import setup_logger
from mdfiles.ui.cli.args.options import CLIArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Suffix and root default to ``None`` so configuration values can fill
        in whatever the user did not pass explicitly.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="mdfiles",
            description="List files modified on a given date as Markdown links.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "-d",
            "--date",
            type=str,
            metavar="DATE",
            help="Date in YYYY-MM-DD format (defaults to today)",
        )
        _ = parser.add_argument(
            "-s",
            "--suffix",
            type=str,
            metavar="SUFFIX",
            help="File name suffix to match (default: .go)",
        )
        _ = parser.add_argument(
            "-r",
            "--root",
            type=str,
            metavar="ROOT",
            help="Directory to start searching from (default: .)",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Log scan details to stderr",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all log output except errors",
        )
        _ = parser.add_argument(
            "-V",
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Arguments merged with configuration defaults.

        Raises:
            SystemExit: On usage errors, ``--help`` or ``--version``.
            ConfigError: If the configuration file is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.WARNING

        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        return CLIArgs(
            date=parsed_args.date,
            suffix=parsed_args.suffix if parsed_args.suffix is not None else configuration.suffix,
            root=parsed_args.root if parsed_args.root is not None else configuration.root,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
            log_file=configuration.log_file,
        )
