"""Command line interface for mdfiles."""

import sys
from typing import final

from mdfiles.features.discovery import (
    MdFilesError,
    SearchConfig,
    resolve_target_date,
    run_search,
)
from mdfiles.platform.logging import logger
from mdfiles.ui.cli.args import ArgumentParser
from mdfiles.ui.cli.display import ResultDisplay


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments and stream matches to stdout.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            config = SearchConfig(
                target_date=resolve_target_date(args.date),
                suffix=args.suffix,
                root=args.root,
            )
            display = ResultDisplay()
            _ = run_search(config, display.show_match)

        except MdFilesError as e:
            logger.error("Error: %s", str(e))
            sys.exit(1)
        except KeyboardInterrupt:
            logger.warning("\nOperation cancelled by user")
            sys.exit(130)
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
