"""Command line argument handling package."""

from mdfiles.ui.cli.args.parser import ArgumentParser
from mdfiles.ui.cli.args.options import CLIArgs

__all__ = ["ArgumentParser", "CLIArgs"]
