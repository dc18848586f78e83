"""Command line interface exports."""

from mdfiles.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
