"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final


@final
@dataclass(slots=True, frozen=True)
class CLIArgs:
    """Validated command line arguments for a discovery run.

    ``date`` stays unparsed; date resolution happens in the command processor
    so invalid values map to a domain error.
    """

    date: str | None
    suffix: str
    root: str
    verbose: bool
    quiet: bool
    log_file: Path | None = None


__all__ = ["CLIArgs"]
