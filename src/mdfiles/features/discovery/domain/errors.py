"""
Summary: User-facing error taxonomy for discovery runs.
Why: Let the CLI map fatal failures to exit codes without string matching.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final

EXPECTED_DATE_FORMAT: Final[str] = "YYYY-MM-DD"


class MdFilesError(Exception):
    """Base class for failures that abort a run with exit code 1."""


class InvalidDateFormatError(MdFilesError, ValueError):
    """Raised when a date string is not a valid ``YYYY-MM-DD`` calendar date."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid date format. Use {EXPECTED_DATE_FORMAT}")
        self.value: str = value


class RootNotFoundError(MdFilesError, FileNotFoundError):
    """Raised when the traversal root is missing or is not a directory."""

    def __init__(self, root: str | Path) -> None:
        super().__init__(f"Root directory does not exist or is not a directory: {root}")
        self.root: str = str(root)


class ConfigError(MdFilesError):
    """Raised when the configuration file cannot be read or has bad values."""


__all__ = [
    "EXPECTED_DATE_FORMAT",
    "ConfigError",
    "InvalidDateFormatError",
    "MdFilesError",
    "RootNotFoundError",
]
