"""Domain types for file discovery."""

from .errors import ConfigError, InvalidDateFormatError, MdFilesError, RootNotFoundError
from .models import FileEntry, ScanSummary, SearchConfig

__all__ = [
    "ConfigError",
    "FileEntry",
    "InvalidDateFormatError",
    "MdFilesError",
    "RootNotFoundError",
    "ScanSummary",
    "SearchConfig",
]
