"""File discovery feature: date resolution, traversal and filtering."""

from .domain import (
    ConfigError,
    FileEntry,
    InvalidDateFormatError,
    MdFilesError,
    RootNotFoundError,
    ScanSummary,
    SearchConfig,
)
from .usecases import (
    find_matching_files,
    format_markdown_link,
    format_target_date,
    resolve_target_date,
    run_search,
)

__all__ = [
    "ConfigError",
    "FileEntry",
    "InvalidDateFormatError",
    "MdFilesError",
    "RootNotFoundError",
    "ScanSummary",
    "SearchConfig",
    "find_matching_files",
    "format_markdown_link",
    "format_target_date",
    "resolve_target_date",
    "run_search",
]
