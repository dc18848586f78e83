"""Use cases that make up the discovery pipeline."""

from .date_resolver import format_target_date, resolve_target_date
from .pipeline import find_matching_files, format_markdown_link, run_search
from .predicates import AllOf, FilePredicate, ModifiedOnPredicate, SuffixPredicate, build_filter
from .traversal import ensure_root_directory, iter_regular_files

__all__ = [
    "AllOf",
    "FilePredicate",
    "ModifiedOnPredicate",
    "SuffixPredicate",
    "build_filter",
    "ensure_root_directory",
    "find_matching_files",
    "format_markdown_link",
    "format_target_date",
    "iter_regular_files",
    "resolve_target_date",
    "run_search",
]
