"""src/mdfiles/features/discovery/usecases/pipeline.py
What: Stream matching files from traversal through the run filter.
Why: Validate the root up front, then print each match before the next file is examined.
"""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Callable, Iterator

from mdfiles.features.discovery.domain.models import FileEntry, ScanSummary, SearchConfig

from .date_resolver import format_target_date
from .events import ScanEvent, log_scan_event
from .predicates import FilePredicate, build_filter
from .traversal import ensure_root_directory, iter_regular_files


def format_markdown_link(path: str) -> str:
    """Render ``path`` as a Markdown list item linking to itself.

    Undecodable bytes in any component are shown as U+FFFD so the
    line can always be written to a UTF-8 stream.

    Examples:
        ``"src/main.rs"`` -> ``"- [main.rs](src/main.rs)"``
    """
    text = _display_path(path)
    return f"- [{FileEntry(text).name}]({text})"


def _display_path(path: str) -> str:
    try:
        _ = path.encode("utf-8")
    except UnicodeEncodeError:
        return os.fsencode(path).decode("utf-8", errors="replace")
    return path


def find_matching_files(config: SearchConfig) -> Iterator[str]:
    """Return a lazy iterator over paths that pass the run filter.

    Raises:
        RootNotFoundError: Immediately, before traversal, if the root is missing.
    """
    root = ensure_root_directory(config.root)
    return _filter_paths(iter_regular_files(root), build_filter(config))


def run_search(config: SearchConfig, emit: Callable[[str], None]) -> ScanSummary:
    """Stream every match for ``config`` to ``emit`` as a Markdown link.

    Args:
        config: Parameters for this run.
        emit: Called once per match, in traversal order.

    Returns:
        ScanSummary: Visited and matched counts for the run.

    Raises:
        RootNotFoundError: If the root is missing; nothing is emitted.
    """
    root = ensure_root_directory(config.root)
    predicate = build_filter(config)
    summary = ScanSummary(root=root)
    started = time.perf_counter()

    log_scan_event(
        logging.DEBUG,
        ScanEvent.START,
        "Scan started [root=%s, suffix=%s, date=%s]",
        root,
        config.suffix,
        format_target_date(config.target_date),
        root=root,
        suffix=config.suffix,
        target_date=format_target_date(config.target_date),
    )

    for path in iter_regular_files(root):
        summary.visited += 1
        if not predicate.matches(path):
            continue
        summary.matched += 1
        emit(format_markdown_link(path))

    summary.duration_seconds = round(time.perf_counter() - started, 4)
    log_scan_event(
        logging.DEBUG,
        ScanEvent.COMPLETE,
        "Scan completed [root=%s, visited=%d, matched=%d, duration=%.2fs]",
        root,
        summary.visited,
        summary.matched,
        summary.duration_seconds,
        root=root,
        visited=summary.visited,
        matched=summary.matched,
        duration_seconds=summary.duration_seconds,
    )
    return summary


def _filter_paths(paths: Iterator[str], predicate: FilePredicate) -> Iterator[str]:
    for path in paths:
        if predicate.matches(path):
            yield path


__all__ = ["find_matching_files", "format_markdown_link", "run_search"]
