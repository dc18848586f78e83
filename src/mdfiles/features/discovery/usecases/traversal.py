"""
Summary: Lazily enumerate regular files beneath a root directory.
Why: Feed the filter pipeline one path at a time while skipping unreadable entries.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterator
from functools import partial
from pathlib import Path

from mdfiles.features.discovery.domain.errors import RootNotFoundError

from .events import ScanEvent, log_scan_event


def ensure_root_directory(root: str | Path) -> str:
    """Return ``root`` as a string when it names an existing directory.

    Raises:
        RootNotFoundError: If ``root`` is missing or is not a directory.
    """
    if not os.path.isdir(root):
        raise RootNotFoundError(root)
    return os.fspath(root)


def iter_regular_files(root: str | Path) -> Iterator[str]:
    """Yield every regular file reachable under ``root``.

    Paths are joined onto ``root`` exactly as given, so ``"."`` yields
    ``"./name"``. Symlinked directories are listed but not descended into.
    Entries that fail to list or stat are skipped.
    """
    base = os.fspath(root)
    on_error = partial(_skip_unlistable, base=base)
    for dirpath, _, filenames in os.walk(root, onerror=on_error, followlinks=False):
        for name in filenames:
            path = os.path.join(dirpath, name)
            if _is_regular_file(path, base):
                yield path


def _is_regular_file(path: str, base: str) -> bool:
    try:
        mode = os.stat(path).st_mode
    except OSError as exc:
        log_scan_event(
            logging.DEBUG,
            ScanEvent.ENTRY_SKIPPED,
            "Skipping unreadable entry [path=%s, error=%s]",
            path,
            exc.strerror or type(exc).__name__,
            source_path=path,
            base_path=base,
        )
        return False
    return stat.S_ISREG(mode)


def _skip_unlistable(error: OSError, *, base: str) -> None:
    log_scan_event(
        logging.DEBUG,
        ScanEvent.ENTRY_SKIPPED,
        "Skipping unlistable directory [path=%s, error=%s]",
        error.filename,
        error.strerror or type(error).__name__,
        source_path=error.filename,
        base_path=base,
    )


__all__ = ["ensure_root_directory", "iter_regular_files"]
