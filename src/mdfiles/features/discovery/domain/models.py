"""
Summary: Value objects shared by the discovery pipeline and the CLI.
Why: Keep run parameters immutable and per-file data transient.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date, datetime


@dataclass(slots=True, frozen=True)
class SearchConfig:
    """Parameters for a single discovery run."""

    target_date: date
    suffix: str
    root: str


@dataclass(slots=True, frozen=True)
class FileEntry:
    """A discovered path as produced by traversal.

    ``path`` is kept as the raw string so prefixes such as ``./`` survive
    into the rendered output.
    """

    path: str

    @property
    def name(self) -> str:
        """Return the final path component, or the whole path when it has none."""

        return os.path.basename(self.path) or self.path

    def modified_date(self) -> date | None:
        """Return the local calendar date of the last modification.

        Returns ``None`` when the metadata cannot be read or converted.
        """
        try:
            mtime = os.stat(self.path).st_mtime
            return datetime.fromtimestamp(mtime).date()
        except (OSError, OverflowError, ValueError):
            return None


@dataclass(slots=True)
class ScanSummary:
    """Counters collected while a run streams its matches."""

    root: str
    visited: int = 0
    matched: int = 0
    duration_seconds: float = 0.0


__all__ = ["FileEntry", "ScanSummary", "SearchConfig"]
