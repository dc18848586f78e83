"""
Summary: Composable file predicates for suffix and modification-date checks.
Why: Keep each check independently testable and combinable without touching traversal.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol, final, override

from mdfiles.features.discovery.domain.models import FileEntry, SearchConfig


class FilePredicate(Protocol):
    """A single yes/no test applied to a discovered path."""

    def matches(self, entry: str) -> bool:
        ...


@final
class SuffixPredicate:
    """Match file names that end with a case-sensitive suffix."""

    suffix: str

    def __init__(self, suffix: str) -> None:
        self.suffix = suffix

    def matches(self, entry: str) -> bool:
        name = FileEntry(entry).name
        if not _is_text(name):
            return False
        return name.endswith(self.suffix)

    @override
    def __repr__(self) -> str:
        return f"SuffixPredicate({self.suffix!r})"


@final
class ModifiedOnPredicate:
    """Match files last modified on ``target_date`` in local time.

    Files whose metadata cannot be read never match.
    """

    target_date: date

    def __init__(self, target_date: date) -> None:
        self.target_date = target_date

    def matches(self, entry: str) -> bool:
        return FileEntry(entry).modified_date() == self.target_date

    @override
    def __repr__(self) -> str:
        return f"ModifiedOnPredicate({self.target_date.isoformat()!r})"


@final
class AllOf:
    """Logical AND over predicates, evaluated in order with short-circuit."""

    predicates: tuple[FilePredicate, ...]

    def __init__(self, *predicates: FilePredicate) -> None:
        self.predicates = predicates

    def matches(self, entry: str) -> bool:
        return all(predicate.matches(entry) for predicate in self.predicates)

    @override
    def __repr__(self) -> str:
        inner = ", ".join(repr(predicate) for predicate in self.predicates)
        return f"AllOf({inner})"


def build_filter(config: SearchConfig) -> AllOf:
    """Compose the run filter; the cheaper suffix check goes first."""

    return AllOf(SuffixPredicate(config.suffix), ModifiedOnPredicate(config.target_date))


def _is_text(name: str) -> bool:
    # Undecodable bytes come back from os as lone surrogates.
    try:
        _ = name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


__all__ = [
    "AllOf",
    "FilePredicate",
    "ModifiedOnPredicate",
    "SuffixPredicate",
    "build_filter",
]
