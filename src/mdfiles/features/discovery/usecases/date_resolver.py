"""
Summary: Resolve the optional ``--date`` value into a calendar date.
Why: Reject malformed dates before any traversal starts.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import date
from typing import Final

from mdfiles.features.discovery.domain.errors import InvalidDateFormatError

_DATE_PATTERN: Final[re.Pattern[str]] = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def resolve_target_date(
    value: str | None,
    *,
    today: Callable[[], date] = date.today,
) -> date:
    """Return the date a run compares modification times against.

    Args:
        value: Raw ``YYYY-MM-DD`` string, or ``None`` for the current local date.
        today: Clock used when ``value`` is ``None``.

    Returns:
        date: The resolved target date.

    Raises:
        InvalidDateFormatError: If ``value`` is not a valid ``YYYY-MM-DD`` date.
    """
    if value is None:
        return today()

    match = _DATE_PATTERN.fullmatch(value)
    if match is None:
        raise InvalidDateFormatError(value)

    year, month, day = (int(group) for group in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidDateFormatError(value) from exc


def format_target_date(target: date) -> str:
    """Render ``target`` in the same ``YYYY-MM-DD`` layout the parser accepts."""

    return f"{target.year:04d}-{target.month:02d}-{target.day:02d}"


__all__ = ["format_target_date", "resolve_target_date"]
