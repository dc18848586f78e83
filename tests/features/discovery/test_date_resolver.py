"""Tests for resolving the target date from CLI input."""

from datetime import date

import pytest

from mdfiles.features.discovery import (
    InvalidDateFormatError,
    format_target_date,
    resolve_target_date,
)


@pytest.mark.parametrize("raw", ["2025-12-25", "2024-01-01", "2024-02-29", "0001-01-01"])
def test_valid_date_round_trips(raw: str) -> None:
    """A valid date renders back to the identical string."""

    assert format_target_date(resolve_target_date(raw)) == raw


def test_valid_date_components() -> None:
    assert resolve_target_date("2025-12-25") == date(2025, 12, 25)


@pytest.mark.parametrize(
    "raw",
    [
        "25-12-2025",
        "2025-13-45",
        "not-a-date",
        "2025-02-29",
        "2025-00-10",
        "2025-04-31",
        "2025-1-05",
        "2025-01-5",
        " 2025-01-05",
        "2025-01-05 ",
        "2025-01-05\n",
        "2025/01/05",
        "20250105",
        "0000-01-01",
        "２０２５-01-05",
        "",
    ],
)
def test_invalid_dates_raise(raw: str) -> None:
    """Malformed or impossible dates raise with the expected-format message."""

    with pytest.raises(InvalidDateFormatError) as excinfo:
        _ = resolve_target_date(raw)

    assert "Invalid date format" in str(excinfo.value)
    assert "YYYY-MM-DD" in str(excinfo.value)
    assert excinfo.value.value == raw


def test_invalid_date_is_value_error() -> None:
    with pytest.raises(ValueError):
        _ = resolve_target_date("nope")


def test_missing_date_defaults_to_today() -> None:
    assert resolve_target_date(None) == date.today()


def test_missing_date_uses_injected_clock() -> None:
    """The clock is read exactly once when no date is supplied."""

    calls: list[int] = []

    def fake_today() -> date:
        calls.append(1)
        return date(2030, 6, 1)

    assert resolve_target_date(None, today=fake_today) == date(2030, 6, 1)
    assert len(calls) == 1


def test_explicit_date_does_not_read_clock() -> None:
    def exploding_today() -> date:
        raise AssertionError("clock should not be read")

    assert resolve_target_date("2024-01-01", today=exploding_today) == date(2024, 1, 1)
