"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from mdfiles import __version__
from mdfiles.ui.cli.args import ArgumentParser, CLIArgs


def test_create_parser_defaults() -> None:
    """Suffix and root stay unset so configuration can supply them."""

    parser = ArgumentParser.create_parser()

    args: Namespace = parser.parse_args([])
    assert args.date is None
    assert args.suffix is None
    assert args.root is None
    assert not args.verbose and not args.quiet


def test_create_parser_short_and_long_flags() -> None:
    parser = ArgumentParser.create_parser()

    long_form = parser.parse_args(["--date", "2025-12-25", "--suffix", ".rs", "--root", "src"])
    short_form = parser.parse_args(["-d", "2024-01-01", "-s", ".md", "-r", "docs"])

    assert (long_form.date, long_form.suffix, long_form.root) == ("2025-12-25", ".rs", "src")
    assert (short_form.date, short_form.suffix, short_form.root) == ("2024-01-01", ".md", "docs")


def test_verbose_and_quiet_are_exclusive(capsys: pytest.CaptureFixture[str]) -> None:
    parser = ArgumentParser.create_parser()

    with pytest.raises(SystemExit) as excinfo:
        _ = parser.parse_args(["--verbose", "--quiet"])

    assert excinfo.value.code == 2
    assert "not allowed with" in capsys.readouterr().err


def test_help_mentions_date_format(
    capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("COLUMNS", "120")

    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["--help"])

    assert excinfo.value.code == 0
    assert "Date in YYYY-MM-DD format" in capsys.readouterr().out


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["--version"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == f"mdfiles {__version__}"


def test_process_args_uses_builtin_defaults(mocker: MockerFixture) -> None:
    mock_setup_logger = mocker.patch("mdfiles.ui.cli.args.parser.setup_logger")

    args = ArgumentParser.process_args([])

    assert args == CLIArgs(
        date=None, suffix=".go", root=".", verbose=False, quiet=False, log_file=None
    )
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.WARNING
    assert mock_setup_logger.call_args.kwargs["log_file"] is None


def test_process_args_verbosity_levels(mocker: MockerFixture) -> None:
    mock_setup_logger = mocker.patch("mdfiles.ui.cli.args.parser.setup_logger")

    _ = ArgumentParser.process_args(["--verbose"])
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.DEBUG

    _ = ArgumentParser.process_args(["--quiet"])
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.ERROR


def test_process_args_config_fills_missing_flags(
    isolated_config: Path, mocker: MockerFixture
) -> None:
    """Configuration supplies defaults; explicit flags win."""

    _ = mocker.patch("mdfiles.ui.cli.args.parser.setup_logger")
    _ = isolated_config.write_text(
        'suffix = ".md"\nroot = "notes"\nlog_file = "mdfiles.log"\n', encoding="utf-8"
    )

    from_config = ArgumentParser.process_args([])
    overridden = ArgumentParser.process_args(["--suffix", ".txt", "--root", "src"])

    assert (from_config.suffix, from_config.root) == (".md", "notes")
    assert from_config.log_file == Path("mdfiles.log")
    assert (overridden.suffix, overridden.root) == (".txt", "src")


def test_process_args_keeps_date_unparsed(mocker: MockerFixture) -> None:
    """Date validation happens later so it maps to a domain error."""

    _ = mocker.patch("mdfiles.ui.cli.args.parser.setup_logger")

    args = ArgumentParser.process_args(["--date", "not-a-date"])

    assert args.date == "not-a-date"
