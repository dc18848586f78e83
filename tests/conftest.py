"""Shared pytest fixtures for mdfiles tests."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from datetime import date, datetime
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point configuration lookup at a file that does not exist yet."""

    config_file = tmp_path / "mdfiles-config.toml"
    monkeypatch.setenv("MDFILES_CONFIG", str(config_file))
    return config_file


@pytest.fixture
def make_file() -> Callable[..., Path]:
    """Create a file and optionally pin its modification time to a date.

    The mtime is set to noon local time so the date is stable across zones.
    """

    def _make(path: Path, modified: date | None = None, content: str = "") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_text(content, encoding="utf-8")
        if modified is not None:
            stamp = datetime(modified.year, modified.month, modified.day, 12, 0).timestamp()
            os.utime(path, (stamp, stamp))
        return path

    return _make


@pytest.fixture
def undecodable_dir(tmp_path: Path) -> Path:
    """Create a directory whose name is not valid UTF-8 and return it."""

    if sys.platform in {"win32", "darwin"}:
        pytest.skip("filesystem requires valid Unicode names")
    raw = os.path.join(os.fsencode(tmp_path), b"bad\xff")
    try:
        os.mkdir(raw)
    except OSError as exc:
        pytest.skip(f"filesystem rejects undecodable names: {exc}")
    return Path(os.fsdecode(raw))
