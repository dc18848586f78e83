"""Shared path utilities for configuration lookup.

Policy:
- Config: ``<project_root>/.mdfiles.toml`` unless overridden by
  ``MDFILES_CONFIG``. The project root is the nearest ancestor of the
  working directory holding ``pyproject.toml`` or ``.git``.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final

CONFIG_ENV_VAR: Final[str] = "MDFILES_CONFIG"
CONFIG_FILE_NAME: Final[str] = ".mdfiles.toml"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = (mapping.get(env_var) or "").strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    return default_factory().expanduser().resolve()


def _detect_project_root(start: Path | None = None) -> Path:
    """Walk up from ``start`` (default: cwd) looking for a project marker.

    Returns the working directory when no marker is found.
    """
    here = (start or Path.cwd()).resolve()
    for candidate in [here, *here.parents]:
        if (candidate / "pyproject.toml").exists() or (candidate / ".git").exists():
            return candidate
    return here


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the config file path, honoring ``MDFILES_CONFIG``."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=CONFIG_ENV_VAR,
        default_factory=lambda: _detect_project_root() / CONFIG_FILE_NAME,
    )


__all__ = [
    "CONFIG_ENV_VAR",
    "CONFIG_FILE_NAME",
    "default_config_path",
    "resolve_overridable_path",
]
