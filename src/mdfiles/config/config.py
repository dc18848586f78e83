"""Configuration management for mdfiles."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Final

from mdfiles.config.paths import default_config_path
from mdfiles.features.discovery.domain.errors import ConfigError
from mdfiles.platform.logging import logger

DEFAULT_SUFFIX: Final[str] = ".go"
DEFAULT_ROOT: Final[str] = "."


def _path_field(default: Path | None = None) -> Any:
    """Create a field whose string values are converted to ``Path``."""

    return field(default=default, metadata={"path": True})


@dataclass(slots=True)
class Config:
    """Defaults applied when the matching CLI flag is not given."""

    # File-name suffix to match
    suffix: str = DEFAULT_SUFFIX

    # Directory to start traversal from
    root: str = DEFAULT_ROOT

    # Optional log file; console logging only when unset
    log_file: Path | None = _path_field()

    def __post_init__(self) -> None:
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from ``path`` or the default location.

        A missing file yields the built-in defaults; nothing is created.

        Raises:
            ConfigError: If the file cannot be read, is not valid TOML,
                or holds a value of the wrong type.
        """
        config_file = path if path is not None else default_config_path()
        if not config_file.is_file():
            logger.debug("No configuration file at %s; using defaults", config_file)
            return cls()

        try:
            with open(config_file, "rb") as f:
                raw = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Failed to load configuration from {config_file}: {e}") from e

        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in raw.items():
            if key not in known:
                logger.debug("Ignoring unknown configuration key: %s", key)
                continue
            if not isinstance(value, str):
                raise ConfigError(
                    f"Configuration value '{key}' in {config_file} must be a string"
                )
            values[key] = value

        logger.debug("Configuration loaded from %s", config_file)
        return cls(**values)


__all__ = ["DEFAULT_ROOT", "DEFAULT_SUFFIX", "Config"]
