"""Configuration loading for mdfiles."""

from mdfiles.config.config import DEFAULT_ROOT, DEFAULT_SUFFIX, Config

__all__ = ["DEFAULT_ROOT", "DEFAULT_SUFFIX", "Config"]
