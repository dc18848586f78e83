"""Rich-based display helpers for the CLI."""

from .result import ResultDisplay

__all__ = ["ResultDisplay"]
