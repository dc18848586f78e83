"""mdfiles - list files modified on a given date as Markdown links."""

__version__ = "0.1.0"

__all__ = ["__version__"]
