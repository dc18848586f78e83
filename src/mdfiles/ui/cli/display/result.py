"""src/mdfiles/ui/cli/display/result.py
What: Write matching files to stdout as Markdown list items.
Why: Keep console output settings in one place so paths print verbatim.
"""

from __future__ import annotations

from typing import final

from rich.console import Console


@final
class ResultDisplay:
    """Prints one Markdown link per matching file."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(soft_wrap=True)

    def show_match(self, line: str) -> None:
        """Write a single formatted match to the console stream unrendered.

        Rendering would expand tabs, drop control characters and treat
        ``[...]`` as markup; paths must appear exactly as discovered.
        """
        output = self.console.file
        _ = output.write(line + "\n")
        output.flush()


__all__ = ["ResultDisplay"]
