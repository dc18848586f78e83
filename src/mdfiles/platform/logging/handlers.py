"""Rich console handler for mdfiles log records.

Where: platform/logging/handlers.py
What: Render structured scan events with icons and compact paths on stderr.
Why: Keep console styling out of the discovery use cases.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text
from rich.traceback import Traceback


class ScanRichHandler(RichHandler):
    """Rich handler that renders ``scan_event`` records as one styled line."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "scan.start": ("🔎", "cyan"),
        "scan.complete": ("✅", "green"),
        "scan.entry.skipped": ("↪️", "yellow"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with mdfiles display defaults.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format ``path`` compactly, relative to ``base`` when it lies beneath it.

        Only the last few segments are kept; dropped leading segments are
        replaced with an ellipsis.
        """
        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and pure_path.is_relative_to(base_path):
            relative_path = pure_path.relative_to(base_path)
            if str(relative_path) not in {"", "."}:
                display_path = relative_path

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if anchor:
            display_string = anchor.rstrip("\\/") + separator
        if truncated:
            display_string += "…" + separator
        display_string += separator.join(body_parts)

        return self._style_path_string(display_string or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        text = Text()
        for char in path_string:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_scan_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured scan events; ``None`` for ordinary records."""

        event = getattr(record, "scan_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        details: list[str] = []
        path: object = None

        if event == "scan.start":
            _ = body.append("Scan start")
            suffix = getattr(record, "suffix", None)
            target_date = getattr(record, "target_date", None)
            if suffix:
                details.append(f"suffix={suffix}")
            if target_date:
                details.append(f"date={target_date}")
            path = getattr(record, "root", None)
        elif event == "scan.complete":
            _ = body.append("Scan complete")
            for key in ("visited", "matched"):
                value = getattr(record, key, None)
                if isinstance(value, int):
                    details.append(f"{key}={value}")
            duration = getattr(record, "duration_seconds", None)
            if isinstance(duration, (int, float)):
                details.append(f"duration={duration:.2f}s")
            path = getattr(record, "root", None)
        else:
            _ = body.append("Skipped ")
            path = getattr(record, "source_path", None)

        if details:
            _ = body.append(" [" + ", ".join(details) + "]")
        if path:
            if event != "scan.entry.skipped":
                _ = body.append(" @ ")
            _ = body.append_text(self._format_path(str(path), base=getattr(record, "base_path", None)))

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render scan events with custom styling, other records as plain text."""

        scan_text = self._render_scan_message(record)
        if scan_text is not None:
            return scan_text
        return super().render_message(record, message)

    @override
    def render(
        self,
        *,
        record: logging.LogRecord,
        traceback: Traceback | None,
        message_renderable: ConsoleRenderable,
    ) -> ConsoleRenderable:
        """Return the message itself so lines are neither wrapped nor padded.

        Time, level and path columns are disabled, so the column layout adds
        nothing but padding to the console width.
        """
        if traceback is None:
            return message_renderable
        return super().render(
            record=record, traceback=traceback, message_renderable=message_renderable
        )


__all__ = ["ScanRichHandler"]
