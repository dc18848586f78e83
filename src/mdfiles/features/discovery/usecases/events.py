"""src/mdfiles/features/discovery/usecases/events.py
What: Structured event identifiers and a logging helper for discovery runs.
Why: Let the console handler style scan progress without parsing messages.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Any

from mdfiles.platform.logging import logger


class ScanEvent(StrEnum):
    """Structured event identifiers attached to discovery log records."""

    START = "scan.start"
    COMPLETE = "scan.complete"
    ENTRY_SKIPPED = "scan.entry.skipped"


def log_scan_event(
    level: int,
    event: ScanEvent,
    message: str,
    *message_args: object,
    **context: Any,
) -> None:
    """Emit ``message`` with ``event`` and ``context`` as record extras."""

    if not logger.isEnabledFor(level):
        return
    extra: dict[str, Any] = {"scan_event": event.value}
    for key, value in context.items():
        extra[key] = str(value) if isinstance(value, Path) else value
    logger.log(level, message, *message_args, extra=extra, stacklevel=2)


__all__ = ["ScanEvent", "log_scan_event"]
