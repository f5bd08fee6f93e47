"""Structured event logging used by graphs, the solver and the CLI.

Events are a name plus keyword fields. :class:`NoopLogger` drops them and is
the default everywhere; :class:`StdLogger` writes them to a stream.
"""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, Protocol, TextIO

LEVELS: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30}


class Logger(Protocol):
    """Anything with ``debug``/``info``/``warning`` event methods."""

    def debug(self, event: str, **fields: Any) -> None:
        """Emit a ``DEBUG``-level event."""
        ...

    def info(self, event: str, **fields: Any) -> None:
        """Emit an ``INFO``-level event."""
        ...

    def warning(self, event: str, **fields: Any) -> None:
        """Emit a ``WARNING``-level event."""
        ...


class NoopLogger:
    """Logger that discards all events."""

    def debug(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        """Ignore a ``DEBUG`` event."""
        return

    def info(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        """Ignore an ``INFO`` event."""
        return

    def warning(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        """Ignore a ``WARNING`` event."""
        return


class StdLogger:
    """Write events as ``level event key=value`` lines or as JSON objects.

    Args:
        level: Lowest level written: ``"debug"``, ``"info"`` or ``"warning"``.
        json_fmt: One JSON object per line instead of text.
        stream: Destination, ``sys.stderr`` when omitted.
    """

    def __init__(
        self,
        level: str = "warning",
        json_fmt: bool = False,
        stream: TextIO | None = None,
    ) -> None:
        self.threshold = LEVELS.get(level, LEVELS["info"])
        self.json_fmt = json_fmt
        self.stream = stream or sys.stderr

    def log(self, level: str, event: str, **fields: Any) -> None:
        """Write ``event`` if ``level`` passes the threshold."""
        if LEVELS[level] < self.threshold:
            return
        if self.json_fmt:
            record: Dict[str, Any] = {"level": level, "event": event, **fields}
            line = json.dumps(record, default=repr)
        else:
            line = " ".join([level, event] + [f"{k}={v}" for k, v in fields.items()])
        self.stream.write(line + "\n")

    def debug(self, event: str, **fields: Any) -> None:
        """Emit a ``DEBUG`` event."""
        self.log("debug", event, **fields)

    def info(self, event: str, **fields: Any) -> None:
        """Emit an ``INFO`` event."""
        self.log("info", event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        """Emit a ``WARNING`` event."""
        self.log("warning", event, **fields)


__all__ = ["LEVELS", "Logger", "NoopLogger", "StdLogger"]
