"""Logging interface (adapter pattern)."""

from typing import Protocol

LOG_LEVELS = ("debug", "info", "warn", "error")


class ILogSink(Protocol):
    """Interface for generator log output."""

    def log(self, level: str, message: str) -> None:
        """Write one entry; level is one of LOG_LEVELS."""
        ...
