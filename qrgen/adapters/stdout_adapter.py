"""Stdout logging adapter."""

import sys
from datetime import datetime
from ..interfaces.i_log_sink import LOG_LEVELS

LEVEL_ALIASES = {"warning": "warn", "critical": "error"}


class StdoutAdapter:
    """Adapter for console logging.

    Warnings and errors go to stderr, the rest to stdout. Entries below
    min_level are dropped; an unknown min_level means info.
    """

    def __init__(self, min_level: str = "info"):
        level = LEVEL_ALIASES.get(min_level.lower(), min_level.lower())
        if level not in LOG_LEVELS:
            level = "info"
        self.min_rank = LOG_LEVELS.index(level)

    def log(self, level: str, message: str) -> None:
        """Write log entry."""
        rank = LOG_LEVELS.index(level) if level in LOG_LEVELS else 1
        if rank < self.min_rank:
            return

        timestamp = datetime.now().isoformat()
        stream = sys.stderr if rank >= LOG_LEVELS.index("warn") else sys.stdout
        print(f"[{timestamp}] {level.upper()}: {message}", file=stream)
