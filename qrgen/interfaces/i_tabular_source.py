"""Tabular input interface (adapter pattern)."""

from typing import Iterator, Protocol, Sequence


class ITabularSource(Protocol):
    """Interface for row-oriented batch input."""

    def rows(self) -> Iterator[Sequence[str]]:
        """Yield rows as ordered string fields."""
        ...
