"""Bounded log of completed computations."""

from __future__ import annotations

from collections.abc import Iterator

from decicalc.exceptions import ConfigError

DEFAULT_CAPACITY = 50


class HistoryLog:
    """
    Most-recent-first list of history entries with a fixed capacity.

    Example:
        >>> log = HistoryLog(capacity=2)
        >>> for entry in ("1 + 1 = 2", "2 + 2 = 4", "3 + 3 = 6"):
        ...     log.record(entry)
        >>> log.entries
        ('3 + 3 = 6', '2 + 2 = 4')
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ConfigError("History capacity must be positive", capacity)
        self._capacity = capacity
        self._entries: list[str] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def entries(self) -> tuple[str, ...]:
        """Snapshot of all entries, newest first."""
        return tuple(self._entries)

    @property
    def latest(self) -> str | None:
        return self._entries[0] if self._entries else None

    def record(self, entry: str) -> None:
        """Insert an entry at the front, evicting the oldest when full."""
        self._entries.insert(0, entry)
        del self._entries[self._capacity :]

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> str:
        return self._entries[index]

    def __repr__(self) -> str:
        return f"HistoryLog(capacity={self._capacity}, size={len(self._entries)})"
