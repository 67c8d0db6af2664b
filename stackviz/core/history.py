"""Bounded operation history."""

from __future__ import annotations

from collections import deque

from stackviz.core.models import MAX_HISTORY_ITEMS


class HistoryLog:
    """FIFO of operation descriptions that evicts its oldest entry when full."""

    def __init__(self, max_size: int = MAX_HISTORY_ITEMS) -> None:
        if max_size <= 0:
            raise ValueError("max_size must be > 0")
        self._entries: deque[str] = deque(maxlen=max_size)

    @property
    def max_size(self) -> int:
        return self._entries.maxlen or 0

    @property
    def entries(self) -> tuple[str, ...]:
        """Entries oldest first."""
        return tuple(self._entries)

    def append(self, message: str) -> None:
        self._entries.append(message)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
