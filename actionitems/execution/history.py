"""Bounded, append-only execution history log."""

import threading
from collections import deque

from actionitems.execution.models import ExecutionLogEntry
from actionitems.observability.metrics import HISTORY_ENTRIES

DEFAULT_CAPACITY = 100
DEFAULT_LIMIT = 50


class ExecutionHistory:
    """Ring buffer of execution log entries.

    Once ``capacity`` is exceeded the oldest entry is evicted. Access is
    guarded by a lock so the log can be shared by the scheduler loop and
    request handlers, including across threads.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        default_limit: int = DEFAULT_LIMIT,
    ) -> None:
        if capacity < 1:
            raise ValueError("History capacity must be at least 1")
        self._entries: deque[ExecutionLogEntry] = deque(maxlen=capacity)
        self._default_limit = default_limit
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or 0

    def append(self, entry: ExecutionLogEntry) -> None:
        with self._lock:
            self._entries.append(entry)
            size = len(self._entries)
        HISTORY_ENTRIES.set(size)

    def recent(self, limit: int | None = None) -> list[ExecutionLogEntry]:
        """Return up to ``limit`` entries, newest first.

        ``limit`` defaults to the configured default and is clamped to the
        current size; a non-positive limit yields an empty list.
        """
        if limit is None:
            limit = self._default_limit
        with self._lock:
            size = len(self._entries)
            limit = max(0, min(limit, size))
            return [self._entries[size - 1 - i] for i in range(limit)]

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
        HISTORY_ENTRIES.set(0)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
