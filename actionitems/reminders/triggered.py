"""Registry of already-triggered reminders used to de-duplicate ticks."""

import asyncio
from datetime import datetime, timedelta

from actionitems.reminders.models import TriggeredReminder


class TriggeredReminderRegistry:
    """Membership map of item id -> TriggeredReminder.

    Entries older than ``ttl`` are evicted by ``evict_expired``; beyond
    ``max_entries`` the oldest entry is dropped on insert.
    """

    def __init__(
        self,
        ttl: timedelta = timedelta(days=1),
        max_entries: int = 10_000,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._ttl = ttl
        self._max_entries = max_entries
        # Insertion order doubles as trigger order
        self._entries: dict[str, TriggeredReminder] = {}
        self._lock = asyncio.Lock()

    async def contains(self, item_id: str) -> bool:
        async with self._lock:
            return item_id in self._entries

    async def record(self, entry: TriggeredReminder) -> None:
        async with self._lock:
            self._entries.pop(entry.item_id, None)
            self._entries[entry.item_id] = entry
            while len(self._entries) > self._max_entries:
                oldest = next(iter(self._entries))
                del self._entries[oldest]

    async def evict_expired(self, now: datetime) -> list[str]:
        """Drop entries triggered more than ``ttl`` ago, returning their ids."""
        cutoff = now - self._ttl
        async with self._lock:
            expired = [
                item_id
                for item_id, entry in self._entries.items()
                if entry.triggered_at < cutoff
            ]
            for item_id in expired:
                del self._entries[item_id]
        return expired

    async def entries(self) -> list[TriggeredReminder]:
        async with self._lock:
            return list(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
