"""Due-item scanner: selects pending items inside the due-soon window."""

from collections.abc import Callable
from datetime import datetime, timedelta

from actionitems.items.models import ActionItem, utc_now
from actionitems.items.store import ActionItemStore


class DueItemScanner:
    """Read-only query over the store for items that are due or due soon.

    The window is ``[now - overdue_grace, now + lookahead]``. Without a
    grace period the window is open towards the past, so an item whose due
    date passed between two scans is still picked up.
    """

    def __init__(
        self,
        store: ActionItemStore,
        overdue_grace: timedelta | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = store
        self._overdue_grace = overdue_grace
        self._clock = clock

    async def due_soon(self, lookahead_hours: float = 24.0) -> list[ActionItem]:
        """Pending items due within ``lookahead_hours``, ascending by due date.

        A lookahead of 0 returns only items that are already due.
        """
        if lookahead_hours < 0:
            raise ValueError("lookahead_hours must be non-negative")

        now = self._clock()
        start = None if self._overdue_grace is None else now - self._overdue_grace
        end = now + timedelta(hours=lookahead_hours)
        return await self._store.due_between(start, end)
