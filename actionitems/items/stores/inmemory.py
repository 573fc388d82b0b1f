"""In-memory implementation of ActionItemStore."""

from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Any

from actionitems.items.models import (
    ActionItem,
    ActionPriority,
    ActionStatus,
    ActionType,
    ItemFilter,
    ItemStats,
    utc_now,
)
from actionitems.items.store import ActionItemStore
from actionitems.observability.logging import get_logger

logger = get_logger(__name__)


class InMemoryActionItemStore(ActionItemStore):
    """In-memory implementation of ActionItemStore.

    Uses a dict guarded by a single asyncio lock, with linear scans for
    queries. Suitable for a single-process deployment and for tests.
    """

    def __init__(self, items: list[ActionItem] | None = None) -> None:
        self._items: dict[str, ActionItem] = {}
        self._lock = asyncio.Lock()
        for item in items or []:
            self._items[item.id] = item.model_copy(deep=True)

    async def get(self, item_id: str) -> ActionItem | None:
        async with self._lock:
            item = self._items.get(item_id)
            return item.model_copy(deep=True) if item else None

    async def list(self, item_filter: ItemFilter | None = None) -> list[ActionItem]:
        item_filter = item_filter or ItemFilter()
        async with self._lock:
            results = [
                item.model_copy(deep=True)
                for item in self._items.values()
                if item_filter.matches(item)
            ]
        results.sort(key=lambda i: i.due_date)
        return results

    async def create(self, item: ActionItem) -> ActionItem:
        async with self._lock:
            if item.id in self._items:
                raise ValueError(f"Action item already exists: {item.id}")
            self._items[item.id] = item.model_copy(deep=True)

        logger.info(
            "action_item_created",
            item_id=item.id,
            item_type=item.type.value,
            due_date=item.due_date.isoformat(),
        )
        return item.model_copy(deep=True)

    async def update(self, item_id: str, **fields: Any) -> ActionItem | None:
        async with self._lock:
            current = self._items.get(item_id)
            if current is None:
                return None
            return self._apply(current, fields)

    async def delete(self, item_id: str) -> bool:
        async with self._lock:
            existed = self._items.pop(item_id, None) is not None

        if existed:
            logger.info("action_item_deleted", item_id=item_id)
        return existed

    async def compare_and_set_status(
        self,
        item_id: str,
        expected: ActionStatus,
        **fields: Any,
    ) -> ActionItem | None:
        async with self._lock:
            current = self._items.get(item_id)
            if current is None or current.status != expected:
                return None
            return self._apply(current, fields)

    async def due_between(
        self,
        start: datetime | None,
        end: datetime,
    ) -> list[ActionItem]:
        async with self._lock:
            results = [
                item.model_copy(deep=True)
                for item in self._items.values()
                if item.status == ActionStatus.PENDING
                and (start is None or item.due_date >= start)
                and item.due_date <= end
            ]
        results.sort(key=lambda i: i.due_date)
        return results

    async def stats(self) -> ItemStats:
        async with self._lock:
            items = list(self._items.values())

        by_type = {t: 0 for t in ActionType}
        by_priority = {p: 0 for p in ActionPriority}
        by_status = {s: 0 for s in ActionStatus}
        for item in items:
            by_type[item.type] += 1
            by_priority[item.priority] += 1
            by_status[item.status] += 1

        return ItemStats(
            total=len(items),
            pending=by_status[ActionStatus.PENDING],
            in_progress=by_status[ActionStatus.IN_PROGRESS],
            completed=by_status[ActionStatus.COMPLETED],
            failed=by_status[ActionStatus.FAILED],
            by_type=by_type,
            by_priority=by_priority,
        )

    def _apply(self, current: ActionItem, fields: dict[str, Any]) -> ActionItem:
        """Merge fields into an item and store the result. Caller holds the lock."""
        fields.pop("id", None)
        data = current.model_dump()
        data.update(fields)
        data["updated_at"] = utc_now()

        # Re-validate so the status/outcome invariants hold on every write
        updated = ActionItem.model_validate(data)
        self._items[updated.id] = updated
        return updated.model_copy(deep=True)
