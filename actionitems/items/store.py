"""ActionItemStore abstract interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from actionitems.items.models import ActionItem, ActionStatus, ItemFilter, ItemStats


class ActionItemStore(ABC):
    """Abstract interface for action item storage.

    Implementations must return copies: mutating a returned item never
    changes stored state. ``update`` always refreshes ``updated_at``.
    """

    @abstractmethod
    async def get(self, item_id: str) -> ActionItem | None:
        """Get an item by ID."""
        pass

    @abstractmethod
    async def list(self, item_filter: ItemFilter | None = None) -> list[ActionItem]:
        """List items matching the filter, ordered by due date ascending."""
        pass

    @abstractmethod
    async def create(self, item: ActionItem) -> ActionItem:
        """Insert a new item.

        Raises:
            ValueError: If an item with the same ID already exists
        """
        pass

    @abstractmethod
    async def update(self, item_id: str, **fields: Any) -> ActionItem | None:
        """Apply a partial update, returning the updated item or None if absent."""
        pass

    @abstractmethod
    async def delete(self, item_id: str) -> bool:
        """Delete an item, returning whether it existed."""
        pass

    @abstractmethod
    async def compare_and_set_status(
        self,
        item_id: str,
        expected: ActionStatus,
        **fields: Any,
    ) -> ActionItem | None:
        """Atomically update an item only if its status equals ``expected``.

        This is the per-item mutual exclusion primitive: of several
        concurrent callers expecting the same status, exactly one wins.

        Returns:
            The updated item, or None if the item is absent or its status
            no longer matches
        """
        pass

    @abstractmethod
    async def due_between(
        self,
        start: datetime | None,
        end: datetime,
    ) -> list[ActionItem]:
        """Pending items with ``start <= due_date <= end``, ascending by due date.

        A ``start`` of None leaves the window open towards the past.
        """
        pass

    @abstractmethod
    async def stats(self) -> ItemStats:
        """Count items by status, type and priority."""
        pass
