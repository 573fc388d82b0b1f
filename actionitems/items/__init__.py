"""Action item domain: models and record stores."""

from actionitems.items.models import (
    ActionItem,
    ActionPriority,
    ActionStatus,
    ActionType,
    ItemFilter,
    ItemStats,
)
from actionitems.items.samples import sample_items
from actionitems.items.store import ActionItemStore
from actionitems.items.stores.inmemory import InMemoryActionItemStore

__all__ = [
    "ActionItem",
    "ActionItemStore",
    "ActionPriority",
    "ActionStatus",
    "ActionType",
    "InMemoryActionItemStore",
    "ItemFilter",
    "ItemStats",
    "sample_items",
]
