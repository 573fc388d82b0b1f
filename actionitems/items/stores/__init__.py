"""Action item stores."""

from actionitems.items.store import ActionItemStore
from actionitems.items.stores.inmemory import InMemoryActionItemStore

__all__ = [
    "ActionItemStore",
    "InMemoryActionItemStore",
]
