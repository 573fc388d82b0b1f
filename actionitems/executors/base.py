"""ActionExecutor abstract interface."""

from abc import ABC, abstractmethod
from typing import ClassVar

from actionitems.execution.models import ExecutionOutcome
from actionitems.items.models import ActionItem, ActionType


class ActionExecutor(ABC):
    """Performs the type-specific side effect of an action item.

    ``execute`` returns a failed outcome for expected problems (missing
    metadata, a rejected send); raising is reserved for faults. Executors
    must be safe to invoke concurrently for distinct items.
    """

    action_type: ClassVar[ActionType]

    @abstractmethod
    async def execute(self, item: ActionItem) -> ExecutionOutcome:
        """Execute the item and report the outcome."""
        pass
