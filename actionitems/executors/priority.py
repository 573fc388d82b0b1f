"""Priority executor: no side effect, routes priority items through the state machine."""

from actionitems.execution.models import ExecutionOutcome
from actionitems.executors.base import ActionExecutor
from actionitems.items.models import ActionItem, ActionType
from actionitems.observability.logging import get_logger

logger = get_logger(__name__)


class PriorityExecutor(ActionExecutor):
    action_type = ActionType.PRIORITY

    async def execute(self, item: ActionItem) -> ExecutionOutcome:
        logger.info(
            "executing_priority_action",
            item_id=item.id,
            priority=item.priority.value,
        )
        return ExecutionOutcome.ok(
            message="Priority task marked as ready for execution",
            priorityLevel=item.priority.value,
        )
