"""Reminder executor: fires the reminder immediately via the scheduler's manual path."""

from typing import TYPE_CHECKING

from actionitems.execution.models import ExecutionOutcome
from actionitems.executors.base import ActionExecutor
from actionitems.items.models import ActionItem, ActionType
from actionitems.observability.logging import get_logger

if TYPE_CHECKING:
    from actionitems.reminders.scheduler import ReminderScheduler

logger = get_logger(__name__)


class ReminderExecutor(ActionExecutor):
    """Executing a reminder triggers it now, regardless of its reminder time."""

    action_type = ActionType.REMINDER

    def __init__(self, scheduler: "ReminderScheduler") -> None:
        self._scheduler = scheduler

    async def execute(self, item: ActionItem) -> ExecutionOutcome:
        logger.info("executing_reminder_action", item_id=item.id)
        return await self._scheduler.trigger_manually(item.id)
