"""Tests for PriorityExecutor."""

import pytest

from actionitems.executors.priority import PriorityExecutor
from actionitems.items.models import ActionPriority, ActionType


@pytest.mark.asyncio
async def test_priority_executor_reports_level(make_item):
    item = make_item(ActionType.PRIORITY, priority=ActionPriority.URGENT)

    outcome = await PriorityExecutor().execute(item)

    assert outcome.success is True
    assert outcome.data == {
        "message": "Priority task marked as ready for execution",
        "priorityLevel": "urgent",
    }
