"""Reminder trigger models."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from actionitems.items.models import ActionItem, ActionPriority, utc_now

TriggerSource = Literal["scheduled", "manual"]


class Notification(BaseModel):
    """Payload pushed to the notification sink when a reminder fires."""

    model_config = ConfigDict(frozen=True)

    title: str
    body: str
    priority: ActionPriority
    timestamp: datetime = Field(default_factory=utc_now)

    @classmethod
    def for_item(cls, item: ActionItem, timestamp: datetime) -> "Notification":
        return cls(
            title=item.title,
            body=item.metadata.get("reminderMessage") or item.description,
            priority=item.priority,
            timestamp=timestamp,
        )


class TriggeredReminder(BaseModel):
    """Record kept for each reminder that has fired."""

    model_config = ConfigDict(frozen=True)

    item_id: str
    triggered_at: datetime
    source: TriggerSource
    item: ActionItem = Field(..., description="Snapshot of the item when it fired")
