"""Reminder triggering: the scheduler loop, its dedup registry and notification sinks."""

from actionitems.reminders.models import Notification, TriggeredReminder
from actionitems.reminders.notifications import (
    InMemoryNotificationSink,
    LoggingNotificationSink,
    NotificationSink,
)
from actionitems.reminders.scheduler import ReminderScheduler
from actionitems.reminders.triggered import TriggeredReminderRegistry

__all__ = [
    "InMemoryNotificationSink",
    "LoggingNotificationSink",
    "Notification",
    "NotificationSink",
    "ReminderScheduler",
    "TriggeredReminder",
    "TriggeredReminderRegistry",
]
