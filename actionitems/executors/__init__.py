"""Per-type action executors."""

from actionitems.executors.base import ActionExecutor
from actionitems.executors.calendars import (
    CalendarEvent,
    CalendarEventNotFoundError,
    CalendarExecutor,
    CalendarService,
)
from actionitems.executors.mail import (
    EmailExecutor,
    EmailMessage,
    EmailTransport,
    InMemoryEmailTransport,
)
from actionitems.executors.priority import PriorityExecutor
from actionitems.executors.reminder import ReminderExecutor

__all__ = [
    "ActionExecutor",
    "CalendarEvent",
    "CalendarEventNotFoundError",
    "CalendarExecutor",
    "CalendarService",
    "EmailExecutor",
    "EmailMessage",
    "EmailTransport",
    "InMemoryEmailTransport",
    "PriorityExecutor",
    "ReminderExecutor",
]
