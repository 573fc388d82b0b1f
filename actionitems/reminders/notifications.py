"""Notification sinks receiving fired reminders.

Delivery is fire-and-forget: a sink that raises is logged by the caller
and never fails the trigger.
"""

from abc import ABC, abstractmethod

from actionitems.observability.logging import get_logger
from actionitems.reminders.models import Notification

logger = get_logger(__name__)


class NotificationSink(ABC):
    """Destination for reminder notifications."""

    @abstractmethod
    async def send(self, notification: Notification) -> None:
        pass


class LoggingNotificationSink(NotificationSink):
    """Writes each notification to the structured log."""

    async def send(self, notification: Notification) -> None:
        logger.info(
            "push_notification_sent",
            title=notification.title,
            body=notification.body,
            priority=notification.priority.value,
            timestamp=notification.timestamp.isoformat(),
        )


class InMemoryNotificationSink(NotificationSink):
    """Collects notifications in a list."""

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    async def send(self, notification: Notification) -> None:
        self.notifications.append(notification)
