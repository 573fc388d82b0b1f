"""Reminder scheduler: fixed-cadence loop that fires due reminders.

Each tick:
1. Evicts expired entries from the triggered-reminder registry
2. Scans for pending items due within the reminder lookahead
3. Fires every reminder whose reminderTime has passed and which has not
   been triggered before

Ticks never overlap: a tick that starts while the previous one is still
running is skipped.
"""

import asyncio
from collections.abc import Callable
from datetime import datetime

from actionitems.execution.errors import ActionItemNotFoundError, NotAReminderError
from actionitems.execution.models import ExecutionOutcome
from actionitems.execution.scanner import DueItemScanner
from actionitems.items.models import (
    ActionItem,
    ActionStatus,
    ActionType,
    parse_timestamp,
    utc_now,
)
from actionitems.items.store import ActionItemStore
from actionitems.observability.logging import get_logger
from actionitems.observability.metrics import REMINDERS_TRIGGERED, SCHEDULER_TICKS
from actionitems.reminders.models import Notification, TriggeredReminder, TriggerSource
from actionitems.reminders.notifications import LoggingNotificationSink, NotificationSink
from actionitems.reminders.triggered import TriggeredReminderRegistry

logger = get_logger(__name__)


class ReminderScheduler:
    """Scheduler for reminder-type action items.

    The triggered-reminder registry guards against firing the same
    reminder on consecutive ticks; the manual trigger path bypasses it.
    """

    def __init__(
        self,
        store: ActionItemStore,
        scanner: DueItemScanner,
        sink: NotificationSink | None = None,
        triggered: TriggeredReminderRegistry | None = None,
        tick_interval_seconds: float = 60.0,
        lookahead_minutes: float = 6.0,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize scheduler.

        Args:
            store: Record store holding the action items
            scanner: Due-item query used on every tick
            sink: Destination for fired notifications
            triggered: Registry of reminders that already fired
            tick_interval_seconds: Seconds between ticks
            lookahead_minutes: Scan window beyond now
            clock: Source of the current time
        """
        self._store = store
        self._scanner = scanner
        self._sink = sink or LoggingNotificationSink()
        self._triggered = triggered or TriggeredReminderRegistry()
        self._tick_interval_seconds = tick_interval_seconds
        self._lookahead_minutes = lookahead_minutes
        self._clock = clock
        self._running = False
        self._loop_task: asyncio.Task | None = None
        self._tick_lock = asyncio.Lock()

    @property
    def is_running(self) -> bool:
        return self._running

    async def start(self) -> None:
        """Start the scheduler loop as a background task."""
        if self._running:
            logger.warning("reminder_scheduler_already_running")
            return

        self._running = True
        self._loop_task = asyncio.create_task(self._run_loop())

        logger.info(
            "reminder_scheduler_started",
            tick_interval_seconds=self._tick_interval_seconds,
            lookahead_minutes=self._lookahead_minutes,
        )

    async def stop(self) -> None:
        """Stop the scheduler loop."""
        if not self._running:
            return

        self._running = False

        if self._loop_task:
            self._loop_task.cancel()
            try:
                await self._loop_task
            except asyncio.CancelledError:
                pass
            self._loop_task = None

        logger.info("reminder_scheduler_stopped")

    async def _run_loop(self) -> None:
        while self._running:
            await self.tick()
            await asyncio.sleep(self._tick_interval_seconds)

    async def tick(self) -> list[str]:
        """Run one due-reminder check unless one is already in progress.

        Returns:
            IDs of reminders fired by this tick
        """
        if self._tick_lock.locked():
            SCHEDULER_TICKS.labels(result="skipped").inc()
            logger.warning("reminder_tick_skipped")
            return []

        async with self._tick_lock:
            try:
                fired = await self.check_due_reminders()
            except Exception as e:
                SCHEDULER_TICKS.labels(result="error").inc()
                logger.exception("reminder_tick_error", error=str(e))
                return []

        SCHEDULER_TICKS.labels(result="ran").inc()
        return fired

    async def check_due_reminders(self) -> list[str]:
        """Fire every due, not-yet-triggered pending reminder."""
        now = self._clock()
        evicted = await self._triggered.evict_expired(now)
        if evicted:
            logger.debug("triggered_reminders_evicted", count=len(evicted))

        candidates = await self._scanner.due_soon(self._lookahead_minutes / 60)
        fired: list[str] = []

        for item in candidates:
            if item.type != ActionType.REMINDER or item.status != ActionStatus.PENDING:
                continue

            reminder_time = self._reminder_time(item)
            if reminder_time is None or reminder_time > now:
                continue

            if await self._triggered.contains(item.id):
                continue

            outcome = await self._trigger(item, source="scheduled")
            if outcome is not None and outcome.success:
                fired.append(item.id)

        return fired

    async def trigger_manually(self, item_id: str) -> ExecutionOutcome:
        """Fire a reminder now, ignoring its due time and prior triggers.

        Raises:
            ActionItemNotFoundError: If the item does not exist
            NotAReminderError: If the item is not a reminder
        """
        item = await self._store.get(item_id)
        if item is None:
            raise ActionItemNotFoundError(item_id)
        if item.type != ActionType.REMINDER:
            raise NotAReminderError(item_id)

        outcome = await self._trigger(item, source="manual")
        if outcome is None:
            raise ActionItemNotFoundError(item_id)
        return outcome

    async def history(self) -> list[TriggeredReminder]:
        """Triggered reminders still held by the registry, oldest first."""
        return await self._triggered.entries()

    async def _trigger(
        self,
        item: ActionItem,
        source: TriggerSource,
    ) -> ExecutionOutcome | None:
        """Mark the item completed, record it, and emit its notification.

        Scheduled triggers only proceed if the item is still pending;
        returns None when the item could not be claimed.
        """
        now = self._clock()
        fields = {
            "status": ActionStatus.COMPLETED,
            "executed_at": now,
            "completed_at": now,
            "failure_reason": None,
        }
        if item.failure_reason:
            fields["metadata"] = {**item.metadata, "previousFailureReason": item.failure_reason}

        if source == "scheduled":
            updated = await self._store.compare_and_set_status(
                item.id, ActionStatus.PENDING, **fields
            )
        else:
            updated = await self._store.update(item.id, **fields)

        if updated is None:
            logger.info("reminder_trigger_skipped", item_id=item.id, source=source)
            return None

        await self._triggered.record(
            TriggeredReminder(item_id=item.id, triggered_at=now, source=source, item=item)
        )

        notification = Notification.for_item(item, timestamp=now)
        try:
            await self._sink.send(notification)
        except Exception as e:
            logger.warning("notification_delivery_failed", item_id=item.id, error=str(e))

        REMINDERS_TRIGGERED.labels(source=source).inc()
        logger.info(
            "reminder_triggered",
            item_id=item.id,
            source=source,
            priority=item.priority.value,
        )

        return ExecutionOutcome.ok(notification=notification.model_dump(mode="json"))

    def _reminder_time(self, item: ActionItem) -> datetime | None:
        raw = item.metadata.get("reminderTime")
        if raw is None:
            return item.due_date
        try:
            return parse_timestamp(raw)
        except ValueError:
            logger.warning("reminder_time_invalid", item_id=item.id, reminder_time=str(raw))
            return None
