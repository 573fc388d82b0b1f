"""Bootstrap module wiring the full execution core from settings.

Example usage:

    from actionitems.bootstrap import build_runtime

    runtime = await build_runtime()
    await runtime.start()
    outcome = await runtime.engine.execute_action("4")
    await runtime.stop()
"""

from dataclasses import dataclass
from datetime import timedelta

from prometheus_client import start_http_server

from actionitems.config import get_settings
from actionitems.config.settings import Settings
from actionitems.execution.engine import ExecutionEngine
from actionitems.execution.history import ExecutionHistory
from actionitems.execution.registry import ExecutorRegistry
from actionitems.execution.scanner import DueItemScanner
from actionitems.executors.calendars import CalendarExecutor, CalendarService
from actionitems.executors.mail import EmailExecutor, EmailTransport, InMemoryEmailTransport
from actionitems.executors.priority import PriorityExecutor
from actionitems.executors.reminder import ReminderExecutor
from actionitems.items.samples import sample_items
from actionitems.items.store import ActionItemStore
from actionitems.items.stores.inmemory import InMemoryActionItemStore
from actionitems.observability.logging import get_logger, setup_logging
from actionitems.reminders.notifications import LoggingNotificationSink, NotificationSink
from actionitems.reminders.scheduler import ReminderScheduler
from actionitems.reminders.triggered import TriggeredReminderRegistry

logger = get_logger(__name__)


@dataclass
class ActionItemsRuntime:
    """Every component of a wired execution core."""

    settings: Settings
    store: ActionItemStore
    history: ExecutionHistory
    registry: ExecutorRegistry
    scanner: DueItemScanner
    engine: ExecutionEngine
    reminders: ReminderScheduler
    calendar: CalendarService
    email_transport: EmailTransport
    notification_sink: NotificationSink

    async def start(self) -> None:
        """Start the reminder loop if enabled in settings."""
        if self.settings.scheduler.enabled:
            await self.reminders.start()

    async def stop(self) -> None:
        await self.reminders.stop()


async def build_runtime(
    settings: Settings | None = None,
    *,
    store: ActionItemStore | None = None,
    email_transport: EmailTransport | None = None,
    notification_sink: NotificationSink | None = None,
    configure_logging: bool = False,
) -> ActionItemsRuntime:
    """Build a runtime from settings, with optional component overrides.

    Args:
        settings: Settings to use (default: get_settings())
        store: Record store (default: in-memory)
        email_transport: Mail transport (default: in-memory)
        notification_sink: Reminder sink (default: structured log)
        configure_logging: Apply the logging section of settings

    Returns:
        Wired runtime; the reminder loop is not started
    """
    settings = settings or get_settings()

    if configure_logging:
        log_config = settings.observability.logging
        setup_logging(
            level=log_config.level,
            format=log_config.format,
            redact_pii=log_config.redact_pii,
        )

    if settings.observability.metrics.enabled:
        start_http_server(settings.observability.metrics.port)
        logger.info("metrics_server_started", port=settings.observability.metrics.port)

    store = store or InMemoryActionItemStore()
    if settings.store.seed_sample_data:
        for item in sample_items():
            await store.create(item)
        logger.info("sample_data_seeded")

    grace_hours = settings.execution.overdue_grace_hours
    scanner = DueItemScanner(
        store,
        overdue_grace=None if grace_hours is None else timedelta(hours=grace_hours),
    )
    history = ExecutionHistory(
        capacity=settings.history.capacity,
        default_limit=settings.history.default_limit,
    )

    sink = notification_sink or LoggingNotificationSink()
    reminders = ReminderScheduler(
        store=store,
        scanner=scanner,
        sink=sink,
        triggered=TriggeredReminderRegistry(
            ttl=timedelta(seconds=settings.scheduler.dedup_ttl_seconds),
            max_entries=settings.scheduler.dedup_max_entries,
        ),
        tick_interval_seconds=settings.scheduler.tick_interval_seconds,
        lookahead_minutes=settings.scheduler.reminder_lookahead_minutes,
    )

    transport = email_transport or InMemoryEmailTransport()
    calendar = CalendarService(organizer=settings.calendar.organizer)
    registry = ExecutorRegistry([
        EmailExecutor(transport, sender=settings.email.sender),
        CalendarExecutor(calendar, link_template=settings.calendar.link_template),
        ReminderExecutor(reminders),
        PriorityExecutor(),
    ])

    engine = ExecutionEngine(
        store=store,
        registry=registry,
        history=history,
        scanner=scanner,
        executor_timeout_seconds=settings.execution.executor_timeout_seconds,
        due_lookahead_hours=settings.execution.due_lookahead_hours,
    )

    logger.info(
        "runtime_built",
        app_name=settings.app_name,
        scheduler_enabled=settings.scheduler.enabled,
    )

    return ActionItemsRuntime(
        settings=settings,
        store=store,
        history=history,
        registry=registry,
        scanner=scanner,
        engine=engine,
        reminders=reminders,
        calendar=calendar,
        email_transport=transport,
        notification_sink=sink,
    )
