"""Calendar executor and the simulated calendar service behind it."""

from datetime import datetime, timedelta
from typing import Any, Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from actionitems.execution.models import ExecutionOutcome
from actionitems.executors.base import ActionExecutor
from actionitems.items.models import ActionItem, ActionType, parse_timestamp, utc_now
from actionitems.observability.logging import get_logger

logger = get_logger(__name__)

DEFAULT_ORGANIZER = "system@actionitems.com"
DEFAULT_LINK_TEMPLATE = "https://calendar.google.com/calendar/event?id={event_id}"


class CalendarEventNotFoundError(LookupError):
    """Raised when a calendar event ID is unknown."""

    def __init__(self, event_id: str) -> None:
        super().__init__(f"Event not found: {event_id}")
        self.event_id = event_id


class CalendarEvent(BaseModel):
    """A created calendar event."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(default_factory=lambda: f"cal-{uuid4().hex[:12]}")
    title: str
    description: str = ""
    start_time: datetime
    end_time: datetime
    duration: int = Field(..., description="Duration in minutes")
    location: str | None = None
    attendees: list[str] = Field(default_factory=list)
    organizer: str = DEFAULT_ORGANIZER
    created_at: datetime = Field(default_factory=utc_now)
    status: Literal["confirmed", "cancelled"] = "confirmed"
    cancelled_at: datetime | None = None


class EventDetails(BaseModel):
    """The ``calendarEventDetails`` metadata of a calendar item."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    start_time: datetime
    duration: int = Field(..., gt=0, description="Duration in minutes")
    location: str | None = None
    attendees: list[str] = Field(default_factory=list)
    description: str | None = None


def _format_ical_date(value: datetime) -> str:
    return value.strftime("%Y%m%dT%H%M%SZ")


class CalendarService:
    """Keeps created events in memory; stands in for a real calendar API."""

    def __init__(self, organizer: str = DEFAULT_ORGANIZER) -> None:
        self._organizer = organizer
        self._events: dict[str, CalendarEvent] = {}

    def create_event(self, item: ActionItem, details: EventDetails) -> CalendarEvent:
        start = parse_timestamp(details.start_time)
        event = CalendarEvent(
            title=item.title,
            description=details.description or item.description,
            start_time=start,
            end_time=start + timedelta(minutes=details.duration),
            duration=details.duration,
            location=details.location,
            attendees=details.attendees,
            organizer=self._organizer,
        )
        self._events[event.id] = event

        logger.info(
            "calendar_event_created",
            event_id=event.id,
            item_id=item.id,
            start_time=event.start_time.isoformat(),
            duration_minutes=event.duration,
            location=event.location or "Not specified",
        )
        self._send_invitations(event)
        return event

    def get_event(self, event_id: str) -> CalendarEvent | None:
        return self._events.get(event_id)

    def list_events(self) -> list[CalendarEvent]:
        return list(self._events.values())

    def cancel_event(self, event_id: str) -> CalendarEvent:
        """Mark an event cancelled.

        Raises:
            CalendarEventNotFoundError: If the event does not exist
        """
        event = self._events.get(event_id)
        if event is None:
            raise CalendarEventNotFoundError(event_id)

        cancelled = event.model_copy(update={"status": "cancelled", "cancelled_at": utc_now()})
        self._events[event_id] = cancelled
        logger.info("calendar_event_cancelled", event_id=event_id)
        return cancelled

    def to_ical(self, event: CalendarEvent) -> str:
        """Render a single event as a minimal VCALENDAR document."""
        lines = [
            "BEGIN:VCALENDAR",
            "VERSION:2.0",
            "PRODID:-//Action Items//Calendar//EN",
            "BEGIN:VEVENT",
            f"UID:{event.id}",
            f"DTSTAMP:{_format_ical_date(utc_now())}",
            f"DTSTART:{_format_ical_date(event.start_time)}",
            f"DTEND:{_format_ical_date(event.end_time)}",
            f"SUMMARY:{event.title}",
            f"DESCRIPTION:{event.description}",
            f"LOCATION:{event.location or ''}",
            f"ORGANIZER:{event.organizer}",
            f"STATUS:{event.status.upper()}",
            "END:VEVENT",
            "END:VCALENDAR",
        ]
        return "\r\n".join(lines)

    def _send_invitations(self, event: CalendarEvent) -> None:
        for attendee in event.attendees:
            logger.info("calendar_invitation_sent", event_id=event.id, attendee=attendee)


class CalendarExecutor(ActionExecutor):
    """Creates the event described by ``calendarEventDetails``.

    Requires at least a start time and a positive duration in minutes;
    missing or malformed details are reported as a failed outcome.
    """

    action_type = ActionType.CALENDAR

    def __init__(
        self,
        service: CalendarService,
        link_template: str = DEFAULT_LINK_TEMPLATE,
    ) -> None:
        self._service = service
        self._link_template = link_template

    async def execute(self, item: ActionItem) -> ExecutionOutcome:
        logger.info("executing_calendar_action", item_id=item.id)

        raw: Any = item.metadata.get("calendarEventDetails")
        if not raw:
            return ExecutionOutcome.failed("Calendar event details are missing")
        if not isinstance(raw, dict):
            return ExecutionOutcome.failed("Calendar event details are malformed")

        try:
            details = EventDetails.model_validate(raw)
        except ValueError as e:
            logger.warning("calendar_details_invalid", item_id=item.id, error=str(e))
            return ExecutionOutcome.failed(f"Calendar event details are malformed: {e}")

        event = self._service.create_event(item, details)
        return ExecutionOutcome.ok(
            event=event.model_dump(mode="json", by_alias=True),
            calendarLink=self._link_template.format(event_id=event.id),
        )
