"""Executor configuration models."""

from pydantic import BaseModel, Field


class EmailConfig(BaseModel):
    """Email executor configuration."""

    sender: str = Field(
        default='"Action Items System" <noreply@actionitems.com>',
        description="From header used for outgoing mail",
    )


class CalendarConfig(BaseModel):
    """Calendar executor configuration."""

    organizer: str = Field(
        default="system@actionitems.com",
        description="Organizer recorded on created events",
    )
    link_template: str = Field(
        default="https://calendar.google.com/calendar/event?id={event_id}",
        description="Template for the event link returned to callers",
    )
