"""Action item domain models.

An action item is created externally in ``pending`` status and from then on
is mutated only by the execution engine or the reminder scheduler.
"""

from datetime import UTC, datetime
from enum import Enum
from typing import Any
from uuid import uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


def ensure_aware_utc(value: datetime) -> datetime:
    """Normalize a datetime to aware UTC (naive is assumed to be UTC)."""
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class ActionType(str, Enum):
    """Kinds of action item, one executor per kind."""

    REMINDER = "reminder"
    EMAIL = "email"
    CALENDAR = "calendar"
    PRIORITY = "priority"


class ActionStatus(str, Enum):
    """Execution state of an action item."""

    PENDING = "pending"  # Waiting to execute
    IN_PROGRESS = "in_progress"  # Executor is running
    COMPLETED = "completed"  # Executed successfully
    FAILED = "failed"  # Executor reported failure or raised


class ActionPriority(str, Enum):
    """Informational priority; does not affect scheduling order."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class ActionItem(BaseModel):
    """A discrete unit of work executed once at or after its due date.

    Field names are snake_case in Python and camelCase on the wire
    (``dueDate``, ``failureReason``...); both spellings are accepted.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(default_factory=lambda: uuid4().hex, description="Immutable identifier")
    title: str = Field(..., min_length=1, description="Short human-readable title")
    description: str = Field(default="", description="Longer free-form description")
    type: ActionType = Field(..., description="Determines the executor and required metadata")
    status: ActionStatus = Field(default=ActionStatus.PENDING)
    priority: ActionPriority = Field(default=ActionPriority.MEDIUM)
    due_date: datetime = Field(..., description="When the item becomes due")
    metadata: dict[str, Any] = Field(
        default_factory=dict, description="Type-specific payload"
    )

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    executed_at: datetime | None = Field(default=None)
    completed_at: datetime | None = Field(default=None)
    failure_reason: str | None = Field(
        default=None,
        description="Reason of the last failure; moved to metadata.previousFailureReason on success",
    )

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Title is required")
        return value

    @field_validator("due_date", "created_at", "updated_at", "executed_at", "completed_at")
    @classmethod
    def _normalize_datetimes(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return None
        return ensure_aware_utc(value)

    @model_validator(mode="after")
    def _status_matches_outcome_fields(self) -> "ActionItem":
        # completed and failed are mutually exclusive outcomes
        if self.status == ActionStatus.COMPLETED:
            if self.completed_at is None:
                raise ValueError("completed items must carry completed_at")
            if self.failure_reason:
                raise ValueError("completed items cannot carry failure_reason")
        if self.status == ActionStatus.FAILED:
            if not self.failure_reason:
                raise ValueError("failed items must carry failure_reason")
            if self.completed_at is not None:
                raise ValueError("failed items cannot carry completed_at")
        return self

    def validate_for_type(self) -> list[str]:
        """Return type-specific validation errors for this item.

        Creation does not enforce these; executors report the same
        problems as failed outcomes.
        """
        errors: list[str] = []

        if self.type == ActionType.EMAIL:
            if not self.metadata.get("emailTo"):
                errors.append("Email recipients are required")
            if not self.metadata.get("emailSubject"):
                errors.append("Email subject is required")
        elif self.type == ActionType.CALENDAR:
            if not self.metadata.get("calendarEventDetails"):
                errors.append("Calendar event details are required")
        elif self.type == ActionType.REMINDER:
            if not self.metadata.get("reminderTime"):
                errors.append("Reminder time is required")

        return errors

    def to_wire(self) -> dict[str, Any]:
        """Serialize with camelCase keys and ISO timestamps."""
        return self.model_dump(mode="json", by_alias=True)


class ItemFilter(BaseModel):
    """Optional equality filters for listing items."""

    status: ActionStatus | None = None
    type: ActionType | None = None
    priority: ActionPriority | None = None

    def matches(self, item: ActionItem) -> bool:
        if self.status is not None and item.status != self.status:
            return False
        if self.type is not None and item.type != self.type:
            return False
        if self.priority is not None and item.priority != self.priority:
            return False
        return True


class ItemStats(BaseModel):
    """Item counts by status, type and priority."""

    total: int = 0
    pending: int = 0
    in_progress: int = 0
    completed: int = 0
    failed: int = 0
    by_type: dict[ActionType, int] = Field(default_factory=dict)
    by_priority: dict[ActionPriority, int] = Field(default_factory=dict)


_DATETIME_ADAPTER = TypeAdapter(datetime)


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO-8601 string or datetime found in item metadata.

    Raises:
        ValueError: If the value is not a recognizable timestamp
    """
    try:
        parsed = _DATETIME_ADAPTER.validate_python(value)
    except ValidationError as e:
        raise ValueError(f"Invalid timestamp: {value!r}") from e
    return ensure_aware_utc(parsed)
