"""Scheduling and execution configuration models."""

from pydantic import BaseModel, Field


class SchedulerConfig(BaseModel):
    """Reminder scheduler loop configuration."""

    enabled: bool = Field(default=True, description="Start the reminder loop on boot")
    tick_interval_seconds: float = Field(
        default=60.0,
        ge=1.0,
        description="Seconds between due-reminder checks",
    )
    reminder_lookahead_minutes: float = Field(
        default=6.0,
        ge=0.0,
        description="Lookahead window used when scanning for reminders",
    )
    dedup_ttl_seconds: float = Field(
        default=86400.0,
        ge=0.0,
        description="Age after which a triggered-reminder entry is evicted",
    )
    dedup_max_entries: int = Field(
        default=10_000,
        ge=1,
        description="Maximum number of triggered-reminder entries kept in memory",
    )


class ExecutionConfig(BaseModel):
    """Execution engine configuration."""

    executor_timeout_seconds: float = Field(
        default=30.0,
        gt=0.0,
        description="Upper bound on a single executor invocation",
    )
    due_lookahead_hours: float = Field(
        default=0.0,
        ge=0.0,
        description="Lookahead used by execute_all_due (0 = already due)",
    )
    overdue_grace_hours: float | None = Field(
        default=None,
        ge=0.0,
        description="How far in the past a due date may be and still be picked up (None = unbounded)",
    )


class HistoryConfig(BaseModel):
    """Execution history log configuration."""

    capacity: int = Field(default=100, ge=1, description="Maximum retained log entries")
    default_limit: int = Field(default=50, ge=1, description="Default page size for recent()")


class StoreConfig(BaseModel):
    """Record store configuration."""

    seed_sample_data: bool = Field(
        default=False,
        description="Populate the in-memory store with one sample item per type",
    )
