"""Execution outcome and log models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from actionitems.items.models import ActionItem, ActionType, utc_now


class ExecutionOutcome(BaseModel):
    """Result of one executor invocation.

    ``data`` holds the success payload (delivery id, created event...);
    ``error`` is set exactly when ``success`` is False.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    data: dict[str, Any] = Field(default_factory=dict)
    error: str | None = None

    @model_validator(mode="after")
    def _error_iff_failed(self) -> "ExecutionOutcome":
        if self.success and self.error is not None:
            raise ValueError("successful outcomes carry no error")
        if not self.success and not self.error:
            raise ValueError("failed outcomes must carry an error")
        return self

    @classmethod
    def ok(cls, **data: Any) -> "ExecutionOutcome":
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, error: str, **data: Any) -> "ExecutionOutcome":
        return cls(success=False, error=error, data=data)

    def to_payload(self) -> dict[str, Any]:
        """Flatten into the ``{success, ..., error}`` shape stored on items."""
        payload: dict[str, Any] = {"success": self.success, **self.data}
        if self.error is not None:
            payload["error"] = self.error
        return payload


class ExecutionLogEntry(BaseModel):
    """Immutable record of one execution attempt."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(default_factory=utc_now)
    action_id: str = Field(..., description="Executed item")
    title: str = Field(..., description="Item title at execution time")
    type: ActionType = Field(..., description="Item type at execution time")
    success: bool
    result: dict[str, Any] = Field(default_factory=dict, description="Full outcome payload")

    @classmethod
    def record(cls, item: ActionItem, outcome: ExecutionOutcome) -> "ExecutionLogEntry":
        return cls(
            action_id=item.id,
            title=item.title,
            type=item.type,
            success=outcome.success,
            result=outcome.to_payload(),
        )


class BatchResult(BaseModel):
    """One entry of an execute-all-due run."""

    item: ActionItem
    result: ExecutionOutcome
