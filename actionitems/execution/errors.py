"""Execution error hierarchy.

All errors inherit from ActionItemsError, which carries a machine-readable
error_code so a request boundary can map failures to responses. A failed
executor outcome is NOT an error: it is returned as an ExecutionOutcome.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for execution failures."""

    NOT_FOUND = "NOT_FOUND"
    """No action item exists with the given ID."""

    INVALID_STATE = "INVALID_STATE"
    """Execution attempted on an item that is not pending."""

    UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"
    """No executor is registered for the item's type."""

    NOT_A_REMINDER = "NOT_A_REMINDER"
    """A reminder trigger was requested for a non-reminder item."""

    EXECUTOR_FAULT = "EXECUTOR_FAULT"
    """The executor raised instead of returning an outcome."""


class ActionItemsError(Exception):
    """Base exception for all execution errors."""

    error_code: ErrorCode = ErrorCode.EXECUTOR_FAULT

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ActionItemNotFoundError(ActionItemsError):
    """Raised when an item ID is unknown to the store."""

    error_code = ErrorCode.NOT_FOUND

    def __init__(self, item_id: str) -> None:
        super().__init__("Action item not found")
        self.item_id = item_id


class InvalidStateError(ActionItemsError):
    """Raised when execution is attempted on a non-pending item."""

    error_code = ErrorCode.INVALID_STATE

    def __init__(self, item_id: str, current_status: str) -> None:
        super().__init__(f"Cannot execute action with status: {current_status}")
        self.item_id = item_id
        self.current_status = current_status


class UnsupportedTypeError(ActionItemsError):
    """Raised when no executor is registered for an item type."""

    error_code = ErrorCode.UNSUPPORTED_TYPE

    def __init__(self, item_type: str) -> None:
        super().__init__(f"Unsupported action type: {item_type}")
        self.item_type = item_type


class NotAReminderError(ActionItemsError):
    """Raised when a reminder trigger targets another item type."""

    error_code = ErrorCode.NOT_A_REMINDER

    def __init__(self, item_id: str) -> None:
        super().__init__("Action item is not a reminder")
        self.item_id = item_id


class ExecutorFaultError(ActionItemsError):
    """Raised when an executor invocation itself raised.

    The original exception is chained as ``__cause__``.
    """

    error_code = ErrorCode.EXECUTOR_FAULT

    def __init__(self, item_id: str, message: str) -> None:
        super().__init__(message)
        self.item_id = item_id
