"""Execution core: state machine, executor registry, due-item scanning and history."""

from actionitems.execution.engine import ExecutionEngine
from actionitems.execution.errors import (
    ActionItemNotFoundError,
    ActionItemsError,
    ErrorCode,
    ExecutorFaultError,
    InvalidStateError,
    NotAReminderError,
    UnsupportedTypeError,
)
from actionitems.execution.history import ExecutionHistory
from actionitems.execution.models import BatchResult, ExecutionLogEntry, ExecutionOutcome
from actionitems.execution.registry import ExecutorRegistry
from actionitems.execution.scanner import DueItemScanner

__all__ = [
    # Components
    "ExecutionEngine",
    "ExecutorRegistry",
    "DueItemScanner",
    "ExecutionHistory",
    # Models
    "BatchResult",
    "ExecutionLogEntry",
    "ExecutionOutcome",
    # Errors
    "ActionItemNotFoundError",
    "ActionItemsError",
    "ErrorCode",
    "ExecutorFaultError",
    "InvalidStateError",
    "NotAReminderError",
    "UnsupportedTypeError",
]
