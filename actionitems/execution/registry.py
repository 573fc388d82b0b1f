"""Executor registry: static lookup from action type to executor."""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType
from typing import TYPE_CHECKING

from actionitems.execution.errors import UnsupportedTypeError
from actionitems.items.models import ActionType
from actionitems.observability.logging import get_logger

if TYPE_CHECKING:
    from actionitems.executors.base import ActionExecutor

logger = get_logger(__name__)


class ExecutorRegistry:
    """Maps each ActionType to the executor that handles it.

    A missing registration is a configuration error and surfaces as
    UnsupportedTypeError, never as a failed outcome.
    """

    def __init__(self, executors: Iterable[ActionExecutor] = ()) -> None:
        self._executors: dict[ActionType, ActionExecutor] = {}
        for executor in executors:
            self.register(executor)

    def register(self, executor: ActionExecutor) -> None:
        """Register an executor for its declared action type.

        Raises:
            ValueError: If the type already has an executor
        """
        action_type = executor.action_type
        if action_type in self._executors:
            raise ValueError(f"Executor already registered for {action_type.value}")
        self._executors[action_type] = executor
        logger.debug(
            "executor_registered",
            action_type=action_type.value,
            executor=type(executor).__name__,
        )

    def get(self, action_type: ActionType | str) -> ActionExecutor:
        """Look up the executor for a type.

        Raises:
            UnsupportedTypeError: If the type is unknown or unregistered
        """
        try:
            key = ActionType(action_type)
        except ValueError as e:
            raise UnsupportedTypeError(str(action_type)) from e

        executor = self._executors.get(key)
        if executor is None:
            raise UnsupportedTypeError(key.value)
        return executor

    def missing_types(self) -> list[ActionType]:
        """Action types that have no executor registered."""
        return [t for t in ActionType if t not in self._executors]

    @property
    def executors(self) -> MappingProxyType[ActionType, ActionExecutor]:
        return MappingProxyType(self._executors)

    def __contains__(self, action_type: object) -> bool:
        return action_type in self._executors
