"""Execution engine: drives one action item through its state machine.

    pending -> in_progress -> completed | failed

The pending -> in_progress claim is an atomic compare-and-set on the
store, so of two concurrent calls for the same item exactly one proceeds
and the other sees InvalidStateError. Every path that claims an item
leaves it completed or failed and appends one history entry.
"""

import asyncio
import time
from typing import TYPE_CHECKING

import structlog

from actionitems.execution.errors import (
    ActionItemNotFoundError,
    ActionItemsError,
    ExecutorFaultError,
    InvalidStateError,
    UnsupportedTypeError,
)
from actionitems.execution.history import ExecutionHistory
from actionitems.execution.models import BatchResult, ExecutionLogEntry, ExecutionOutcome
from actionitems.execution.registry import ExecutorRegistry
from actionitems.execution.scanner import DueItemScanner
from actionitems.items.models import ActionItem, ActionStatus, utc_now
from actionitems.items.store import ActionItemStore
from actionitems.observability.logging import get_logger
from actionitems.observability.metrics import (
    EXECUTION_LATENCY,
    EXECUTIONS,
    EXECUTIONS_REJECTED,
)

if TYPE_CHECKING:
    from actionitems.executors.base import ActionExecutor

logger = get_logger(__name__)

TIMEOUT_REASON = "timeout"
CANCELLED_REASON = "cancelled"


class ExecutionEngine:
    """Executes action items exactly once per pending -> terminal transition."""

    def __init__(
        self,
        store: ActionItemStore,
        registry: ExecutorRegistry,
        history: ExecutionHistory,
        scanner: DueItemScanner,
        executor_timeout_seconds: float | None = 30.0,
        due_lookahead_hours: float = 0.0,
    ):
        """Initialize engine.

        Args:
            store: Record store holding the action items
            registry: Executor lookup by action type
            history: Execution log receiving one entry per attempt
            scanner: Due-item query used by execute_all_due
            executor_timeout_seconds: Bound on one executor call (None disables)
            due_lookahead_hours: Lookahead used by execute_all_due
        """
        self._store = store
        self._registry = registry
        self._history = history
        self._scanner = scanner
        self._executor_timeout_seconds = executor_timeout_seconds
        self._due_lookahead_hours = due_lookahead_hours

    async def execute_action(self, item_id: str) -> ExecutionOutcome:
        """Execute a single pending item.

        Returns:
            The executor's outcome; a failed outcome is recorded, not raised

        Raises:
            ActionItemNotFoundError: If the item does not exist
            InvalidStateError: If the item is not pending
            UnsupportedTypeError: If no executor handles the item's type
            ExecutorFaultError: If the executor raised (item left failed)
        """
        item = await self._store.get(item_id)
        if item is None:
            EXECUTIONS_REJECTED.labels(reason="not_found").inc()
            logger.warning("execute_action_not_found", item_id=item_id)
            raise ActionItemNotFoundError(item_id)

        if item.status != ActionStatus.PENDING:
            EXECUTIONS_REJECTED.labels(reason="invalid_state").inc()
            logger.warning(
                "execute_action_invalid_state",
                item_id=item_id,
                status=item.status.value,
            )
            raise InvalidStateError(item_id, item.status.value)

        try:
            executor = self._registry.get(item.type)
        except UnsupportedTypeError:
            EXECUTIONS_REJECTED.labels(reason="unsupported_type").inc()
            logger.error(
                "execute_action_unsupported_type",
                item_id=item_id,
                item_type=item.type.value,
            )
            raise

        claimed = await self._store.compare_and_set_status(
            item_id,
            ActionStatus.PENDING,
            status=ActionStatus.IN_PROGRESS,
        )
        if claimed is None:
            # Lost the race: another caller moved the item out of pending
            current = await self._store.get(item_id)
            EXECUTIONS_REJECTED.labels(reason="invalid_state").inc()
            if current is None:
                raise ActionItemNotFoundError(item_id)
            logger.warning(
                "execute_action_claim_lost",
                item_id=item_id,
                status=current.status.value,
            )
            raise InvalidStateError(item_id, current.status.value)

        with structlog.contextvars.bound_contextvars(
            item_id=item_id, item_type=claimed.type.value
        ):
            logger.info("action_execution_started", title=claimed.title)
            return await self._run_executor(executor, claimed)

    async def _run_executor(
        self,
        executor: "ActionExecutor",
        item: ActionItem,
    ) -> ExecutionOutcome:
        started = time.perf_counter()

        # Executors that raise before their first await are faults as well
        try:
            if self._executor_timeout_seconds is None:
                outcome = await executor.execute(item)
            else:
                outcome = await asyncio.wait_for(
                    executor.execute(item), timeout=self._executor_timeout_seconds
                )
        except TimeoutError:
            outcome = ExecutionOutcome.failed(TIMEOUT_REASON)
            label = "timeout"
            logger.warning(
                "action_execution_timeout",
                timeout_seconds=self._executor_timeout_seconds,
            )
        except asyncio.CancelledError:
            await self._finish(item, ExecutionOutcome.failed(CANCELLED_REASON), "fault", started)
            raise
        except Exception as e:
            message = str(e) or type(e).__name__
            await self._finish(item, ExecutionOutcome.failed(message), "fault", started)
            logger.error("action_execution_fault", error=message, error_type=type(e).__name__)
            raise ExecutorFaultError(item.id, message) from e
        else:
            label = "success" if outcome.success else "failure"

        await self._finish(item, outcome, label, started)
        return outcome

    async def _finish(
        self,
        item: ActionItem,
        outcome: ExecutionOutcome,
        label: str,
        started: float,
    ) -> None:
        """Persist the terminal state, then log the attempt."""
        EXECUTION_LATENCY.labels(item_type=item.type.value).observe(time.perf_counter() - started)
        EXECUTIONS.labels(item_type=item.type.value, outcome=label).inc()

        if outcome.success:
            now = utc_now()
            metadata = {**item.metadata, "executionResult": outcome.to_payload()}
            if item.failure_reason:
                metadata["previousFailureReason"] = item.failure_reason
            await self._store.update(
                item.id,
                status=ActionStatus.COMPLETED,
                executed_at=now,
                completed_at=now,
                failure_reason=None,
                metadata=metadata,
            )
            logger.info("action_execution_completed")
        else:
            await self._store.update(
                item.id,
                status=ActionStatus.FAILED,
                failure_reason=outcome.error,
                completed_at=None,
            )
            logger.warning("action_execution_failed", failure_reason=outcome.error)

        self._history.append(ExecutionLogEntry.record(item, outcome))

    async def execute_all_due(self) -> list[BatchResult]:
        """Execute every due item in due-date order, one at a time.

        A failure or fault on one item is folded into its result entry
        and never stops the remaining items.
        """
        candidates = await self._scanner.due_soon(self._due_lookahead_hours)
        logger.info("execute_all_due_started", count=len(candidates))

        results: list[BatchResult] = []
        for item in candidates:
            try:
                outcome = await self.execute_action(item.id)
            except ActionItemsError as e:
                outcome = ExecutionOutcome.failed(e.message)
            except Exception as e:
                logger.exception("execute_all_due_item_error", item_id=item.id)
                outcome = ExecutionOutcome.failed(str(e) or type(e).__name__)
            results.append(BatchResult(item=item, result=outcome))

        logger.info(
            "execute_all_due_finished",
            count=len(results),
            succeeded=sum(1 for r in results if r.result.success),
        )
        return results

    def recent(self, limit: int | None = None) -> list[ExecutionLogEntry]:
        """Most recent execution log entries, newest first."""
        return self._history.recent(limit)
