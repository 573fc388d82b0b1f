"""Tests for Prometheus metrics."""

import pytest
from prometheus_client import REGISTRY

from actionitems.execution.engine import ExecutionEngine
from actionitems.execution.errors import ActionItemNotFoundError
from actionitems.execution.history import ExecutionHistory
from actionitems.execution.registry import ExecutorRegistry
from actionitems.execution.scanner import DueItemScanner
from actionitems.executors.priority import PriorityExecutor
from actionitems.items.models import ActionType
from actionitems.items.stores.inmemory import InMemoryActionItemStore
from actionitems.observability.metrics import EXECUTIONS, SCHEDULER_TICKS


def sample(name: str, **labels: str) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


class TestMetricDefinitions:
    """Tests that counters accept their label sets."""

    def test_executions_labels(self) -> None:
        EXECUTIONS.labels(item_type="email", outcome="success").inc()

    def test_scheduler_tick_labels(self) -> None:
        SCHEDULER_TICKS.labels(result="skipped").inc()


@pytest.mark.asyncio
class TestEngineMetrics:
    """Tests that the engine records outcomes."""

    @pytest.fixture
    def wired(self):
        store = InMemoryActionItemStore()
        return store, ExecutionEngine(
            store=store,
            registry=ExecutorRegistry([PriorityExecutor()]),
            history=ExecutionHistory(),
            scanner=DueItemScanner(store),
        )

    async def test_success_counted(self, wired, make_item) -> None:
        store, engine = wired
        item = make_item(ActionType.PRIORITY)
        await store.create(item)
        before = sample(
            "actionitems_executions_total", item_type="priority", outcome="success"
        )

        await engine.execute_action(item.id)

        after = sample("actionitems_executions_total", item_type="priority", outcome="success")
        assert after == before + 1

    async def test_rejection_counted(self, wired) -> None:
        _, engine = wired
        before = sample("actionitems_execution_rejected_total", reason="not_found")

        with pytest.raises(ActionItemNotFoundError):
            await engine.execute_action("missing")

        assert sample("actionitems_execution_rejected_total", reason="not_found") == before + 1

    async def test_history_gauge_tracks_entries(self, wired, make_item) -> None:
        store, engine = wired
        item = make_item(ActionType.PRIORITY)
        await store.create(item)

        await engine.execute_action(item.id)

        assert sample("actionitems_history_entries") >= 1
