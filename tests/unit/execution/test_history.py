"""Tests for ExecutionHistory."""

import pytest
from pydantic import ValidationError

from actionitems.execution.history import ExecutionHistory
from actionitems.execution.models import ExecutionLogEntry
from actionitems.items.models import ActionType


def _entry(n: int) -> ExecutionLogEntry:
    return ExecutionLogEntry(
        action_id=str(n),
        title=f"item {n}",
        type=ActionType.PRIORITY,
        success=True,
        result={"success": True, "n": n},
    )


class TestExecutionHistory:
    """Test suite for the bounded execution log."""

    def test_recent_is_newest_first(self) -> None:
        history = ExecutionHistory()
        for n in range(1, 4):
            history.append(_entry(n))

        assert [e.action_id for e in history.recent()] == ["3", "2", "1"]

    def test_capacity_evicts_oldest(self) -> None:
        """After 101 inserts the first is gone and recent(1) is the 101st."""
        history = ExecutionHistory(capacity=100)
        for n in range(1, 102):
            history.append(_entry(n))

        assert len(history) == 100
        ids = [e.action_id for e in history.recent(100)]
        assert "1" not in ids
        assert history.recent(1)[0].action_id == "101"

    def test_default_limit_is_50(self) -> None:
        history = ExecutionHistory()
        for n in range(80):
            history.append(_entry(n))

        assert len(history.recent()) == 50

    def test_limit_clamped_to_size(self) -> None:
        history = ExecutionHistory()
        history.append(_entry(1))
        history.append(_entry(2))

        assert len(history.recent(10)) == 2
        assert history.recent(0) == []
        assert history.recent(-3) == []

    def test_invalid_capacity(self) -> None:
        with pytest.raises(ValueError):
            ExecutionHistory(capacity=0)

    def test_entries_are_immutable(self) -> None:
        entry = _entry(1)
        with pytest.raises(ValidationError):
            entry.success = False  # type: ignore[misc]

    def test_clear(self) -> None:
        history = ExecutionHistory()
        history.append(_entry(1))
        history.clear()
        assert len(history) == 0
