"""Tests for DueItemScanner."""

from datetime import timedelta

import pytest

from actionitems.execution.scanner import DueItemScanner
from actionitems.items.models import ActionStatus
from actionitems.items.stores.inmemory import InMemoryActionItemStore


@pytest.fixture
def store():
    return InMemoryActionItemStore()


@pytest.mark.asyncio
class TestDueItemScanner:
    """Test suite for the due-soon query."""

    async def test_lookahead_zero_returns_only_already_due(self, store, make_item, clock):
        """due_soon(0) never returns future or non-pending items."""
        due = make_item(due_date=clock.now - timedelta(minutes=1))
        future = make_item(due_date=clock.now + timedelta(seconds=30))
        done = make_item(
            due_date=clock.now - timedelta(minutes=2),
            status=ActionStatus.COMPLETED,
            completed_at=clock.now,
        )
        failed = make_item(
            due_date=clock.now - timedelta(minutes=2),
            status=ActionStatus.FAILED,
            failure_reason="boom",
        )
        for item in (due, future, done, failed):
            await store.create(item)

        scanner = DueItemScanner(store, clock=clock)
        results = await scanner.due_soon(0)

        assert [i.id for i in results] == [due.id]
        assert all(i.due_date <= clock.now for i in results)
        assert all(i.status == ActionStatus.PENDING for i in results)

    async def test_lookahead_window_ordered_ascending(self, store, make_item, clock):
        second = make_item(due_date=clock.now + timedelta(hours=2))
        first = make_item(due_date=clock.now + timedelta(minutes=10))
        outside = make_item(due_date=clock.now + timedelta(hours=30))
        for item in (second, first, outside):
            await store.create(item)

        scanner = DueItemScanner(store, clock=clock)
        results = await scanner.due_soon(24)

        assert [i.id for i in results] == [first.id, second.id]

    async def test_overdue_grace_bounds_the_past(self, store, make_item, clock):
        recent = make_item(due_date=clock.now - timedelta(minutes=30))
        stale = make_item(due_date=clock.now - timedelta(days=3))
        for item in (recent, stale):
            await store.create(item)

        unbounded = DueItemScanner(store, clock=clock)
        bounded = DueItemScanner(store, overdue_grace=timedelta(hours=1), clock=clock)

        assert {i.id for i in await unbounded.due_soon(0)} == {recent.id, stale.id}
        assert [i.id for i in await bounded.due_soon(0)] == [recent.id]

    async def test_negative_lookahead_rejected(self, store, clock):
        scanner = DueItemScanner(store, clock=clock)
        with pytest.raises(ValueError):
            await scanner.due_soon(-1)

    async def test_scan_does_not_mutate(self, store, make_item, clock):
        item = make_item(due_date=clock.now - timedelta(minutes=1))
        await store.create(item)

        scanner = DueItemScanner(store, clock=clock)
        await scanner.due_soon(0)

        assert await store.get(item.id) == item
