"""Tests for TriggeredReminderRegistry."""

from datetime import timedelta

import pytest

from actionitems.items.models import ActionType
from actionitems.reminders.models import TriggeredReminder
from actionitems.reminders.triggered import TriggeredReminderRegistry


@pytest.fixture
def make_entry(make_item, clock):
    def _make(triggered_at=None, source="scheduled"):
        item = make_item(ActionType.REMINDER)
        return TriggeredReminder(
            item_id=item.id,
            triggered_at=triggered_at or clock.now,
            source=source,
            item=item,
        )

    return _make


@pytest.mark.asyncio
class TestTriggeredReminderRegistry:
    """Tests for membership, TTL eviction and the size cap."""

    async def test_record_and_contains(self, make_entry):
        registry = TriggeredReminderRegistry()
        entry = make_entry()

        assert not await registry.contains(entry.item_id)
        await registry.record(entry)

        assert await registry.contains(entry.item_id)
        assert len(registry) == 1

    async def test_rerecord_replaces_entry(self, make_entry, clock):
        registry = TriggeredReminderRegistry()
        entry = make_entry()
        other = make_entry()
        await registry.record(entry)
        await registry.record(other)

        again = entry.model_copy(update={"triggered_at": clock.now + timedelta(minutes=1)})
        await registry.record(again)

        entries = await registry.entries()
        assert len(entries) == 2
        assert entries[-1] == again

    async def test_evict_expired(self, make_entry, clock):
        registry = TriggeredReminderRegistry(ttl=timedelta(hours=1))
        old = make_entry(triggered_at=clock.now - timedelta(hours=2))
        fresh = make_entry(triggered_at=clock.now - timedelta(minutes=5))
        await registry.record(old)
        await registry.record(fresh)

        evicted = await registry.evict_expired(clock.now)

        assert evicted == [old.item_id]
        assert not await registry.contains(old.item_id)
        assert await registry.contains(fresh.item_id)

    async def test_cap_drops_oldest(self, make_entry):
        registry = TriggeredReminderRegistry(max_entries=2)
        entries = [make_entry() for _ in range(3)]
        for entry in entries:
            await registry.record(entry)

        assert len(registry) == 2
        assert not await registry.contains(entries[0].item_id)
        assert await registry.contains(entries[2].item_id)


def test_rejects_non_positive_capacity():
    with pytest.raises(ValueError):
        TriggeredReminderRegistry(max_entries=0)
