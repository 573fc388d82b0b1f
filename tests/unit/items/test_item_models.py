"""Tests for action item models."""

from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from actionitems.items.models import (
    ActionItem,
    ActionPriority,
    ActionStatus,
    ActionType,
    ItemFilter,
    parse_timestamp,
)


class TestActionItem:
    """Tests for ActionItem construction and validation."""

    def test_defaults(self) -> None:
        """New items are pending, medium priority, with no outcome fields."""
        item = ActionItem(
            title="Review PRs",
            type=ActionType.PRIORITY,
            due_date=datetime.now(UTC),
        )
        assert item.status == ActionStatus.PENDING
        assert item.priority == ActionPriority.MEDIUM
        assert item.completed_at is None
        assert item.failure_reason is None
        assert item.id

    def test_accepts_wire_names(self) -> None:
        """camelCase keys are accepted on input."""
        item = ActionItem.model_validate(
            {
                "title": "Standup",
                "type": "calendar",
                "dueDate": "2026-03-01T09:00:00Z",
                "failureReason": None,
            }
        )
        assert item.type == ActionType.CALENDAR
        assert item.due_date == datetime(2026, 3, 1, 9, tzinfo=UTC)

    def test_wire_serialization_uses_camel_case(self) -> None:
        """to_wire emits camelCase keys."""
        item = ActionItem(title="x", type=ActionType.EMAIL, due_date=datetime.now(UTC))
        wire = item.to_wire()
        assert "dueDate" in wire
        assert "failureReason" in wire
        assert wire["type"] == "email"

    def test_naive_datetimes_become_utc(self) -> None:
        """Naive timestamps are interpreted as UTC."""
        item = ActionItem(title="x", type=ActionType.PRIORITY, due_date=datetime(2026, 1, 1, 12))
        assert item.due_date.tzinfo is not None
        assert item.due_date == datetime(2026, 1, 1, 12, tzinfo=UTC)

    def test_blank_title_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ActionItem(title="   ", type=ActionType.PRIORITY, due_date=datetime.now(UTC))

    def test_unknown_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ActionItem(title="x", type="fax", due_date=datetime.now(UTC))

    def test_completed_requires_completed_at(self) -> None:
        """status=completed without completed_at violates the invariant."""
        with pytest.raises(ValidationError):
            ActionItem(
                title="x",
                type=ActionType.PRIORITY,
                due_date=datetime.now(UTC),
                status=ActionStatus.COMPLETED,
            )

    def test_failed_requires_failure_reason(self) -> None:
        """status=failed without failure_reason violates the invariant."""
        with pytest.raises(ValidationError):
            ActionItem(
                title="x",
                type=ActionType.PRIORITY,
                due_date=datetime.now(UTC),
                status=ActionStatus.FAILED,
            )

    def test_completed_cannot_carry_failure_reason(self) -> None:
        """completed and failed outcome fields are mutually exclusive."""
        with pytest.raises(ValidationError):
            ActionItem(
                title="x",
                type=ActionType.PRIORITY,
                due_date=datetime.now(UTC),
                status=ActionStatus.COMPLETED,
                completed_at=datetime.now(UTC),
                failure_reason="earlier",
            )

    def test_failed_cannot_carry_completed_at(self) -> None:
        with pytest.raises(ValidationError):
            ActionItem(
                title="x",
                type=ActionType.PRIORITY,
                due_date=datetime.now(UTC),
                status=ActionStatus.FAILED,
                failure_reason="boom",
                completed_at=datetime.now(UTC),
            )

    def test_pending_may_keep_earlier_outcome_fields(self) -> None:
        item = ActionItem(
            title="x",
            type=ActionType.PRIORITY,
            due_date=datetime.now(UTC),
            failure_reason="earlier",
        )
        assert item.status == ActionStatus.PENDING


class TestValidateForType:
    """Tests for type-specific metadata validation."""

    def test_email_requires_recipients_and_subject(self) -> None:
        item = ActionItem(title="x", type=ActionType.EMAIL, due_date=datetime.now(UTC))
        assert item.validate_for_type() == [
            "Email recipients are required",
            "Email subject is required",
        ]

    def test_valid_email(self) -> None:
        item = ActionItem(
            title="x",
            type=ActionType.EMAIL,
            due_date=datetime.now(UTC),
            metadata={"emailTo": ["a@example.com"], "emailSubject": "Hi"},
        )
        assert item.validate_for_type() == []

    def test_calendar_requires_details(self) -> None:
        item = ActionItem(title="x", type=ActionType.CALENDAR, due_date=datetime.now(UTC))
        assert item.validate_for_type() == ["Calendar event details are required"]

    def test_priority_has_no_requirements(self) -> None:
        item = ActionItem(title="x", type=ActionType.PRIORITY, due_date=datetime.now(UTC))
        assert item.validate_for_type() == []


class TestItemFilter:
    """Tests for ItemFilter matching."""

    def test_empty_filter_matches_everything(self) -> None:
        item = ActionItem(title="x", type=ActionType.EMAIL, due_date=datetime.now(UTC))
        assert ItemFilter().matches(item)

    def test_all_criteria_must_match(self) -> None:
        item = ActionItem(
            title="x",
            type=ActionType.EMAIL,
            priority=ActionPriority.HIGH,
            due_date=datetime.now(UTC),
        )
        assert ItemFilter(type=ActionType.EMAIL, priority=ActionPriority.HIGH).matches(item)
        assert not ItemFilter(type=ActionType.EMAIL, priority=ActionPriority.LOW).matches(item)
        assert not ItemFilter(status=ActionStatus.COMPLETED).matches(item)


class TestParseTimestamp:
    """Tests for parse_timestamp."""

    def test_parses_iso_string_with_offset(self) -> None:
        parsed = parse_timestamp("2026-05-01T10:00:00+02:00")
        assert parsed == datetime(2026, 5, 1, 8, tzinfo=UTC)

    def test_accepts_datetime(self) -> None:
        value = datetime(2026, 5, 1, 10, tzinfo=timezone(timedelta(hours=-5)))
        assert parse_timestamp(value) == datetime(2026, 5, 1, 15, tzinfo=UTC)

    def test_rejects_garbage(self) -> None:
        with pytest.raises(ValueError):
            parse_timestamp("next tuesday")
