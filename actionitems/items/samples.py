"""Sample action items, one per type, for development environments."""

from datetime import datetime, timedelta

from actionitems.items.models import ActionItem, ActionPriority, ActionType, utc_now


def sample_items(now: datetime | None = None) -> list[ActionItem]:
    """Build four pending items due over the next few hours."""
    now = now or utc_now()

    return [
        ActionItem(
            id="1",
            title="Send Q1 Financial Report",
            description="Include revenue metrics, growth projections, and market analysis",
            type=ActionType.EMAIL,
            priority=ActionPriority.HIGH,
            due_date=now + timedelta(days=1),
            metadata={
                "emailTo": ["john@company.com", "sarah@company.com", "board@company.com"],
                "emailSubject": "Q1 Financial Report",
                "emailBody": "Please find attached the Q1 financial report with detailed analysis.",
            },
        ),
        ActionItem(
            id="2",
            title="Daily Team Standup",
            description="Engineering team daily sync meeting",
            type=ActionType.CALENDAR,
            priority=ActionPriority.MEDIUM,
            due_date=now + timedelta(hours=1),
            metadata={
                "calendarEventDetails": {
                    "attendees": ["dev-team@company.com", "john@company.com"],
                    "startTime": (now + timedelta(hours=1)).isoformat(),
                    "duration": 30,
                    "location": "Conference Room B",
                    "description": "Daily standup to discuss progress and blockers",
                },
            },
        ),
        ActionItem(
            id="3",
            title="Follow up with client about contract",
            description="Check on project delivery timeline and next steps",
            type=ActionType.REMINDER,
            priority=ActionPriority.URGENT,
            due_date=now + timedelta(hours=2),
            metadata={
                "reminderTime": (now + timedelta(hours=2)).isoformat(),
                "reminderMessage": "Time to follow up with the client!",
            },
        ),
        ActionItem(
            id="4",
            title="Review code pull requests",
            description="Check pending PRs and provide feedback",
            type=ActionType.PRIORITY,
            priority=ActionPriority.HIGH,
            due_date=now + timedelta(hours=4),
        ),
    ]
