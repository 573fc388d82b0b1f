"""Shared test fixtures for the action items test suite."""

from collections.abc import Callable, Generator
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

import pytest

from actionitems.items.models import ActionItem, ActionPriority, ActionType


class FrozenClock:
    """Callable clock returning a settable instant."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **delta: float) -> None:
        self.now = self.now + timedelta(**delta)


@pytest.fixture
def clock() -> FrozenClock:
    """Clock frozen at the current wall-clock time."""
    return FrozenClock(datetime.now(UTC))


@pytest.fixture
def make_item() -> Callable[..., ActionItem]:
    """Factory fixture for pending action items.

    Usage:
        item = make_item(ActionType.EMAIL, due_in=timedelta(minutes=-5), metadata={...})
    """

    def _make_item(
        item_type: ActionType = ActionType.PRIORITY,
        *,
        due_in: timedelta = timedelta(minutes=-1),
        metadata: dict[str, Any] | None = None,
        **fields: Any,
    ) -> ActionItem:
        fields.setdefault("title", f"{item_type.value} item")
        fields.setdefault("priority", ActionPriority.MEDIUM)
        due_date = fields.pop("due_date", None) or datetime.now(UTC) + due_in
        return ActionItem(
            type=item_type,
            due_date=due_date,
            metadata=metadata or {},
            **fields,
        )

    return _make_item


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "debug = true",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test."""
    from actionitems.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
