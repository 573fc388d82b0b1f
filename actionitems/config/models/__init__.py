"""Configuration model exports.

    from actionitems.config.models import SchedulerConfig, ExecutionConfig
"""

from actionitems.config.models.executors import CalendarConfig, EmailConfig
from actionitems.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)
from actionitems.config.models.scheduler import (
    ExecutionConfig,
    HistoryConfig,
    SchedulerConfig,
    StoreConfig,
)

__all__ = [
    "CalendarConfig",
    "EmailConfig",
    "ExecutionConfig",
    "HistoryConfig",
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
    "SchedulerConfig",
    "StoreConfig",
]
