"""Prometheus metrics for action item execution.

Provides counters for execution outcomes and rejections, a latency
histogram per item type, and scheduler tick accounting.
"""

from prometheus_client import Counter, Gauge, Histogram

# Execution metrics
EXECUTIONS = Counter(
    "actionitems_executions_total",
    "Total number of executor invocations by outcome",
    labelnames=["item_type", "outcome"],
)

EXECUTION_LATENCY = Histogram(
    "actionitems_execution_latency_seconds",
    "Executor invocation latency in seconds",
    labelnames=["item_type"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)

EXECUTIONS_REJECTED = Counter(
    "actionitems_execution_rejected_total",
    "Execution attempts rejected before any executor ran",
    labelnames=["reason"],
)

# Reminder metrics
REMINDERS_TRIGGERED = Counter(
    "actionitems_reminders_triggered_total",
    "Total number of reminders triggered",
    labelnames=["source"],
)

SCHEDULER_TICKS = Counter(
    "actionitems_scheduler_ticks_total",
    "Reminder scheduler ticks by result",
    labelnames=["result"],
)

# History metrics
HISTORY_ENTRIES = Gauge(
    "actionitems_history_entries",
    "Number of entries currently held in the execution history log",
)
