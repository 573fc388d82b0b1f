"""Action item execution core.

Scans for due action items, drives each through the
pending -> in_progress -> completed | failed state machine exactly once,
dispatches to a per-type executor, and keeps a bounded execution log.
"""

__version__ = "0.1.0"
