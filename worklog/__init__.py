"""
Worklog
=======
Personal time tracker: start/stop entries in a flat text log, totals per
day or ISO week.

Usage:
    from worklog import TimeTracker, LocalFileLogStore

    tracker = TimeTracker(LocalFileLogStore("~/timetracker.txt"))
    tracker.start()
    print(tracker.show("today"))
"""

from .aggregator import aggregate, matches, total_duration
from .errors import (
    ConfigError,
    LogAccessError,
    CorruptLogError,
    InvalidDateExpressionError,
    MalformedEntryError,
    WorklogError,
)
from .intervals import build_intervals, session_state
from .models import Interval, MarkKind, SameDay, SameWeek, SessionState, TimeMark
from .service import TimeTracker, ToggleResult
from .storage import InMemoryLogStore, LocalFileLogStore, LogStore

__version__ = "0.1.0"

__all__ = [
    # Models
    "MarkKind", "TimeMark", "Interval", "SessionState", "SameDay", "SameWeek",
    # Core
    "build_intervals", "session_state", "aggregate", "matches", "total_duration",
    # Service
    "TimeTracker", "ToggleResult",
    # Storage
    "LogStore", "LocalFileLogStore", "InMemoryLogStore",
    # Errors
    "WorklogError", "CorruptLogError", "MalformedEntryError",
    "InvalidDateExpressionError", "ConfigError", "LogAccessError",
]
