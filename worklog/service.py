#!/usr/bin/env python3
"""
TIME TRACKER SERVICE
====================
Start/stop bookkeeping and daily/weekly totals on top of a log store.

Every operation reads the whole log, captures "now" exactly once, and
writes at most one line.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Callable, Optional

from .aggregator import total_duration
from .dates import parse_date_expression, truncate_to_minute
from .intervals import build_intervals, last_mark, session_state
from .models import DateFilter, SameDay, SameWeek, SessionState, TimeMark
from .storage import LogStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToggleResult:
    """Outcome of start/stop.

    `changed` is False when the session was already in the requested
    state; `mark` is then the existing entry instead of a new one.
    """
    changed: bool
    mark: Optional[TimeMark]


class TimeTracker:
    """Records work sessions and reports tracked time."""

    def __init__(self, store: LogStore, clock: Callable[[], datetime] = datetime.now):
        self.store = store
        self.clock = clock

    def now(self) -> datetime:
        return truncate_to_minute(self.clock())

    def start(self) -> ToggleResult:
        """Append a start entry unless a session is already running."""
        lines = self.store.read_lines()
        if session_state(lines) is SessionState.TRACKING:
            existing = last_mark(lines)
            logger.info(f"Already tracking since {existing.at}")
            return ToggleResult(changed=False, mark=existing)

        mark = TimeMark.start(self.now())
        self.store.append_line(mark.to_line())
        logger.info(f"Started at {mark.at}")
        return ToggleResult(changed=True, mark=mark)

    def stop(self) -> ToggleResult:
        """Append a stop entry unless no session is running."""
        lines = self.store.read_lines()
        state = session_state(lines)
        if state is not SessionState.TRACKING:
            # a stop on an empty log would make it corrupt
            existing = last_mark(lines)
            logger.info(f"Nothing to stop ({state.value})")
            return ToggleResult(changed=False, mark=existing)

        mark = TimeMark.stop(self.now())
        self.store.append_line(mark.to_line())
        logger.info(f"Stopped at {mark.at}")
        return ToggleResult(changed=True, mark=mark)

    def total(self, date_filter: DateFilter, now: Optional[datetime] = None) -> timedelta:
        """Tracked time accepted by `date_filter`, open session counted up to now."""
        now = now or self.now()
        intervals = build_intervals(self.store.read_lines())
        return total_duration(intervals, date_filter, now)

    def total_for_day(self, day: date) -> timedelta:
        return self.total(SameDay(day))

    def total_for_week(self, today: Optional[date] = None) -> timedelta:
        now = self.now()
        return self.total(SameWeek.containing(today or now), now)

    def show(self, expression: Optional[str] = None) -> timedelta:
        """Total for the day named by a date expression (default: today)."""
        now = self.now()
        day = parse_date_expression(expression, now.date())
        return self.total(SameDay(day), now)
