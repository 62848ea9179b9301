"""
Duration Aggregation
====================
Sums tracked time over the intervals accepted by a date filter.

Closed intervals count only when both endpoints pass the filter; intervals
are never split at period boundaries. The trailing open interval counts up
to `now` when its start passes.
"""
import logging
from datetime import datetime, timedelta
from typing import Iterable, Sequence

from .intervals import build_intervals
from .models import DateFilter, Interval, SameDay, SameWeek

logger = logging.getLogger(__name__)

ZERO = timedelta(0)


def matches(date_filter: DateFilter, moment: datetime) -> bool:
    """Evaluate a date filter against one timestamp."""
    if isinstance(date_filter, SameDay):
        return moment.date() == date_filter.day
    if isinstance(date_filter, SameWeek):
        iso = moment.isocalendar()
        return (iso[0], iso[1]) == (date_filter.year, date_filter.week)
    raise TypeError(f"Unsupported date filter: {date_filter!r}")


def interval_duration(interval: Interval, date_filter: DateFilter, now: datetime) -> timedelta:
    """Contribution of a single interval to the filtered total."""
    if not matches(date_filter, interval.start):
        return ZERO

    if interval.is_open:
        if now < interval.start:
            logger.warning(f"Open interval starts in the future ({interval.start}), ignored")
            return ZERO
        return now - interval.start

    if not matches(date_filter, interval.end):
        return ZERO
    if interval.end < interval.start:
        logger.warning(f"Interval {interval.start} -> {interval.end} ends before it starts, ignored")
        return ZERO
    return interval.end - interval.start


def total_duration(intervals: Iterable[Interval], date_filter: DateFilter, now: datetime) -> timedelta:
    total = ZERO
    for interval in intervals:
        total += interval_duration(interval, date_filter, now)
    return total


def aggregate(lines: Sequence[str], date_filter: DateFilter, now: datetime) -> timedelta:
    """Rebuild intervals from raw log lines and sum them for the filter."""
    return total_duration(build_intervals(lines), date_filter, now)
