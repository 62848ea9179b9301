"""
Interval Reconstruction
=======================
Turns raw log lines into typed marks and pairs them into intervals.

A log is a sequence of `from:` / `to:` lines written by alternating
start/stop commands. Every start opens an interval and the next stop closes
it. A trailing start without a stop stays open (`end is None`).
"""
import logging
from typing import List, Optional, Sequence

from .errors import CorruptLogError
from .models import Interval, MarkKind, SessionState, TimeMark

logger = logging.getLogger(__name__)


def parse_marks(lines: Sequence[str]) -> List[TimeMark]:
    """Parse every line, failing on the first malformed one."""
    return [TimeMark.parse(line, line_no) for line_no, line in enumerate(lines, start=1)]


def build_intervals(lines: Sequence[str]) -> List[Interval]:
    """
    Rebuild the interval sequence from log lines.

    Args:
        lines: Trimmed, non-blank log lines in file order

    Returns:
        Closed intervals in log order, plus at most one trailing open interval

    Raises:
        CorruptLogError: the log starts with a stop entry
        MalformedEntryError: a line cannot be parsed
    """
    if not lines:
        return []

    marks = parse_marks(lines)
    if not marks[0].is_start:
        raise CorruptLogError("log starts with a stop entry")

    intervals: List[Interval] = []
    pending: Optional[TimeMark] = None

    for line_no, mark in enumerate(marks, start=1):
        if mark.kind is MarkKind.START:
            if pending is not None:
                logger.warning(
                    f"Line {line_no}: start without preceding stop, "
                    f"dropping start at {pending.at}"
                )
            pending = mark
        else:
            if pending is None:
                logger.warning(f"Line {line_no}: stop without open start, ignored")
                continue
            intervals.append(Interval(start=pending.at, end=mark.at))
            pending = None

    if pending is not None:
        intervals.append(Interval(start=pending.at))

    logger.debug(f"Rebuilt {len(intervals)} intervals from {len(marks)} entries")
    return intervals


def last_mark(lines: Sequence[str]) -> Optional[TimeMark]:
    if not lines:
        return None
    return TimeMark.parse(lines[-1], len(lines))


def session_state(lines: Sequence[str]) -> SessionState:
    """Derive the tracking state from the last log line only."""
    mark = last_mark(lines)
    if mark is None:
        return SessionState.NEVER_STARTED
    return SessionState.TRACKING if mark.is_start else SessionState.STOPPED
