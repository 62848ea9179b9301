"""Data models for the time log."""
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional, Union

from .dates import format_timestamp, parse_timestamp
from .errors import MalformedEntryError


class MarkKind(str, Enum):
    """Kind of a log entry, keyed by its line prefix."""

    START = 'from:'
    STOP = 'to:'

    @property
    def prefix(self) -> str:
        return self.value


class SessionState(str, Enum):
    """Tracking state derived from the last log line."""

    NEVER_STARTED = 'never_started'
    TRACKING = 'tracking'
    STOPPED = 'stopped'


@dataclass(frozen=True)
class TimeMark:
    """One log entry: a start or stop at minute resolution."""
    kind: MarkKind
    at: datetime

    @classmethod
    def parse(cls, line: str, line_no: Optional[int] = None) -> 'TimeMark':
        """Parse a single (already trimmed) log line."""
        for kind in MarkKind:
            if line.startswith(kind.prefix):
                raw = line[len(kind.prefix):]
                try:
                    at = parse_timestamp(raw)
                except ValueError as e:
                    raise MalformedEntryError(line, line_no, str(e)) from e
                return cls(kind=kind, at=at)
        raise MalformedEntryError(line, line_no, "expected 'from:' or 'to:' prefix")

    @classmethod
    def start(cls, at: datetime) -> 'TimeMark':
        return cls(kind=MarkKind.START, at=at)

    @classmethod
    def stop(cls, at: datetime) -> 'TimeMark':
        return cls(kind=MarkKind.STOP, at=at)

    @property
    def is_start(self) -> bool:
        return self.kind is MarkKind.START

    def to_line(self) -> str:
        return f"{self.kind.prefix}{format_timestamp(self.at)}"


@dataclass(frozen=True)
class Interval:
    """A tracked work session. `end` is None while it is still running."""
    start: datetime
    end: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.end is None


# --- Date filters ---


@dataclass(frozen=True)
class SameDay:
    """Accepts timestamps on one calendar day."""
    day: date


@dataclass(frozen=True)
class SameWeek:
    """Accepts timestamps in one ISO week (ISO year + week number)."""
    year: int
    week: int

    @classmethod
    def containing(cls, moment: Union[date, datetime]) -> 'SameWeek':
        iso = moment.isocalendar()
        return cls(year=iso[0], week=iso[1])


DateFilter = Union[SameDay, SameWeek]
