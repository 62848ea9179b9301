"""Exceptions raised by the worklog package."""
from typing import Optional


class WorklogError(Exception):
    """Base class for all worklog errors."""


class CorruptLogError(WorklogError):
    """The persisted log violates the start-before-stop structure."""


class MalformedEntryError(CorruptLogError):
    """A log line has an unknown prefix or an unparsable timestamp."""

    def __init__(self, line: str, line_no: Optional[int] = None, reason: str = ''):
        self.line = line
        self.line_no = line_no
        self.reason = reason
        where = f"line {line_no}" if line_no is not None else "log entry"
        message = f"Malformed {where}: {line!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class InvalidDateExpressionError(WorklogError, ValueError):
    """`show` was given something that is not a date expression."""


class ConfigError(WorklogError):
    """Configuration file could not be read or validated."""


class LogAccessError(WorklogError):
    """The log file could not be read or written."""
