"""
Date Helpers
============
Timestamp (de)serialization for log lines, `show` date expressions and
duration formatting.

Date expression grammar:
    today | yesterday | 1-7 (ISO weekday in the current week) | YYYYMMDD
"""
import re
from datetime import date, datetime, timedelta
from typing import Optional

from .errors import InvalidDateExpressionError

TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M'
BASIC_DATE_FORMAT = '%Y%m%d'

TODAY = 'today'
YESTERDAY = 'yesterday'

# strptime accepts unpadded fields, the log format does not
_TIMESTAMP_RE = re.compile(r'^\d{4}-\d{2}-\d{2} \d{2}:\d{2}$')
_BASIC_DATE_RE = re.compile(r'^[0-9]{8}$')
_DIGITS_RE = re.compile(r'^[0-9]+$')


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(text: str) -> datetime:
    """Parse `yyyy-MM-dd HH:mm`. Raises ValueError on anything else."""
    if not _TIMESTAMP_RE.match(text):
        raise ValueError(f"timestamp {text!r} does not match yyyy-MM-dd HH:mm")
    return datetime.strptime(text, TIMESTAMP_FORMAT)


def truncate_to_minute(moment: datetime) -> datetime:
    return moment.replace(second=0, microsecond=0)


def parse_date_expression(expr: Optional[str], today: date) -> date:
    """
    Resolve a `show` argument to a calendar date.

    Keywords are case-sensitive and not trimmed. Any run of digits whose
    value is 1-7 ('3', '07') is a weekday, everything else numeric must be
    a valid YYYYMMDD date.

    Args:
        expr: Date expression, None means 'today'
        today: Reference date for relative expressions

    Returns:
        The resolved date

    Raises:
        InvalidDateExpressionError: expression matches no form of the grammar
    """
    if expr is None:
        expr = TODAY

    if expr == TODAY:
        return today
    if expr == YESTERDAY:
        return today - timedelta(days=1)
    if _DIGITS_RE.fullmatch(expr) and 1 <= int(expr) <= 7:
        return today + timedelta(days=int(expr) - today.isoweekday())
    if _BASIC_DATE_RE.fullmatch(expr):
        try:
            return datetime.strptime(expr, BASIC_DATE_FORMAT).date()
        except ValueError as e:
            raise InvalidDateExpressionError(f"Invalid date {expr!r}: {e}") from e

    raise InvalidDateExpressionError(
        f"Invalid date expression {expr!r}: use 'today', 'yesterday', "
        f"a weekday number 1-7 or a date like 20161231"
    )


def format_duration(duration: timedelta) -> str:
    """Render as '<H> hours <M> minutes', hours not wrapped at 24."""
    total_minutes = max(int(duration.total_seconds()) // 60, 0)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours} hours {minutes} minutes"
