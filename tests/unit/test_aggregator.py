"""Tests for date filters and duration aggregation."""

from datetime import date, datetime, timedelta

import pytest

from tests.fixtures.logs import (
    CLOSED_DAY_LOG,
    LEADING_STOP_LOG,
    MIDNIGHT_LOG,
    OPEN_DAY_LOG,
    WEEK_LOG,
)
from worklog.aggregator import aggregate, interval_duration, matches, total_duration
from worklog.errors import CorruptLogError
from worklog.models import Interval, SameDay, SameWeek

NEW_YEARS_EVE = date(2016, 12, 31)
EVENING = datetime(2016, 12, 31, 18, 0)


class TestDateFilters:

    def test_same_day(self):
        f = SameDay(NEW_YEARS_EVE)
        assert matches(f, datetime(2016, 12, 31, 0, 0))
        assert matches(f, datetime(2016, 12, 31, 23, 59))
        assert not matches(f, datetime(2017, 1, 1, 0, 0))

    def test_same_week_uses_iso_weeks(self):
        # 2017-01-01 is a Sunday and still belongs to 2016-W52
        f = SameWeek.containing(NEW_YEARS_EVE)
        assert (f.year, f.week) == (2016, 52)
        assert matches(f, datetime(2017, 1, 1, 12, 0))
        assert not matches(f, datetime(2017, 1, 2, 12, 0))

    def test_same_week_distinguishes_years(self):
        assert not matches(SameWeek(2015, 52), datetime(2016, 12, 30, 8, 0))

    def test_unknown_filter(self):
        with pytest.raises(TypeError):
            matches("today", EVENING)


class TestIntervalDuration:

    def test_closed_inside_day(self):
        interval = Interval(datetime(2016, 12, 31, 9, 0), datetime(2016, 12, 31, 12, 30))
        assert interval_duration(interval, SameDay(NEW_YEARS_EVE), EVENING) == timedelta(hours=3, minutes=30)

    def test_closed_other_day(self):
        interval = Interval(datetime(2016, 12, 30, 9, 0), datetime(2016, 12, 30, 12, 30))
        assert interval_duration(interval, SameDay(NEW_YEARS_EVE), EVENING) == timedelta(0)

    def test_open_counts_until_now(self):
        interval = Interval(datetime(2016, 12, 31, 9, 0))
        now = datetime(2016, 12, 31, 10, 30)
        assert interval_duration(interval, SameDay(NEW_YEARS_EVE), now) == timedelta(hours=1, minutes=30)

    def test_open_with_start_outside_filter(self):
        interval = Interval(datetime(2016, 12, 30, 9, 0))
        assert interval_duration(interval, SameDay(NEW_YEARS_EVE), EVENING) == timedelta(0)

    def test_open_started_after_now(self):
        """Clock skew never produces a negative contribution."""
        interval = Interval(datetime(2016, 12, 31, 19, 0))
        assert interval_duration(interval, SameDay(NEW_YEARS_EVE), EVENING) == timedelta(0)

    def test_closed_ending_before_start(self):
        interval = Interval(datetime(2016, 12, 31, 12, 0), datetime(2016, 12, 31, 11, 0))
        assert interval_duration(interval, SameDay(NEW_YEARS_EVE), EVENING) == timedelta(0)


class TestAggregate:

    def test_empty_log(self):
        assert aggregate([], SameDay(NEW_YEARS_EVE), EVENING) == timedelta(0)

    def test_closed_day(self):
        total = aggregate(CLOSED_DAY_LOG, SameDay(NEW_YEARS_EVE), EVENING)
        assert total == timedelta(hours=8)

    def test_open_interval_accounting(self):
        lines = ["from:2016-12-31 09:00"]
        now = datetime(2016, 12, 31, 9, 0) + timedelta(minutes=90)
        assert aggregate(lines, SameDay(NEW_YEARS_EVE), now) == timedelta(hours=1, minutes=30)

    def test_open_day(self):
        # 3:30 closed + 4:45 running since 13:15
        total = aggregate(OPEN_DAY_LOG, SameDay(NEW_YEARS_EVE), EVENING)
        assert total == timedelta(hours=8, minutes=15)

    @pytest.mark.parametrize("date_filter", [
        SameDay(NEW_YEARS_EVE),
        SameWeek(2016, 52),
        SameDay(date(2020, 1, 1)),
    ])
    def test_leading_stop_fails_for_any_filter(self, date_filter):
        with pytest.raises(CorruptLogError):
            aggregate(LEADING_STOP_LOG, date_filter, EVENING)

    def test_midnight_interval_excluded_from_both_days(self):
        now = datetime(2017, 1, 1, 12, 0)
        assert aggregate(MIDNIGHT_LOG, SameDay(NEW_YEARS_EVE), now) == timedelta(0)
        assert aggregate(MIDNIGHT_LOG, SameDay(date(2017, 1, 1)), now) == timedelta(0)

    def test_midnight_interval_counted_for_week(self):
        now = datetime(2017, 1, 1, 12, 0)
        assert aggregate(MIDNIGHT_LOG, SameWeek(2016, 52), now) == timedelta(hours=1)

    def test_week_aggregation(self):
        now = datetime(2017, 1, 4, 18, 0)
        current = SameWeek.containing(now)
        assert aggregate(WEEK_LOG, current, now) == timedelta(hours=3, minutes=30)

    def test_prior_week_only(self):
        now = datetime(2017, 1, 4, 18, 0)
        assert aggregate(WEEK_LOG, SameWeek(2016, 52), now) == timedelta(hours=8)

    def test_deterministic_for_fixed_now(self):
        first = aggregate(OPEN_DAY_LOG, SameDay(NEW_YEARS_EVE), EVENING)
        second = aggregate(OPEN_DAY_LOG, SameDay(NEW_YEARS_EVE), EVENING)
        assert first == second

    def test_total_duration_of_no_intervals(self):
        assert total_duration([], SameWeek(2016, 52), EVENING) == timedelta(0)
