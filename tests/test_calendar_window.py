"""Tests for calendar windows and day matching."""

import time
from datetime import date, datetime, timedelta

import pytest

from bar_logistics.calendar_window import (
    events_in_window,
    is_same_day,
    local_today,
    parse_date_parts,
    schedule_by_day,
    window_days,
)
from bar_logistics.models import EventPlan


class TestWindowDays:
    """Tests for window_days."""

    def test_seven_consecutive_days(self, monday):
        days = window_days(monday)
        assert len(days) == 7
        assert days[0] == monday
        assert days[-1] == date(2024, 3, 10)

    def test_crosses_month_end(self):
        """Window rolls over into the next month."""
        days = window_days(date(2024, 2, 27), 4)
        assert days == [
            date(2024, 2, 27),
            date(2024, 2, 28),
            date(2024, 2, 29),
            date(2024, 3, 1),
        ]

    def test_zero_days(self, monday):
        assert window_days(monday, 0) == []

    def test_negative_days_rejected(self, monday):
        with pytest.raises(ValueError):
            window_days(monday, -1)

    def test_accepts_datetime(self):
        """A datetime late in the evening still anchors on its own day."""
        days = window_days(datetime(2024, 3, 4, 23, 30), 1)
        assert days == [date(2024, 3, 4)]

    def test_defaults_to_local_today(self):
        assert window_days(days=1) == [local_today()]

    @pytest.mark.skipif(not hasattr(time, "tzset"), reason="needs time.tzset")
    @pytest.mark.parametrize("days", [1, 7, 30])
    @pytest.mark.parametrize("tz", ["America/Sao_Paulo", "Asia/Tokyo"])
    def test_consecutive_days_in_any_timezone(self, monkeypatch, tz, days):
        """The window starts on the local today and steps one day at a time."""
        monkeypatch.setenv("TZ", tz)
        time.tzset()
        try:
            window = window_days(days=days)
            assert len(window) == days
            assert all(b - a == timedelta(days=1) for a, b in zip(window, window[1:]))
            assert is_same_day(local_today().isoformat(), window_days(days=1)[0])
        finally:
            monkeypatch.undo()
            time.tzset()


class TestParseDateParts:
    """Tests for parse_date_parts."""

    def test_valid(self):
        assert parse_date_parts("2024-03-04") == (2024, 3, 4)

    def test_surrounding_whitespace(self):
        assert parse_date_parts(" 2024-03-04 ") == (2024, 3, 4)

    @pytest.mark.parametrize("value", ["", None, "2024-03", "04/03/2024", "2024-xx-04"])
    def test_malformed(self, value):
        assert parse_date_parts(value) is None

    @pytest.mark.parametrize(
        "value", ["2024-0_3-04", "2024-+3-04", "+2024-03-04", "2024-03- 4", "２０２４-03-04"]
    )
    def test_only_ascii_digits(self, value):
        """Fields int() would accept but that are not plain digits are rejected."""
        assert parse_date_parts(value) is None


class TestIsSameDay:
    """Tests for is_same_day."""

    def test_full_width_digits_never_match(self, monday):
        assert not is_same_day("２０２４-03-04", monday)

    def test_match(self, monday):
        assert is_same_day("2024-03-04", monday)

    def test_no_match(self, monday):
        assert not is_same_day("2024-03-05", monday)

    def test_malformed_never_matches(self, monday):
        assert not is_same_day("not a date", monday)

    @pytest.mark.skipif(not hasattr(time, "tzset"), reason="needs time.tzset")
    @pytest.mark.parametrize("tz", ["America/Sao_Paulo", "Asia/Tokyo", "UTC"])
    def test_independent_of_local_timezone(self, monkeypatch, tz):
        """An event on the 4th stays on the 4th at any UTC offset."""
        monkeypatch.setenv("TZ", tz)
        time.tzset()
        try:
            assert is_same_day("2024-03-04", date(2024, 3, 4))
            assert not is_same_day("2024-03-04", date(2024, 3, 3))
        finally:
            monkeypatch.undo()
            time.tzset()


class TestEventsInWindow:
    """Tests for events_in_window."""

    def test_filters_to_window(self, monday):
        events = [
            EventPlan(name="Before", date="2024-03-03"),
            EventPlan(name="First", date="2024-03-04"),
            EventPlan(name="Last", date="2024-03-10"),
            EventPlan(name="After", date="2024-03-11"),
        ]
        matched = events_in_window(events, window_days(monday))
        assert [e.name for e in matched] == ["First", "Last"]

    def test_malformed_dates_skipped(self, monday):
        events = [
            EventPlan(name="Bad", date="someday"),
            EventPlan(name="Blank", date=""),
            EventPlan(name="Good", date="2024-03-05"),
        ]
        matched = events_in_window(events, window_days(monday))
        assert [e.name for e in matched] == ["Good"]

    def test_empty_window(self, monday):
        events = [EventPlan(name="Party", date="2024-03-04")]
        assert events_in_window(events, []) == []


class TestScheduleByDay:
    """Tests for schedule_by_day."""

    def test_groups_events(self, monday):
        events = [
            EventPlan(name="Lunch", date="2024-03-06"),
            EventPlan(name="Gala", date="2024-03-04"),
            EventPlan(name="Dinner", date="2024-03-06"),
        ]
        schedule = schedule_by_day(events, window_days(monday))

        assert len(schedule) == 7
        assert [d.day for d in schedule] == window_days(monday)
        assert [e.name for e in schedule[0].events] == ["Gala"]
        assert schedule[1].events == []
        assert [e.name for e in schedule[2].events] == ["Lunch", "Dinner"]
