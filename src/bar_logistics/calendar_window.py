"""Rolling calendar windows and timezone-safe day matching.

Event dates are stored as plain ``YYYY-MM-DD`` strings. They are matched
against window days by comparing their year, month and day fields directly;
the raw string is never turned into a datetime, so no UTC offset can move an
event onto the neighbouring day.
"""

import logging
from collections.abc import Iterable, Sequence
from datetime import date, datetime, timedelta

from .models import DaySchedule, EventPlan

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_DAYS = 7


def local_today() -> date:
    """Today's date on the local wall clock."""
    return datetime.now().date()


def window_days(today: date | None = None, days: int = DEFAULT_WINDOW_DAYS) -> list[date]:
    """Build ``days`` consecutive calendar days starting at ``today``.

    Args:
        today: Day 0 of the window. Defaults to the local date.
        days: Window length

    Returns:
        List of dates, one calendar day apart

    Raises:
        ValueError: If days is negative
    """
    if days < 0:
        raise ValueError(f"Window length must be non-negative, got {days}")

    start = today or local_today()
    if isinstance(start, datetime):
        start = start.date()
    return [start + timedelta(days=offset) for offset in range(days)]


def parse_date_parts(value: str | None) -> tuple[int, int, int] | None:
    """Split a ``YYYY-MM-DD`` string into integer parts.

    Returns None unless the string has exactly three dash-separated fields of
    ASCII digits.
    """
    if not value:
        return None

    parts = value.strip().split("-")
    if len(parts) != 3:
        return None

    if not all(part.isascii() and part.isdigit() for part in parts):
        return None

    year, month, day = (int(part) for part in parts)
    return year, month, day


def is_same_day(value: str | None, day: date) -> bool:
    """Check whether a date string falls on the given calendar day."""
    parts = parse_date_parts(value)
    if parts is None:
        return False
    return parts == (day.year, day.month, day.day)


def events_in_window(events: Iterable[EventPlan], days: Sequence[date]) -> list[EventPlan]:
    """Keep the events dated on any day of the window, in input order."""
    wanted = {(d.year, d.month, d.day) for d in days}
    matched = []
    for event in events:
        parts = parse_date_parts(event.date)
        if parts is None:
            if event.date:
                logger.warning("Ignoring event %s with malformed date %r", event.id, event.date)
            continue
        if parts in wanted:
            matched.append(event)
    return matched


def schedule_by_day(events: Iterable[EventPlan], days: Sequence[date]) -> list[DaySchedule]:
    """Group events under the window day they fall on."""
    events = list(events)
    return [
        DaySchedule(day=day, events=[e for e in events if is_same_day(e.date, day)])
        for day in days
    ]
