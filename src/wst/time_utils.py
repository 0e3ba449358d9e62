"""Time utilities for weekly bucketing."""
from __future__ import annotations

from datetime import date, datetime, time, timedelta


def week_bucket(d: date) -> date:
    """Return the Monday of the week containing the given date (local naive)."""

    weekday = d.weekday()  # Monday == 0
    return d - timedelta(days=weekday)


def week_start(instant: datetime) -> int:
    """Return the epoch marker (ms) of local Monday midnight for ``instant``.

    Naive datetimes are read as local time; aware ones keep their own zone.
    """

    monday = datetime.combine(week_bucket(instant.date()), time.min, tzinfo=instant.tzinfo)
    return int(monday.timestamp()) * 1000


def week_range_label(now: datetime) -> str:
    """Format the Monday-Sunday span containing ``now``, e.g. ``Oct 12 - Oct 18``."""

    start = week_bucket(now.date())
    end = start + timedelta(days=6)
    return f"{start:%b} {start.day} - {end:%b} {end.day}"
