"""Calendar-day helpers shared by every analytics engine.

All day-boundary decisions go through :func:`day_of` so that each engine
agrees on which local calendar day an instant belongs to.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, tzinfo


def day_of(value: date | datetime, tz: tzinfo | None = None) -> date:
    """Return the local calendar day for *value*.

    Naive datetimes are taken as local wall time. Aware datetimes are
    converted to *tz*, or to the system local zone when *tz* is None.
    """
    if not isinstance(value, datetime):
        return value
    if value.tzinfo is None:
        return value.date()
    return value.astimezone(tz).date()


def add_days(day: date, days: int) -> date:
    return day + timedelta(days=days)


def monday_of(day: date) -> date:
    return day - timedelta(days=day.weekday())


def weeks_between(start: date, end: date) -> int:
    """Whole weeks from *start* to *end* (negative when *end* is earlier)."""
    return (end - start).days // 7


def as_local(value: datetime) -> datetime:
    """Pin a naive *value* to the system local zone; aware values pass through."""
    if value.tzinfo is None:
        return value.astimezone()
    return value
