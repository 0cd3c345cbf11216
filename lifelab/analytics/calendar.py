"""Calendar footprint: activity range, navigable week window and day intensity."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lifelab.analytics.activity import completed_on, created_on, logged_on
from lifelab.dates import day_of, monday_of, weeks_between
from lifelab.models.analytics import DayCell, WeekWindow

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from datetime import date, datetime, tzinfo

    from lifelab.models.experiment import ExperimentRecord


def _activity_days(records: Sequence[ExperimentRecord], tz: tzinfo | None) -> Iterator[date]:
    for record in records:
        yield day_of(record.created_at, tz)
        yield day_of(record.updated_at, tz)
        if record.completed_at is not None:
            yield day_of(record.completed_at, tz)
        for entry in record.logs:
            yield entry.date


def activity_range(
    records: Sequence[ExperimentRecord],
    today: date | datetime,
    tz: tzinfo | None = None,
) -> tuple[date, date]:
    """Earliest and latest day with any recorded activity.

    Both ends fall back to *today* for an empty snapshot.
    """
    today = day_of(today, tz)
    days = list(_activity_days(records, tz))
    if not days:
        return today, today
    return min(days), max(days)


def build_week_window(
    records: Sequence[ExperimentRecord],
    today: date | datetime,
    tz: tzinfo | None = None,
) -> WeekWindow:
    """Week window anchored on the latest activity's week, opened at today's week.

    The upper bound never passes the current week, even when the latest
    activity lies in the future.
    """
    today = day_of(today, tz)
    earliest, latest = activity_range(records, today, tz)

    reference = monday_of(latest)
    min_offset = weeks_between(reference, monday_of(earliest))
    max_offset = weeks_between(reference, min(monday_of(latest), monday_of(today)))
    # All activity after the current week: collapse to the upper bound.
    min_offset = min(min_offset, max_offset)

    window = WeekWindow(
        reference_monday=reference,
        min_offset=min_offset,
        max_offset=max_offset,
        today_offset=weeks_between(reference, monday_of(today)),
    )
    return window.jump_to_today()


def day_intensity(
    records: Sequence[ExperimentRecord], day: date, tz: tzinfo | None = None
) -> int:
    """Number of distinct records active on *day*.

    Active records count when created or logged that day; any record counts
    on the day it was completed.
    """
    ids = {
        r.id
        for r in records
        if (r.is_active and (created_on(r, day, tz) or logged_on(r, day)))
        or completed_on(r, day, tz)
    }
    return len(ids)


def week_cells(
    records: Sequence[ExperimentRecord],
    window: WeekWindow,
    today: date | datetime,
    tz: tzinfo | None = None,
) -> list[DayCell]:
    today = day_of(today, tz)
    return [
        DayCell(day=day, count=day_intensity(records, day, tz), is_today=day == today)
        for day in window.days
    ]
