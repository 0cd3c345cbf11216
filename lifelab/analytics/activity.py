"""Activity predicate: did anything happen to a record on a given day?"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lifelab.dates import day_of

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date, tzinfo

    from lifelab.models.experiment import ExperimentRecord


def created_on(record: ExperimentRecord, day: date, tz: tzinfo | None = None) -> bool:
    return day_of(record.created_at, tz) == day


def logged_on(record: ExperimentRecord, day: date) -> bool:
    return any(entry.date == day for entry in record.logs)


def completed_on(record: ExperimentRecord, day: date, tz: tzinfo | None = None) -> bool:
    return record.completed_at is not None and day_of(record.completed_at, tz) == day


def touched_on(record: ExperimentRecord, day: date, tz: tzinfo | None = None) -> bool:
    """True if *record* was created, logged or completed on *day*."""
    day = day_of(day, tz)
    return created_on(record, day, tz) or logged_on(record, day) or completed_on(record, day, tz)


def any_touched_on(
    records: Iterable[ExperimentRecord], day: date, tz: tzinfo | None = None
) -> bool:
    return any(touched_on(r, day, tz) for r in records)
