"""Record lifecycle transitions.

Each function takes a frozen :class:`ExperimentRecord` plus the current
instant and returns an updated copy. ``updated_at`` only ever moves forward.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from lifelab.dates import as_local, day_of
from lifelab.models.experiment import (
    DailyLogEntry,
    ExperimentRecord,
    ExperimentStatus,
    Review,
)

if TYPE_CHECKING:
    from datetime import date, datetime, tzinfo

    from lifelab.models.experiment import Mood

logger = structlog.get_logger()


class LifecycleError(Exception):
    """A transition is not allowed in the record's current state."""


class RecordCompletedError(LifecycleError):
    """The record is completed and no longer accepts logs."""


class ReviewLockedError(LifecycleError):
    """The review is locked; reopen the record to edit it."""


def _touch(record: ExperimentRecord, now: datetime) -> datetime:
    return max(record.updated_at, as_local(now))


def create_record(
    title: str,
    now: datetime,
    category: str | None = None,
    subcategory: str | None = None,
) -> ExperimentRecord:
    if not title.strip():
        raise ValueError("title must not be blank")
    record = ExperimentRecord(
        title=title.strip(),
        category=category,
        subcategory=subcategory,
        created_at=now,
        updated_at=now,
    )
    logger.info("Record created", record_id=record.id, category=record.category)
    return record


def save_log(
    record: ExperimentRecord,
    day: date | datetime,
    now: datetime,
    note: str = "",
    mood: Mood | None = None,
    tz: tzinfo | None = None,
) -> ExperimentRecord:
    """Write the log for *day*, replacing any entry already saved that day.

    An aware *day* is placed on its calendar day in *tz*. Logs stay ordered
    by date.
    """
    if not record.is_active:
        raise RecordCompletedError(f"Record {record.id} is completed; reopen it to add logs")

    day = day_of(day, tz)
    logs = list(record.logs)
    existing = record.log_for(day)
    if existing is None:
        logs.append(DailyLogEntry(date=day, note=note, mood=mood))
        logs.sort(key=lambda entry: entry.date)
    else:
        logs[logs.index(existing)] = existing.model_copy(update={"note": note, "mood": mood})

    return record.model_copy(update={"logs": logs, "updated_at": _touch(record, now)})


def complete_record(
    record: ExperimentRecord, now: datetime, review: Review | None = None
) -> ExperimentRecord:
    if not record.is_active:
        raise RecordCompletedError(f"Record {record.id} is already completed")

    update: dict[str, object] = {
        "status": ExperimentStatus.COMPLETED,
        "completed_at": as_local(now),
        "updated_at": _touch(record, now),
    }
    if review is not None:
        update["review"] = review.model_copy(update={"locked": True})
    logger.info("Record completed", record_id=record.id)
    return record.model_copy(update=update)


def reopen_record(record: ExperimentRecord, now: datetime) -> ExperimentRecord:
    if record.is_active:
        return record

    update: dict[str, object] = {
        "status": ExperimentStatus.ACTIVE,
        "completed_at": None,
        "updated_at": _touch(record, now),
    }
    if record.review is not None:
        update["review"] = record.review.model_copy(update={"locked": False})
    logger.info("Record reopened", record_id=record.id)
    return record.model_copy(update=update)


def update_review(
    record: ExperimentRecord, answers: tuple[str, str, str], now: datetime
) -> ExperimentRecord:
    if record.review is not None and record.review.locked:
        raise ReviewLockedError(f"Review for record {record.id} is locked")
    review = Review(answers=answers)
    return record.model_copy(update={"review": review, "updated_at": _touch(record, now)})


def lock_review(record: ExperimentRecord, now: datetime) -> ExperimentRecord:
    review = record.review or Review()
    if review.locked:
        return record
    locked = review.model_copy(update={"locked": True})
    return record.model_copy(update={"review": locked, "updated_at": _touch(record, now)})
