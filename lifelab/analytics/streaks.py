"""Streak counting and milestone selection for the recent-events section."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from lifelab.analytics.activity import any_touched_on, completed_on, touched_on
from lifelab.dates import add_days, day_of
from lifelab.models.events import MilestoneEvent, MilestoneKind

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import date, datetime, tzinfo

    from lifelab.models.experiment import ExperimentRecord

logger = structlog.get_logger()

MAX_STREAK_DAYS = 365
MAX_EVENTS = 2


def calculate_streak(
    records: Sequence[ExperimentRecord],
    today: date | datetime,
    tz: tzinfo | None = None,
) -> int:
    """Consecutive days with activity, counting back from *today*.

    Returns 0 when nothing happened today. Capped at ``MAX_STREAK_DAYS``.
    """
    check = day_of(today, tz)
    streak = 0
    for _ in range(MAX_STREAK_DAYS):
        if not any_touched_on(records, check, tz):
            break
        streak += 1
        check = add_days(check, -1)
    return streak


def first_time_category(
    records: Sequence[ExperimentRecord],
    today: date | datetime,
    tz: tzinfo | None = None,
) -> str | None:
    """Category of the first record touched today, if no other record uses it.

    Only the first categorized record touched today is considered.
    """
    today = day_of(today, tz)
    candidate = next(
        (r for r in records if touched_on(r, today, tz) and r.trimmed_category),
        None,
    )
    if candidate is None:
        return None

    category = candidate.trimmed_category
    shared = any(r.id != candidate.id and r.trimmed_category == category for r in records)
    return None if shared else category


def build_milestones(
    records: Sequence[ExperimentRecord],
    today: date | datetime,
    tz: tzinfo | None = None,
    streak: int | None = None,
) -> list[MilestoneEvent]:
    """Select at most two milestone events in fixed priority order.

    1. streak of 2+ days, or progress today
    2. records completed yesterday
    3. first record in a category, when something happened today
    4. encouragement when there is nothing else and no active records

    A lower tier only fills slots left open by the tiers above it.
    """
    today = day_of(today, tz)
    has_updated_today = any_touched_on(records, today, tz)
    if streak is None:
        streak = calculate_streak(records, today, tz)

    events: list[MilestoneEvent] = []

    if streak >= 2:
        events.append(MilestoneEvent(kind=MilestoneKind.STREAK_DAYS, count=streak))
    elif streak == 1 and has_updated_today:
        events.append(MilestoneEvent(kind=MilestoneKind.PROGRESS_TODAY))

    if len(events) < MAX_EVENTS:
        yesterday = add_days(today, -1)
        finished = sum(1 for r in records if completed_on(r, yesterday, tz))
        if finished:
            events.append(MilestoneEvent(kind=MilestoneKind.COMPLETED_YESTERDAY, count=finished))

    if len(events) < MAX_EVENTS and has_updated_today:
        category = first_time_category(records, today, tz)
        if category is not None:
            events.append(MilestoneEvent(kind=MilestoneKind.FIRST_IN_CATEGORY, category=category))

    if not events and not any(r.is_active for r in records):
        events.append(MilestoneEvent(kind=MilestoneKind.EMPTY_STATE))

    logger.debug(
        "Milestones selected",
        today=today.isoformat(),
        streak=streak,
        kinds=[e.kind.value for e in events],
    )
    return events[:MAX_EVENTS]
