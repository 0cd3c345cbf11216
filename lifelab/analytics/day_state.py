"""Home-state classification and the "continue recording" list."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lifelab.analytics.activity import touched_on
from lifelab.dates import day_of
from lifelab.models.analytics import DayState, HomeState

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import date, datetime, tzinfo

    from lifelab.models.experiment import ExperimentRecord

CONTINUE_TITLES: dict[HomeState, str] = {
    HomeState.NO_ACTIVE: "Start New Experiment",
    HomeState.ACTIVE_NO_UPDATE_TODAY: "Continue Recording",
    HomeState.UPDATED_TODAY: "Anything else to add? (optional)",
}


def continue_candidates(
    records: Sequence[ExperimentRecord], today: date, tz: tzinfo | None = None
) -> list[ExperimentRecord]:
    """Active records not touched today, most recently updated first.

    Ties keep snapshot order.
    """
    pending = [r for r in records if r.is_active and not touched_on(r, today, tz)]
    return sorted(pending, key=lambda r: r.updated_at, reverse=True)


def classify_day(
    records: Sequence[ExperimentRecord],
    today: date | datetime,
    tz: tzinfo | None = None,
) -> DayState:
    today = day_of(today, tz)
    active = [r for r in records if r.is_active]
    has_updated_today = any(touched_on(r, today, tz) for r in records)

    if not active:
        state = HomeState.NO_ACTIVE
    elif has_updated_today:
        state = HomeState.UPDATED_TODAY
    else:
        state = HomeState.ACTIVE_NO_UPDATE_TODAY

    return DayState(
        state=state,
        today=today,
        has_updated_today=has_updated_today,
        active_records=active,
        continue_candidates=continue_candidates(records, today, tz),
        continue_title=CONTINUE_TITLES[state],
    )
