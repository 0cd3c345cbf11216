"""Home summary — runs every engine over one snapshot for one day."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from lifelab.analytics.activity import touched_on
from lifelab.analytics.calendar import build_week_window, week_cells
from lifelab.analytics.categories import group_by_category
from lifelab.analytics.day_state import classify_day
from lifelab.analytics.streaks import build_milestones, calculate_streak
from lifelab.analytics.templates import render_all
from lifelab.dates import day_of
from lifelab.models.analytics import HomeSummary

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import date, datetime, tzinfo

    from lifelab.models.catalog import CategoryCatalog
    from lifelab.models.experiment import ExperimentRecord

logger = structlog.get_logger()


def build_home(
    records: Sequence[ExperimentRecord],
    today: date | datetime,
    catalog: CategoryCatalog | None = None,
    tz: tzinfo | None = None,
) -> HomeSummary:
    today = day_of(today, tz)
    records = list(records)

    streak = calculate_streak(records, today, tz)
    milestones = build_milestones(records, today, tz, streak=streak)
    window = build_week_window(records, today, tz)

    summary = HomeSummary(
        today=today,
        day_state=classify_day(records, today, tz),
        streak=streak,
        updated_today_count=sum(1 for r in records if touched_on(r, today, tz)),
        milestones=milestones,
        events=render_all(milestones),
        week=window,
        week_cells=week_cells(records, window, today, tz),
        category_boxes=group_by_category(records, catalog),
    )
    logger.debug(
        "Home summary built",
        today=today.isoformat(),
        records=len(records),
        state=summary.day_state.state.value,
        streak=streak,
    )
    return summary
