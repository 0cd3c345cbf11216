"""Activity analytics engine — pure computations over a record snapshot."""

from lifelab.analytics.activity import any_touched_on, touched_on
from lifelab.analytics.calendar import (
    activity_range,
    build_week_window,
    day_intensity,
    week_cells,
)
from lifelab.analytics.categories import group_by_category, sort_boxes
from lifelab.analytics.day_state import classify_day, continue_candidates
from lifelab.analytics.home import build_home
from lifelab.analytics.streaks import build_milestones, calculate_streak, first_time_category
from lifelab.analytics.templates import render, render_all

__all__ = [
    "activity_range",
    "any_touched_on",
    "build_home",
    "build_milestones",
    "build_week_window",
    "calculate_streak",
    "classify_day",
    "continue_candidates",
    "day_intensity",
    "first_time_category",
    "group_by_category",
    "render",
    "render_all",
    "sort_boxes",
    "touched_on",
    "week_cells",
]
