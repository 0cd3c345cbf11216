"""Milestone events shown in the home view's recent-events section."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class MilestoneKind(StrEnum):
    STREAK_DAYS = "streak_days"
    PROGRESS_TODAY = "progress_today"
    COMPLETED_YESTERDAY = "completed_yesterday"
    FIRST_IN_CATEGORY = "first_in_category"
    EMPTY_STATE = "empty_state"


class MilestoneEvent(BaseModel):
    """A selected milestone: its kind plus the values its copy needs."""

    model_config = ConfigDict(frozen=True)

    kind: MilestoneKind
    count: int | None = None
    category: str | None = None


class RecentEvent(BaseModel):
    """A milestone rendered into icon + text for display."""

    model_config = ConfigDict(frozen=True)

    icon: str
    title: str
    subtitle: str | None = None
