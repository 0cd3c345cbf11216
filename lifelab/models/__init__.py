"""Re-exports all Pydantic models."""

from lifelab.models.analytics import (
    DISTANT_PAST,
    BoxKind,
    CategoryBox,
    DayCell,
    DayState,
    HomeState,
    HomeSummary,
    WeekWindow,
)
from lifelab.models.catalog import Category, CategoryCatalog, Subcategory
from lifelab.models.events import MilestoneEvent, MilestoneKind, RecentEvent
from lifelab.models.experiment import (
    DailyLogEntry,
    ExperimentRecord,
    ExperimentStatus,
    Mood,
    Review,
)

__all__ = [
    "DISTANT_PAST",
    "BoxKind",
    "Category",
    "CategoryBox",
    "CategoryCatalog",
    "DailyLogEntry",
    "DayCell",
    "DayState",
    "ExperimentRecord",
    "ExperimentStatus",
    "HomeState",
    "HomeSummary",
    "MilestoneEvent",
    "MilestoneKind",
    "Mood",
    "RecentEvent",
    "Review",
    "Subcategory",
    "WeekWindow",
]
