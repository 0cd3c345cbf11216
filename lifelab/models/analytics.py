"""Result models produced by the analytics engines."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from lifelab.models.events import MilestoneEvent, RecentEvent
from lifelab.models.experiment import ExperimentRecord

# Sort key for boxes with no members.
DISTANT_PAST = datetime.min.replace(tzinfo=UTC)

MAX_DOTS = 5


class HomeState(StrEnum):
    NO_ACTIVE = "no_active"
    ACTIVE_NO_UPDATE_TODAY = "active_no_update_today"
    UPDATED_TODAY = "updated_today"


class DayState(BaseModel):
    model_config = ConfigDict(frozen=True)

    state: HomeState
    today: date
    has_updated_today: bool
    active_records: list[ExperimentRecord] = Field(default_factory=list)
    continue_candidates: list[ExperimentRecord] = Field(default_factory=list)
    continue_title: str

    @property
    def continue_preview(self) -> list[ExperimentRecord]:
        return self.continue_candidates[:2]


class DayCell(BaseModel):
    """One day of the calendar strip."""

    model_config = ConfigDict(frozen=True)

    day: date
    count: int = 0
    is_today: bool = False

    @property
    def dots(self) -> int:
        return min(self.count, MAX_DOTS)

    @property
    def overflow(self) -> bool:
        return self.count > MAX_DOTS


class WeekWindow(BaseModel):
    """Navigable week range, as offsets in weeks from ``reference_monday``.

    Every navigation step returns a copy with the offset clamped into
    ``[min_offset, max_offset]``.
    """

    model_config = ConfigDict(frozen=True)

    reference_monday: date
    min_offset: int = 0
    max_offset: int = 0
    today_offset: int = 0
    offset: int = 0

    @property
    def monday(self) -> date:
        return self.reference_monday + timedelta(weeks=self.offset)

    @property
    def days(self) -> list[date]:
        return [self.monday + timedelta(days=i) for i in range(7)]

    @property
    def can_go_previous(self) -> bool:
        return self.offset > self.min_offset

    @property
    def can_go_next(self) -> bool:
        return self.offset < self.max_offset

    def clamp(self, offset: int) -> int:
        return max(self.min_offset, min(offset, self.max_offset))

    def with_offset(self, offset: int) -> WeekWindow:
        return self.model_copy(update={"offset": self.clamp(offset)})

    def previous(self) -> WeekWindow:
        return self.with_offset(self.offset - 1)

    def next(self) -> WeekWindow:
        return self.with_offset(self.offset + 1)

    def jump_to_today(self) -> WeekWindow:
        return self.with_offset(self.today_offset)


class BoxKind(StrEnum):
    CATALOG = "catalog"
    CUSTOM = "custom"
    UNCATEGORIZED = "uncategorized"


class CategoryBox(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    title: str
    kind: BoxKind
    records: list[ExperimentRecord] = Field(default_factory=list)
    updated_at: datetime = DISTANT_PAST
    custom_category_names: list[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.records


class HomeSummary(BaseModel):
    """Everything the home view needs for one day, computed in one pass."""

    model_config = ConfigDict(frozen=True)

    today: date
    day_state: DayState
    streak: int
    updated_today_count: int
    milestones: list[MilestoneEvent] = Field(default_factory=list)
    events: list[RecentEvent] = Field(default_factory=list)
    week: WeekWindow
    week_cells: list[DayCell] = Field(default_factory=list)
    category_boxes: list[CategoryBox] = Field(default_factory=list)
