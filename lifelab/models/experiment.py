"""Experiment record — one tracked life experiment and its daily logs."""

from __future__ import annotations

import uuid
from datetime import date, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from lifelab.dates import as_local


def _new_id() -> str:
    return uuid.uuid4().hex


def _now() -> datetime:
    return datetime.now().astimezone()


class ExperimentStatus(StrEnum):
    ACTIVE = "active"
    COMPLETED = "completed"


class Mood(StrEnum):
    VERY_BAD = "very_bad"
    BAD = "bad"
    NEUTRAL = "neutral"
    GOOD = "good"
    VERY_GOOD = "very_good"

    @property
    def level(self) -> int:
        return _MOOD_LEVELS[self]

    @property
    def glyph(self) -> str:
        return _MOOD_GLYPHS[self]

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


_MOOD_LEVELS = {mood: i for i, mood in enumerate(Mood, start=1)}

_MOOD_GLYPHS = {
    Mood.VERY_BAD: "😣",
    Mood.BAD: "😕",
    Mood.NEUTRAL: "😐",
    Mood.GOOD: "🙂",
    Mood.VERY_GOOD: "😄",
}


class DailyLogEntry(BaseModel):
    """A note (and optional mood) for one calendar day."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    date: date
    note: str = ""
    mood: Mood | None = None


class Review(BaseModel):
    """Closing reflection: what happened, what was learned, what comes next."""

    model_config = ConfigDict(frozen=True)

    answers: tuple[str, str, str] = ("", "", "")
    locked: bool = False


class ExperimentRecord(BaseModel):
    """Represents one life experiment."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    title: str
    category: str | None = None
    subcategory: str | None = None
    status: ExperimentStatus = ExperimentStatus.ACTIVE

    # Timestamps
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime
    completed_at: datetime | None = None

    logs: list[DailyLogEntry] = Field(default_factory=list)
    review: Review | None = None

    @model_validator(mode="before")
    @classmethod
    def _default_updated_at(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("updated_at") is None:
            data = dict(data)
            if data.get("created_at") is None:
                data["created_at"] = _now()
            data["updated_at"] = data["created_at"]
        return data

    @field_validator("created_at", "updated_at", "completed_at")
    @classmethod
    def _naive_is_local(cls, value: datetime | None) -> datetime | None:
        return as_local(value) if value is not None else None

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be blank")
        return value

    @model_validator(mode="after")
    def _timestamps_consistent(self) -> ExperimentRecord:
        if self.updated_at < self.created_at:
            raise ValueError("updated_at cannot precede created_at")
        completed = self.status == ExperimentStatus.COMPLETED
        if completed and self.completed_at is None:
            raise ValueError("completed records need completed_at")
        if not completed and self.completed_at is not None:
            raise ValueError("active records cannot have completed_at")
        return self

    @property
    def is_active(self) -> bool:
        return self.status == ExperimentStatus.ACTIVE

    @property
    def trimmed_category(self) -> str:
        return (self.category or "").strip()

    def log_for(self, day: date) -> DailyLogEntry | None:
        """Return the log entry written for *day*, if any."""
        for entry in self.logs:
            if entry.date == day:
                return entry
        return None
