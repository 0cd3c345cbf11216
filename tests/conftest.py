"""Shared test fixtures."""

from __future__ import annotations

from datetime import date, datetime, time

import pytest

from lifelab.config import Settings
from lifelab.db import Database
from lifelab.models.experiment import DailyLogEntry, ExperimentRecord, ExperimentStatus

# Monday.
TODAY = date(2026, 1, 5)


def at(day: date | datetime, hour: int = 9) -> datetime:
    if isinstance(day, datetime):
        return day
    return datetime.combine(day, time(hour))


@pytest.fixture()
def today() -> date:
    return TODAY


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(
        data_dir=tmp_path / "data",
        catalog_path=None,
        timezone="",
        log_level="WARNING",
        log_format="console",
        _env_file=None,
    )


@pytest.fixture()
def db(tmp_path) -> Database:
    db = Database(tmp_path / "test.db")
    db.init_schema()
    yield db
    db.close()


@pytest.fixture()
def make_record():
    """Build records from plain days; timestamps land at 09:00 local."""

    def _make(
        title: str = "Experiment",
        *,
        category: str | None = None,
        created: date | datetime = TODAY,
        updated: date | datetime | None = None,
        completed: date | datetime | None = None,
        logs: tuple[date, ...] | list[date] = (),
        record_id: str | None = None,
    ) -> ExperimentRecord:
        created_at = at(created)
        completed_at = at(completed) if completed is not None else None
        instants = [created_at, *(at(d) for d in logs)]
        if completed_at is not None:
            instants.append(completed_at)
        fields = {
            "title": title,
            "category": category,
            "status": ExperimentStatus.COMPLETED if completed_at else ExperimentStatus.ACTIVE,
            "created_at": created_at,
            "updated_at": at(updated) if updated is not None else max(instants),
            "completed_at": completed_at,
            "logs": [DailyLogEntry(date=d, note=f"note {d.isoformat()}") for d in logs],
        }
        if record_id is not None:
            fields["id"] = record_id
        return ExperimentRecord(**fields)

    return _make
