"""SQLAlchemy-backed record store; the snapshot provider for the analytics engine."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING

import structlog
from sqlalchemy import select, text

from lifelab.db.engine import create_db_engine, create_session_factory
from lifelab.db.orm import Base, DailyLogRow, ExperimentRow
from lifelab.models.experiment import (
    DailyLogEntry,
    ExperimentRecord,
    ExperimentStatus,
    Mood,
    Review,
)

if TYPE_CHECKING:
    from pathlib import Path

    from sqlalchemy import Engine
    from sqlalchemy.orm import Session, sessionmaker

logger = structlog.get_logger()


class Database:
    """SQLAlchemy-backed wrapper with CRUD helpers for experiment records."""

    def __init__(self, db_path: str | Path = ":memory:"):
        self.db_path = str(db_path)
        self._engine: Engine = create_db_engine(self.db_path)
        self._session_factory: sessionmaker[Session] = create_session_factory(self._engine)

    @property
    def engine(self) -> Engine:
        """Expose the SQLAlchemy engine for inspection and advanced use."""
        return self._engine

    def init_schema(self) -> None:
        """Create all tables via ORM metadata."""
        Base.metadata.create_all(self._engine)

    def close(self) -> None:
        self._engine.dispose()

    def check_connection(self) -> bool:
        """Verify the database is reachable. Returns True or raises."""
        with self._session_factory() as session:
            session.execute(text("SELECT 1"))
        return True

    # --- Records ---

    def save_record(self, record: ExperimentRecord) -> ExperimentRecord:
        """Insert *record*, or overwrite the stored copy with the same id."""
        with self._session_factory() as session:
            row = self._get_row(session, record.id)
            if row is None:
                row = ExperimentRow(record_id=record.id)
                session.add(row)
            row.title = record.title
            row.category = record.category
            row.subcategory = record.subcategory
            row.status = record.status.value
            row.created_at = record.created_at.isoformat()
            row.updated_at = record.updated_at.isoformat()
            row.completed_at = record.completed_at.isoformat() if record.completed_at else None
            row.review_json = record.review.model_dump_json() if record.review else None
            self._sync_logs(row, record.logs)
            session.commit()
        logger.debug("Record saved", record_id=record.id, logs=len(record.logs))
        return record

    def get_record(self, record_id: str) -> ExperimentRecord | None:
        with self._session_factory() as session:
            row = self._get_row(session, record_id)
            if row is None:
                return None
            return self._row_to_record(row)

    def list_records(self, status: ExperimentStatus | None = None) -> list[ExperimentRecord]:
        with self._session_factory() as session:
            stmt = select(ExperimentRow).order_by(ExperimentRow.pk)
            if status:
                stmt = stmt.where(ExperimentRow.status == status.value)
            rows = session.scalars(stmt).all()
            return [self._row_to_record(r) for r in rows]

    def delete_record(self, record_id: str) -> bool:
        with self._session_factory() as session:
            row = self._get_row(session, record_id)
            if row is None:
                return False
            session.delete(row)
            session.commit()
        logger.info("Record deleted", record_id=record_id)
        return True

    def snapshot(self) -> list[ExperimentRecord]:
        """Current records in insertion order."""
        return self.list_records()

    # --- Helpers ---

    @staticmethod
    def _get_row(session: Session, record_id: str) -> ExperimentRow | None:
        stmt = select(ExperimentRow).where(ExperimentRow.record_id == record_id)
        return session.scalars(stmt).first()

    @staticmethod
    def _sync_logs(row: ExperimentRow, logs: list[DailyLogEntry]) -> None:
        # Match on date so the (experiment, date) unique constraint holds mid-flush.
        existing = {log_row.date: log_row for log_row in row.logs}
        wanted = {entry.date.isoformat() for entry in logs}
        for day, log_row in existing.items():
            if day not in wanted:
                row.logs.remove(log_row)
        for entry in logs:
            day = entry.date.isoformat()
            log_row = existing.get(day)
            if log_row is None:
                log_row = DailyLogRow(date=day)
                row.logs.append(log_row)
            log_row.entry_id = entry.id
            log_row.note = entry.note
            log_row.mood = entry.mood.value if entry.mood else None

    @staticmethod
    def _parse_dt_opt(value: str | None) -> datetime | None:
        if value is None:
            return None
        return datetime.fromisoformat(value)

    @staticmethod
    def _row_to_record(row: ExperimentRow) -> ExperimentRecord:
        return ExperimentRecord(
            id=row.record_id,
            title=row.title,
            category=row.category,
            subcategory=row.subcategory,
            status=ExperimentStatus(row.status),
            created_at=datetime.fromisoformat(row.created_at),
            updated_at=datetime.fromisoformat(row.updated_at),
            completed_at=Database._parse_dt_opt(row.completed_at),
            logs=[
                DailyLogEntry(
                    id=log_row.entry_id,
                    date=date.fromisoformat(log_row.date),
                    note=log_row.note,
                    mood=Mood(log_row.mood) if log_row.mood else None,
                )
                for log_row in sorted(row.logs, key=lambda r: r.date)
            ],
            review=Review.model_validate_json(row.review_json) if row.review_json else None,
        )
