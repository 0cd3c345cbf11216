"""SQLAlchemy ORM models mapping to the lifelab database tables."""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    ForeignKey,
    Index,
    Integer,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class ExperimentRow(Base):
    __tablename__ = "experiments"

    pk: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    record_id: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    subcategory: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    status: Mapped[str] = mapped_column(Text, nullable=False, default="active")

    # ISO-8601 timestamps
    created_at: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[str] = mapped_column(Text, nullable=False)
    completed_at: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    review_json: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    logs: Mapped[list[DailyLogRow]] = relationship(
        back_populates="experiment",
        cascade="all, delete-orphan",
        order_by="DailyLogRow.pk",
    )

    __table_args__ = (
        CheckConstraint("status IN ('active', 'completed')", name="ck_experiments_status"),
    )


class DailyLogRow(Base):
    __tablename__ = "daily_logs"

    pk: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    entry_id: Mapped[str] = mapped_column(Text, nullable=False)
    experiment_pk: Mapped[int] = mapped_column(
        Integer, ForeignKey("experiments.pk", ondelete="CASCADE"), nullable=False
    )
    date: Mapped[str] = mapped_column(Text, nullable=False)
    note: Mapped[str] = mapped_column(Text, nullable=False, default="")
    mood: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    experiment: Mapped[ExperimentRow] = relationship(back_populates="logs")

    __table_args__ = (
        UniqueConstraint("experiment_pk", "date", name="uq_daily_logs_experiment_date"),
        Index("idx_daily_logs_experiment", "experiment_pk"),
    )
