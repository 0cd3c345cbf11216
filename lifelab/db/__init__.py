"""Database package — engine, ORM models, and CRUD facade."""

from lifelab.db.engine import create_db_engine, create_session_factory
from lifelab.db.facade import Database
from lifelab.db.orm import Base, DailyLogRow, ExperimentRow

__all__ = [
    "Base",
    "DailyLogRow",
    "Database",
    "ExperimentRow",
    "create_db_engine",
    "create_session_factory",
]
