"""SQLite engine setup for the record store."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from pathlib import Path

    from sqlalchemy import Engine

IN_MEMORY = ":memory:"

# Daily logs only cascade with their experiment while foreign keys are on.
CONNECTION_PRAGMAS = ("foreign_keys=ON",)
# WAL needs a database file.
FILE_PRAGMAS = ("journal_mode=WAL", "synchronous=NORMAL")


def sqlite_url(db_path: str | Path) -> str:
    path = str(db_path)
    return "sqlite://" if path == IN_MEMORY else f"sqlite:///{path}"


def _pragma_hook(pragmas: Sequence[str]) -> Callable[[object, object], None]:
    def _apply(dbapi_conn: object, _connection_record: object) -> None:
        cursor = dbapi_conn.cursor()  # type: ignore[attr-defined]
        try:
            for pragma in pragmas:
                cursor.execute(f"PRAGMA {pragma}")
        finally:
            cursor.close()

    return _apply


def create_db_engine(db_path: str | Path, echo: bool = False) -> Engine:
    """Engine for the record store at *db_path*; pass ``":memory:"`` for a scratch store."""
    pragmas = CONNECTION_PRAGMAS
    if str(db_path) != IN_MEMORY:
        pragmas = FILE_PRAGMAS + pragmas

    engine = create_engine(sqlite_url(db_path), echo=echo, connect_args={"timeout": 30.0})
    event.listen(engine, "connect", _pragma_hook(pragmas))
    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False)
