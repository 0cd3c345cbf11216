"""Alembic migration environment for the lifelab record store."""

from __future__ import annotations

from logging.config import fileConfig
from typing import Any

from alembic import context
from lifelab.db.engine import IN_MEMORY, create_db_engine, sqlite_url
from lifelab.db.orm import Base

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)


def _database_path() -> str:
    """Filesystem path named by ``sqlalchemy.url``, else the configured data dir."""
    url = config.get_main_option("sqlalchemy.url")
    if not url:
        from lifelab.config import Settings

        return str(Settings().db_path)
    if url == "sqlite://":
        return IN_MEMORY
    # sqlite:///relative/path or sqlite:////absolute/path
    return url.removeprefix("sqlite:///")


def _migrate(**options: Any) -> None:
    # SQLite has no ALTER COLUMN; batch mode rebuilds the table instead.
    context.configure(target_metadata=Base.metadata, render_as_batch=True, **options)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_offline() -> None:
    _migrate(
        url=sqlite_url(_database_path()),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )


def run_migrations_online() -> None:
    engine = create_db_engine(_database_path())
    try:
        with engine.connect() as connection:
            _migrate(connection=connection)
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
