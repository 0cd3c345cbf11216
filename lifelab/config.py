"""Application configuration via pydantic-settings."""

from __future__ import annotations

from datetime import tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Data directory
    data_dir: Path = Path("./data")

    # Seed category catalog (JSON); unset means no catalog
    catalog_path: Path | None = None

    # IANA zone name used for day boundaries; empty means system local time
    timezone: str = ""

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"

    @property
    def db_path(self) -> Path:
        return self.data_dir / "lifelab.db"

    @property
    def tzinfo(self) -> tzinfo | None:
        return ZoneInfo(self.timezone) if self.timezone else None

    def ensure_data_dir(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
