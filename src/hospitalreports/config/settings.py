"""Application settings and configuration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseModel):
    """Hospital store configuration."""

    path: Path = Path("hospital.db")
    timeout_seconds: float | None = Field(default=30.0, gt=0)


class ReportSettings(BaseModel):
    """Report rendering configuration."""

    max_display_rows: int = Field(default=50, ge=1)
    output_dir: Path = Path("reports")


class Settings(BaseSettings):
    """Application configuration.

    Settings are loaded from environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    # Store Configuration
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)

    # Report Configuration
    reports: ReportSettings = Field(default_factory=ReportSettings)

    # Logging
    log_level: str = "INFO"

    def __init__(self, **data: Any) -> None:
        """Initialize settings with environment variable overrides."""
        super().__init__(**data)
        self._load_env_overrides()

    def _load_env_overrides(self) -> None:
        """Load environment variable overrides for nested settings."""
        # Store overrides
        if path := os.getenv("HOSPITAL_DB_PATH"):
            self.database.path = Path(path)
        if timeout := os.getenv("REPORT_TIMEOUT_SECONDS"):
            self.database.timeout_seconds = float(timeout) if float(timeout) > 0 else None

        # Report overrides
        if rows := os.getenv("REPORT_MAX_DISPLAY_ROWS"):
            self.reports.max_display_rows = int(rows)
        if output_dir := os.getenv("REPORT_OUTPUT_DIR"):
            self.reports.output_dir = Path(output_dir)
