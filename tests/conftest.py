"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import sqlite3
from datetime import date
from typing import TYPE_CHECKING, Any

import pytest

from hospitalreports.config.schema import SCHEMA_TABLES
from hospitalreports.reports.catalog import ReportCatalog
from hospitalreports.storage.hospital_db import HospitalDatabase


if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

TODAY = date(2026, 6, 15)

_REQUIRED_DEFAULTS: dict[str, dict[str, Any]] = {
    "patients": {"first_name": "First", "last_name": "Last"},
    "doctors": {"first_name": "Doc", "last_name": "Tor"},
    "appointments": {"appointment_date": "2024-01-01", "doctor_id": 1},
    "treatments": {"treatment_type": "Checkup"},
    "billing": {},
}


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path of an initialized, empty hospital store."""
    path = tmp_path / "hospital.db"
    HospitalDatabase(path).initialize()
    return path


@pytest.fixture
def hospital_db(db_path: Path) -> HospitalDatabase:
    return HospitalDatabase(db_path)


@pytest.fixture
def seed(db_path: Path) -> Callable[[str, list[dict[str, Any]]], None]:
    """Insert rows into a table, filling unspecified columns with defaults or NULL."""

    def _seed(table: str, rows: list[dict[str, Any]]) -> None:
        columns = SCHEMA_TABLES[table]
        values = [
            tuple({**_REQUIRED_DEFAULTS[table], **row}.get(col) for col in columns) for row in rows
        ]
        conn = sqlite3.connect(db_path)
        try:
            conn.executemany(
                f"INSERT INTO {table} ({', '.join(columns)}) "
                f"VALUES ({', '.join('?' * len(columns))})",
                values,
            )
            conn.commit()
        finally:
            conn.close()

    return _seed


@pytest.fixture
def catalog(hospital_db: HospitalDatabase) -> ReportCatalog:
    """Catalog over the empty store with a fixed clock."""
    return ReportCatalog(hospital_db, clock=lambda: TODAY)


@pytest.fixture
def sample_db(tmp_path: Path) -> HospitalDatabase:
    """Store loaded with the bundled sample data."""
    db = HospitalDatabase(tmp_path / "sample.db")
    db.initialize(load_sample=True)
    return db


@pytest.fixture
def today() -> date:
    """The date the catalog fixture treats as the current date."""
    return TODAY
