"""Tests for the hospital store."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

import pytest

from hospitalreports.core.errors import DataAccessError, QueryTimeoutError
from hospitalreports.storage.hospital_db import HospitalDatabase


if TYPE_CHECKING:
    from pathlib import Path

SLOW_QUERY = """
WITH RECURSIVE counter(x) AS (
    SELECT 1 UNION ALL SELECT x + 1 FROM counter WHERE x < 10000000000
)
SELECT COUNT(*) AS n FROM counter
"""


def test_execute_returns_columns_and_rows(hospital_db: HospitalDatabase, seed) -> None:
    seed("treatments", [{"treatment_id": 1, "treatment_type": "MRI", "cost": 100}])
    columns, rows = hospital_db.execute(
        "SELECT treatment_id, treatment_type FROM treatments WHERE cost > :min_cost",
        {"min_cost": 50},
    )
    assert columns == ["treatment_id", "treatment_type"]
    assert rows == [{"treatment_id": 1, "treatment_type": "MRI"}]


def test_connections_are_read_only(hospital_db: HospitalDatabase) -> None:
    with pytest.raises(DataAccessError, match="readonly"):
        hospital_db.execute("INSERT INTO treatments (treatment_type, cost) VALUES ('X', 1)")


def test_missing_store_raises_data_access_error(tmp_path: Path) -> None:
    db = HospitalDatabase(tmp_path / "absent.db")
    with pytest.raises(DataAccessError):
        db.execute("SELECT 1")
    assert not (tmp_path / "absent.db").exists()


def test_unknown_table_raises_data_access_error(hospital_db: HospitalDatabase) -> None:
    with pytest.raises(DataAccessError, match="no such table"):
        hospital_db.execute("SELECT * FROM wards")


def test_timeout_aborts_query(hospital_db: HospitalDatabase) -> None:
    with pytest.raises(QueryTimeoutError):
        hospital_db.execute(SLOW_QUERY, timeout=0.05)


def test_default_timeout_applies(db_path: Path) -> None:
    db = HospitalDatabase(db_path, timeout=0.05)
    with pytest.raises(QueryTimeoutError):
        db.execute(SLOW_QUERY)


def test_cancel_event_aborts_in_flight_query(hospital_db: HospitalDatabase) -> None:
    cancel = threading.Event()
    timer = threading.Timer(0.05, cancel.set)
    timer.start()
    try:
        with pytest.raises(QueryTimeoutError):
            hospital_db.execute(SLOW_QUERY, timeout=30, cancel_event=cancel)
    finally:
        timer.cancel()


def test_already_cancelled_query_is_never_issued(tmp_path: Path) -> None:
    cancel = threading.Event()
    cancel.set()
    db = HospitalDatabase(tmp_path / "absent.db")
    with pytest.raises(QueryTimeoutError, match="before it was issued"):
        db.execute("SELECT 1", cancel_event=cancel)


def test_timeout_is_a_data_access_error() -> None:
    assert issubclass(QueryTimeoutError, DataAccessError)


def test_connection_usable_after_timeout(hospital_db: HospitalDatabase) -> None:
    with pytest.raises(QueryTimeoutError):
        hospital_db.execute(SLOW_QUERY, timeout=0.05)
    _, rows = hospital_db.execute("SELECT 1 AS one")
    assert rows == [{"one": 1}]


def test_initialize_creates_view(hospital_db: HospitalDatabase) -> None:
    _, rows = hospital_db.execute(
        "SELECT name FROM sqlite_master WHERE type = 'view' AND name = 'appointment_summary'"
    )
    assert rows == [{"name": "appointment_summary"}]


def test_sample_data_and_stats(sample_db: HospitalDatabase) -> None:
    stats = sample_db.get_stats()
    assert stats == {
        "patients": 8,
        "doctors": 5,
        "appointments": 12,
        "billing": 9,
        "treatments": 7,
    }


def test_sample_data_loads_once(sample_db: HospitalDatabase) -> None:
    sample_db.load_sample_data()
    assert sample_db.get_stats()["patients"] == 8
