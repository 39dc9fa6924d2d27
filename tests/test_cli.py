"""Tests for the command-line interface."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from hospitalreports.cli import main, parse_param_pairs
from hospitalreports.core.errors import InvalidParameterError


if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def store(tmp_path: Path) -> str:
    path = tmp_path / "cli.db"
    main(["--db", str(path), "init"])
    return str(path)


def test_parse_param_pairs() -> None:
    assert parse_param_pairs(["limit=3", "min-appointments = 2"]) == {
        "limit": "3",
        "min_appointments": "2",
    }
    assert parse_param_pairs(None) == {}
    with pytest.raises(InvalidParameterError):
        parse_param_pairs(["limit"])


def test_no_command_prints_help() -> None:
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 0


def test_run_json_output(store: str, tmp_path: Path) -> None:
    output = tmp_path / "revenue.json"
    main(["--db", store, "run", "total_revenue", "--format", "json", "--output", str(output)])
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["report"] == "total_revenue"
    assert payload["rows"][0]["total_revenue"] == pytest.approx(13814.88)


def test_run_with_parameters(store: str, tmp_path: Path) -> None:
    output = tmp_path / "frequent.json"
    main([
        "--db", store, "run", "frequent_patients",
        "-p", "min_appointments=1", "-f", "json", "-o", str(output),
    ])
    rows = json.loads(output.read_text(encoding="utf-8"))["rows"]
    assert rows[0] == {"patient_id": 1, "first_name": "David", "total_appointments": 4}
    assert [r["patient_id"] for r in rows] == [1, 2]


def test_run_html_output(store: str, tmp_path: Path) -> None:
    output = tmp_path / "rank.html"
    main(["--db", store, "run", "billing_rank", "-f", "html", "-o", str(output)])
    assert "Patients ranked by total billing" in output.read_text(encoding="utf-8")


def test_run_table_output(store: str, capsys: pytest.CaptureFixture[str]) -> None:
    main(["--db", store, "run", "doctors_by_specialization"])
    out = capsys.readouterr().out
    assert "Dermatology" in out
    assert "Pediatrics" in out


def test_invalid_parameter_exits_with_error(store: str) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--db", store, "run", "frequent_patients", "-p", "min_appointments=-1"])
    assert exc_info.value.code == 1


def test_unknown_report_exits_with_error(store: str) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--db", store, "run", "bed_occupancy"])
    assert exc_info.value.code == 1


def test_missing_store_exits_with_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--db", str(tmp_path / "missing.db"), "run", "total_revenue"])
    assert exc_info.value.code == 1


def test_sql_command(capsys: pytest.CaptureFixture[str]) -> None:
    main(["sql", "top_visit_reasons"])
    assert "GROUP BY" in capsys.readouterr().out


def test_sql_command_limited(capsys: pytest.CaptureFixture[str]) -> None:
    main(["sql", "appointment_details", "--limited"])
    assert "LIMIT" in capsys.readouterr().out


def test_oversized_window_exits_with_error(store: str, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--db", store, "run", "recent_appointments", "-p", "window_days=1000000"])
    assert exc_info.value.code == 1
    assert "Unexpected error" not in capsys.readouterr().out


def test_list_and_stats(store: str, capsys: pytest.CaptureFixture[str]) -> None:
    main(["--db", store, "list", "--category", "billing"])
    main(["--db", store, "stats"])
    out = capsys.readouterr().out
    assert "total_revenue" in out
    assert "appointments" in out
