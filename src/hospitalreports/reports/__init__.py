"""Reports module - The catalog of hospital reports."""

from __future__ import annotations

from hospitalreports.reports.catalog import ALL_REPORTS, ReportCatalog, build_parameters
from hospitalreports.reports.sql import format_sql, validate_definition


__all__ = [
    "ALL_REPORTS",
    "ReportCatalog",
    "build_parameters",
    "format_sql",
    "validate_definition",
]
