"""hospital-reports - Analytical reporting over a hospital database.

This package provides a read-only report catalog for:
- Appointment insights
- Patient demographics and data quality
- Billing and revenue
- Doctor workload
- Treatment analytics
"""

from __future__ import annotations

from hospitalreports.config.settings import Settings
from hospitalreports.core.errors import (
    DataAccessError,
    InvalidParameterError,
    QueryTimeoutError,
    ReportError,
)
from hospitalreports.core.models import ReportDefinition, ReportParameters, ReportResult
from hospitalreports.reports.catalog import ReportCatalog
from hospitalreports.storage.hospital_db import HospitalDatabase


__version__ = "0.1.0"

__all__ = [
    "DataAccessError",
    "HospitalDatabase",
    "InvalidParameterError",
    "QueryTimeoutError",
    "ReportCatalog",
    "ReportDefinition",
    "ReportError",
    "ReportParameters",
    "ReportResult",
    "Settings",
]
