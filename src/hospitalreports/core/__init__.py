"""Core module - Shared models, types and errors."""

from __future__ import annotations

from hospitalreports.core.errors import (
    DataAccessError,
    InvalidParameterError,
    QueryTimeoutError,
    ReportError,
)
from hospitalreports.core.models import ReportDefinition, ReportParameters, ReportResult
from hospitalreports.core.types import (
    AgeGroup,
    AppointmentStatus,
    Gender,
    OutputFormat,
    PaymentStatus,
    ReportCategory,
)


__all__ = [
    # Types
    "AgeGroup",
    "AppointmentStatus",
    # Errors
    "DataAccessError",
    "Gender",
    "InvalidParameterError",
    "OutputFormat",
    "PaymentStatus",
    "QueryTimeoutError",
    "ReportCategory",
    # Models
    "ReportDefinition",
    "ReportError",
    "ReportParameters",
    "ReportResult",
]
