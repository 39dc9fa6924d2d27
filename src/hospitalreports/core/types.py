"""Core type definitions and enums."""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeAlias


# Type aliases for clarity
Row: TypeAlias = dict[str, Any]
SQLParams: TypeAlias = dict[str, Any]


class AppointmentStatus(str, Enum):
    """Lifecycle states of an appointment."""

    SCHEDULED = "Scheduled"
    CANCELLED = "Cancelled"
    COMPLETED = "Completed"
    NO_SHOW = "No-Show"


class PaymentStatus(str, Enum):
    """Payment states of a bill."""

    PAID = "Paid"
    UNPAID = "Unpaid"
    PENDING = "Pending"


class Gender(str, Enum):
    """Patient gender codes as stored in the patients table."""

    MALE = "M"
    FEMALE = "F"
    OTHER = "O"


class AgeGroup(str, Enum):
    """Age buckets used by the demographics report."""

    CHILD = "Child"
    ADULT = "Adult"
    SENIOR = "Senior"


class ReportCategory(str, Enum):
    """Sections of the report catalog."""

    APPOINTMENTS = "appointments"
    PATIENTS = "patients"
    BILLING = "billing"
    DOCTORS = "doctors"
    TREATMENTS = "treatments"
    DIRECTORY = "directory"


class OutputFormat(str, Enum):
    """Rendering targets for a report result."""

    TABLE = "table"
    JSON = "json"
    HTML = "html"
