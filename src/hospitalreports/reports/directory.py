"""Cross-entity directory reports and the appointment summary view."""

from __future__ import annotations

from hospitalreports.core.models import ReportDefinition
from hospitalreports.core.types import ReportCategory


ALL_UNIQUE_EMAILS = ReportDefinition(
    name="all_unique_emails",
    title="Every distinct patient and doctor email",
    category=ReportCategory.DIRECTORY,
    columns=("email",),
    sql="""
SELECT email FROM patients
UNION
SELECT email FROM doctors
ORDER BY email
""",
)

APPOINTMENT_SUMMARY = ReportDefinition(
    name="appointment_summary",
    title="Appointment summary view",
    category=ReportCategory.DIRECTORY,
    columns=("appointment_id", "patient", "doctor", "appointment_date", "reason_for_visit"),
    sql="""
SELECT appointment_id, patient, doctor, appointment_date, reason_for_visit
FROM appointment_summary
WHERE :since IS NULL OR appointment_date > :since
ORDER BY appointment_date, appointment_id
""",
    defaults={"since": None},
    notes="Reads the appointment_summary view, which the store must provide.",
)

REPORTS = (
    ALL_UNIQUE_EMAILS,
    APPOINTMENT_SUMMARY,
)
