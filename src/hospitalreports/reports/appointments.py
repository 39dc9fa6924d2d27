"""Appointment insight reports."""

from __future__ import annotations

from hospitalreports.core.models import ReportDefinition
from hospitalreports.core.types import AppointmentStatus, Gender, ReportCategory


_DETAILS_SELECT = """
SELECT
    a.appointment_id,
    p.first_name AS patient_name,
    d.first_name AS doctor_name,
    a.appointment_date,
    a.reason_for_visit
FROM appointments a
JOIN patients p ON a.patient_id = p.patient_id
JOIN doctors d ON a.doctor_id = d.doctor_id
"""

_APPOINTMENT_COLUMNS = (
    "appointment_id", "patient_id", "doctor_id", "appointment_date", "reason_for_visit", "status",
)

APPOINTMENT_DETAILS = ReportDefinition(
    name="appointment_details",
    title="Appointments with patient and doctor names",
    category=ReportCategory.APPOINTMENTS,
    columns=("appointment_id", "patient_name", "doctor_name", "appointment_date", "reason_for_visit"),
    sql=_DETAILS_SELECT + "ORDER BY a.appointment_date",
    limited_sql=_DETAILS_SELECT + "LIMIT :limit",
    defaults={"limit": None},
    notes="Ordered by date when complete; a limited run returns an unordered sample.",
)

APPOINTMENTS_BY_GENDER = ReportDefinition(
    name="appointments_by_gender",
    title="Appointments for patients of one gender",
    category=ReportCategory.APPOINTMENTS,
    columns=("appointment_id", "first_name", "gender", "appointment_date"),
    sql="""
SELECT
    a.appointment_id, p.first_name, p.gender, a.appointment_date
FROM appointments a
JOIN patients p ON a.patient_id = p.patient_id
WHERE p.gender = :gender
ORDER BY a.appointment_date, a.appointment_id
""",
    defaults={"gender": Gender.MALE},
)

RECENT_APPOINTMENTS = ReportDefinition(
    name="recent_appointments",
    title="Appointments within a trailing window",
    category=ReportCategory.APPOINTMENTS,
    columns=("appointment_id", "appointment_date", "status"),
    sql="""
SELECT
    appointment_id,
    appointment_date,
    status
FROM appointments
WHERE appointment_date >= :cutoff
ORDER BY appointment_date, appointment_id
""",
    defaults={"window_days": 730},
)

APPOINTMENTS_BY_STATUS = ReportDefinition(
    name="appointments_by_status",
    title="Appointments in one status",
    category=ReportCategory.APPOINTMENTS,
    columns=_APPOINTMENT_COLUMNS,
    sql=f"""
SELECT {", ".join(_APPOINTMENT_COLUMNS)}
FROM appointments
WHERE status = :status
ORDER BY appointment_date, appointment_id
""",
    defaults={"status": AppointmentStatus.CANCELLED},
)

APPOINTMENT_STATUS_RATE = ReportDefinition(
    name="appointment_status_rate",
    title="Share of appointments by status",
    category=ReportCategory.APPOINTMENTS,
    columns=("status", "count", "percentage"),
    sql="""
SELECT
    status,
    COUNT(*) AS count,
    ROUND(COUNT(*) * 100.0 / NULLIF((SELECT COUNT(*) FROM appointments), 0), 2) AS percentage
FROM appointments
GROUP BY status
ORDER BY count DESC, status
""",
    notes="The denominator is a scalar subquery over every appointment, issued per run.",
)

LATEST_APPOINTMENT_PER_PATIENT = ReportDefinition(
    name="latest_appointment_per_patient",
    title="Most recent appointment of each patient",
    category=ReportCategory.APPOINTMENTS,
    columns=("patient_id", "last_appointment"),
    sql="""
SELECT
    a.patient_id,
    MAX(a.appointment_date) AS last_appointment
FROM appointments a
GROUP BY a.patient_id
ORDER BY a.patient_id
""",
)

APPOINTMENTS_IN_MONTH = ReportDefinition(
    name="appointments_in_month",
    title="Appointments in one calendar month",
    category=ReportCategory.APPOINTMENTS,
    columns=_APPOINTMENT_COLUMNS,
    sql=f"""
SELECT {", ".join(_APPOINTMENT_COLUMNS)}
FROM appointments
WHERE CAST(strftime('%m', appointment_date) AS INTEGER) = :month
  AND CAST(strftime('%Y', appointment_date) AS INTEGER) = :year
ORDER BY appointment_date, appointment_id
""",
    defaults={"year": 2023, "month": 12},
)

TOP_VISIT_REASONS = ReportDefinition(
    name="top_visit_reasons",
    title="Most common reasons for a visit",
    category=ReportCategory.APPOINTMENTS,
    columns=("reason_for_visit", "total_visits"),
    sql="""
SELECT
    reason_for_visit,
    COUNT(*) AS total_visits
FROM appointments
GROUP BY reason_for_visit
ORDER BY total_visits DESC, reason_for_visit
LIMIT :limit
""",
    defaults={"limit": 5},
)

REPORTS = (
    APPOINTMENT_DETAILS,
    APPOINTMENTS_BY_GENDER,
    RECENT_APPOINTMENTS,
    APPOINTMENTS_BY_STATUS,
    APPOINTMENT_STATUS_RATE,
    LATEST_APPOINTMENT_PER_PATIENT,
    APPOINTMENTS_IN_MONTH,
    TOP_VISIT_REASONS,
)
