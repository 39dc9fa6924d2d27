"""Doctor workload and revenue reports."""

from __future__ import annotations

from hospitalreports.core.models import ReportDefinition
from hospitalreports.core.types import ReportCategory


EXPERIENCED_DOCTORS = ReportDefinition(
    name="experienced_doctors",
    title="Doctors with at least a number of years of service",
    category=ReportCategory.DOCTORS,
    columns=("first_name", "last_name", "specialization", "years_experience"),
    sql="""
SELECT
    first_name,
    last_name,
    specialization,
    years_experience
FROM doctors
WHERE years_experience >= :min_years
ORDER BY years_experience DESC, doctor_id
""",
    defaults={"min_years": 20},
)

APPOINTMENTS_PER_DOCTOR = ReportDefinition(
    name="appointments_per_doctor",
    title="Appointments handled by each doctor",
    category=ReportCategory.DOCTORS,
    columns=("first_name", "num_appointments"),
    sql="""
SELECT
    d.first_name,
    COUNT(a.appointment_id) AS num_appointments
FROM doctors d
JOIN appointments a ON d.doctor_id = a.doctor_id
GROUP BY d.doctor_id, d.first_name
ORDER BY num_appointments DESC, d.doctor_id
""",
)

DOCTORS_BY_SPECIALIZATION = ReportDefinition(
    name="doctors_by_specialization",
    title="Doctors per specialization",
    category=ReportCategory.DOCTORS,
    columns=("specialization", "num_doctors"),
    sql="""
SELECT
    specialization,
    COUNT(*) AS num_doctors
FROM doctors
GROUP BY specialization
ORDER BY num_doctors DESC, specialization
""",
)

# Bills are joined on patient_id, not on the appointment. A paid bill counts
# once for every appointment its patient had, so a patient seen by several
# doctors contributes to each of their specializations.
REVENUE_BY_SPECIALIZATION = ReportDefinition(
    name="revenue_by_specialization",
    title="Paid revenue attributed to each specialization",
    category=ReportCategory.DOCTORS,
    columns=("specialization", "total_revenue"),
    sql="""
SELECT
    d.specialization,
    ROUND(SUM(b.amount), 2) AS total_revenue
FROM appointments a
JOIN doctors d ON a.doctor_id = d.doctor_id
JOIN billing b ON a.patient_id = b.patient_id
WHERE b.payment_status = :paid_status
GROUP BY d.specialization
ORDER BY total_revenue DESC, d.specialization
""",
    notes=(
        "Bills are attributed through the patient, so revenue is repeated per appointment "
        "and across specializations that saw the same patient."
    ),
)

REPORTS = (
    EXPERIENCED_DOCTORS,
    APPOINTMENTS_PER_DOCTOR,
    DOCTORS_BY_SPECIALIZATION,
    REVENUE_BY_SPECIALIZATION,
)
