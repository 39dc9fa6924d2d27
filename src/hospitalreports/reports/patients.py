"""Patient demographics and data quality reports."""

from __future__ import annotations

from hospitalreports.core.models import ReportDefinition
from hospitalreports.core.types import ReportCategory


PATIENT_COLUMNS = (
    "patient_id", "first_name", "last_name", "gender", "date_of_birth",
    "email", "insurance_provider", "insurance_number",
)

# Whole years between date_of_birth and :today
_AGE_EXPR = """(
        CAST(strftime('%Y', :today) AS INTEGER) - CAST(strftime('%Y', date_of_birth) AS INTEGER)
        - (strftime('%m-%d', :today) < strftime('%m-%d', date_of_birth))
    )"""

PATIENT_AGE_GROUPS = ReportDefinition(
    name="patient_age_groups",
    title="Patients by age group",
    category=ReportCategory.PATIENTS,
    columns=("patient_id", "first_name", "last_name", "age", "age_group"),
    sql=f"""
SELECT
    patient_id,
    first_name,
    last_name,
    age,
    CASE
        WHEN age < 18 THEN 'Child'
        WHEN age BETWEEN 18 AND 59 THEN 'Adult'
        WHEN age >= 60 THEN 'Senior'
    END AS age_group
FROM (
    SELECT patient_id, first_name, last_name, {_AGE_EXPR} AS age
    FROM patients
)
ORDER BY patient_id
""",
    notes="Child under 18, Adult 18 to 59, Senior 60 and over.",
)

PATIENTS_MISSING_INSURANCE = ReportDefinition(
    name="patients_missing_insurance",
    title="Patients without complete insurance details",
    category=ReportCategory.PATIENTS,
    columns=PATIENT_COLUMNS,
    sql=f"""
SELECT {", ".join(PATIENT_COLUMNS)}
FROM patients
WHERE insurance_provider IS NULL OR insurance_number IS NULL
ORDER BY patient_id
""",
)

FREQUENT_PATIENTS = ReportDefinition(
    name="frequent_patients",
    title="Patients with more appointments than a threshold",
    category=ReportCategory.PATIENTS,
    columns=("patient_id", "first_name", "total_appointments"),
    sql="""
SELECT
    p.patient_id,
    p.first_name,
    COUNT(a.appointment_id) AS total_appointments
FROM patients p
JOIN appointments a ON p.patient_id = a.patient_id
GROUP BY p.patient_id, p.first_name
HAVING COUNT(a.appointment_id) > :min_appointments
ORDER BY total_appointments DESC, p.patient_id
""",
    defaults={"min_appointments": 3},
    notes="Strictly more than the threshold.",
)

DUPLICATE_PATIENT_EMAILS = ReportDefinition(
    name="duplicate_patient_emails",
    title="Email addresses shared by several patients",
    category=ReportCategory.PATIENTS,
    columns=("email", "count"),
    sql="""
SELECT email, COUNT(*) AS count
FROM patients
WHERE email IS NOT NULL
GROUP BY email
HAVING COUNT(*) > 1
ORDER BY count DESC, email
""",
)

REPORTS = (
    PATIENT_AGE_GROUPS,
    PATIENTS_MISSING_INSURANCE,
    FREQUENT_PATIENTS,
    DUPLICATE_PATIENT_EMAILS,
)
