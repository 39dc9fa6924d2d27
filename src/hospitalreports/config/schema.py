"""Hospital database schema definition.

This is the reference layout of the external store the reports are written
against. The reporting layer never migrates it; the DDL is only used to
initialize demo stores and to check report SQL against known tables.
"""

from __future__ import annotations


HOSPITAL_SCHEMA = """
CREATE TABLE IF NOT EXISTS patients (
    patient_id INTEGER PRIMARY KEY,
    first_name TEXT NOT NULL,
    last_name TEXT NOT NULL,
    gender TEXT,
    date_of_birth DATE,
    email TEXT,
    insurance_provider TEXT,
    insurance_number TEXT
);

CREATE TABLE IF NOT EXISTS doctors (
    doctor_id INTEGER PRIMARY KEY,
    first_name TEXT NOT NULL,
    last_name TEXT NOT NULL,
    specialization TEXT,
    years_experience INTEGER,
    email TEXT
);

CREATE TABLE IF NOT EXISTS appointments (
    appointment_id INTEGER PRIMARY KEY,
    patient_id INTEGER NOT NULL,
    doctor_id INTEGER NOT NULL,
    appointment_date DATE NOT NULL,
    reason_for_visit TEXT,
    status TEXT,
    FOREIGN KEY (patient_id) REFERENCES patients(patient_id),
    FOREIGN KEY (doctor_id) REFERENCES doctors(doctor_id)
);

CREATE TABLE IF NOT EXISTS treatments (
    treatment_id INTEGER PRIMARY KEY,
    treatment_type TEXT NOT NULL,
    cost DECIMAL(10, 2)
);

CREATE TABLE IF NOT EXISTS billing (
    bill_id INTEGER PRIMARY KEY,
    patient_id INTEGER NOT NULL,
    treatment_id INTEGER,
    amount DECIMAL(10, 2),
    payment_status TEXT,
    payment_method TEXT,
    FOREIGN KEY (patient_id) REFERENCES patients(patient_id),
    FOREIGN KEY (treatment_id) REFERENCES treatments(treatment_id)
);

CREATE INDEX IF NOT EXISTS idx_appointments_patient ON appointments(patient_id);
CREATE INDEX IF NOT EXISTS idx_appointments_doctor ON appointments(doctor_id);
CREATE INDEX IF NOT EXISTS idx_billing_patient ON billing(patient_id);
"""

APPOINTMENT_SUMMARY_VIEW = """
CREATE VIEW IF NOT EXISTS appointment_summary AS
SELECT
    a.appointment_id,
    p.first_name AS patient,
    d.first_name AS doctor,
    a.appointment_date,
    a.reason_for_visit
FROM appointments a
JOIN patients p ON a.patient_id = p.patient_id
JOIN doctors d ON a.doctor_id = d.doctor_id;
"""

# Relations a report may reference, with their columns.
SCHEMA_TABLES: dict[str, tuple[str, ...]] = {
    "patients": (
        "patient_id", "first_name", "last_name", "gender", "date_of_birth",
        "email", "insurance_provider", "insurance_number",
    ),
    "doctors": (
        "doctor_id", "first_name", "last_name", "specialization", "years_experience", "email",
    ),
    "appointments": (
        "appointment_id", "patient_id", "doctor_id", "appointment_date",
        "reason_for_visit", "status",
    ),
    "billing": (
        "bill_id", "patient_id", "treatment_id", "amount", "payment_status", "payment_method",
    ),
    "treatments": ("treatment_id", "treatment_type", "cost"),
    "appointment_summary": (
        "appointment_id", "patient", "doctor", "appointment_date", "reason_for_visit",
    ),
}
