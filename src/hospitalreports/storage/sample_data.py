"""Sample hospital rows for demo stores."""

from __future__ import annotations

from typing import Any


SAMPLE_ROWS: dict[str, list[tuple[Any, ...]]] = {
    "patients": [
        (1, "David", "Williams", "M", "1955-06-04", "david.williams@mail.com", "WellnessCorp", "INS840674"),
        (2, "Emily", "Smith", "F", "1984-10-12", "emily.smith@mail.com", "PulseSecure", "INS354079"),
        (3, "Laura", "Jones", "F", "2011-03-08", "laura.jones@mail.com", None, None),
        (4, "Michael", "Johnson", "M", "1990-09-22", "michael.johnson@mail.com", "HealthIndia", "INS650929"),
        (5, "Alex", "Brown", "M", "1961-01-30", "alex.brown@mail.com", "MedCare Plus", None),
        (6, "Sarah", "Taylor", "F", "2007-07-15", "sarah.taylor@mail.com", "WellnessCorp", "INS123477"),
        (7, "Linda", "Davis", "F", "1948-12-01", "linda.davis@mail.com", "PulseSecure", "INS998120"),
        (8, "Emily", "Smith", "F", "1986-04-19", "emily.smith@mail.com", "HealthIndia", "INS330012"),
    ],
    "doctors": [
        (1, "David", "Taylor", "Dermatology", 17, "dr.david.taylor@hospital.com"),
        (2, "Jane", "Davis", "Pediatrics", 24, "dr.jane.davis@hospital.com"),
        (3, "Jane", "Smith", "Pediatrics", 19, "dr.jane.smith@hospital.com"),
        (4, "David", "Jones", "Oncology", 28, "dr.david.jones@hospital.com"),
        (5, "Sarah", "Taylor", "Dermatology", 26, "dr.sarah.taylor@hospital.com"),
    ],
    "appointments": [
        (1, 1, 4, "2023-08-09", "Therapy", "Scheduled"),
        (2, 2, 1, "2023-06-09", "Therapy", "No-Show"),
        (3, 3, 2, "2023-12-14", "Consultation", "Completed"),
        (4, 1, 4, "2023-12-02", "Therapy", "Completed"),
        (5, 4, 5, "2024-01-26", "Emergency", "Cancelled"),
        (6, 5, 3, "2023-04-11", "Follow-up", "Completed"),
        (7, 1, 4, "2024-03-03", "Checkup", "Completed"),
        (8, 6, 2, "2024-05-20", "Consultation", "Scheduled"),
        (9, 7, 1, "2023-02-17", "Checkup", "Cancelled"),
        (10, 1, 5, "2024-07-08", "Follow-up", "Completed"),
        (11, 2, 3, "2023-12-21", "Emergency", "Completed"),
        (12, 8, 1, "2024-09-14", "Therapy", "Scheduled"),
    ],
    "treatments": [
        (1, "Chemotherapy", 3941.97),
        (2, "MRI", 4158.44),
        (3, "ECG", 3731.55),
        (4, "Physiotherapy", 1508.13),
        (5, "X-Ray", 1711.53),
        (6, "MRI", 2875.10),
        (7, "ECG", 652.40),
    ],
    "billing": [
        (1, 1, 1, 3941.97, "Paid", "Insurance"),
        (2, 2, 2, 4158.44, "Pending", "Credit Card"),
        (3, 3, 4, 1508.13, "Paid", "Cash"),
        (4, 1, 5, 1711.53, "Unpaid", "Insurance"),
        (5, 4, 3, 3731.55, "Paid", "Credit Card"),
        (6, 5, 6, 2875.10, "Paid", "Insurance"),
        (7, 6, 7, 652.40, "Pending", "Cash"),
        (8, 7, None, 250.00, "Paid", "Cash"),
        (9, 2, 4, 1508.13, "Paid", "Credit Card"),
    ],
}
