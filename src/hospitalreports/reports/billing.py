"""Billing and revenue reports."""

from __future__ import annotations

from decimal import Decimal

from hospitalreports.core.models import ReportDefinition
from hospitalreports.core.types import ReportCategory
from hospitalreports.reports.patients import PATIENT_COLUMNS


_BILL_COLUMNS = (
    "bill_id", "patient_id", "treatment_id", "amount", "payment_status", "payment_method",
)

TOTAL_REVENUE = ReportDefinition(
    name="total_revenue",
    title="Revenue from paid bills",
    category=ReportCategory.BILLING,
    columns=("total_revenue",),
    sql="""
SELECT
    COALESCE(ROUND(SUM(amount), 2), 0.0) AS total_revenue
FROM billing
WHERE payment_status = :paid_status
""",
)

UNPAID_BILLS_WITH_PATIENT = ReportDefinition(
    name="unpaid_bills_with_patient",
    title="Bills not yet paid, with the patient",
    category=ReportCategory.BILLING,
    columns=("bill_id", "first_name", "amount", "payment_status"),
    sql="""
SELECT
    b.bill_id,
    p.first_name,
    b.amount,
    b.payment_status
FROM billing b
JOIN patients p ON b.patient_id = p.patient_id
WHERE b.payment_status IS NULL OR b.payment_status != :paid_status
ORDER BY b.bill_id
""",
    notes="Unpaid, Pending and bills with no recorded status.",
)

HIGH_VALUE_BILLS = ReportDefinition(
    name="high_value_bills",
    title="Bills above an amount",
    category=ReportCategory.BILLING,
    columns=_BILL_COLUMNS,
    sql=f"""
SELECT {", ".join(_BILL_COLUMNS)}
FROM billing
WHERE amount > :threshold_amount
ORDER BY amount DESC, bill_id
""",
    defaults={"threshold_amount": Decimal(3000)},
)

TOTAL_SPEND_PER_PATIENT = ReportDefinition(
    name="total_spend_per_patient",
    title="Total billed per patient",
    category=ReportCategory.BILLING,
    columns=("patient_id", "first_name", "total_spent"),
    sql="""
SELECT
    p.patient_id,
    p.first_name,
    SUM(b.amount) AS total_spent
FROM patients p
JOIN billing b ON p.patient_id = b.patient_id
GROUP BY p.patient_id, p.first_name
ORDER BY total_spent DESC, p.patient_id
""",
)

PAYMENT_METHOD_COUNTS = ReportDefinition(
    name="payment_method_counts",
    title="Bills per payment method",
    category=ReportCategory.BILLING,
    columns=("payment_method", "num_payments"),
    sql="""
SELECT
    payment_method,
    COUNT(*) AS num_payments
FROM billing
GROUP BY payment_method
ORDER BY num_payments DESC, payment_method
""",
)

AVG_BILL_BY_METHOD = ReportDefinition(
    name="avg_bill_by_method",
    title="Average bill per payment method",
    category=ReportCategory.BILLING,
    columns=("payment_method", "avg_bill"),
    sql="""
SELECT
    payment_method,
    ROUND(AVG(amount), 2) AS avg_bill
FROM billing
GROUP BY payment_method
ORDER BY avg_bill DESC, payment_method
""",
)

ABOVE_AVERAGE_TREATMENT_SPENDERS = ReportDefinition(
    name="above_average_treatment_spenders",
    title="Patients billed more than the average treatment cost",
    category=ReportCategory.BILLING,
    columns=PATIENT_COLUMNS,
    sql=f"""
SELECT {", ".join(PATIENT_COLUMNS)}
FROM patients
WHERE patient_id IN (
    SELECT b.patient_id
    FROM billing b
    JOIN treatments t ON b.treatment_id = t.treatment_id
    GROUP BY b.patient_id
    HAVING SUM(b.amount) > (
        SELECT AVG(cost) FROM treatments
    )
)
ORDER BY patient_id
""",
    notes="Compared against the average catalog cost, not the average billed amount.",
)

BILLING_RANK = ReportDefinition(
    name="billing_rank",
    title="Patients ranked by total billing",
    category=ReportCategory.BILLING,
    columns=("patient_id", "patient_name", "total_spent", "spend_rank"),
    sql="""
SELECT
    p.patient_id,
    p.first_name || ' ' || p.last_name AS patient_name,
    SUM(b.amount) AS total_spent,
    RANK() OVER (ORDER BY SUM(b.amount) DESC) AS spend_rank
FROM billing b
JOIN patients p ON b.patient_id = p.patient_id
GROUP BY p.patient_id, p.first_name, p.last_name
ORDER BY spend_rank, p.patient_id
""",
    notes="Competition ranking: equal totals share a rank and the next rank skips.",
)

REPORTS = (
    TOTAL_REVENUE,
    UNPAID_BILLS_WITH_PATIENT,
    HIGH_VALUE_BILLS,
    TOTAL_SPEND_PER_PATIENT,
    PAYMENT_METHOD_COUNTS,
    AVG_BILL_BY_METHOD,
    ABOVE_AVERAGE_TREATMENT_SPENDERS,
    BILLING_RANK,
)
