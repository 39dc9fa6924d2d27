"""Tests for billing and revenue reports."""

from __future__ import annotations

from decimal import Decimal

import pytest

from hospitalreports.reports.catalog import ReportCatalog


@pytest.fixture
def seeded(catalog: ReportCatalog, seed) -> ReportCatalog:
    seed("patients", [
        {"patient_id": 1, "first_name": "Ann", "last_name": "Lee"},
        {"patient_id": 2, "first_name": "Bob", "last_name": "Ray"},
        {"patient_id": 3, "first_name": "Cy", "last_name": "Fox"},
    ])
    seed("treatments", [
        {"treatment_id": 1, "treatment_type": "MRI", "cost": 100},
        {"treatment_id": 2, "treatment_type": "ECG", "cost": 300},
    ])
    seed("billing", [
        {"bill_id": 1, "patient_id": 1, "treatment_id": 1, "amount": 250,
         "payment_status": "Paid", "payment_method": "Cash"},
        {"bill_id": 2, "patient_id": 2, "treatment_id": 2, "amount": 150,
         "payment_status": "Unpaid", "payment_method": "Card"},
        {"bill_id": 3, "patient_id": 3, "treatment_id": None, "amount": 1000,
         "payment_status": "Pending", "payment_method": "Cash"},
        {"bill_id": 4, "patient_id": 1, "treatment_id": None, "amount": 50,
         "payment_status": None, "payment_method": "Insurance"},
    ])
    return catalog


def test_total_revenue_counts_paid_only(catalog: ReportCatalog, seed) -> None:
    seed("billing", [
        {"bill_id": 1, "patient_id": 1, "amount": 100, "payment_status": "Paid"},
        {"bill_id": 2, "patient_id": 1, "amount": 200, "payment_status": "Unpaid"},
        {"bill_id": 3, "patient_id": 1, "amount": 300, "payment_status": "Paid"},
        {"bill_id": 4, "patient_id": 1, "amount": 400, "payment_status": "Pending"},
    ])
    assert catalog.total_revenue().rows == [{"total_revenue": 400.0}]


def test_total_revenue_rounds_to_cents(catalog: ReportCatalog, seed) -> None:
    seed("billing", [
        {"bill_id": 1, "patient_id": 1, "amount": 10.004, "payment_status": "Paid"},
        {"bill_id": 2, "patient_id": 1, "amount": 0.002, "payment_status": "Paid"},
    ])
    assert catalog.total_revenue().rows[0]["total_revenue"] == 10.01


def test_total_revenue_without_paid_bills(catalog: ReportCatalog) -> None:
    assert catalog.total_revenue().rows == [{"total_revenue": 0.0}]


def test_unpaid_bills_include_pending_and_missing_status(seeded: ReportCatalog) -> None:
    result = seeded.unpaid_bills_with_patient()
    assert result.rows == [
        {"bill_id": 2, "first_name": "Bob", "amount": 150, "payment_status": "Unpaid"},
        {"bill_id": 3, "first_name": "Cy", "amount": 1000, "payment_status": "Pending"},
        {"bill_id": 4, "first_name": "Ann", "amount": 50, "payment_status": None},
    ]


def test_high_value_bills_threshold_is_strict(catalog: ReportCatalog, seed) -> None:
    seed("billing", [
        {"bill_id": 1, "patient_id": 1, "amount": 3000},
        {"bill_id": 2, "patient_id": 1, "amount": 3000.01},
        {"bill_id": 3, "patient_id": 1, "amount": 5000},
    ])
    assert catalog.high_value_bills().column("bill_id") == [3, 2]
    assert catalog.high_value_bills(Decimal(2999)).column("bill_id") == [3, 2, 1]


def test_total_spend_per_patient(seeded: ReportCatalog) -> None:
    assert seeded.total_spend_per_patient().rows == [
        {"patient_id": 3, "first_name": "Cy", "total_spent": 1000},
        {"patient_id": 1, "first_name": "Ann", "total_spent": 300},
        {"patient_id": 2, "first_name": "Bob", "total_spent": 150},
    ]


def test_payment_method_counts(seeded: ReportCatalog) -> None:
    assert seeded.payment_method_counts().rows == [
        {"payment_method": "Cash", "num_payments": 2},
        {"payment_method": "Card", "num_payments": 1},
        {"payment_method": "Insurance", "num_payments": 1},
    ]


def test_avg_bill_by_method(seeded: ReportCatalog) -> None:
    assert seeded.avg_bill_by_method().rows == [
        {"payment_method": "Cash", "avg_bill": 625.0},
        {"payment_method": "Card", "avg_bill": 150.0},
        {"payment_method": "Insurance", "avg_bill": 50.0},
    ]


def test_above_average_treatment_spenders(seeded: ReportCatalog) -> None:
    # Average catalog cost is 200. Bob's treatment bill is 150 and Cy's bill
    # has no treatment, so only Ann qualifies.
    result = seeded.above_average_treatment_spenders()
    assert result.column("patient_id") == [1]
    assert result.columns[:3] == ["patient_id", "first_name", "last_name"]


def test_billing_rank_uses_competition_ranking(catalog: ReportCatalog, seed) -> None:
    seed("patients", [
        {"patient_id": 1, "first_name": "Ann", "last_name": "Lee"},
        {"patient_id": 2, "first_name": "Bob", "last_name": "Ray"},
        {"patient_id": 3, "first_name": "Cy", "last_name": "Fox"},
    ])
    seed("billing", [
        {"bill_id": 1, "patient_id": 1, "amount": 300},
        {"bill_id": 2, "patient_id": 1, "amount": 200},
        {"bill_id": 3, "patient_id": 2, "amount": 500},
        {"bill_id": 4, "patient_id": 3, "amount": 200},
    ])
    assert catalog.billing_rank().rows == [
        {"patient_id": 1, "patient_name": "Ann Lee", "total_spent": 500, "spend_rank": 1},
        {"patient_id": 2, "patient_name": "Bob Ray", "total_spent": 500, "spend_rank": 1},
        {"patient_id": 3, "patient_name": "Cy Fox", "total_spent": 200, "spend_rank": 3},
    ]
