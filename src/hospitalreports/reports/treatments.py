"""Treatment analytics."""

from __future__ import annotations

from hospitalreports.core.models import ReportDefinition
from hospitalreports.core.types import ReportCategory


AVG_COST_BY_TREATMENT_TYPE = ReportDefinition(
    name="avg_cost_by_treatment_type",
    title="Average cost of each treatment type",
    category=ReportCategory.TREATMENTS,
    columns=("treatment_type", "avg_cost"),
    sql="""
SELECT
    treatment_type,
    ROUND(AVG(cost), 2) AS avg_cost
FROM treatments
GROUP BY treatment_type
ORDER BY avg_cost DESC, treatment_type
""",
)

TOP_EXPENSIVE_TREATMENTS = ReportDefinition(
    name="top_expensive_treatments",
    title="Most expensive treatments",
    category=ReportCategory.TREATMENTS,
    columns=("treatment_id", "treatment_type", "cost"),
    sql="""
SELECT treatment_id, treatment_type, cost
FROM treatments
ORDER BY cost DESC, treatment_id
LIMIT :limit
""",
    defaults={"limit": 5},
)

TOP_TREATMENT_TYPES_BY_FREQUENCY = ReportDefinition(
    name="top_treatment_types_by_frequency",
    title="Most commonly performed treatment types",
    category=ReportCategory.TREATMENTS,
    columns=("treatment_type", "frequency"),
    sql="""
SELECT
    treatment_type,
    COUNT(*) AS frequency
FROM treatments
GROUP BY treatment_type
ORDER BY frequency DESC, treatment_type
LIMIT :limit
""",
    defaults={"limit": 3},
)

REPORTS = (
    AVG_COST_BY_TREATMENT_TYPE,
    TOP_EXPENSIVE_TREATMENTS,
    TOP_TREATMENT_TYPES_BY_FREQUENCY,
)
