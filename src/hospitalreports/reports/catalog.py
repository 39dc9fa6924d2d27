"""Report catalog: named, parameterized read-only queries over the hospital store."""

from __future__ import annotations

import logging
import time
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from hospitalreports.core.errors import DataAccessError, InvalidParameterError
from hospitalreports.core.models import ReportDefinition, ReportParameters, ReportResult
from hospitalreports.reports import appointments, billing, directory, doctors, patients, treatments
from hospitalreports.reports.sql import format_sql


if TYPE_CHECKING:
    import threading
    from collections.abc import Callable, Mapping

    from hospitalreports.core.types import AppointmentStatus, Gender, ReportCategory
    from hospitalreports.storage.hospital_db import HospitalDatabase

logger = logging.getLogger(__name__)

ALL_REPORTS: tuple[ReportDefinition, ...] = (
    *appointments.REPORTS,
    *patients.REPORTS,
    *billing.REPORTS,
    *doctors.REPORTS,
    *treatments.REPORTS,
    *directory.REPORTS,
)


def build_parameters(values: Mapping[str, Any] | ReportParameters | None) -> ReportParameters:
    """Validate caller-supplied values into :class:`ReportParameters`."""
    if values is None:
        return ReportParameters()
    if isinstance(values, ReportParameters):
        return values
    try:
        return ReportParameters.model_validate(dict(values))
    except ValidationError as e:
        first = e.errors()[0]
        name = ".".join(str(part) for part in first["loc"]) or None
        raise InvalidParameterError(
            f"Invalid parameter '{name}': {first['msg']}", parameter=name
        ) from e


class ReportCatalog:
    """Runs catalog reports against a hospital store.

    The catalog holds no per-call state, so one instance can serve several
    threads; each run opens its own connection through the store.
    """

    def __init__(
        self,
        database: HospitalDatabase,
        clock: Callable[[], date] = date.today,
        definitions: tuple[ReportDefinition, ...] = ALL_REPORTS,
    ) -> None:
        self._db = database
        self._clock = clock
        self._definitions = {d.name: d for d in definitions}

    def definitions(self, category: ReportCategory | None = None) -> list[ReportDefinition]:
        return [d for d in self._definitions.values() if category is None or d.category == category]

    def get(self, name: str) -> ReportDefinition:
        try:
            return self._definitions[name]
        except KeyError:
            raise InvalidParameterError(f"Unknown report: {name}", parameter="name") from None

    def run(
        self,
        name: str,
        params: Mapping[str, Any] | ReportParameters | None = None,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> ReportResult:
        """Run a report by name.

        Args:
            name: Catalog name of the report.
            params: Recognized parameters; omitted ones take the report default.
            timeout: Seconds before the query is aborted.
            cancel_event: Aborts the in-flight query when set.

        Returns:
            The ordered, named-column result.

        Raises:
            InvalidParameterError: Unknown report or out-of-domain parameter.
                Raised before any query is issued.
            DataAccessError: The store failed or returned an unexpected shape.
        """
        definition = self.get(name)
        resolved = definition.resolve(build_parameters(params))
        sql = definition.select_sql(resolved)
        bindings = resolved.to_bindings(self._clock())

        logger.debug("Running %s with %s:\n%s", name, resolved.supplied(), sql)
        start = time.perf_counter()
        columns, rows = self._db.execute(sql, bindings, timeout=timeout, cancel_event=cancel_event)
        elapsed = time.perf_counter() - start

        if tuple(columns) != definition.columns:
            raise DataAccessError(
                f"Report '{name}' returned columns {columns}, expected {list(definition.columns)}",
                report=name,
            )
        logger.info("Report %s returned %d rows in %.1fms", name, len(rows), elapsed * 1000)
        return ReportResult(
            report=name,
            title=definition.title,
            columns=columns,
            rows=rows,
            row_count=len(rows),
            parameters=resolved.supplied(),
            sql=sql.strip(),
            elapsed_seconds=elapsed,
        )

    def format_sql(self, name: str, dialect: str | None = None, limited: bool = False) -> str:
        """Pretty-print a report's SQL, optionally in another dialect.

        With ``limited`` the query run when a limit is supplied is shown;
        reports without a separate limited query show their only query.
        """
        definition = self.get(name)
        sql = definition.limited_sql if limited and definition.limited_sql else definition.sql
        return format_sql(sql, dialect=dialect)

    # Appointments

    def appointment_details(self, limit: int | None = None) -> ReportResult:
        return self.run("appointment_details", {"limit": limit} if limit is not None else None)

    def appointments_by_gender(self, gender: Gender | str = "M") -> ReportResult:
        return self.run("appointments_by_gender", {"gender": gender})

    def recent_appointments(self, window_days: int = 730) -> ReportResult:
        return self.run("recent_appointments", {"window_days": window_days})

    def appointments_by_status(self, status: AppointmentStatus | str = "Cancelled") -> ReportResult:
        return self.run("appointments_by_status", {"status": status})

    def appointment_status_rate(self) -> ReportResult:
        return self.run("appointment_status_rate")

    def latest_appointment_per_patient(self) -> ReportResult:
        return self.run("latest_appointment_per_patient")

    def appointments_in_month(self, year: int = 2023, month: int = 12) -> ReportResult:
        return self.run("appointments_in_month", {"year": year, "month": month})

    def top_visit_reasons(self, limit: int = 5) -> ReportResult:
        return self.run("top_visit_reasons", {"limit": limit})

    # Patients

    def patient_age_groups(self) -> ReportResult:
        return self.run("patient_age_groups")

    def patients_missing_insurance(self) -> ReportResult:
        return self.run("patients_missing_insurance")

    def frequent_patients(self, min_appointments: int = 3) -> ReportResult:
        return self.run("frequent_patients", {"min_appointments": min_appointments})

    def duplicate_patient_emails(self) -> ReportResult:
        return self.run("duplicate_patient_emails")

    # Billing

    def total_revenue(self) -> ReportResult:
        return self.run("total_revenue")

    def unpaid_bills_with_patient(self) -> ReportResult:
        return self.run("unpaid_bills_with_patient")

    def high_value_bills(self, threshold_amount: Decimal | float = Decimal(3000)) -> ReportResult:
        return self.run("high_value_bills", {"threshold_amount": threshold_amount})

    def total_spend_per_patient(self) -> ReportResult:
        return self.run("total_spend_per_patient")

    def payment_method_counts(self) -> ReportResult:
        return self.run("payment_method_counts")

    def avg_bill_by_method(self) -> ReportResult:
        return self.run("avg_bill_by_method")

    def above_average_treatment_spenders(self) -> ReportResult:
        return self.run("above_average_treatment_spenders")

    def billing_rank(self) -> ReportResult:
        return self.run("billing_rank")

    # Doctors

    def experienced_doctors(self, min_years: int = 20) -> ReportResult:
        return self.run("experienced_doctors", {"min_years": min_years})

    def appointments_per_doctor(self) -> ReportResult:
        return self.run("appointments_per_doctor")

    def doctors_by_specialization(self) -> ReportResult:
        return self.run("doctors_by_specialization")

    def revenue_by_specialization(self) -> ReportResult:
        return self.run("revenue_by_specialization")

    # Treatments

    def avg_cost_by_treatment_type(self) -> ReportResult:
        return self.run("avg_cost_by_treatment_type")

    def top_expensive_treatments(self, limit: int = 5) -> ReportResult:
        return self.run("top_expensive_treatments", {"limit": limit})

    def top_treatment_types_by_frequency(self, limit: int = 3) -> ReportResult:
        return self.run("top_treatment_types_by_frequency", {"limit": limit})

    # Directory

    def all_unique_emails(self) -> ReportResult:
        return self.run("all_unique_emails")

    def appointment_summary(self, since: date | str | None = None) -> ReportResult:
        return self.run("appointment_summary", {"since": since} if since is not None else None)
