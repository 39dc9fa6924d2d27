"""Data models for the hospital reporting layer."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hospitalreports.core.errors import InvalidParameterError
from hospitalreports.core.types import (  # noqa: TC001 - Pydantic needs at runtime
    AppointmentStatus,
    Gender,
    PaymentStatus,
    ReportCategory,
    Row,
    SQLParams,
)


# Largest integer SQLite can bind
SQLITE_MAX_INT = 2**63 - 1


class ReportParameters(BaseModel):
    """Every parameter a report can recognize.

    Unset fields fall back to the defaults declared by the report definition.
    """

    model_config = ConfigDict(extra="forbid")

    limit: int | None = Field(default=None, ge=0, le=SQLITE_MAX_INT)
    min_appointments: int | None = Field(default=None, ge=0, le=SQLITE_MAX_INT)
    threshold_amount: Decimal | None = Field(default=None, ge=0, allow_inf_nan=False)
    status: AppointmentStatus | None = None
    gender: Gender | None = None
    window_days: int | None = Field(default=None, ge=0, le=SQLITE_MAX_INT)
    min_years: int | None = Field(default=None, ge=0, le=SQLITE_MAX_INT)
    since: date | None = None
    year: int | None = Field(default=None, ge=1, le=9999)
    month: int | None = Field(default=None, ge=1, le=12)

    @field_validator(
        "limit", "min_appointments", "window_days", "min_years", "year", "month", mode="before"
    )
    @classmethod
    def _reject_booleans(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("expected an integer, got a boolean")
        return value

    def to_bindings(self, today: date) -> SQLParams:
        """Convert to named SQL bindings the sqlite driver accepts.

        Raises:
            InvalidParameterError: ``window_days`` reaches before the first
                representable date.
        """
        bindings: SQLParams = {"today": today.isoformat(), "paid_status": PaymentStatus.PAID.value}
        for name in type(self).model_fields:
            value = getattr(self, name)
            if isinstance(value, Enum):
                value = value.value
            elif isinstance(value, Decimal):
                value = float(value)
            elif isinstance(value, date):
                value = value.isoformat()
            bindings[name] = value
        if self.window_days is not None:
            try:
                bindings["cutoff"] = (today - timedelta(days=self.window_days)).isoformat()
            except OverflowError as e:
                raise InvalidParameterError(
                    f"Invalid parameter 'window_days': {self.window_days} days before {today} "
                    "is out of the date range",
                    parameter="window_days",
                ) from e
        return bindings

    def supplied(self) -> dict[str, Any]:
        """Parameters that carry a value, as plain JSON-friendly data."""
        return self.model_dump(mode="json", exclude_none=True)


class ReportDefinition(BaseModel):
    """A named, read-only query with a fixed output shape."""

    model_config = ConfigDict(frozen=True)

    name: str
    title: str
    category: ReportCategory
    columns: tuple[str, ...]
    sql: str
    # Used instead of ``sql`` when the caller supplies a limit.
    limited_sql: str | None = None
    defaults: dict[str, Any] = Field(default_factory=dict)
    notes: str = ""

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return tuple(self.defaults)

    def resolve(self, params: ReportParameters) -> ReportParameters:
        """Reject parameters this report does not take and fill in its defaults."""
        provided = {key for key in params.model_fields_set if getattr(params, key) is not None}
        unknown = sorted(provided - set(self.defaults))
        if unknown:
            raise InvalidParameterError(
                f"Report '{self.name}' does not accept parameter '{unknown[0]}'",
                parameter=unknown[0],
            )
        missing = {
            key: value for key, value in self.defaults.items() if key not in provided
        }
        return params.model_copy(update=missing)

    def select_sql(self, params: ReportParameters) -> str:
        if self.limited_sql is not None and params.limit is not None:
            return self.limited_sql
        return self.sql


class ReportResult(BaseModel):
    """Tabular output of one report invocation."""

    report: str
    title: str
    columns: list[str]
    rows: list[Row] = Field(default_factory=list)
    row_count: int = 0
    parameters: dict[str, Any] = Field(default_factory=dict)
    sql: str = ""
    generated_at: datetime = Field(default_factory=datetime.now)
    elapsed_seconds: float = 0.0

    @property
    def is_empty(self) -> bool:
        return self.row_count == 0

    def column(self, name: str) -> list[Any]:
        """Values of a single column in row order."""
        return [row[name] for row in self.rows]

    def to_template_data(self, max_rows: int | None = None) -> dict[str, Any]:
        """Convert to data for HTML template."""
        rows = self.rows if max_rows is None else self.rows[:max_rows]
        return {
            "report": self.report,
            "title": self.title,
            "columns": self.columns,
            "rows": rows,
            "row_count": self.row_count,
            "shown": len(rows),
            "parameters": self.parameters,
            "sql": self.sql,
            "generated_at": self.generated_at.strftime("%Y-%m-%d %H:%M:%S"),
            "elapsed": f"{self.elapsed_seconds * 1000:.1f}ms",
        }
