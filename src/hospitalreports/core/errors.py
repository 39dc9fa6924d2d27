"""Exceptions raised by the reporting layer."""

from __future__ import annotations


class ReportError(Exception):
    """Base class for all report failures."""


class DataAccessError(ReportError):
    """The store is unreachable, a query failed, or the schema does not match."""

    def __init__(self, message: str, report: str | None = None) -> None:
        super().__init__(message)
        self.report = report


class QueryTimeoutError(DataAccessError):
    """A query was aborted because its deadline passed or it was cancelled."""


class InvalidParameterError(ReportError):
    """A caller supplied an unknown report, an unknown parameter or an out-of-domain value."""

    def __init__(self, message: str, parameter: str | None = None) -> None:
        super().__init__(message)
        self.parameter = parameter
