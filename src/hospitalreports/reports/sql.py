"""Static checks and formatting for report SQL."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

import sqlglot
from sqlglot import exp

from hospitalreports.config.schema import SCHEMA_TABLES
from hospitalreports.core.errors import DataAccessError


if TYPE_CHECKING:
    from hospitalreports.core.models import ReportDefinition

logger = logging.getLogger(__name__)

SOURCE_DIALECT = "sqlite"
_PLACEHOLDER = re.compile(r"(?<![:\w]):(\w+)")
_MARKER = "__param_"


def _restore_placeholder(node: exp.Expression) -> exp.Expression:
    if isinstance(node, exp.Column) and node.name.startswith(_MARKER):
        return exp.Placeholder(this=node.name[len(_MARKER):])
    return node


def parse_report_sql(sql: str) -> exp.Expression:
    """Parse report SQL, keeping ``:name`` placeholders as named placeholders."""
    marked = _PLACEHOLDER.sub(lambda m: f"{_MARKER}{m.group(1)}", sql)
    try:
        parsed = sqlglot.parse_one(marked, read=SOURCE_DIALECT)
    except sqlglot.errors.ParseError as e:
        raise DataAccessError(f"SQL syntax error: {e}") from e
    return parsed.transform(_restore_placeholder)


def format_sql(sql: str, dialect: str | None = None) -> str:
    """Pretty-print report SQL, optionally transpiled to another dialect."""
    return parse_report_sql(sql).sql(dialect=dialect or SOURCE_DIALECT, pretty=True)


def validate_definition(definition: ReportDefinition) -> list[str]:
    """Check every table and column a report references against the hospital schema.

    Both the default and the limited query text are checked.

    Returns:
        Warnings; empty when the report only touches known relations.
    """
    warnings: list[str] = []
    for sql in (definition.sql, definition.limited_sql):
        if sql is None:
            continue
        for warning in _schema_warnings(sql):
            if warning not in warnings:
                warnings.append(warning)

    if warnings:
        logger.debug("Report %s has schema warnings: %s", definition.name, warnings)
    return warnings


def _schema_warnings(sql: str) -> list[str]:
    warnings: list[str] = []
    parsed = parse_report_sql(sql)

    aliases: dict[str, str] = {}
    for table in parsed.find_all(exp.Table):
        table_name = table.name.lower()
        if table_name not in SCHEMA_TABLES:
            warnings.append(f"Unknown table: {table_name}")
            continue
        aliases[table.alias_or_name.lower()] = table_name

    projected = {alias.alias.lower() for alias in parsed.find_all(exp.Alias)}
    known_columns = {col for name in aliases.values() for col in SCHEMA_TABLES[name]}

    for column in parsed.find_all(exp.Column):
        col_name = column.name.lower()
        table_ref = column.table.lower() if column.table else None
        if table_ref:
            table_name = aliases.get(table_ref)
            if table_name is None:
                warnings.append(f"Unknown table alias: {table_ref}")
            elif col_name not in SCHEMA_TABLES[table_name]:
                warnings.append(f"Unknown column: {table_ref}.{col_name}")
        elif col_name not in known_columns and col_name not in projected:
            warnings.append(f"Unknown column: {col_name}")
    return warnings
