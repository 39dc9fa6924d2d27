"""Display components for console output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree


if TYPE_CHECKING:
    from rich.console import Console

    from hospitalreports.core.models import ReportDefinition, ReportResult


def _cell(value: Any) -> str:
    if value is None:
        return "[dim]-[/dim]"
    if isinstance(value, float):
        return f"{value:,.2f}"
    return str(value)


def print_result(console: Console, result: ReportResult, max_rows: int = 50) -> None:
    """Print a report result as a table."""
    if result.is_empty:
        console.print(f"  [yellow]⚠[/yellow] {result.title}: no rows")
        return
    table = Table(title=result.title, border_style="blue")
    for column in result.columns:
        table.add_column(column, justify="right" if _is_numeric(result, column) else "left")
    for row in result.rows[:max_rows]:
        table.add_row(*(_cell(row[column]) for column in result.columns))
    console.print(table)
    if result.row_count > max_rows:
        console.print(f"  [dim]... and {result.row_count - max_rows} more rows[/dim]")


def _is_numeric(result: ReportResult, column: str) -> bool:
    values = [v for v in result.column(column) if v is not None]
    return bool(values) and all(isinstance(v, int | float) for v in values)


def print_catalog(console: Console, definitions: list[ReportDefinition]) -> None:
    """Print the available reports grouped by category."""
    by_category: dict[str, list[ReportDefinition]] = {}
    for definition in definitions:
        by_category.setdefault(definition.category.value, []).append(definition)
    tree = Tree("[bold]Report Catalog[/bold]")
    for category, category_reports in by_category.items():
        branch = tree.add(f"[cyan]{category.title()}[/cyan] ({len(category_reports)})")
        for definition in category_reports:
            params = ", ".join(
                f"{key}={'-' if value is None else getattr(value, 'value', value)}"
                for key, value in definition.defaults.items()
            )
            suffix = f" [dim]({params})[/dim]" if params else ""
            branch.add(f"[bold]{definition.name}[/bold] {definition.title}{suffix}")
    console.print(tree)


def print_sql(console: Console, name: str, sql: str, dialect: str) -> None:
    """Print a report's SQL."""
    console.print(Panel(Text(sql), title=f"{name} [dim]({dialect})[/dim]", border_style="dim"))


def print_db_stats(console: Console, stats: dict[str, int]) -> None:
    """Print store statistics."""
    table = Table(title="Hospital Database Statistics", border_style="blue")
    table.add_column("Table", style="bold")
    table.add_column("Rows", justify="right")
    for name, count in stats.items():
        table.add_row(name, str(count))
    console.print()
    console.print(table)
