"""Rich console for the reporting CLI."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.text import Text

from hospitalreports.console.display import print_catalog, print_db_stats, print_result, print_sql


if TYPE_CHECKING:
    from pathlib import Path

    from hospitalreports.core.models import ReportDefinition, ReportResult


class ReportConsole:
    """Rich console interface for report runs and results."""

    def __init__(self, verbose: bool = False, console: Console | None = None) -> None:
        self.console = console or Console()
        self.verbose = verbose

    def setup_logging(self, level: str = "INFO") -> None:
        logging.basicConfig(
            level=level if self.verbose else "WARNING",
            format="%(message)s",
            handlers=[
                RichHandler(
                    console=self.console, rich_tracebacks=True, show_time=False, show_path=False
                )
            ],
            force=True,
        )

    def print_header(self, definition: ReportDefinition, db_path: Path) -> None:
        header = Text()
        header.append("hospital-reports", style="bold blue")
        header.append(" - Hospital Database Analysis\n\n", style="dim")
        header.append("Report: ", style="bold")
        header.append(f"{definition.name}\n", style="green")
        header.append("Store: ", style="bold")
        header.append(str(db_path), style="dim")
        if definition.notes:
            header.append("\n\n")
            header.append(definition.notes, style="italic")
        self.console.print(Panel(header, border_style="blue"))

    def print_result(self, result: ReportResult, max_rows: int = 50) -> None:
        print_result(self.console, result, max_rows)
        self.console.print(
            f"  [green]✓[/green] {result.row_count} rows [dim]in {result.elapsed_seconds * 1000:.1f}ms[/dim]"
        )

    def print_catalog(self, definitions: list[ReportDefinition]) -> None:
        print_catalog(self.console, definitions)

    def print_sql(self, name: str, sql: str, dialect: str) -> None:
        print_sql(self.console, name, sql, dialect)

    def print_db_stats(self, stats: dict[str, int]) -> None:
        print_db_stats(self.console, stats)

    def print_success(self, message: str, output_path: Path | None = None) -> None:
        body = f"[green]✓ {message}[/green]"
        if output_path is not None:
            body += f"\n\n[bold]Output:[/bold] {output_path}"
        self.console.print()
        self.console.print(Panel(body, title="[green]Complete[/green]", border_style="green"))

    def print_error(self, error: str) -> None:
        self.console.print()
        self.console.print(
            Panel(f"[red]{error}[/red]", title="[red]Error[/red]", border_style="red")
        )
