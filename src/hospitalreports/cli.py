"""Command-line interface for hospital-reports."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from hospitalreports.config.settings import Settings
from hospitalreports.console.logger import ReportConsole
from hospitalreports.core.errors import InvalidParameterError, ReportError
from hospitalreports.core.types import OutputFormat, ReportCategory
from hospitalreports.export.html import HTMLExporter
from hospitalreports.reports.catalog import ReportCatalog
from hospitalreports.storage.hospital_db import HospitalDatabase


if TYPE_CHECKING:
    from collections.abc import Sequence

console = ReportConsole()


def parse_param_pairs(pairs: Sequence[str] | None) -> dict[str, str]:
    """Turn ``key=value`` arguments into a parameter mapping."""
    params: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise InvalidParameterError(f"Expected key=value, got: {pair}", parameter=pair)
        params[key.strip().replace("-", "_")] = value.strip()
    return params


def run_report(
    settings: Settings,
    name: str,
    params: dict[str, str],
    output_format: OutputFormat = OutputFormat.TABLE,
    output_path: str | None = None,
    timeout: float | None = None,
) -> None:
    """Run one report and render it."""
    db = HospitalDatabase(settings.database.path, timeout=settings.database.timeout_seconds)
    catalog = ReportCatalog(db)
    definition = catalog.get(name)
    result = catalog.run(name, params, timeout=timeout)

    if output_format is OutputFormat.JSON:
        payload = result.model_dump_json(indent=2)
        if output_path:
            Path(output_path).write_text(payload, encoding="utf-8")
            console.print_success(f"{name}: {result.row_count} rows", Path(output_path))
        else:
            console.console.print_json(payload)
    elif output_format is OutputFormat.HTML:
        target = Path(output_path) if output_path else settings.reports.output_dir / f"{name}.html"
        exporter = HTMLExporter(max_rows=settings.reports.max_display_rows)
        written = exporter.export(result, target)
        console.print_success(f"{name}: {result.row_count} rows", written)
    else:
        console.print_header(definition, settings.database.path)
        console.print_result(result, settings.reports.max_display_rows)


def show_catalog(settings: Settings, category: str | None = None) -> None:
    """List the catalog."""
    catalog = ReportCatalog(HospitalDatabase(settings.database.path))
    console.print_catalog(catalog.definitions(ReportCategory(category) if category else None))


def show_sql(
    settings: Settings, name: str, dialect: str | None = None, limited: bool = False
) -> None:
    """Print a report's SQL."""
    catalog = ReportCatalog(HospitalDatabase(settings.database.path))
    console.print_sql(name, catalog.format_sql(name, dialect, limited), dialect or "sqlite")


def show_stats(settings: Settings) -> None:
    """Show store statistics."""
    db = HospitalDatabase(settings.database.path, timeout=settings.database.timeout_seconds)
    console.print_db_stats(db.get_stats())


def init_database(settings: Settings, load_sample: bool = True) -> None:
    """Initialize a hospital store with the reference schema."""
    db = HospitalDatabase(settings.database.path)
    db.initialize(load_sample=load_sample)
    console.console.print(f"[green]✓[/green] Hospital database initialized at {db.db_path}")
    stats = db.get_stats()
    console.console.print(
        "  " + ", ".join(f"{table.title()}: {count}" for table, count in stats.items())
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hospital-reports", description="Analytical reports over a hospital database"
    )
    parser.add_argument("--db", help="Hospital database path")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show log output")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    list_cmd = subparsers.add_parser("list", help="List available reports")
    list_cmd.add_argument("--category", choices=[c.value for c in ReportCategory])

    run_cmd = subparsers.add_parser("run", help="Run a report")
    run_cmd.add_argument("name", help="Report name")
    run_cmd.add_argument(
        "--param", "-p", action="append", metavar="KEY=VALUE", help="Report parameter"
    )
    run_cmd.add_argument(
        "--format", "-f", choices=[f.value for f in OutputFormat], default=OutputFormat.TABLE.value
    )
    run_cmd.add_argument("--output", "-o", help="Output file for json/html")
    run_cmd.add_argument("--timeout", type=float, help="Query timeout in seconds")

    sql_cmd = subparsers.add_parser("sql", help="Show the SQL of a report")
    sql_cmd.add_argument("name", help="Report name")
    sql_cmd.add_argument("--dialect", "-d", help="Target SQL dialect, e.g. mysql")
    sql_cmd.add_argument(
        "--limited", action="store_true", help="Show the query used when a limit is given"
    )

    init_cmd = subparsers.add_parser("init", help="Initialize a hospital database")
    init_cmd.add_argument("--no-sample", action="store_true", help="Don't load sample data")

    subparsers.add_parser("stats", help="Show database statistics")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    settings = Settings()
    if args.db:
        settings.database.path = Path(args.db)
    console.verbose = args.verbose
    console.setup_logging(settings.log_level)

    try:
        if args.command == "list":
            show_catalog(settings, args.category)
        elif args.command == "run":
            run_report(
                settings,
                args.name,
                parse_param_pairs(args.param),
                OutputFormat(args.format),
                args.output,
                args.timeout,
            )
        elif args.command == "sql":
            show_sql(settings, args.name, args.dialect, args.limited)
        elif args.command == "init":
            init_database(settings, not args.no_sample)
        elif args.command == "stats":
            show_stats(settings)
    except KeyboardInterrupt:
        console.console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)
    except ReportError as e:
        console.print_error(str(e))
        sys.exit(1)
    except Exception as e:
        console.print_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
