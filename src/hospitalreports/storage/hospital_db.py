"""Hospital database the report catalog reads from."""

from __future__ import annotations

import logging
import sqlite3
import time
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from hospitalreports.config.schema import APPOINTMENT_SUMMARY_VIEW, HOSPITAL_SCHEMA, SCHEMA_TABLES
from hospitalreports.core.errors import DataAccessError, QueryTimeoutError
from hospitalreports.storage.sample_data import SAMPLE_ROWS


if TYPE_CHECKING:
    import threading
    from collections.abc import Iterator

    from hospitalreports.core.types import Row, SQLParams

logger = logging.getLogger(__name__)

# SQLite VM instructions between deadline/cancel checks
PROGRESS_INTERVAL = 1000


class HospitalDatabase:
    """SQLite hospital store.

    Reports run over isolated read-only connections, one per call. Only
    :meth:`initialize` and :meth:`load_sample_data` ever write, and they exist
    to set up demo and test stores.
    """

    def __init__(self, db_path: str | Path = "hospital.db", timeout: float | None = None) -> None:
        self.db_path = Path(db_path)
        self.timeout = timeout

    @contextmanager
    def _connection(self, read_only: bool = True) -> Iterator[sqlite3.Connection]:
        if read_only:
            conn = sqlite3.connect(f"{self.db_path.absolute().as_uri()}?mode=ro", uri=True)
        else:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            if not read_only:
                conn.commit()
        finally:
            conn.close()

    def execute(
        self,
        sql: str,
        params: SQLParams | None = None,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> tuple[list[str], list[Row]]:
        """Run a single read-only query.

        Args:
            sql: Query text with named placeholders.
            params: Values for the placeholders.
            timeout: Seconds before the query is aborted. Falls back to the
                store default; ``None`` there means no deadline.
            cancel_event: Aborts the query as soon as it is set.

        Returns:
            Column names and rows keyed by column.

        Raises:
            QueryTimeoutError: The deadline passed or the query was cancelled.
            DataAccessError: The store could not be opened or the query failed.
        """
        timeout = self.timeout if timeout is None else timeout
        deadline = time.monotonic() + timeout if timeout is not None else None

        def should_abort() -> bool:
            if cancel_event is not None and cancel_event.is_set():
                return True
            return deadline is not None and time.monotonic() >= deadline

        if should_abort():
            raise QueryTimeoutError("Query cancelled before it was issued")

        try:
            with self._connection() as conn:
                if deadline is not None or cancel_event is not None:
                    conn.set_progress_handler(should_abort, PROGRESS_INTERVAL)
                cursor = conn.execute(sql, params or {})
                columns = [desc[0] for desc in cursor.description] if cursor.description else []
                rows = [dict(row) for row in cursor.fetchall()]
        except sqlite3.OperationalError as e:
            if "interrupted" in str(e) and should_abort():
                logger.warning("Query aborted on %s: %s", self.db_path, e)
                raise QueryTimeoutError(
                    f"Query aborted after exceeding {timeout}s or on cancellation"
                ) from e
            logger.warning("Query failed on %s: %s", self.db_path, e)
            raise DataAccessError(f"Query failed: {e}") from e
        except sqlite3.Error as e:
            logger.warning("Query failed on %s: %s", self.db_path, e)
            raise DataAccessError(f"Query failed: {e}") from e
        return columns, rows

    def initialize(self, load_sample: bool = False) -> None:
        """Create the reference schema and the appointment summary view."""
        with self._connection(read_only=False) as conn:
            conn.executescript(HOSPITAL_SCHEMA)
            conn.executescript(APPOINTMENT_SUMMARY_VIEW)
        if load_sample:
            self.load_sample_data()

    def load_sample_data(self) -> None:
        """Load sample hospital data for demos."""
        with self._connection(read_only=False) as conn:
            # Check if data exists
            count = conn.execute("SELECT COUNT(*) FROM patients").fetchone()[0]
            if count > 0:
                return
            for table, rows in SAMPLE_ROWS.items():
                columns = SCHEMA_TABLES[table]
                placeholders = ", ".join("?" * len(columns))
                conn.executemany(
                    f"INSERT INTO {table} ({', '.join(columns)}) VALUES ({placeholders})", rows
                )
        logger.info("Loaded sample data into %s", self.db_path)

    def get_stats(self) -> dict[str, int]:
        """Get row counts per table."""
        stats: dict[str, int] = {}
        for table in ("patients", "doctors", "appointments", "billing", "treatments"):
            _, rows = self.execute(f"SELECT COUNT(*) AS cnt FROM {table}")  # noqa: S608
            stats[table] = rows[0]["cnt"]
        return stats
