"""
Persistence store for calculation records.

``CalculationStore`` owns every SQL statement touching the
``calculations`` table.  Records are append‑only: the store can
insert, list the most recent entries and empty the table, but never
updates a single row.  Driver errors are wrapped into
``PersistenceError`` or ``SchemaError`` so that callers never deal
with psycopg2 exceptions directly.

All methods block on network I/O.  They are called from plain ``def``
endpoints, which FastAPI runs in its worker thread pool, and no
in‑process lock is held around them.
"""

from __future__ import annotations

import logging
from typing import Callable, ContextManager, List

import psycopg2
from psycopg2 import errorcodes

from ajax_lab_api.app.core.db import CALCULATIONS_TABLE_SQL, get_cursor
from ajax_lab_api.app.core.exceptions import PersistenceError, SchemaError
from ajax_lab_api.app.schemas.calculation import CalculationRecord

# Two sessions racing on CREATE TABLE IF NOT EXISTS may both pass the
# existence check; the loser fails on the catalog instead of skipping.
_CONCURRENT_CREATE_CODES = {errorcodes.DUPLICATE_TABLE, errorcodes.UNIQUE_VIOLATION}


class CalculationStore:
    """PostgreSQL backed storage of ``CalculationRecord`` rows."""

    def __init__(self, cursor_factory: Callable[[], ContextManager] = get_cursor) -> None:
        self._cursor = cursor_factory
        self._log = logging.getLogger(__name__)

    def ping(self) -> bool:
        """Return ``True`` when the database answers ``SELECT NOW()``."""
        try:
            with self._cursor() as cursor:
                cursor.execute("SELECT NOW() AS now")
                row = cursor.fetchone()
        except psycopg2.Error as exc:
            self._log.error("Database connection error: %s", exc)
            return False
        self._log.info("Database connected successfully at %s", row["now"])
        return True

    def ensure_schema(self) -> None:
        """Create the ``calculations`` table if it does not exist.

        Safe to call repeatedly and from concurrent requests.
        """
        try:
            with self._cursor() as cursor:
                cursor.execute(CALCULATIONS_TABLE_SQL)
        except psycopg2.Error as exc:
            if exc.pgcode in _CONCURRENT_CREATE_CODES:
                self._log.info("Table calculations created concurrently by another session")
                return
            raise SchemaError("Database setup failed", str(exc)) from exc
        self._log.info("Database table created/verified")

    def insert(self, input_value: int, result: int) -> CalculationRecord:
        """Append one record and return it with its generated id and timestamp."""
        try:
            with self._cursor() as cursor:
                cursor.execute(
                    """
                    INSERT INTO calculations (input_value, result)
                    VALUES (%s, %s)
                    RETURNING id, input_value, result, created_at
                    """,
                    (input_value, result),
                )
                row = cursor.fetchone()
        except psycopg2.Error as exc:
            raise PersistenceError("Failed to save calculation", str(exc)) from exc
        record = self._row_to_record(row)
        self._log.info("Calculation saved to database: id=%s %s -> %s", record.id, input_value, result)
        return record

    def list_recent(self, limit: int = 20) -> List[CalculationRecord]:
        """Return up to ``limit`` records, newest first.

        Rows sharing a ``created_at`` value are ordered by descending id
        so the order is total.  An empty table yields an empty list.
        """
        try:
            with self._cursor() as cursor:
                cursor.execute(
                    """
                    SELECT id, input_value, result, created_at
                    FROM calculations
                    ORDER BY created_at DESC, id DESC
                    LIMIT %s
                    """,
                    (limit,),
                )
                rows = cursor.fetchall()
        except psycopg2.Error as exc:
            raise PersistenceError("Failed to retrieve calculations", str(exc)) from exc
        self._log.info("Retrieved %d calculations from database", len(rows))
        return [self._row_to_record(row) for row in rows]

    def delete_all(self) -> None:
        """Remove every record.  Deleting from an empty table is not an error."""
        try:
            with self._cursor() as cursor:
                cursor.execute("DELETE FROM calculations")
                deleted = cursor.rowcount
        except psycopg2.Error as exc:
            raise PersistenceError("Failed to delete calculations", str(exc)) from exc
        self._log.info("All calculations deleted (%s rows)", deleted)

    @staticmethod
    def _row_to_record(row) -> CalculationRecord:
        return CalculationRecord(
            id=row["id"],
            input_value=row["input_value"],
            result=row["result"],
            created_at=row["created_at"],
        )
