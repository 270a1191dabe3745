"""
PostgreSQL integration.

This module provides the connection factory (``get_connection``), a
cursor context manager (``get_cursor``) and the DDL of the
``calculations`` table.  Every call opens a fresh connection and
closes it afterwards; the service performs at most one statement per
request so no pool is kept.  Rows are returned as dictionaries keyed
by column name.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

import psycopg2
import psycopg2.extras

from .config import Settings, settings

CALCULATIONS_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS calculations (
        id SERIAL PRIMARY KEY,
        input_value INTEGER NOT NULL,
        result INTEGER NOT NULL,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
"""


def get_connection(config: Optional[Settings] = None):
    """Open and return a new PostgreSQL connection.

    Cursors created from the connection yield ``RealDictRow`` objects,
    so columns are accessed by name (``row["input_value"]``).
    """
    config = config or settings
    return psycopg2.connect(config.dsn(), cursor_factory=psycopg2.extras.RealDictCursor)


@contextmanager
def get_cursor(config: Optional[Settings] = None) -> Iterator[psycopg2.extensions.cursor]:
    """Yield a cursor, commit on success, roll back on error and always close."""
    conn = get_connection(config)
    try:
        with conn.cursor() as cursor:
            yield cursor
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()

