"""
Tests for the PostgreSQL store.

The cursor factory is replaced by a context manager yielding a
``MagicMock`` cursor, so the SQL sent and the mapping of returned rows
can be checked without a database.
"""
from contextlib import contextmanager
from datetime import datetime
from unittest.mock import MagicMock

import psycopg2
import pytest

from ajax_lab_api.app.core.exceptions import PersistenceError, SchemaError
from ajax_lab_api.app.services.calculation_store import CalculationStore


class DuplicateTableError(psycopg2.Error):
    pgcode = "42P07"


def make_store(cursor):
    @contextmanager
    def factory():
        yield cursor

    return CalculationStore(cursor_factory=factory)


def failing_store(exc):
    @contextmanager
    def factory():
        raise exc
        yield  # pragma: no cover

    return CalculationStore(cursor_factory=factory)


def test_insert_returns_populated_record():
    cursor = MagicMock()
    created = datetime(2024, 5, 1, 10, 30)
    cursor.fetchone.return_value = {"id": 7, "input_value": 5, "result": 25, "created_at": created}

    record = make_store(cursor).insert(5, 25)

    sql, params = cursor.execute.call_args[0]
    assert "INSERT INTO calculations" in sql
    assert "RETURNING" in sql
    assert params == (5, 25)
    assert record.id == 7
    assert record.input_value == 5
    assert record.result == 25
    assert record.created_at == created


def test_list_recent_orders_and_limits():
    cursor = MagicMock()
    cursor.fetchall.return_value = [
        {"id": 3, "input_value": 3, "result": 23, "created_at": datetime(2024, 1, 3)},
        {"id": 2, "input_value": 2, "result": 22, "created_at": datetime(2024, 1, 2)},
    ]

    records = make_store(cursor).list_recent(20)

    sql, params = cursor.execute.call_args[0]
    assert "ORDER BY created_at DESC, id DESC" in sql
    assert params == (20,)
    assert [r.result for r in records] == [23, 22]


def test_list_recent_empty_table():
    cursor = MagicMock()
    cursor.fetchall.return_value = []
    assert make_store(cursor).list_recent() == []


def test_delete_all_on_empty_table():
    cursor = MagicMock()
    cursor.rowcount = 0
    make_store(cursor).delete_all()
    cursor.execute.assert_called_once_with("DELETE FROM calculations")


def test_ensure_schema_runs_ddl():
    cursor = MagicMock()
    make_store(cursor).ensure_schema()
    sql = cursor.execute.call_args[0][0]
    assert "CREATE TABLE IF NOT EXISTS calculations" in sql


def test_ensure_schema_tolerates_concurrent_creation():
    cursor = MagicMock()
    cursor.execute.side_effect = DuplicateTableError("relation already exists")
    make_store(cursor).ensure_schema()


def test_ensure_schema_failure_raises_schema_error():
    store = failing_store(psycopg2.OperationalError("could not connect to server"))
    with pytest.raises(SchemaError) as excinfo:
        store.ensure_schema()
    assert excinfo.value.message == "Database setup failed"
    assert "could not connect" in excinfo.value.detail


@pytest.mark.parametrize(
    "call, message",
    [
        (lambda s: s.insert(1, 21), "Failed to save calculation"),
        (lambda s: s.list_recent(), "Failed to retrieve calculations"),
        (lambda s: s.delete_all(), "Failed to delete calculations"),
    ],
)
def test_driver_errors_become_persistence_errors(call, message):
    store = failing_store(psycopg2.OperationalError("connection refused"))
    with pytest.raises(PersistenceError) as excinfo:
        call(store)
    assert excinfo.value.message == message
    assert excinfo.value.detail == "connection refused"
    assert isinstance(excinfo.value.__cause__, psycopg2.OperationalError)


def test_ping():
    cursor = MagicMock()
    cursor.fetchone.return_value = {"now": datetime(2024, 1, 1)}
    assert make_store(cursor).ping() is True
    assert failing_store(psycopg2.OperationalError("down")).ping() is False
