"""
Shared fixtures for the AJAX Lab test suite.

The API is built with ``create_app`` around an in‑memory store so no
PostgreSQL server is needed; delays are disabled through settings.
"""
import threading
from datetime import datetime, timedelta
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from ajax_lab_api.app.core.config import Settings
from ajax_lab_api.app.core.exceptions import PersistenceError, SchemaError
from ajax_lab_api.app.main import create_app
from ajax_lab_api.app.schemas.calculation import CalculationRecord


class InMemoryCalculationStore:
    """Drop‑in replacement for ``CalculationStore`` keeping rows in a list.

    Setting ``fail_with`` to an exception makes every operation raise
    it, which simulates an unreachable database.
    """

    def __init__(self) -> None:
        self.records: List[CalculationRecord] = []
        self.fail_with: Optional[Exception] = None
        self.schema_calls = 0
        self._lock = threading.Lock()
        self._next_id = 1
        self._clock = datetime(2024, 1, 1, 12, 0, 0)

    def _check(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def ping(self) -> bool:
        return self.fail_with is None

    def ensure_schema(self) -> None:
        self._check()
        self.schema_calls += 1

    def insert(self, input_value: int, result: int) -> CalculationRecord:
        self._check()
        with self._lock:
            record = CalculationRecord(
                id=self._next_id,
                input_value=input_value,
                result=result,
                created_at=self._clock,
            )
            self._next_id += 1
            self._clock += timedelta(seconds=1)
            self.records.append(record)
        return record

    def list_recent(self, limit: int = 20) -> List[CalculationRecord]:
        self._check()
        with self._lock:
            ordered = sorted(self.records, key=lambda r: (r.created_at, r.id), reverse=True)
        return ordered[:limit]

    def delete_all(self) -> None:
        self._check()
        with self._lock:
            self.records.clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(otp_delay_seconds=0, slow_delay_seconds=0, history_limit=20, api_prefix="/api")


@pytest.fixture
def store() -> InMemoryCalculationStore:
    return InMemoryCalculationStore()


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def unreachable_db() -> PersistenceError:
    return PersistenceError("Failed to save calculation", "connection refused")


@pytest.fixture
def broken_schema() -> SchemaError:
    return SchemaError("Database setup failed", "permission denied for schema public")
