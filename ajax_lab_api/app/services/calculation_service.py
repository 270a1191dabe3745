"""
Service layer for the ``input + 20`` calculation and its history.

The business rule is fixed: the result of a calculation is always the
operand plus ``ADDEND``.  ``CalculationService`` validates the operand,
computes the result and records it through a ``CalculationStore``.

Operand parsing is explicit rather than truth‑based: ``0`` and ``"0"``
are valid operands, while ``None``, blank strings, booleans and
non‑integral numbers are not.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, NamedTuple, Optional

from ajax_lab_api.app.core.exceptions import PersistenceError, ValidationError
from ajax_lab_api.app.schemas.calculation import CalculationRecord
from ajax_lab_api.app.services.calculation_store import CalculationStore

ADDEND = 20

MISSING_OPERAND = "num1 is required"
INVALID_OPERAND = "num1 must be an integer"


class ParsedOperand(NamedTuple):
    """Outcome of ``parse_operand``: exactly one of the fields is set."""

    value: Optional[int]
    error: Optional[str]

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_operand(raw: Any) -> ParsedOperand:
    """Interpret ``raw`` as an integer operand without raising."""
    if raw is None:
        return ParsedOperand(None, MISSING_OPERAND)
    # bool is a subclass of int; JSON true/false are not operands
    if isinstance(raw, bool):
        return ParsedOperand(None, INVALID_OPERAND)
    if isinstance(raw, int):
        return ParsedOperand(raw, None)
    if isinstance(raw, float):
        if raw.is_integer():
            return ParsedOperand(int(raw), None)
        return ParsedOperand(None, INVALID_OPERAND)
    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return ParsedOperand(None, MISSING_OPERAND)
        try:
            return ParsedOperand(int(text), None)
        except ValueError:
            return ParsedOperand(None, INVALID_OPERAND)
    return ParsedOperand(None, INVALID_OPERAND)


def require_operand(raw: Any) -> int:
    parsed = parse_operand(raw)
    if not parsed.ok:
        raise ValidationError(parsed.error)
    return parsed.value


def format_message(value: int, result: int) -> str:
    return f"{value} + {ADDEND} = {result}"


@dataclass
class AdditionResult:
    """Answer of ``add_and_record``.

    ``record`` holds the stored row when the insert succeeded.  When it
    failed, ``persistence_error`` carries the original exception and the
    arithmetic fields are still valid.
    """

    original: Any
    result: int
    message: str
    record: Optional[CalculationRecord] = None
    persistence_error: Optional[PersistenceError] = None

    @property
    def saved(self) -> bool:
        return self.record is not None


class CalculationService:
    """Validates operands, computes results and manages the history."""

    def __init__(self, store: CalculationStore, history_limit: int = 20) -> None:
        self.store = store
        self.history_limit = history_limit
        self._log = logging.getLogger(__name__)

    def add_and_record(self, raw_input: Any) -> AdditionResult:
        """Compute ``raw_input + 20`` and record it.

        Raises ``ValidationError`` before touching the store when the
        operand is missing or not an integer.  A failed insert does not
        change the computed answer; the error is returned alongside it
        for the caller to report.
        """
        value = require_operand(raw_input)
        result = value + ADDEND
        addition = AdditionResult(
            original=raw_input,
            result=result,
            message=format_message(value, result),
        )
        try:
            addition.record = self.store.insert(value, result)
        except PersistenceError as exc:
            addition.persistence_error = exc
        return addition

    def save_calculation(self, raw_input: Any, claimed_result: Any = None) -> CalculationRecord:
        """Store a calculation submitted by a client.

        The stored result is recomputed from the operand; a disagreeing
        ``claimed_result`` is logged and discarded.
        """
        value = require_operand(raw_input)
        result = value + ADDEND
        if claimed_result is not None:
            claimed = parse_operand(claimed_result)
            if not claimed.ok or claimed.value != result:
                self._log.warning(
                    "Client result %r for operand %s ignored, storing %s", claimed_result, value, result
                )
        return self.store.insert(value, result)

    def list_history(self, limit: Optional[int] = None) -> List[CalculationRecord]:
        """Return the most recent records, newest first, capped at ``history_limit``."""
        if limit is None or limit > self.history_limit:
            limit = self.history_limit
        if limit < 1:
            return []
        return self.store.list_recent(limit)

    def clear_history(self) -> None:
        self.store.delete_all()

    def setup(self) -> None:
        self.store.ensure_schema()
