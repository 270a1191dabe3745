"""
Pydantic schemas for the calculation endpoints.

Request models accept any JSON or form value for ``num1`` because the
operand is parsed by the service layer, which reports missing or
malformed values as a 400 rather than letting FastAPI answer 422.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field


class AddRequest(BaseModel):
    """Body of ``POST /add``."""

    num1: Optional[Any] = Field(None, description="Operand; an integer or a string holding one")


class SaveCalculationRequest(BaseModel):
    """Body of ``POST /save-calculation``.

    ``result`` is accepted for compatibility with existing clients but
    the stored value is always recomputed on the server.
    """

    num1: Optional[Any] = Field(None, description="Operand that was added to 20")
    result: Optional[Any] = Field(None, description="Client side result; ignored")


class AddResponse(BaseModel):
    original: Any
    result: int
    message: str
    saved: bool = Field(False, description="Whether the calculation was recorded in the history")
    id: Optional[int] = Field(None, description="Identifier of the stored record when saved")


class CalculationRecord(BaseModel):
    """A stored calculation.  Records are never modified after insert."""

    id: int
    input_value: int
    result: int
    created_at: datetime


class SaveCalculationResponse(BaseModel):
    success: bool = True
    message: str = "Calculation saved to database"
    data: CalculationRecord


class CalculationList(BaseModel):
    success: bool = True
    count: int
    calculations: List[CalculationRecord]


class StatusResponse(BaseModel):
    success: bool = True
    message: str
