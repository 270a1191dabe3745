"""
Calculation endpoints for API v1.

``POST /add`` computes ``num1 + 20`` and records it in the history.
The remaining routes manage the history table directly: create it
(``GET /setup-database``), store a calculation
(``POST /save-calculation``), list the 20 most recent records
(``GET /calculations``) and delete all of them
(``DELETE /calculations``).

Handlers are plain functions because the store performs blocking
database I/O; FastAPI runs them in its worker thread pool.
"""

import logging

from fastapi import APIRouter, Depends

from ajax_lab_api.app.api.deps import body_as, get_calculation_service
from ajax_lab_api.app.schemas.calculation import (
    AddRequest,
    AddResponse,
    CalculationList,
    SaveCalculationRequest,
    SaveCalculationResponse,
    StatusResponse,
)
from ajax_lab_api.app.services.calculation_service import CalculationService

router = APIRouter()
log = logging.getLogger(__name__)


@router.post("/add", response_model=AddResponse)
def add_number(
    payload: AddRequest = Depends(body_as(AddRequest)),
    service: CalculationService = Depends(get_calculation_service),
) -> AddResponse:
    """Return ``num1 + 20`` and record the calculation.

    A missing or non‑integer ``num1`` yields HTTP 400.  If the record
    cannot be stored the result is still returned with ``saved`` set
    to ``false``.

    Clients should not follow this call with ``POST /save-calculation``
    for the same operand; that would store the calculation twice.
    """
    log.debug("Received data: %s", payload)
    addition = service.add_and_record(payload.num1)
    if addition.persistence_error is not None:
        log.warning(
            "Calculation %s not recorded: %s",
            addition.message,
            addition.persistence_error.detail,
        )
    return AddResponse(
        original=addition.original,
        result=addition.result,
        message=addition.message,
        saved=addition.saved,
        id=addition.record.id if addition.record else None,
    )


@router.get("/setup-database", response_model=StatusResponse)
def setup_database(service: CalculationService = Depends(get_calculation_service)) -> StatusResponse:
    """Create the ``calculations`` table if it does not exist yet."""
    service.setup()
    return StatusResponse(message='Database table "calculations" created successfully!')


@router.post("/save-calculation", response_model=SaveCalculationResponse)
def save_calculation(
    payload: SaveCalculationRequest = Depends(body_as(SaveCalculationRequest)),
    service: CalculationService = Depends(get_calculation_service),
) -> SaveCalculationResponse:
    """Store a calculation.  The result is recomputed from ``num1``."""
    record = service.save_calculation(payload.num1, payload.result)
    return SaveCalculationResponse(data=record)


@router.get("/calculations", response_model=CalculationList)
def list_calculations(service: CalculationService = Depends(get_calculation_service)) -> CalculationList:
    """Return the most recent calculations, newest first."""
    records = service.list_history()
    return CalculationList(count=len(records), calculations=records)


@router.delete("/calculations", response_model=StatusResponse)
def delete_calculations(service: CalculationService = Depends(get_calculation_service)) -> StatusResponse:
    """Delete every stored calculation."""
    service.clear_history()
    return StatusResponse(message="All calculations deleted")
