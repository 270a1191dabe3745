"""
Connectivity and timing demo endpoints for API v1.

``/slow`` and ``/fast`` let a client compare issuing two requests one
after another with issuing them concurrently: the slow one waits
``slow_delay_seconds`` before answering, the fast one answers at once.
The wait is asynchronous, so a pending slow request never delays other
requests.  ``/echo`` returns whatever JSON it receives.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from ajax_lab_api.app.api.deps import get_settings
from ajax_lab_api.app.core.config import Settings
from ajax_lab_api.app.schemas.demo import EchoResponse, HelloResponse, TimingResponse
from ajax_lab_api.app.services.latency import simulate_latency

router = APIRouter()
log = logging.getLogger(__name__)


@router.get("/hello", response_model=HelloResponse)
async def hello() -> HelloResponse:
    return HelloResponse()


@router.get("/slow", response_model=TimingResponse)
async def slow(settings: Settings = Depends(get_settings)) -> TimingResponse:
    log.info("Slow endpoint called, responding in %s seconds", settings.slow_delay_seconds)
    await simulate_latency(settings.slow_delay_seconds)
    log.info("Slow endpoint responded")
    return TimingResponse(
        message="Response from SLOW endpoint",
        delay=f"{settings.slow_delay_seconds:g} seconds",
        endpoint="slow",
    )


@router.get("/fast", response_model=TimingResponse)
async def fast() -> TimingResponse:
    log.info("Fast endpoint called, responding immediately")
    return TimingResponse(message="Response from FAST endpoint", delay="immediate", endpoint="fast")


@router.post("/echo", response_model=EchoResponse)
async def echo(body: Any = Body(None)) -> EchoResponse:
    log.info("Echo received: %s", body)
    return EchoResponse(receivedData=body)
