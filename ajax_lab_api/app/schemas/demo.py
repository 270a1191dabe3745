"""Pydantic schemas for the connectivity and timing demo endpoints."""

from typing import Any

from pydantic import BaseModel


class HelloResponse(BaseModel):
    message: str = "Hello from AJAX Lab!"


class TimingResponse(BaseModel):
    """Answer of ``/slow`` and ``/fast``."""

    message: str
    delay: str
    endpoint: str


class EchoResponse(BaseModel):
    message: str = "Echo response"
    receivedData: Any = None
