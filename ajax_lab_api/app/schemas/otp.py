"""Pydantic schemas for the verification demo."""

from typing import Any, Optional

from pydantic import BaseModel


class OtpRequest(BaseModel):
    otp: Optional[Any] = None


class OtpResult(BaseModel):
    success: bool
    message: str
