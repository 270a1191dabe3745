"""
Verification endpoint for API v1.

``POST /verify-otp`` always answers HTTP 200; a wrong or missing code
is reported through ``success: false``.
"""

from fastapi import APIRouter, Depends

from ajax_lab_api.app.api.deps import body_as, get_otp_verifier
from ajax_lab_api.app.schemas.otp import OtpRequest, OtpResult
from ajax_lab_api.app.services.otp_service import OtpVerifier

router = APIRouter()


@router.post("/verify-otp", response_model=OtpResult)
async def verify_otp(
    payload: OtpRequest = Depends(body_as(OtpRequest, strict=False)),
    verifier: OtpVerifier = Depends(get_otp_verifier),
) -> OtpResult:
    return await verifier.verify(payload.otp)
