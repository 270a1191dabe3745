"""
One‑time‑password check used by the verification demo.

This is a teaching example of a form submitted without a page reload,
not an authentication mechanism: the code is a fixed configuration
value, nothing is hashed, codes never expire and may be reused, and
attempts are not rate limited.  The delay before answering only
simulates a round trip to a real verification backend.
"""

import logging
from typing import Any

from ajax_lab_api.app.schemas.otp import OtpResult
from ajax_lab_api.app.services.latency import simulate_latency

SUCCESS_MESSAGE = "OTP verified successfully! ✓"
FAILURE_MESSAGE = "Invalid OTP. Please try again."


class OtpVerifier:
    """Stateless comparison of a submitted code against a fixed one."""

    def __init__(self, expected_code: str = "123456", delay_seconds: float = 0.5) -> None:
        self.expected_code = expected_code
        self.delay_seconds = delay_seconds
        self._log = logging.getLogger(__name__)

    def check(self, code: Any) -> OtpResult:
        """Compare without delay.  Only an exact string match succeeds."""
        if isinstance(code, str) and code == self.expected_code:
            return OtpResult(success=True, message=SUCCESS_MESSAGE)
        return OtpResult(success=False, message=FAILURE_MESSAGE)

    async def verify(self, code: Any) -> OtpResult:
        """Wait ``delay_seconds`` and then ``check`` the code."""
        self._log.debug("OTP verification attempt")
        await simulate_latency(self.delay_seconds)
        outcome = self.check(code)
        if outcome.success:
            self._log.info("OTP verified successfully")
        else:
            self._log.info("Invalid OTP submitted")
        return outcome
