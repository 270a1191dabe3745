"""Simulated network latency for the demo endpoints."""

import asyncio


async def simulate_latency(seconds: float) -> None:
    """Suspend the current request for ``seconds`` without blocking others.

    Non‑positive values return immediately, which is how the test suite
    disables the delays.
    """
    if seconds > 0:
        await asyncio.sleep(seconds)
