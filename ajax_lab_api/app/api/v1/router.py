"""
Top‑level router for version 1 of the API.

The browser client addresses every route directly under the API
prefix (``/api/add``, ``/api/likes``...), so the domain routers are
included without prefixes of their own and only grouped by tag.
"""

from fastapi import APIRouter

from .endpoints import calculations, demo, engagement, otp

router = APIRouter()

router.include_router(demo.router, tags=["demo"])
router.include_router(calculations.router, tags=["calculations"])
router.include_router(otp.router, tags=["otp"])
router.include_router(engagement.router, tags=["engagement"])
