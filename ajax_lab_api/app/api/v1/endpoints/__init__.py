"""
Endpoint subpackage for API v1.

Each module defines an APIRouter for one domain (calculations,
engagement, otp, demo); ``router.py`` aggregates them.
"""
