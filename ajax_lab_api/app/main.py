"""
Main entrypoint for the AJAX Lab API.

This module assembles the FastAPI application: logging, CORS,
exception handlers, the versioned router and the service objects
shared by all requests.  ``create_app`` builds and configures the
app, which is then instantiated at module import time as ``app``::

    uvicorn ajax_lab_api.app.main:app --reload

Tests call ``create_app`` directly with their own settings and an
in‑memory store.
"""

import logging
from functools import partial
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import get_cursor
from .core.exceptions import register_exception_handlers
from .core.logging_config import setup_logging
from .services.calculation_service import CalculationService
from .services.calculation_store import CalculationStore
from .services.engagement_service import EngagementState
from .services.otp_service import OtpVerifier


def create_app(settings: Optional[Settings] = None, store: Optional[CalculationStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the environment‑driven
        module level ``settings``.
    store : Optional[CalculationStore]
        Persistence store for the calculation history.  Defaults to a
        PostgreSQL store using ``settings`` for its connection.

    Returns
    -------
    FastAPI
        A configured application.  Each call returns an independent
        instance with its own like counter and comment list.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    if store is None:
        store = CalculationStore(cursor_factory=partial(get_cursor, settings))

    app.state.settings = settings
    app.state.calculation_store = store
    app.state.calculation_service = CalculationService(store, history_limit=settings.history_limit)
    app.state.engagement = EngagementState()
    app.state.otp_verifier = OtpVerifier(settings.otp_code, settings.otp_delay_seconds)

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    def startup_event() -> None:
        # Report database availability.  The schema is created on demand
        # through ``/setup-database``, and a missing database must not
        # stop the endpoints that do not need it.
        log = logging.getLogger(__name__)
        log.info("%s %s starting on port %s", settings.project_name, settings.api_version, settings.port)
        app.state.calculation_store.ping()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
