"""Entry point for the AJAX Lab API.

Starts the FastAPI application with uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``5000``); database credentials are read the same way, see
``ajax_lab_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from ajax_lab_api.app.core.config import settings
from ajax_lab_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    # log_config=None keeps uvicorn from replacing the handlers set up by create_app
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_config=None)
    server = Server(config)
    logging.getLogger(__name__).info(
        "AJAX Lab backend listening on http://localhost:%s%s/hello", settings.port, settings.api_prefix
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
