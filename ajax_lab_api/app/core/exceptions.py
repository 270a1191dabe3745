"""
Error taxonomy and the FastAPI handlers that translate it to responses.

Services raise the exceptions defined here and never return error
values; the API layer maps each kind to its own HTTP status:

* ``ValidationError``  -> 400, a required field is missing or malformed.
* ``PersistenceError`` -> 500, the database is unreachable or rejected
  the statement.
* ``SchemaError``      -> 500, the calculation table could not be created.

Requests for unknown paths are answered with a JSON body naming the
path instead of Starlette's default ``{"detail": "Not Found"}``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

log = logging.getLogger(__name__)


class AjaxLabError(Exception):
    """Base class for errors raised by the service layer."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, detail: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_body(self) -> dict:
        body = {"success": False, "error": self.message}
        if self.detail is not None:
            body["details"] = self.detail
        return body


class ValidationError(AjaxLabError):
    status_code = status.HTTP_400_BAD_REQUEST


class PersistenceError(AjaxLabError):
    pass


class SchemaError(AjaxLabError):
    pass


async def ajax_lab_error_handler(request: Request, exc: AjaxLabError) -> JSONResponse:
    if exc.status_code >= 500:
        log.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.detail)
    else:
        log.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code != status.HTTP_404_NOT_FOUND:
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )
    log.info("Unknown endpoint requested: %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "Endpoint not found", "path": request.url.path},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AjaxLabError, ajax_lab_error_handler)
    app.add_exception_handler(StarletteHTTPException, not_found_handler)
