"""
FastAPI dependencies resolving the application's service objects.

``create_app`` builds one instance of each service and stores it on
``app.state``; handlers receive them through ``Depends`` so the test
suite can build an application around an in‑memory store.

Request bodies are read by ``body_as``: browsers post either JSON or
URL‑encoded forms, and both are turned into the same pydantic model.
"""

import json
from typing import Any, Callable, Dict, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel

from ajax_lab_api.app.core.config import Settings
from ajax_lab_api.app.core.exceptions import ValidationError
from ajax_lab_api.app.services.calculation_service import CalculationService
from ajax_lab_api.app.services.engagement_service import EngagementState
from ajax_lab_api.app.services.otp_service import OtpVerifier

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_calculation_service(request: Request) -> CalculationService:
    return request.app.state.calculation_service


def get_engagement_state(request: Request) -> EngagementState:
    return request.app.state.engagement


def get_otp_verifier(request: Request) -> OtpVerifier:
    return request.app.state.otp_verifier


async def read_body(request: Request) -> Dict[str, Any]:
    """Return the request body as a dictionary.

    Form posts are decoded field by field; anything else is parsed as
    JSON.  An empty body yields ``{}`` so that missing fields are
    reported by the services.  A body that is neither a JSON object nor
    a form is rejected with ``ValidationError``.
    """
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form)
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise ValidationError("Request body must be JSON or form data") from exc
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def body_as(model: Type[ModelT], strict: bool = True) -> Callable[..., ModelT]:
    """Build a dependency returning ``model`` filled from the request body.

    With ``strict=False`` an unreadable body is treated as empty, for
    endpoints that must always answer 200.
    """

    async def dependency(request: Request) -> ModelT:
        try:
            body = await read_body(request)
        except ValidationError:
            if strict:
                raise
            body = {}
        return model(**body)

    return dependency
