"""
Authentication routes.

Defines the signup endpoint. Every response is HTTP 200 carrying a
response envelope; the logical status is inside the body.
"""

import json
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from reviewer_signup.api.dependencies import get_signup_service
from reviewer_signup.api.models import EnvelopeResponse, SignUpRequest
from reviewer_signup.domain import envelope
from reviewer_signup.domain.envelope import Envelope
from reviewer_signup.domain.signup import SignUpService

router = APIRouter(tags=["authentication"])


def _as_response(result: Envelope) -> JSONResponse:
    return JSONResponse(content=result.to_dict(), status_code=result.status_code)


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {token}")


def _decode_body(raw: bytes) -> Any:
    """Decode a JSON request body; an empty body decodes to None."""
    if not raw.strip():
        return None
    return json.loads(raw, parse_constant=_reject_constant)


@router.post(
    "/sign-up",
    response_model=None,
    responses={200: {"model": EnvelopeResponse, "description": "Response envelope"}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": SignUpRequest.model_json_schema()}},
        }
    },
    summary="Sign up a reviewer account",
    description="Validate the submitted fields, hash the password and create the account. "
    "The outcome is always returned as an envelope with HTTP 200.",
)
async def sign_up(
    request: Request,
    service: SignUpService = Depends(get_signup_service),
) -> JSONResponse:
    """
    Create a reviewer account.

    - **fullName**, **emailAddress**, **username**, **password**: required strings
    - **professionalArea**: optional string

    On success the original request body is echoed back as `responseObject`.
    """
    try:
        body = _decode_body(await request.body())
    except ValueError:
        return _as_response(envelope.bad_request())

    if body is not None and not isinstance(body, dict):
        return _as_response(envelope.bad_request())

    # bcrypt and psycopg are blocking
    result = await run_in_threadpool(service.sign_up, body)
    return _as_response(result)
