"""
API request and response models.

Pydantic models for OpenAPI schema generation. The sign-up route reads the
raw JSON body itself so that presence and type problems are reported inside
the response envelope instead of as a framework-level 422; these models
document the contract and are used to check envelopes in tests.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field


class SignUpRequest(BaseModel):
    """Request model for reviewer account signup."""

    fullName: str = Field(..., description="Full name of the reviewer")
    emailAddress: str = Field(..., description="Email address (stored lower-cased)")
    username: str = Field(
        ..., min_length=6, max_length=50, description="Unique username (6-50 characters)"
    )
    password: str = Field(..., min_length=6, description="Password (min 6 characters)")
    professionalArea: str | None = Field(None, description="Optional professional area")


class EnvelopeInfo(BaseModel):
    """Payload of a response envelope."""

    message: str
    errors: list[str] | None = None
    responseObject: dict[str, Any] | None = None


class EnvelopeResponse(BaseModel):
    """
    Standard response envelope.

    The HTTP status is always 200; `code` carries the logical status
    and is only present when `success` is "error".
    """

    success: Literal["ok", "error"]
    code: int | None = None
    info: EnvelopeInfo
