"""
Response envelope builder - Fixed JSON shape for every outcome.

Every response body has the shape:

    {"success": "ok" | "error", "code": <int, errors only>, "info": {...}}

`info` always carries a `message`; validation failures add `errors` and
successful operations may add `responseObject`. The transport status is
always 200; the logical status lives in `code`.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

TRANSPORT_STATUS = 200

_DEFAULT_ENTITY_LABEL = "An entity"


class EntityKind(str, Enum):
    """
    Entities that appear in envelope messages.

    The value is the label used in the message before capitalization.
    """

    ACCOUNT = "your account"


class MissingContent(str, Enum):
    """What a request was missing."""

    REQUEST_BODY = "RB"
    REQUIRED_FIELDS = "RF"


@dataclass(frozen=True)
class Envelope:
    """Immutable response envelope paired with its transport status."""

    success: str
    info: dict[str, Any]
    code: int | None = None
    status_code: int = field(default=TRANSPORT_STATUS)

    @property
    def ok(self) -> bool:
        return self.success == "ok"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON body, omitting `code` on success."""
        body: dict[str, Any] = {"success": self.success}
        if self.code is not None:
            body["code"] = self.code
        body["info"] = dict(self.info)
        return body


def entity_label(entity: EntityKind | None) -> str:
    """
    Display label for an entity: trimmed, first character upper-cased.

    Falls back to "An entity" when no entity is given.
    """
    if entity is None:
        return _DEFAULT_ENTITY_LABEL
    label = entity.value.strip()
    if not label:
        return _DEFAULT_ENTITY_LABEL
    return label[0].upper() + label[1:]


def _ok(message: str, response_object: Any = None) -> Envelope:
    info: dict[str, Any] = {"message": message}
    if response_object:
        info["responseObject"] = response_object
    return Envelope(success="ok", info=info)


def _error(code: int, message: str, errors: list[str] | None = None) -> Envelope:
    info: dict[str, Any] = {"message": message}
    if errors is not None:
        info["errors"] = list(errors)
    return Envelope(success="error", code=code, info=info)


def create_successful(response_object: Any = None, entity: EntityKind | None = None) -> Envelope:
    """Entity created; echoes `response_object` when it is non-empty."""
    return _ok(f"{entity_label(entity)} successfully created.", response_object)


def get_successful(response_object: Any = None, entity: EntityKind | None = None) -> Envelope:
    return _ok(f"{entity_label(entity)} successfully retrieved.", response_object)


def update_successful(response_object: Any = None, entity: EntityKind | None = None) -> Envelope:
    return _ok(f"{entity_label(entity)} successfully updated.", response_object)


def delete_successful(entity: EntityKind | None = None) -> Envelope:
    return _ok(f"{entity_label(entity)} successfully deleted.")


def not_found(entity: EntityKind | None = None, message: str = "") -> Envelope:
    """Logical 404. A custom message takes precedence over the entity label."""
    if message:
        return _error(404, message)
    return _error(404, f"{entity_label(entity)} not found.")


def missing_content(kind: MissingContent) -> Envelope:
    """Logical 400 for an empty request body or missing required fields."""
    if kind == MissingContent.REQUEST_BODY:
        return _error(400, "Request body is empty.")
    return _error(400, "Missing required fields!")


def validation_failed(errors: list[str]) -> Envelope:
    """
    Logical 400 carrying every validation error.

    The first error becomes the top-level message. An empty list is not a
    failure and yields an "ok" envelope.
    """
    if errors:
        return _error(400, errors[0], errors)
    return _ok("There is no error.")


def server_error(message: str = "") -> Envelope:
    """Logical 502 for unexpected failures."""
    return _error(502, message or "Server is in maintenance. Please try again.")


def bad_request(message: str = "") -> Envelope:
    return _error(400, message or "A bad request was made. Try again.")
