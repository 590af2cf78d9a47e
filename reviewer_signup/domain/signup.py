"""
Signup domain service - Reviewer account registration.

This module contains the core business logic for creating a reviewer
account from a raw JSON body:

1. Validate the body (presence, type, username and password rules)
2. Normalize the fields (trim; lower-case email and username)
3. Hash the password with bcrypt
4. Insert the account row
5. Answer with a response envelope

Validation errors accumulate and are reported together; the first one
becomes the envelope message. Anything unexpected (a storage failure, a
bug) is caught once in sign_up() and answered with a server-error envelope.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import bcrypt

from . import envelope
from .envelope import EntityKind, Envelope, MissingContent
from .exceptions import UsernameAlreadyTaken
from .ports import AccountRecord, AccountRepository
from .validators import validate_required, validate_type

logger = logging.getLogger(__name__)

FIELD_LABELS = {
    "fullName": "Full Name",
    "professionalArea": "Professional Area",
    "emailAddress": "Email Address",
    "username": "Username",
    "password": "Password",
}

REQUIRED_FIELDS = ("fullName", "emailAddress", "username", "password")

STRING_FIELDS = ("fullName", "professionalArea", "emailAddress", "username", "password")

USERNAME_MIN_LENGTH = 6
USERNAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6
BCRYPT_MAX_BYTES = 72

USERNAME_LENGTH_ERROR = "Username must be longer than 6 and less than 50 characters."
USERNAME_TAKEN_ERROR = "Username already exists."
PASSWORD_LENGTH_ERROR = "Password must be longer than 6 characters."
SERVER_ERROR_PREFIX = "There is an error while signing up."


@dataclass
class SignUpService:
    """
    Domain service for reviewer account signup.

    Orchestrates validation, normalization, password hashing
    and persistence through the injected repository.
    """

    repository: AccountRepository
    bcrypt_cost: int = 10

    def sign_up(self, body: Mapping[str, Any] | None) -> Envelope:
        """
        Create an account from a raw request body.

        Args:
            body: Decoded JSON object as received from the client, or None

        Returns:
            - missing_content envelope if the body is absent or empty
            - validation_failed envelope listing every rule violation
            - create_successful envelope echoing the original body
            - server_error envelope if anything unexpected raised
        """
        if not body:
            return envelope.missing_content(MissingContent.REQUEST_BODY)

        try:
            errors = self.validate(body)
            if errors:
                return envelope.validation_failed(errors)

            record = self._build_record(body)
            if not self.repository.insert(record):
                raise UsernameAlreadyTaken(record.username)
        except UsernameAlreadyTaken:
            return envelope.validation_failed([USERNAME_TAKEN_ERROR])
        except Exception as e:
            logger.exception("There is an error while signing up")
            return envelope.server_error(f"{SERVER_ERROR_PREFIX}{e}")

        logger.info("Account created: %s", record.username)
        return envelope.create_successful(body, EntityKind.ACCOUNT)

    def validate(self, body: Mapping[str, Any]) -> list[str]:
        """
        Run every signup rule and collect the errors in report order.

        Required-field errors come first, then type errors, then the
        username and password rules. Repository failures propagate.
        """
        return [
            *validate_required(body, REQUIRED_FIELDS, FIELD_LABELS),
            *validate_type(body, str, STRING_FIELDS, FIELD_LABELS),
            *self._validate_username(body.get("username")),
            *self._validate_password(body.get("password")),
        ]

    def _validate_username(self, username: Any) -> list[str]:
        """Length bounds and uniqueness; both checks run."""
        if not username or not isinstance(username, str):
            return []

        errors = []
        if len(username) < USERNAME_MIN_LENGTH or len(username) > USERNAME_MAX_LENGTH:
            errors.append(USERNAME_LENGTH_ERROR)

        if self.repository.find_by_username(username.strip()) is not None:
            errors.append(USERNAME_TAKEN_ERROR)
        return errors

    def _validate_password(self, password: Any) -> list[str]:
        if password and isinstance(password, str) and len(password) < PASSWORD_MIN_LENGTH:
            return [PASSWORD_LENGTH_ERROR]
        return []

    def _build_record(self, body: Mapping[str, Any]) -> AccountRecord:
        # Present-but-falsy non-strings (null, 0) pass validation and raise here (502)
        professional_area = body.get("professionalArea")
        return AccountRecord(
            full_name=body["fullName"].strip(),
            email_address=self._normalize(body["emailAddress"]),
            username=self._normalize(body["username"]),
            password_hash=self._hash_password(body["password"]),
            professional_area=professional_area.strip() if professional_area else None,
        )

    def _normalize(self, value: str) -> str:
        """
        Normalize an identifier for consistent storage and lookup.

        Applies: strip whitespace + lowercase
        """
        return value.strip().lower()

    def _hash_password(self, password: str) -> str:
        """
        Hash password using bcrypt with the configured cost factor.

        bcrypt only reads the first 72 bytes; newer releases raise instead
        of truncating, so the input is cut to that limit here.
        """
        secret = password.encode()[:BCRYPT_MAX_BYTES]
        return bcrypt.hashpw(secret, bcrypt.gensalt(rounds=self.bcrypt_cost)).decode()
