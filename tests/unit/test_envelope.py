"""
Unit tests for the response envelope builder.

Tests verify the fixed JSON shape, logical codes, message templates
and entity label capitalization for every builder.
"""

import pytest

from reviewer_signup.domain import envelope
from reviewer_signup.domain.envelope import (
    EntityKind,
    Envelope,
    MissingContent,
    entity_label,
)


class TestEntityLabel:
    """Tests for entity label capitalization."""

    def test_no_entity_uses_default(self) -> None:
        assert entity_label(None) == "An entity"

    def test_account_label_capitalized(self) -> None:
        """Only the first character is upper-cased."""
        assert entity_label(EntityKind.ACCOUNT) == "Your account"


class TestEnvelopeShape:
    """Tests for Envelope serialization."""

    def test_transport_status_always_200(self) -> None:
        """Every builder answers with HTTP 200."""
        results = [
            envelope.create_successful(),
            envelope.not_found(),
            envelope.server_error(),
            envelope.bad_request(),
            envelope.missing_content(MissingContent.REQUEST_BODY),
            envelope.validation_failed(["x"]),
        ]
        assert {r.status_code for r in results} == {200}

    def test_code_omitted_on_success(self) -> None:
        """Successful envelopes carry no code key."""
        body = envelope.create_successful().to_dict()
        assert "code" not in body
        assert body["success"] == "ok"

    def test_code_present_on_error(self) -> None:
        body = envelope.bad_request().to_dict()
        assert body["success"] == "error"
        assert body["code"] == 400

    def test_builders_are_pure(self) -> None:
        """Identical arguments produce identical envelopes."""
        obj = {"username": "test.account"}
        first = envelope.create_successful(obj, EntityKind.ACCOUNT)
        second = envelope.create_successful(obj, EntityKind.ACCOUNT)
        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_envelope_is_immutable(self) -> None:
        result = envelope.bad_request()
        with pytest.raises(AttributeError):
            result.success = "ok"  # type: ignore[misc]

    def test_ok_property(self) -> None:
        assert envelope.get_successful().ok is True
        assert envelope.server_error().ok is False


class TestSuccessBuilders:
    """Tests for create/get/update/delete builders."""

    def test_create_without_object(self) -> None:
        assert envelope.create_successful().to_dict() == {
            "success": "ok",
            "info": {"message": "An entity successfully created."},
        }

    def test_create_with_object_and_entity(self) -> None:
        obj = {"username": "test.account"}
        assert envelope.create_successful(obj, EntityKind.ACCOUNT).to_dict() == {
            "success": "ok",
            "info": {
                "message": "Your account successfully created.",
                "responseObject": {"username": "test.account"},
            },
        }

    def test_empty_object_not_echoed(self) -> None:
        """An empty response object is left out."""
        assert "responseObject" not in envelope.create_successful({}).info

    def test_get_successful(self) -> None:
        result = envelope.get_successful([1, 2], EntityKind.ACCOUNT)
        assert result.info == {
            "message": "Your account successfully retrieved.",
            "responseObject": [1, 2],
        }

    def test_update_successful(self) -> None:
        assert envelope.update_successful().info == {
            "message": "An entity successfully updated."
        }

    def test_delete_successful(self) -> None:
        assert envelope.delete_successful(EntityKind.ACCOUNT).to_dict() == {
            "success": "ok",
            "info": {"message": "Your account successfully deleted."},
        }


class TestErrorBuilders:
    """Tests for error builders and their logical codes."""

    def test_not_found_default(self) -> None:
        assert envelope.not_found().to_dict() == {
            "success": "error",
            "code": 404,
            "info": {"message": "An entity not found."},
        }

    def test_not_found_with_entity(self) -> None:
        assert envelope.not_found(EntityKind.ACCOUNT).info["message"] == "Your account not found."

    def test_not_found_custom_message_wins(self) -> None:
        result = envelope.not_found(EntityKind.ACCOUNT, "No such reviewer.")
        assert result.info == {"message": "No such reviewer."}
        assert result.code == 404

    def test_missing_request_body(self) -> None:
        assert envelope.missing_content(MissingContent.REQUEST_BODY).to_dict() == {
            "success": "error",
            "code": 400,
            "info": {"message": "Request body is empty."},
        }

    def test_missing_required_fields(self) -> None:
        result = envelope.missing_content(MissingContent.REQUIRED_FIELDS)
        assert result.info == {"message": "Missing required fields!"}
        assert result.code == 400

    def test_validation_failed_surfaces_first_error(self) -> None:
        errors = ["Full Name is required.", "Password is required."]
        assert envelope.validation_failed(errors).to_dict() == {
            "success": "error",
            "code": 400,
            "info": {"message": "Full Name is required.", "errors": errors},
        }

    def test_validation_failed_copies_errors(self) -> None:
        """The envelope does not alias the caller's list."""
        errors = ["Username already exists."]
        result = envelope.validation_failed(errors)
        errors.append("late")
        assert result.info["errors"] == ["Username already exists."]

    def test_validation_failed_without_errors_is_ok(self) -> None:
        assert envelope.validation_failed([]) == Envelope(
            success="ok", info={"message": "There is no error."}
        )

    def test_server_error_default(self) -> None:
        assert envelope.server_error().to_dict() == {
            "success": "error",
            "code": 502,
            "info": {"message": "Server is in maintenance. Please try again."},
        }

    def test_server_error_custom(self) -> None:
        assert envelope.server_error("boom").info == {"message": "boom"}

    def test_bad_request_default(self) -> None:
        assert envelope.bad_request().info == {"message": "A bad request was made. Try again."}

    def test_bad_request_custom(self) -> None:
        result = envelope.bad_request("Nope.")
        assert result.info == {"message": "Nope."}
        assert result.code == 400
