"""
Field validators - Generic presence and type checks over a request body.

Each check returns its own list of human-readable errors instead of
mutating a shared accumulator, so callers decide how to combine them.
"""

from collections.abc import Iterable, Mapping
from typing import Any


def _label(field: str, field_labels: Mapping[str, str]) -> str:
    return field_labels.get(field) or field


def validate_required(
    body: Mapping[str, Any],
    required_fields: Iterable[str],
    field_labels: Mapping[str, str],
) -> list[str]:
    """
    Check that every required field is present and not blank.

    A field counts as missing when its key is absent, or when its value
    is a string that is empty after trimming.

    Args:
        body: Request body mapping
        required_fields: Field names, in the order errors should be reported
        field_labels: Display labels keyed by field name (raw name as fallback)

    Returns:
        One "<Label> is required." message per missing field
    """
    errors = []
    for field in required_fields:
        value = body.get(field)
        if field not in body or (isinstance(value, str) and not value.strip()):
            errors.append(f"{_label(field, field_labels)} is required.")
    return errors


def validate_type(
    body: Mapping[str, Any],
    expected_type: type,
    fields: Iterable[str],
    field_labels: Mapping[str, str],
) -> list[str]:
    """
    Check that truthy values have the expected runtime type.

    Absent and falsy values are skipped; presence is validate_required's job.

    Returns:
        One "Invalid type for <label>." message per mistyped field
    """
    errors = []
    for field in fields:
        if field not in body:
            continue
        value = body[field]
        if value and not isinstance(value, expected_type):
            errors.append(f"Invalid type for {_label(field, field_labels).lower()}.")
    return errors
