"""Custom validators used by the Event model."""

from typing import Any

from django.core.exceptions import ValidationError


def validate_string_list(value: Any) -> None:
    """Validate that a JSON field holds a list of strings."""
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        msg = "Value must be a list of strings"
        raise ValidationError(msg, code="invalid")
