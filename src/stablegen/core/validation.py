"""Validation of raw StableGen form and API inputs.

The rules themselves live on :class:`~stablegen.core.models.GenerationRequest`.
This module runs them against raw form values and turns pydantic's error list
into one user-facing :class:`FieldError` per field.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from stablegen.core.models import MAX_STEPS, MIN_STEPS, GenerationRequest
from stablegen.core.presets import StylePreset

logger = logging.getLogger(__name__)

# Form field names, in display order
FORM_FIELDS = ("text_prompt", "steps", "style_preset")

# pydantic error type -> our error code
_ERROR_CODES = {
    "missing": "required",
    "required": "required",
    "string_type": "type",
    "int_type": "type",
    "int_parsing": "type",
    "int_from_float": "type",
    "greater_than_equal": "range",
    "less_than_equal": "range",
    "enum": "invalid_enum",
}

_MESSAGES = {
    ("text_prompt", "required"): "Prompt must not be empty",
    ("text_prompt", "type"): "Prompt must be text",
    ("steps", "required"): "Steps is required",
    ("steps", "type"): "Steps must be a whole number",
    ("steps", "range"): f"Steps must be between {MIN_STEPS} and {MAX_STEPS}",
    ("style_preset", "required"): "Style is required",
    ("style_preset", "invalid_enum"): (
        "Unknown style. Choose one of: " + ", ".join(p.value for p in StylePreset)
    ),
}


@dataclass(frozen=True)
class FieldError:
    """A single field's validation failure.

    Attributes:
        field: Form field name
        code: One of "required", "type", "range", "invalid_enum"
        message: Text shown next to the input
    """

    field: str
    code: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating the whole form."""

    request: GenerationRequest | None = None
    errors: dict[str, FieldError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


class ValidationError(Exception):
    """User-friendly validation error.

    Raised by :func:`require_valid`. The message joins all field messages and
    is intended to be displayed directly to the user; ``errors`` keeps them
    per field.
    """

    def __init__(self, errors: dict[str, FieldError]) -> None:
        self.errors = errors
        super().__init__("; ".join(error.message for error in errors.values()))


def _to_field_errors(exc: PydanticValidationError) -> dict[str, FieldError]:
    """Keep the first error reported for each form field."""
    errors: dict[str, FieldError] = {}
    for err in exc.errors():
        loc = err.get("loc") or ()
        if not loc or loc[0] not in FORM_FIELDS:
            continue
        name = str(loc[0])
        if name in errors:
            continue
        code = _ERROR_CODES.get(err["type"], err["type"])
        message = _MESSAGES.get((name, code), err["msg"])
        errors[name] = FieldError(field=name, code=code, message=message)
    return errors


def validate_form(values: Mapping[str, Any]) -> ValidationResult:
    """Validate all form fields at once.

    Args:
        values: Raw working values keyed by field name. Missing fields fall
            back to their defaults.

    Returns:
        ValidationResult with either a request or per-field errors
    """
    candidate = {name: values[name] for name in FORM_FIELDS if name in values}
    try:
        request = GenerationRequest.model_validate(candidate)
    except PydanticValidationError as e:
        errors = _to_field_errors(e)
        logger.debug(f"Form validation failed: {sorted(errors)}")
        return ValidationResult(errors=errors)
    return ValidationResult(request=request)


def validate_field(name: str, value: Any) -> FieldError | None:
    """Validate one field in isolation.

    Args:
        name: Form field name
        value: Candidate value

    Returns:
        The field's error, or None if the value is acceptable

    Raises:
        KeyError: If name is not a form field
    """
    if name not in FORM_FIELDS:
        raise KeyError(name)
    try:
        GenerationRequest.model_validate({name: value})
    except PydanticValidationError as e:
        # Other fields use defaults and may fail (the empty prompt); ignore them
        return _to_field_errors(e).get(name)
    return None


def require_valid(values: Mapping[str, Any]) -> GenerationRequest:
    """Validate the form and return the request.

    Raises:
        ValidationError: If any field fails, carrying all field errors
    """
    result = validate_form(values)
    if not result.ok:
        raise ValidationError(result.errors)
    return result.request
