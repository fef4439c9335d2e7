"""Validation of serialized documents against the OSCAL JSON schema."""

from __future__ import annotations

import json
from functools import lru_cache
from importlib.resources import files
from typing import TYPE_CHECKING, Any

from jsonschema import Draft202012Validator, FormatChecker

from cac_transpiler.oscal.constants import OSCAL_VERSION
from cac_transpiler.oscal.models import to_document
from cac_transpiler.validation.base import BaseValidator
from cac_transpiler.validation.errors import ErrorCodes, ValidationResult

if TYPE_CHECKING:
    from jsonschema.exceptions import ValidationError as SchemaError

    from cac_transpiler.oscal.models import OscalModels

SCHEMA_FILE = f"oscal_{OSCAL_VERSION}.json"

_CODES = {
    "pattern": ErrorCodes.E300_PATTERN_MISMATCH,
    "format": ErrorCodes.E301_INVALID_FORMAT,
    "required": ErrorCodes.E302_MISSING_FIELD,
    "minItems": ErrorCodes.E303_EMPTY_LIST,
    "additionalProperties": ErrorCodes.E304_UNKNOWN_FIELD,
    "enum": ErrorCodes.E305_NOT_ALLOWED,
}


@lru_cache(maxsize=1)
def load_schema() -> dict[str, Any]:
    """Load the OSCAL JSON schema shipped with the package."""
    resource = files("cac_transpiler.validation") / "schemas" / SCHEMA_FILE
    return json.loads(resource.read_text(encoding="utf-8"))


def schema_error_path(error: SchemaError) -> str:
    """Return the dotted path of the value an error is about."""
    return ".".join(str(part) for part in error.absolute_path)


def describe_schema_error(error: SchemaError) -> tuple[str, str | None]:
    """Return (message, suggestion) for a schema error.

    Datatype and enumeration failures are named by the ``title`` of the
    failing definition, with its ``description`` as the suggestion.
    Other failures keep the message produced by jsonschema.
    """
    schema = error.schema if isinstance(error.schema, dict) else {}
    title = schema.get("title")
    if error.validator in ("pattern", "format", "enum") and title:
        return f"'{error.instance}' is not a valid {title}", schema.get("description")
    if error.validator == "minItems":
        return "List must not be empty", "Leave the field out instead of writing an empty list"
    return error.message, None


class SchemaValidator(BaseValidator):
    """Validates the serialized documents against the OSCAL JSON schema.

    Every populated member of the envelope is checked in one pass, since
    the schema root has a property per document kind.
    """

    def __init__(self) -> None:
        """Compile the bundled schema."""
        self._validator = Draft202012Validator(load_schema(), format_checker=FormatChecker())

    def validate(
        self,
        models: OscalModels,
        result: ValidationResult,
    ) -> None:
        """Check datatypes, required fields and allowed values."""
        errors = sorted(
            self._validator.iter_errors(to_document(models)),
            key=lambda e: [str(part) for part in e.absolute_path],
        )
        for error in errors:
            message, suggestion = describe_schema_error(error)
            context: dict[str, Any] = {"keyword": error.validator}
            if isinstance(error.instance, str):
                context["value"] = error.instance
            result.add_error(
                _CODES.get(str(error.validator), ErrorCodes.E306_SCHEMA_VIOLATION),
                message,
                schema_error_path(error),
                suggestion,
                **context,
            )
