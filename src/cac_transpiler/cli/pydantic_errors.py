"""Translate Pydantic errors to user-friendly messages."""

from __future__ import annotations

from pydantic_core import ErrorDetails

# Translation map for Pydantic error types
ERROR_TRANSLATIONS: dict[str, str] = {
    "missing": "This field is required but was not provided",
    "extra_forbidden": "This field is not allowed in this context",
    "string_type": "Must be a string",
    "int_type": "Must be an integer",
    "int_parsing": "Must be an integer",
    "bool_type": "Must be true or false",
    "bool_parsing": "Must be true or false",
    "list_type": "Must be a list",
    "dict_type": "Must be a mapping",
    "model_type": "Must be a mapping",
    "enum": "Must be one of the allowed values",
    "value_error": "Invalid value",
    "string_too_short": "Must not be empty",
    "datetime_type": "Must be a date and time",
    "datetime_from_date_parsing": "Must be a date and time",
}


def translate_pydantic_error(error: ErrorDetails) -> str:
    """Translate a Pydantic error to a user-friendly message.

    Args:
    ----
        error: The Pydantic error details.

    Returns:
    -------
        User-friendly error message.

    """
    error_type = error["type"]
    ctx = error.get("ctx") or {}

    base_msg = ERROR_TRANSLATIONS.get(error_type, error["msg"])

    if error_type == "enum":
        base_msg = f"Must be one of: {ctx.get('expected', 'unknown')}"

    elif error_type == "string_too_short":
        min_length = ctx.get("min_length", 1)
        if min_length > 1:
            base_msg = f"Must be at least {min_length} characters"

    return base_msg


def format_pydantic_location(loc: tuple[str | int, ...]) -> str:
    """Format Pydantic location tuple to readable path.

    Union members tried during validation (``str``, ``list[str]``, ...)
    are left out of the path.

    Args:
    ----
        loc: Location tuple from Pydantic error.

    Returns:
    -------
        Formatted path string, e.g. ``categories[0].guidelines[2].title``.

    """
    parts: list[str] = []
    for part in loc:
        if isinstance(part, int):
            parts.append(f"[{part}]")
        elif "[" in part or part in ("str", "int", "bool"):
            continue
        else:
            if parts:
                parts.append(".")
            parts.append(part)

    return "".join(parts) or "(document root)"


def get_suggestion_for_error(error: ErrorDetails) -> str | None:
    """Get a suggestion for how to fix the error.

    Args:
    ----
        error: The Pydantic error details.

    Returns:
    -------
        Suggestion string or None.

    """
    ctx = error.get("ctx") or {}

    suggestions: dict[str, str] = {
        "missing": "Add the required field to the input document",
        "extra_forbidden": "Remove this field or check for typos",
        "enum": f"Use one of the allowed values: {ctx.get('expected', 'see documentation')}",
        "string_too_short": "Provide a non-empty value",
        "dict_type": "Check the indentation of this section",
        "model_type": "Check the indentation of this section",
    }

    return suggestions.get(error["type"])
