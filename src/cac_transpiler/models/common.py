"""Common types and validators for Pydantic input models."""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Any, Union

from pydantic import BeforeValidator

# Layout of the last-modified timestamp in guidance document metadata
DATETIME_TEXT_FORMAT = "%Y-%m-%d %H:%M:%S"


def coerce_date_text(value: Any) -> Any:
    """Turn YAML-decoded dates back into the text the document author wrote.

    PyYAML resolves unquoted ``2024-01-15`` to a ``date`` and unquoted
    ``2024-01-15 10:00:00`` to a ``datetime``. Date fields are kept as text
    and parsed during transformation, so both are rendered back.

    Examples:
    --------
        >>> coerce_date_text(date(2024, 1, 15))
        '2024-01-15'
        >>> coerce_date_text(datetime(2024, 1, 15, 10, 0, 0))
        '2024-01-15 10:00:00'
        >>> coerce_date_text("2024-01-15")
        '2024-01-15'

    """
    if isinstance(value, datetime):
        return value.strftime(DATETIME_TEXT_FORMAT)
    if isinstance(value, date):
        return value.isoformat()
    return value


def coerce_identifier(value: Any) -> Any:
    """Accept numeric identifiers (``id: 7``) as strings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return value


DateText = Annotated[str, BeforeValidator(coerce_date_text)]

Identifier = Annotated[str, BeforeValidator(coerce_identifier)]

# Closed set of values a tunable parameter may carry
ParameterValue = Union[bool, int, str, list[str]]


def parameter_values(value: ParameterValue | None) -> list[str]:
    """Render a parameter value as the list of strings a set-parameter holds.

    Args:
    ----
        value: Parameter default or modifier value.

    Returns:
    -------
        One string per value. Lists yield one entry per item, ``None``
        yields an empty list.

    Examples:
    --------
        >>> parameter_values(2)
        ['2']
        >>> parameter_values(True)
        ['true']
        >>> parameter_values(["main", "release"])
        ['main', 'release']

    """
    if value is None:
        return []
    if isinstance(value, bool):
        return ["true" if value else "false"]
    if isinstance(value, list):
        return [str(item) for item in value]
    return [str(value)]
