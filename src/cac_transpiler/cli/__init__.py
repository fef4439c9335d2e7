"""CLI module for cac-transpiler."""

from cac_transpiler.cli.error_formatter import ErrorFormatter, ErrorTable, ErrorTree
from cac_transpiler.cli.exception_handler import handle_exceptions
from cac_transpiler.cli.pydantic_errors import (
    format_pydantic_location,
    get_suggestion_for_error,
    translate_pydantic_error,
)
from cac_transpiler.cli_main import app

__all__ = [
    "app",
    "ErrorFormatter",
    "ErrorTable",
    "ErrorTree",
    "handle_exceptions",
    "format_pydantic_location",
    "get_suggestion_for_error",
    "translate_pydantic_error",
]
