"""Validation module for generated OSCAL documents."""

from cac_transpiler.validation.errors import (
    ErrorCodes,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
)
from cac_transpiler.validation.validator import (
    OscalValidator,
    ValidationError,
)

__all__ = [
    "ErrorCodes",
    "OscalValidator",
    "ValidationError",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
]
