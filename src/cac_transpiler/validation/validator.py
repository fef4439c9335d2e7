"""Main validator combining all validation rules."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cac_transpiler.validation.base import CompositeValidator
from cac_transpiler.validation.errors import ValidationResult, ValidationSeverity
from cac_transpiler.validation.reference_validators import (
    LinkReferenceValidator,
    ResponsiblePartyValidator,
    UniqueIdValidator,
)
from cac_transpiler.validation.schema_validator import SchemaValidator

if TYPE_CHECKING:
    from cac_transpiler.oscal.models import OscalModels

logger = logging.getLogger(__name__)


class OscalValidator:
    """Main validator for OSCAL documents.

    Checks the serialized documents against the OSCAL JSON schema, then
    applies the reference checks the schema cannot express (identifier
    uniqueness and in-document references).
    """

    def __init__(self, strict: bool = False) -> None:
        """Initialize validator.

        Args:
        ----
            strict: If True, treat warnings as errors.

        """
        self.strict = strict
        self._validator = CompositeValidator(
            [
                SchemaValidator(),
                # Reference validators
                UniqueIdValidator(),
                LinkReferenceValidator(),
                ResponsiblePartyValidator(),
            ]
        )

    def validate(self, models: OscalModels) -> ValidationResult:
        """Validate an OSCAL document envelope.

        Args:
        ----
            models: The envelope to validate.

        Returns:
        -------
            ValidationResult with all issues found.

        """
        result = ValidationResult()
        self._validator.validate(models, result)
        logger.debug(
            "Validated %s: %d error(s), %d warning(s)",
            ", ".join(models.document_kinds()) or "empty envelope",
            len(result.errors),
            len(result.warnings),
        )
        return result

    def validate_and_raise(self, models: OscalModels) -> None:
        """Validate and raise exception if invalid.

        Args:
        ----
            models: The envelope to validate.

        Raises:
        ------
            ValidationError: If validation fails.

        """
        result = self.validate(models)

        if not result.is_valid:
            raise ValidationError(result)

        if self.strict and result.warnings:
            raise ValidationError(result)


class ValidationError(Exception):
    """Raised when validation fails."""

    def __init__(self, result: ValidationResult) -> None:
        """Initialize with validation result.

        Args:
        ----
            result: The validation result containing issues.

        """
        self.result = result
        error_count = len(result.errors)
        warning_count = len(result.warnings)

        parts = []
        if error_count:
            parts.append(f"{error_count} error(s)")
        if warning_count:
            parts.append(f"{warning_count} warning(s)")

        message = f"Validation failed: {', '.join(parts)}"
        super().__init__(message)

    def format_issues(self) -> str:
        """Format all issues as a string.

        Returns
        -------
            Formatted string with all issues.

        """
        lines = []

        for issue in self.result.errors:
            lines.append(f"ERROR: {issue}")

        for issue in self.result.warnings:
            lines.append(f"WARNING: {issue}")

        return "\n".join(lines)

    @property
    def errors_only(self) -> list[str]:
        """Get only error messages.

        Returns
        -------
            List of error message strings.

        """
        return [
            str(issue) for issue in self.result.issues if issue.severity == ValidationSeverity.ERROR
        ]
