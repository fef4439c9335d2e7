"""Validation issue types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ValidationSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation issue.

    ``path`` starts with the document kind and continues with OSCAL
    (alias) names and list indices, e.g. ``catalog.groups.0.controls.1.id``.
    ``context`` carries the offending ``value`` where there is one.
    """

    code: str
    message: str
    severity: ValidationSeverity
    path: str
    suggestion: str | None = None
    context: dict[str, Any] = field(default_factory=dict)

    @property
    def document(self) -> str:
        """Document kind the issue was found in ('catalog', 'profile', ...)."""
        return self.path.partition(".")[0]

    def __str__(self) -> str:
        """Format issue as string."""
        text = f"[{self.code}] {self.message} at {self.path}"
        if self.suggestion:
            text += f" (hint: {self.suggestion})"
        return text


@dataclass
class ValidationResult:
    """Result of validation containing all issues."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get only error-level issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get only warning-level issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    @property
    def is_valid(self) -> bool:
        """Check if there are no errors (warnings are OK)."""
        return not self.errors

    def add_error(
        self, code: str, message: str, path: str, suggestion: str | None = None, **context: Any
    ) -> None:
        """Add an error issue."""
        self.issues.append(
            ValidationIssue(code, message, ValidationSeverity.ERROR, path, suggestion, context)
        )

    def add_warning(
        self, code: str, message: str, path: str, suggestion: str | None = None, **context: Any
    ) -> None:
        """Add a warning issue."""
        self.issues.append(
            ValidationIssue(code, message, ValidationSeverity.WARNING, path, suggestion, context)
        )


class ErrorCodes:
    """Standard validation error codes."""

    # E0xx - Reference errors
    E002_UNDEFINED_ROLE = "E002"
    E003_UNDEFINED_PARTY = "E003"

    # E1xx - Duplicate errors
    E100_DUPLICATE_ID = "E100"
    E101_DUPLICATE_UUID = "E101"

    # E3xx - OSCAL schema violations
    E300_PATTERN_MISMATCH = "E300"
    E301_INVALID_FORMAT = "E301"
    E302_MISSING_FIELD = "E302"
    E303_EMPTY_LIST = "E303"
    E304_UNKNOWN_FIELD = "E304"
    E305_NOT_ALLOWED = "E305"
    E306_SCHEMA_VIOLATION = "E306"

    # W0xx - Warnings
    W001_UNRESOLVED_LINK = "W001"
