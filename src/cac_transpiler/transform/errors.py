"""Errors raised while transforming input documents."""

from __future__ import annotations


class TranspileError(Exception):
    """A value in an input document could not be transformed.

    Attributes
    ----------
        field: Name of the offending input field, when known.

    """

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize TranspileError.

        Args:
        ----
            message: Error message describing what went wrong.
            field: Optional name of the input field that caused the error.

        """
        self.field = field
        super().__init__(message)
