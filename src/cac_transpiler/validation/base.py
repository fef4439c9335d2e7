"""Base validator class and document traversal."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import TYPE_CHECKING

from pydantic import BaseModel

from cac_transpiler.validation.errors import ValidationResult

if TYPE_CHECKING:
    from cac_transpiler.oscal.models import OscalModels


def iter_models(model: BaseModel, path: str = "") -> Iterator[tuple[str, BaseModel]]:
    """Walk a model tree depth-first.

    Args:
    ----
        model: Root of the tree.
        path: Dotted path of ``model``.

    Yields:
    ------
        Tuples of (dotted path, model) for ``model`` and every nested
        model. Path segments use the OSCAL (alias) names and list indices.

    """
    yield path, model
    for name, info in type(model).model_fields.items():
        value = getattr(model, name)
        field_path = f"{path}.{info.alias or name}" if path else (info.alias or name)
        if isinstance(value, BaseModel):
            yield from iter_models(value, field_path)
        elif isinstance(value, list):
            for index, item in enumerate(value):
                if isinstance(item, BaseModel):
                    yield from iter_models(item, f"{field_path}.{index}")


def iter_fields(model: BaseModel, path: str) -> Iterator[tuple[str, str, object]]:
    """Yield (field name, dotted path, value) for each set field of a model."""
    for name, info in type(model).model_fields.items():
        value = getattr(model, name)
        if value is None:
            continue
        yield name, f"{path}.{info.alias or name}" if path else (info.alias or name), value


class BaseValidator(ABC):
    """Base class for validators."""

    @abstractmethod
    def validate(
        self,
        models: OscalModels,
        result: ValidationResult,
    ) -> None:
        """Validate the documents and add issues to result.

        Args:
        ----
            models: The OSCAL document envelope to validate.
            result: The result object to add issues to.

        """
        ...


class CompositeValidator(BaseValidator):
    """Combines multiple validators."""

    def __init__(self, validators: list[BaseValidator] | None = None) -> None:
        """Initialize with optional list of validators.

        Args:
        ----
            validators: List of validators to combine.

        """
        self.validators = validators or []

    def validate(
        self,
        models: OscalModels,
        result: ValidationResult,
    ) -> None:
        """Run all validators.

        Args:
        ----
            models: The OSCAL document envelope to validate.
            result: The result object to add issues to.

        """
        for validator in self.validators:
            validator.validate(models, result)


def iter_documents(models: OscalModels) -> Iterator[tuple[str, BaseModel]]:
    """Yield (document kind, root assembly) for each populated member of an envelope."""
    for name, info in type(models).model_fields.items():
        document = getattr(models, name)
        if document is not None:
            yield info.alias or name, document
