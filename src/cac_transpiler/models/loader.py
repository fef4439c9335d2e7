"""YAML/JSON file loading utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ValidationError

from cac_transpiler.models.catalog import ControlCatalog
from cac_transpiler.models.evaluation import EvaluationPlan
from cac_transpiler.models.guidance import GuidanceDocument
from cac_transpiler.models.parameters import (
    ParameterModifier,
    ParameterModifierSet,
    Parameters,
    ParametersAdapter,
)
from cac_transpiler.oscal.models import OscalModels

InputKind = Literal["guidance", "catalog", "plan", "parameters", "modifiers", "oscal"]

_MODELS: dict[str, type[BaseModel]] = {
    "guidance": GuidanceDocument,
    "catalog": ControlCatalog,
    "plan": EvaluationPlan,
    "modifiers": ParameterModifierSet,
    "oscal": OscalModels,
}


class LoaderError(Exception):
    """Error during YAML/JSON file loading."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        """Initialize LoaderError.

        Args:
        ----
            message: Error message describing what went wrong.
            path: Optional path to the file that caused the error.

        """
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


def load_yaml_file(path: Path) -> Any:
    """Load a YAML or JSON file and return the decoded data.

    Args:
    ----
        path: Path to the YAML or JSON file.

    Returns:
    -------
        Parsed data from the file (a dictionary or a list).

    Raises:
    ------
        LoaderError: If the file cannot be loaded or parsed.

    """
    if not path.exists():
        raise LoaderError(f"File not found: {path}", path)

    if not path.is_file():
        raise LoaderError(f"Not a file: {path}", path)

    suffix = path.suffix.lower()
    if suffix not in {".yaml", ".yml", ".json"}:
        raise LoaderError(
            f"Unsupported file extension: {suffix}. Use .yaml, .yml, or .json",
            path,
        )

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise LoaderError(f"YAML parsing error: {e}", path) from e
    except OSError as e:
        raise LoaderError(f"File read error: {e}", path) from e

    if data is None:
        raise LoaderError("File is empty", path)

    if not isinstance(data, (dict, list)):
        raise LoaderError(
            f"Expected a mapping or a list at root level, got {type(data).__name__}",
            path,
        )

    return data


def _require_mapping(data: Any, path: Path) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise LoaderError(
            f"Expected dictionary at root level, got {type(data).__name__}",
            path,
        )
    return data


def load_guidance_document(path: Path) -> GuidanceDocument:
    """Load and validate a Layer 1 guidance document.

    Raises
    ------
        LoaderError: If the file cannot be loaded.
        ValidationError: If the file content is invalid.

    """
    data = _require_mapping(load_yaml_file(path), path)
    return GuidanceDocument.model_validate(data)


def load_control_catalog(path: Path) -> ControlCatalog:
    """Load and validate a Layer 2 control catalog.

    Raises
    ------
        LoaderError: If the file cannot be loaded.
        ValidationError: If the file content is invalid.

    """
    data = _require_mapping(load_yaml_file(path), path)
    return ControlCatalog.model_validate(data)


def load_evaluation_plan(path: Path) -> EvaluationPlan:
    """Load and validate a Layer 4 evaluation plan.

    Raises
    ------
        LoaderError: If the file cannot be loaded.
        ValidationError: If the file content is invalid.

    """
    data = _require_mapping(load_yaml_file(path), path)
    return EvaluationPlan.model_validate(data)


def load_parameters(path: Path) -> Parameters:
    """Load parameters keyed by assessment requirement ID.

    Raises
    ------
        LoaderError: If the file cannot be loaded.
        ValidationError: If the file content is invalid.

    """
    data = _require_mapping(load_yaml_file(path), path)
    return ParametersAdapter.validate_python(data)


def load_parameter_modifiers(path: Path) -> ParameterModifierSet:
    """Load parameter modifiers.

    The file is either a mapping with ``target-id`` and ``modifiers`` keys
    or a bare list of modifiers.

    Raises
    ------
        LoaderError: If the file cannot be loaded.
        ValidationError: If the file content is invalid.

    """
    data = load_yaml_file(path)
    if isinstance(data, list):
        return ParameterModifierSet(
            modifiers=[ParameterModifier.model_validate(item) for item in data]
        )
    return ParameterModifierSet.model_validate(data)


def load_oscal_models(path: Path) -> OscalModels:
    """Load an OSCAL catalog, profile or component definition.

    Raises
    ------
        LoaderError: If the file cannot be loaded or holds no OSCAL document.
        ValidationError: If the file content is invalid.

    """
    data = _require_mapping(load_yaml_file(path), path)
    models = OscalModels.model_validate(data)
    if not models.document_kinds():
        raise LoaderError(
            "No OSCAL document found. Expected a 'catalog', 'profile' or "
            "'component-definition' root key",
            path,
        )
    return models


def validate_input_file(path: Path, kind: InputKind) -> list[str]:
    """Validate an input file and return list of errors.

    This is a non-throwing counterpart of the ``load_*`` functions,
    useful for reporting every problem at once.

    Args:
    ----
        path: Path to the file.
        kind: Which kind of document the file should hold.

    Returns:
    -------
        List of error messages (empty if valid).

    """
    errors: list[str] = []

    try:
        data = load_yaml_file(path)
    except LoaderError as e:
        return [str(e)]

    try:
        if kind == "parameters":
            ParametersAdapter.validate_python(data)
        elif kind == "modifiers" and isinstance(data, list):
            for item in data:
                ParameterModifier.model_validate(item)
        else:
            _MODELS[kind].model_validate(data)
    except ValidationError as e:
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            msg = error["msg"]
            errors.append(f"{loc}: {msg}")

    return errors
