"""Pydantic models for the transpiler's input documents.

Input documents follow the layered Gemara model:

- Layer 1 guidance documents: categories of guidelines
- Layer 2 control catalogs: control families with assessment requirements
- Layer 4 evaluation plans: executors and the procedures they run

plus parameter files (tunable values per assessment requirement) and
parameter-modifier files.

Primary Entry Points:
    load_guidance_document(path): Load and validate a guidance document
    load_control_catalog(path): Load and validate a control catalog
    load_evaluation_plan(path): Load and validate an evaluation plan
    load_parameters(path): Load parameters keyed by requirement ID
    load_parameter_modifiers(path): Load parameter modifiers
    validate_input_file(path, kind): Validate and return list of errors

Example:
-------
    >>> from cac_transpiler.models import load_guidance_document
    >>> guidance = load_guidance_document(Path("800-161.yml"))
    >>> print(f"Categories: {len(guidance.categories)}")

"""

from cac_transpiler.models.catalog import (
    AssessmentRequirement,
    CatalogMetadata,
    Control,
    ControlCatalog,
    ControlFamily,
)
from cac_transpiler.models.common import DateText, Identifier, ParameterValue, parameter_values
from cac_transpiler.models.evaluation import (
    Assessment,
    AssessmentExecutor,
    AssessmentPlan,
    AssessmentProcedure,
    Author,
    EntryMapping,
    EvaluationPlan,
    ExecutorMapping,
    ExecutorType,
    PlanMetadata,
)
from cac_transpiler.models.guidance import (
    Category,
    GuidanceDocument,
    GuidanceMetadata,
    Guideline,
    GuidelinePart,
    Mapping,
    MappingReference,
    ResourceReference,
)
from cac_transpiler.models.loader import (
    LoaderError,
    load_control_catalog,
    load_evaluation_plan,
    load_guidance_document,
    load_oscal_models,
    load_parameter_modifiers,
    load_parameters,
    load_yaml_file,
    validate_input_file,
)
from cac_transpiler.models.parameters import (
    Parameter,
    ParameterModifier,
    ParameterModifierSet,
    Parameters,
    ParametersAdapter,
)

__all__ = [
    # Common types
    "DateText",
    "Identifier",
    "ParameterValue",
    "parameter_values",
    # Guidance (Layer 1)
    "Category",
    "GuidanceDocument",
    "GuidanceMetadata",
    "Guideline",
    "GuidelinePart",
    "Mapping",
    "MappingReference",
    "ResourceReference",
    # Catalog (Layer 2)
    "AssessmentRequirement",
    "CatalogMetadata",
    "Control",
    "ControlCatalog",
    "ControlFamily",
    # Evaluation plan (Layer 4)
    "Assessment",
    "AssessmentExecutor",
    "AssessmentPlan",
    "AssessmentProcedure",
    "Author",
    "EntryMapping",
    "EvaluationPlan",
    "ExecutorMapping",
    "ExecutorType",
    "PlanMetadata",
    # Parameters
    "Parameter",
    "ParameterModifier",
    "ParameterModifierSet",
    "Parameters",
    "ParametersAdapter",
    # Loader utilities
    "LoaderError",
    "load_control_catalog",
    "load_evaluation_plan",
    "load_guidance_document",
    "load_oscal_models",
    "load_parameter_modifiers",
    "load_parameters",
    "load_yaml_file",
    "validate_input_file",
]
