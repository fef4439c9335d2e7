"""cac-transpiler: Converter from Gemara compliance documents to OSCAL.

This package provides tools for:
- Loading and validating YAML/JSON guidance documents, control catalogs,
  evaluation plans and parameter files
- Transforming guidance documents to OSCAL catalogs and profiles
- Assembling OSCAL component definitions from catalogs and evaluation plans

Quick Start:
    >>> from cac_transpiler.models import load_control_catalog, load_parameters
    >>> from cac_transpiler.component import DefinitionBuilder
    >>>
    >>> catalog = load_control_catalog("osps.yml")
    >>> parameters = load_parameters("parameters.yml")
    >>> definition = (
    ...     DefinitionBuilder("ComponentDefinition", "v0.1.0")
    ...     .add_target_component("Example", "software", catalog, parameters)
    ...     .build()
    ... )

Modules:
    models: Pydantic models for the input documents
    oscal: Pydantic models for the OSCAL output documents
    transform: Guidance document to OSCAL catalog/profile transformation
    component: OSCAL component definition builder
    validation: Syntax and reference checks for OSCAL output
    cli: Command-line interface
"""

__version__ = "0.1.0"
