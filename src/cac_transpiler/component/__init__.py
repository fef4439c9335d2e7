"""OSCAL component definition assembly.

A component definition lists target components (the software being
assessed, with the controls it implements and the parameter values it
uses) and validation components (the tools that check those controls).

Example:
-------
    >>> from cac_transpiler.component import DefinitionBuilder
    >>>
    >>> definition = (
    ...     DefinitionBuilder("ComponentDefinition", "v0.1.0")
    ...     .add_target_component("Example", "software", catalog, parameters)
    ...     .add_validation_component(plan)
    ...     .add_parameter_modifiers(catalog.metadata.id, modifiers)
    ...     .build()
    ... )

"""

from cac_transpiler.component.builder import BuilderState, DefinitionBuilder, materialize
from cac_transpiler.component.grouping import (
    AssignedProcedure,
    ExecutorProcedures,
    collect_procedures,
    group_by_executor,
    to_validation_component,
)

__all__ = [
    "AssignedProcedure",
    "BuilderState",
    "DefinitionBuilder",
    "ExecutorProcedures",
    "collect_procedures",
    "group_by_executor",
    "materialize",
    "to_validation_component",
]
