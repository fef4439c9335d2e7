"""Builder for OSCAL component definitions."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone

from cac_transpiler.component.grouping import group_by_executor
from cac_transpiler.models.catalog import Control, ControlCatalog
from cac_transpiler.models.common import parameter_values
from cac_transpiler.models.evaluation import EvaluationPlan
from cac_transpiler.models.parameters import Parameter, ParameterModifier
from cac_transpiler.oscal.common import Metadata, Property, UUIDFactory, new_uuid
from cac_transpiler.oscal.component import (
    ComponentDefinition,
    ControlImplementation,
    DefinedComponent,
    ImplementedRequirement,
    SetParameter,
)
from cac_transpiler.oscal.constants import (
    FRAMEWORK_PROP,
    PARAMETER_DESCRIPTION_PROP,
    PARAMETER_ID_PROP,
    PARAMETER_VALUE_ALTERNATIVES_PROP,
    RULE_DESCRIPTION_PROP,
    RULE_ID_PROP,
    RULE_SET_REMARKS,
    TRESTLE_NAMESPACE,
)
from cac_transpiler.transform.identifiers import normalize_control_id

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current time in UTC."""
    return datetime.now(timezone.utc)


@dataclass
class BuilderState:
    """Components accumulated by a DefinitionBuilder."""

    targets: list[DefinedComponent] = field(default_factory=list)
    validations: list[DefinedComponent] = field(default_factory=list)


def materialize(
    state: BuilderState,
    definition_uuid: str,
    metadata: Metadata,
) -> ComponentDefinition:
    """Create a component definition from builder state.

    Target components come first, then validation components. The
    result shares no objects with ``state``.
    """
    components = [
        component.model_copy(deep=True) for component in (*state.targets, *state.validations)
    ]
    return ComponentDefinition(
        uuid=definition_uuid,
        metadata=metadata,
        components=components or None,
    )


def _trestle_prop(name: str, value: str, remarks: str | None = None) -> Property:
    return Property(name=name, value=value, ns=TRESTLE_NAMESPACE, remarks=remarks)


def _parameter_props(parameter: Parameter, remarks: str) -> list[Property]:
    props = [_trestle_prop(PARAMETER_ID_PROP, parameter.id, remarks)]
    if parameter.description:
        props.append(_trestle_prop(PARAMETER_DESCRIPTION_PROP, parameter.description, remarks))
    values = parameter_values(parameter.default)
    if values:
        props.append(_trestle_prop(PARAMETER_VALUE_ALTERNATIVES_PROP, ", ".join(values), remarks))
    return props


class DefinitionBuilder:
    """Assemble an OSCAL component definition step by step.

    Mutating methods return the builder so calls can be chained. Each
    call to :meth:`build` returns an independent snapshot reflecting every
    change made so far.

    Usage:
        definition = (
            DefinitionBuilder("ComponentDefinition", "v0.1.0")
            .add_target_component("Example", "software", catalog, parameters)
            .add_validation_component(plan)
            .build()
        )
    """

    def __init__(
        self,
        title: str,
        version: str,
        uuid_factory: UUIDFactory = new_uuid,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize the builder.

        Args:
        ----
            title: Title of the component definition.
            version: Version of the component definition.
            uuid_factory: Source of every UUID in the definition.
            clock: Source of the last-modified timestamp.

        """
        self.title = title
        self.version = version
        self._uuid_factory = uuid_factory
        self._clock = clock
        self._uuid = uuid_factory()
        self._state = BuilderState()

    def add_target_component(
        self,
        title: str,
        component_type: str,
        catalog: ControlCatalog,
        parameters: Mapping[str, Sequence[Parameter]],
    ) -> DefinitionBuilder:
        """Add a component implementing the controls of a catalog.

        Args:
        ----
            title: Component title.
            component_type: OSCAL component type, e.g. ``"software"``.
            catalog: Catalog whose controls the component implements.
            parameters: Parameters keyed by assessment requirement ID. Their
                defaults seed the implementation's set-parameters.

        Returns:
        -------
            The builder.

        """
        rule_props: list[Property] = []
        set_parameters: dict[str, SetParameter] = {}
        implemented: list[ImplementedRequirement] = []
        rule_index = 0

        for family in catalog.control_families:
            for control in family.controls:
                requirement_props: list[Property] = []
                for requirement in control.assessment_requirements:
                    remarks = RULE_SET_REMARKS.format(index=rule_index)
                    rule_index += 1
                    rule_props.append(_trestle_prop(RULE_ID_PROP, requirement.id, remarks))
                    rule_props.append(
                        _trestle_prop(
                            RULE_DESCRIPTION_PROP, requirement.text or requirement.id, remarks
                        )
                    )
                    for parameter in parameters.get(requirement.id, ()):
                        rule_props.extend(_parameter_props(parameter, remarks))
                        values = parameter_values(parameter.default)
                        if values and parameter.id not in set_parameters:
                            set_parameters[parameter.id] = SetParameter(
                                param_id=parameter.id, values=values
                            )
                    requirement_props.append(_trestle_prop(RULE_ID_PROP, requirement.id))
                implemented.append(self._implemented_requirement(control, requirement_props))

        implementation = ControlImplementation(
            uuid=self._uuid_factory(),
            source=catalog.metadata.id,
            description=f"Control implementation for {catalog.metadata.title or catalog.metadata.id}",
            props=[_trestle_prop(FRAMEWORK_PROP, catalog.metadata.id)],
            set_parameters=list(set_parameters.values()) or None,
            implemented_requirements=implemented,
        )

        self._state.targets.append(
            DefinedComponent(
                uuid=self._uuid_factory(),
                type=component_type,
                title=title,
                description=title,
                props=rule_props or None,
                control_implementations=[implementation],
            )
        )
        logger.debug(
            "Added target component %s implementing %d controls of %s",
            title,
            len(implemented),
            catalog.metadata.id,
        )
        return self

    def _implemented_requirement(
        self,
        control: Control,
        requirement_props: list[Property],
    ) -> ImplementedRequirement:
        return ImplementedRequirement(
            uuid=self._uuid_factory(),
            control_id=normalize_control_id(control.id),
            description=control.objective or control.title or control.id,
            props=requirement_props or None,
        )

    def add_validation_component(self, plan: EvaluationPlan) -> DefinitionBuilder:
        """Add one validation component per executor of an evaluation plan.

        Args:
        ----
            plan: The evaluation plan.

        Returns:
        -------
            The builder.

        """
        components = group_by_executor(plan, self._uuid_factory)
        self._state.validations.extend(components)
        logger.debug(
            "Added %d validation components from plan by %s",
            len(components),
            plan.metadata.author.name,
        )
        return self

    def add_parameter_modifiers(
        self,
        target_id: str,
        modifiers: Sequence[ParameterModifier],
    ) -> DefinitionBuilder:
        """Replace set-parameter values of every target component.

        Every set-parameter whose ID matches a modifier's ``target_id``
        takes the modifier's value. Modifiers for parameters no target sets
        change nothing. ``tighten`` and ``loosen`` modifiers behave alike.

        Args:
        ----
            target_id: ID of the catalog the modifiers were written for.
                Recorded in the log; modifiers apply to all targets.
            modifiers: The modifiers to apply, in order.

        Returns:
        -------
            The builder.

        """
        for component in self._state.targets:
            for implementation in component.control_implementations or []:
                for set_parameter in implementation.set_parameters or []:
                    for modifier in modifiers:
                        if modifier.target_id != set_parameter.param_id:
                            continue
                        values = parameter_values(modifier.value)
                        if not values:
                            logger.debug(
                                "Ignoring empty %s modifier for %s",
                                modifier.mod_type or "unnamed",
                                modifier.target_id,
                            )
                            continue
                        set_parameter.values = values
                        logger.debug(
                            "Applied %s modifier for %s to %s (target %s)",
                            modifier.mod_type or "unnamed",
                            modifier.target_id,
                            component.title,
                            target_id,
                        )
        return self

    def build(self) -> ComponentDefinition:
        """Return the component definition built so far.

        Returns
        -------
            A new ComponentDefinition; later builder calls do not change it.

        """
        metadata = Metadata(
            title=self.title,
            last_modified=self._clock(),
            version=self.version,
        )
        return materialize(self._state, self._uuid, metadata)

