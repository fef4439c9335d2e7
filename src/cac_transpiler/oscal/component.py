"""OSCAL component-definition model."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from cac_transpiler.oscal.common import BackMatter, Link, Metadata, OscalModel, Property


class SetParameter(OscalModel):
    """A value assigned to a control parameter."""

    param_id: Annotated[str, Field(alias="param-id")]
    values: list[str]
    remarks: str | None = None


class ImplementedRequirement(OscalModel):
    """How a component implements one control."""

    uuid: str
    control_id: Annotated[str, Field(alias="control-id")]
    description: str
    props: list[Property] | None = None
    links: list[Link] | None = None
    set_parameters: Annotated[
        list[SetParameter] | None,
        Field(default=None, alias="set-parameters"),
    ]


class ControlImplementation(OscalModel):
    """Controls of one source catalog or profile implemented by a component."""

    uuid: str
    source: str
    description: str
    props: list[Property] | None = None
    links: list[Link] | None = None
    set_parameters: Annotated[
        list[SetParameter] | None,
        Field(default=None, alias="set-parameters"),
    ]
    implemented_requirements: Annotated[
        list[ImplementedRequirement],
        Field(alias="implemented-requirements"),
    ]


class DefinedComponent(OscalModel):
    """A component: either an assessed target or a validation mechanism."""

    uuid: str
    type: str
    title: str
    description: str
    purpose: str | None = None
    props: list[Property] | None = None
    links: list[Link] | None = None
    control_implementations: Annotated[
        list[ControlImplementation] | None,
        Field(default=None, alias="control-implementations"),
    ]


class ComponentDefinition(OscalModel):
    """An OSCAL component definition."""

    uuid: str
    metadata: Metadata
    components: list[DefinedComponent] | None = None
    back_matter: Annotated[BackMatter | None, Field(default=None, alias="back-matter")]
