"""Models for Layer 2 control catalogs."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from cac_transpiler.models.common import Identifier


class AssessmentRequirement(BaseModel):
    """A testable requirement attached to a control.

    Example:
    -------
        ```yaml
        assessment-requirements:
          - id: OSPS-QA-07.01
            text: Require at least one non-author approval before merging.
            applicability: [Maturity Level 3]
        ```

    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Annotated[Identifier, Field(min_length=1, description="Requirement identifier")]
    text: Annotated[str, Field(default="", description="Requirement text")]
    applicability: Annotated[
        list[str],
        Field(default_factory=list, description="Applicability categories"),
    ]
    recommendation: Annotated[str, Field(default="", description="Recommendation text")]


class Control(BaseModel):
    """A control with its assessment requirements."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Annotated[Identifier, Field(min_length=1, description="Control identifier")]
    title: Annotated[str, Field(default="", description="Control title")]
    objective: Annotated[str, Field(default="", description="Control objective")]
    assessment_requirements: Annotated[
        list[AssessmentRequirement],
        Field(default_factory=list, alias="assessment-requirements"),
    ]


class ControlFamily(BaseModel):
    """A family of related controls."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Annotated[Identifier, Field(min_length=1, description="Family identifier")]
    title: Annotated[str, Field(default="", description="Family title")]
    description: Annotated[str, Field(default="", description="Family description")]
    controls: Annotated[list[Control], Field(default_factory=list)]


class CatalogMetadata(BaseModel):
    """Metadata of a control catalog."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Annotated[Identifier, Field(min_length=1, description="Catalog identifier")]
    title: Annotated[str, Field(default="", description="Catalog title")]
    description: Annotated[str, Field(default="", description="Catalog description")]
    version: Annotated[Identifier, Field(default="", description="Catalog version")]


class ControlCatalog(BaseModel):
    """Root model for a Layer 2 control catalog.

    The catalog is the target a component declares it implements.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    metadata: Annotated[CatalogMetadata, Field(description="Catalog metadata")]
    control_families: Annotated[
        list[ControlFamily],
        Field(default_factory=list, alias="control-families"),
    ]
