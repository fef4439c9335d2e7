"""Models for tunable assessment parameters and their modifiers."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from cac_transpiler.models.common import Identifier, ParameterValue


class Parameter(BaseModel):
    """A "knob" that can be tuned on an assessment requirement.

    Example:
    -------
        ```yaml
        OSPS-QA-07.01:
          - id: main_branch_min_approvals
            description: Minimum number of approvals
            default: 1
        ```

    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Annotated[Identifier, Field(min_length=1, description="Parameter identifier")]
    description: Annotated[str, Field(default="", description="Parameter description")]
    default: Annotated[
        ParameterValue | None,
        Field(default=None, description="Default value"),
    ]


# Key is an assessment requirement ID, value is the parameters tuning it
Parameters = dict[str, list[Parameter]]

ParametersAdapter: TypeAdapter[Parameters] = TypeAdapter(Parameters)


class ParameterModifier(BaseModel):
    """A change to the default value of a parameter.

    The modification type is informational; ``tighten`` and ``loosen``
    both replace the value.

    Example:
    -------
        ```yaml
        - target-id: main_branch_min_approvals
          modification-type: tighten
          modification-rationale: Two reviewers required by policy
          value: 2
        ```

    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    target_id: Annotated[
        Identifier,
        Field(min_length=1, alias="target-id", description="ID of the parameter to modify"),
    ]
    mod_type: Annotated[
        str,
        Field(default="", alias="modification-type", description="tighten or loosen"),
    ]
    modification_rationale: Annotated[
        str,
        Field(default="", alias="modification-rationale", description="Why it changes"),
    ]
    description: Annotated[str, Field(default="", description="Modifier description")]
    value: Annotated[ParameterValue, Field(description="New parameter value")]


class ParameterModifierSet(BaseModel):
    """A file of parameter modifiers for one target catalog."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    target_id: Annotated[
        Identifier,
        Field(default="", alias="target-id", description="Catalog the modifiers apply to"),
    ]
    modifiers: Annotated[list[ParameterModifier], Field(default_factory=list)]
