"""Models for Layer 4 evaluation plans."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cac_transpiler.models.common import Identifier


class ExecutorType(str, Enum):
    """How an assessment executor runs its procedures."""

    AUTOMATED = "automated"
    MANUAL = "manual"


class Author(BaseModel):
    """Author of an evaluation plan."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Annotated[str, Field(min_length=1, description="Author name")]
    uri: Annotated[str, Field(default="", description="Author URI")]
    version: Annotated[str, Field(default="", description="Author tool version")]


class PlanMetadata(BaseModel):
    """Metadata of an evaluation plan."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Annotated[Identifier, Field(default="", description="Plan identifier")]
    version: Annotated[Identifier, Field(default="", description="Plan version")]
    author: Annotated[Author, Field(description="Plan author")]


class AssessmentExecutor(BaseModel):
    """A tool or person able to run assessment procedures.

    Example:
    -------
        ```yaml
        executors:
          - id: automated-executor
            name: Automated Executor
            type: Automated
        ```

    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Annotated[Identifier, Field(min_length=1, description="Executor identifier")]
    name: Annotated[str, Field(default="", description="Executor display name")]
    type: Annotated[
        ExecutorType,
        Field(default=ExecutorType.AUTOMATED, description="Automated or manual"),
    ]
    description: Annotated[str, Field(default="", description="Executor description")]

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: Any) -> Any:
        """Accept executor types in any letter case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


class ExecutorMapping(BaseModel):
    """Reference from a procedure to an executor."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Annotated[Identifier, Field(min_length=1, description="Executor identifier")]


class EntryMapping(BaseModel):
    """Reference to an entry (control or requirement) of a catalog."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    reference_id: Annotated[Identifier, Field(default="", alias="reference-id")]
    entry_id: Annotated[Identifier, Field(min_length=1, alias="entry-id")]
    remarks: Annotated[str, Field(default="")]


class AssessmentProcedure(BaseModel):
    """A check that evaluates one assessment requirement."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Annotated[Identifier, Field(min_length=1, description="Procedure identifier")]
    name: Annotated[str, Field(default="", description="Procedure name")]
    description: Annotated[str, Field(default="", description="What the procedure checks")]
    documentation: Annotated[str, Field(default="", description="Documentation URL")]
    executors: Annotated[
        list[ExecutorMapping],
        Field(default_factory=list, description="Executors that can run the procedure"),
    ]


class Assessment(BaseModel):
    """Procedures evaluating one requirement."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    requirement: Annotated[EntryMapping, Field(description="Assessed requirement")]
    procedures: Annotated[list[AssessmentProcedure], Field(default_factory=list)]


class AssessmentPlan(BaseModel):
    """Assessments for one control."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    control: Annotated[EntryMapping, Field(description="Assessed control")]
    assessments: Annotated[list[Assessment], Field(default_factory=list)]


class EvaluationPlan(BaseModel):
    """Root model for a Layer 4 evaluation plan.

    Example:
    -------
        ```yaml
        metadata:
          author:
            name: myvalidator
        executors:
          - id: automated-executor
            name: Automated Executor
            type: automated
        plans:
          - control:
              entry-id: OSPS-QA-07
            assessments:
              - requirement:
                  entry-id: OSPS-QA-07.01
                procedures:
                  - id: my-check-id
                    name: My Check
                    executors:
                      - id: automated-executor
        ```

    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    metadata: Annotated[PlanMetadata, Field(description="Plan metadata")]
    executors: Annotated[list[AssessmentExecutor], Field(default_factory=list)]
    plans: Annotated[list[AssessmentPlan], Field(default_factory=list)]
