"""Grouping of evaluation plan procedures by executor."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from cac_transpiler.models.evaluation import (
    AssessmentExecutor,
    AssessmentProcedure,
    EvaluationPlan,
)
from cac_transpiler.oscal.common import Property, UUIDFactory, new_uuid
from cac_transpiler.oscal.component import DefinedComponent
from cac_transpiler.oscal.constants import (
    CHECK_DESCRIPTION_PROP,
    CHECK_ID_PROP,
    RULE_ID_PROP,
    RULE_SET_REMARKS,
    TRESTLE_NAMESPACE,
    VALIDATION_COMPONENT_TYPE,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssignedProcedure:
    """A procedure together with the requirement it assesses."""

    requirement_id: str
    procedure: AssessmentProcedure


@dataclass
class ExecutorProcedures:
    """The procedures assigned to one executor."""

    executor: AssessmentExecutor
    procedures: list[AssignedProcedure] = field(default_factory=list)


def collect_procedures(plan: EvaluationPlan) -> list[ExecutorProcedures]:
    """Assign every procedure of a plan to the executors it names.

    Args:
    ----
        plan: The evaluation plan.

    Returns:
    -------
        One entry per declared executor, in declaration order. Executors
        without procedures are kept. Mappings to undeclared executors are
        ignored. Duplicate mappings collapse: an executor gets each
        (requirement ID, procedure ID) pair once, from its first mapping.

    """
    by_executor: dict[str, ExecutorProcedures] = {
        executor.id: ExecutorProcedures(executor) for executor in plan.executors
    }
    seen: set[tuple[str, str, str]] = set()

    for assessment_plan in plan.plans:
        for assessment in assessment_plan.assessments:
            requirement_id = assessment.requirement.entry_id
            for procedure in assessment.procedures:
                for mapping in procedure.executors:
                    group = by_executor.get(mapping.id)
                    if group is None:
                        logger.debug(
                            "Procedure %s names undeclared executor %s; ignoring mapping",
                            procedure.id,
                            mapping.id,
                        )
                        continue
                    key = (mapping.id, requirement_id, procedure.id)
                    if key in seen:
                        continue
                    seen.add(key)
                    group.procedures.append(AssignedProcedure(requirement_id, procedure))

    return list(by_executor.values())


def _procedure_props(assigned: AssignedProcedure, index: int) -> list[Property]:
    remarks = RULE_SET_REMARKS.format(index=index)
    procedure = assigned.procedure
    description = procedure.description or procedure.name or procedure.id
    return [
        Property(
            name=RULE_ID_PROP,
            value=assigned.requirement_id,
            ns=TRESTLE_NAMESPACE,
            remarks=remarks,
        ),
        Property(name=CHECK_ID_PROP, value=procedure.id, ns=TRESTLE_NAMESPACE, remarks=remarks),
        Property(
            name=CHECK_DESCRIPTION_PROP,
            value=description,
            ns=TRESTLE_NAMESPACE,
            remarks=remarks,
        ),
    ]


def to_validation_component(
    group: ExecutorProcedures,
    uuid_factory: UUIDFactory = new_uuid,
) -> DefinedComponent:
    """Build the validation component of one executor."""
    executor = group.executor
    title = executor.name or executor.id

    props: list[Property] = []
    for index, assigned in enumerate(group.procedures):
        props.extend(_procedure_props(assigned, index))

    return DefinedComponent(
        uuid=uuid_factory(),
        type=VALIDATION_COMPONENT_TYPE,
        title=title,
        description=executor.description or f"{title} validation component",
        purpose=f"{executor.type.value} validation",
        props=props or None,
    )


def group_by_executor(
    plan: EvaluationPlan,
    uuid_factory: UUIDFactory = new_uuid,
) -> list[DefinedComponent]:
    """Build one validation component per executor of a plan.

    Components follow the order in which executors are declared, and each
    carries ``Rule_Id``/``Check_Id``/``Check_Description`` properties for
    the procedures mapped to its executor.

    Args:
    ----
        plan: The evaluation plan.
        uuid_factory: Source of component UUIDs.

    Returns:
    -------
        Validation components.

    """
    return [to_validation_component(group, uuid_factory) for group in collect_procedures(plan)]
