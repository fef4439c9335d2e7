"""Tests for grouping evaluation plan procedures by executor."""

from collections.abc import Callable

from cac_transpiler.component.grouping import collect_procedures, group_by_executor
from cac_transpiler.models import EvaluationPlan
from cac_transpiler.oscal.constants import TRESTLE_NAMESPACE


def _plan(executors: list[dict], procedures: list[dict]) -> EvaluationPlan:
    return EvaluationPlan.model_validate(
        {
            "metadata": {"author": {"name": "tester"}},
            "executors": executors,
            "plans": [
                {
                    "control": {"entry-id": "CTRL-1"},
                    "assessments": [
                        {"requirement": {"entry-id": "REQ-1"}, "procedures": procedures}
                    ],
                }
            ],
        }
    )


class TestCollectProcedures:
    """Tests for collect_procedures function."""

    def test_undeclared_executor_ignored(self, plan: EvaluationPlan) -> None:
        """Should ignore mappings to executors the plan does not declare."""
        groups = collect_procedures(plan)

        assert [g.executor.id for g in groups] == ["manual-review", "opa"]
        assert [p.procedure.id for p in groups[0].procedures] == ["check-approvals"]
        assert [p.procedure.id for p in groups[1].procedures] == [
            "check-approvals",
            "check-codeowners",
        ]
        assert all(p.requirement_id == "OSPS-QA-07.01" for p in groups[1].procedures)

    def test_duplicate_mapping_counted_once(self) -> None:
        """Should assign a procedure once even if it names an executor twice."""
        plan = _plan(
            [{"id": "E1"}],
            [{"id": "P1", "executors": [{"id": "E1"}, {"id": "E1"}]}],
        )

        groups = collect_procedures(plan)

        assert len(groups[0].procedures) == 1

    def test_repeated_procedure_id_keeps_first(self) -> None:
        """Should collapse procedures sharing an ID within one requirement."""
        plan = _plan(
            [{"id": "E1"}],
            [
                {"id": "P1", "description": "first", "executors": [{"id": "E1"}]},
                {"id": "P1", "description": "second", "executors": [{"id": "E1"}]},
                {"id": "P2", "executors": [{"id": "E1"}]},
            ],
        )

        procedures = collect_procedures(plan)[0].procedures

        assert [p.procedure.id for p in procedures] == ["P1", "P2"]
        assert procedures[0].procedure.description == "first"

    def test_same_procedure_for_two_requirements(self) -> None:
        """Should keep a procedure once per requirement it assesses."""
        procedure = {"id": "P1", "executors": [{"id": "E1"}]}
        plan = EvaluationPlan.model_validate(
            {
                "metadata": {"author": {"name": "tester"}},
                "executors": [{"id": "E1"}],
                "plans": [
                    {
                        "control": {"entry-id": "CTRL-1"},
                        "assessments": [
                            {"requirement": {"entry-id": "REQ-1"}, "procedures": [procedure]},
                            {"requirement": {"entry-id": "REQ-2"}, "procedures": [procedure]},
                        ],
                    }
                ],
            }
        )

        procedures = collect_procedures(plan)[0].procedures

        assert [(p.requirement_id, p.procedure.id) for p in procedures] == [
            ("REQ-1", "P1"),
            ("REQ-2", "P1"),
        ]


class TestGroupByExecutor:
    """Tests for group_by_executor function."""

    def test_declaration_order(self, uuid_factory: Callable[[], str]) -> None:
        """Should order components by executor declaration, not procedure order."""
        plan = _plan(
            [{"id": "E2", "name": "Second"}, {"id": "E1", "name": "First"}],
            [
                {"id": "P1", "executors": [{"id": "E1"}]},
                {"id": "P2", "executors": [{"id": "E2"}]},
            ],
        )

        components = group_by_executor(plan, uuid_factory)

        assert [c.title for c in components] == ["Second", "First"]

    def test_component_content(
        self, plan: EvaluationPlan, uuid_factory: Callable[[], str]
    ) -> None:
        """Should describe each procedure with rule and check properties."""
        manual, opa = group_by_executor(plan, uuid_factory)

        assert opa.type == "validation"
        assert opa.title == "OPA"
        assert opa.description == "Open Policy Agent checks"
        assert opa.purpose == "automated validation"
        assert manual.purpose == "manual validation"
        assert manual.description == "Manual Review validation component"

        assert opa.props is not None
        assert [(p.name, p.value, p.remarks) for p in opa.props] == [
            ("Rule_Id", "OSPS-QA-07.01", "rule_set_00"),
            ("Check_Id", "check-approvals", "rule_set_00"),
            ("Check_Description", "Verify branch protection requires approvals", "rule_set_00"),
            ("Rule_Id", "OSPS-QA-07.01", "rule_set_01"),
            ("Check_Id", "check-codeowners", "rule_set_01"),
            ("Check_Description", "Check CODEOWNERS", "rule_set_01"),
        ]
        assert all(p.ns == TRESTLE_NAMESPACE for p in opa.props)

    def test_executor_without_procedures(self, uuid_factory: Callable[[], str]) -> None:
        """Should still yield a component for an executor with no procedures."""
        plan = _plan(
            [{"id": "E1"}, {"id": "idle"}],
            [{"id": "P1", "executors": [{"id": "E1"}]}],
        )

        components = group_by_executor(plan, uuid_factory)

        assert [c.title for c in components] == ["E1", "idle"]
        assert components[1].props is None

    def test_distinct_uuids(self, plan: EvaluationPlan, uuid_factory: Callable[[], str]) -> None:
        """Should give each component its own UUID."""
        components = group_by_executor(plan, uuid_factory)
        assert len({c.uuid for c in components}) == len(components)
