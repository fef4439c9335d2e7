"""Full pipeline integration tests for cac-transpiler.

Tests the complete conversion flow: YAML -> Pydantic -> OSCAL -> JSON/YAML,
and reading the result back for validation.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import pytest
from cac_transpiler.component import DefinitionBuilder
from cac_transpiler.models import (
    load_control_catalog,
    load_evaluation_plan,
    load_guidance_document,
    load_oscal_models,
    load_parameter_modifiers,
    load_parameters,
)
from cac_transpiler.oscal.models import OscalModels, dump_oscal
from cac_transpiler.transform import to_oscal_catalog, to_oscal_profile
from cac_transpiler.validation import OscalValidator


def _write_and_reload(models: OscalModels, path: Path, fmt: str) -> OscalModels:
    path.write_text(dump_oscal(models, fmt), encoding="utf-8")  # type: ignore[arg-type]
    return load_oscal_models(path)


class TestFullPipeline:
    """Integration tests for the full conversion pipeline."""

    @pytest.mark.parametrize("fmt", ["json", "yaml"])
    def test_guidance_to_catalog(
        self,
        tmp_path: Path,
        guidance_file: Path,
        uuid_factory: Callable[[], str],
        fmt: str,
    ) -> None:
        """Should convert guidance to a catalog that survives a round trip."""
        guidance = load_guidance_document(guidance_file)
        models = OscalModels(catalog=to_oscal_catalog(guidance, uuid_factory))

        reloaded = _write_and_reload(models, tmp_path / f"catalog.{fmt}", fmt)

        assert reloaded.catalog is not None
        assert reloaded.catalog.uuid == models.catalog.uuid  # type: ignore[union-attr]
        assert OscalValidator(strict=True).validate(reloaded).issues == []

    def test_guidance_to_profile(
        self,
        tmp_path: Path,
        guidance_file: Path,
        uuid_factory: Callable[[], str],
    ) -> None:
        """Should convert shared guidelines to a valid profile."""
        guidance = load_guidance_document(guidance_file)
        models = OscalModels(profile=to_oscal_profile(guidance, uuid_factory))

        reloaded = _write_and_reload(models, tmp_path / "profile.json", "json")

        assert reloaded.profile is not None
        assert {imp.href for imp in reloaded.profile.imports} == {
            ref.url for ref in guidance.metadata.mapping_references
        }
        assert OscalValidator(strict=True).validate(reloaded).issues == []

    def test_catalog_and_plan_to_component_definition(
        self,
        tmp_path: Path,
        catalog_file: Path,
        parameters_file: Path,
        plan_file: Path,
        modifiers_file: Path,
        uuid_factory: Callable[[], str],
        clock: Callable[[], datetime],
    ) -> None:
        """Should build a valid component definition from every input kind."""
        modifier_set = load_parameter_modifiers(modifiers_file)
        definition = (
            DefinitionBuilder("ComponentDefinition", "v0.1.0", uuid_factory, clock)
            .add_target_component(
                "my-project",
                "software",
                load_control_catalog(catalog_file),
                load_parameters(parameters_file),
            )
            .add_validation_component(load_evaluation_plan(plan_file))
            .add_parameter_modifiers(modifier_set.target_id or "", modifier_set.modifiers)
            .build()
        )
        models = OscalModels(component_definition=definition)

        reloaded = _write_and_reload(models, tmp_path / "component-definition.yaml", "yaml")

        assert reloaded.component_definition is not None
        components = reloaded.component_definition.components or []
        assert [c.type for c in components] == ["software", "validation", "validation"]
        set_parameters = components[0].control_implementations[0].set_parameters  # type: ignore[index]
        assert set_parameters is not None
        assert set_parameters[0].param_id == "main_branch_min_approvals"
        assert set_parameters[0].values == ["2"]
        assert OscalValidator(strict=True).validate(reloaded).issues == []

    def test_documents_combined_in_one_envelope(
        self,
        guidance_file: Path,
        uuid_factory: Callable[[], str],
    ) -> None:
        """Should validate each member of an envelope on its own."""
        guidance = load_guidance_document(guidance_file)
        models = OscalModels(
            catalog=to_oscal_catalog(guidance, uuid_factory),
            profile=to_oscal_profile(guidance, uuid_factory),
        )

        assert models.document_kinds() == ["catalog", "profile"]
        assert OscalValidator().validate(models).is_valid
