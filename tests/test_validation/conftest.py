"""Fixtures for validation tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

import pytest
from cac_transpiler.component.builder import DefinitionBuilder
from cac_transpiler.models import (
    ControlCatalog,
    EvaluationPlan,
    GuidanceDocument,
    Parameters,
)
from cac_transpiler.oscal.models import OscalModels
from cac_transpiler.transform.catalog import to_oscal_catalog
from cac_transpiler.transform.profile import to_oscal_profile


@pytest.fixture
def catalog_models(
    guidance: GuidanceDocument, uuid_factory: Callable[[], str]
) -> OscalModels:
    """Create a valid catalog envelope from the guidance fixture."""
    return OscalModels(catalog=to_oscal_catalog(guidance, uuid_factory))


@pytest.fixture
def profile_models(
    guidance: GuidanceDocument, uuid_factory: Callable[[], str]
) -> OscalModels:
    """Create a valid profile envelope from the guidance fixture."""
    return OscalModels(profile=to_oscal_profile(guidance, uuid_factory))


@pytest.fixture
def component_models(
    control_catalog: ControlCatalog,
    parameters: Parameters,
    plan: EvaluationPlan,
    uuid_factory: Callable[[], str],
    clock: Callable[[], datetime],
) -> OscalModels:
    """Create a valid component definition envelope from the fixtures."""
    definition = (
        DefinitionBuilder("ComponentDefinition", "v0.1.0", uuid_factory, clock)
        .add_target_component("my-project", "software", control_catalog, parameters)
        .add_validation_component(plan)
        .build()
    )
    return OscalModels(component_definition=definition)
