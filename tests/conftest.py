"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import itertools
import uuid
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

import pytest
from cac_transpiler.models import (
    ControlCatalog,
    EvaluationPlan,
    GuidanceDocument,
    ParameterModifierSet,
    Parameters,
    load_control_catalog,
    load_evaluation_plan,
    load_guidance_document,
    load_parameter_modifiers,
    load_parameters,
)

FIXED_NOW = datetime(2025, 3, 1, 9, 0, 0, tzinfo=timezone.utc)


def sequential_uuids() -> Callable[[], str]:
    """Return a factory producing valid, predictable version 4 UUIDs."""
    counter = itertools.count(1)
    return lambda: str(uuid.UUID(int=next(counter), version=4))


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def guidance_file(fixtures_dir: Path) -> Path:
    """Return path to the guidance document fixture."""
    return fixtures_dir / "guidance.yml"


@pytest.fixture
def catalog_file(fixtures_dir: Path) -> Path:
    """Return path to the control catalog fixture."""
    return fixtures_dir / "catalog.yml"


@pytest.fixture
def parameters_file(fixtures_dir: Path) -> Path:
    """Return path to the parameters fixture."""
    return fixtures_dir / "parameters.yml"


@pytest.fixture
def plan_file(fixtures_dir: Path) -> Path:
    """Return path to the evaluation plan fixture."""
    return fixtures_dir / "plan.yml"


@pytest.fixture
def modifiers_file(fixtures_dir: Path) -> Path:
    """Return path to the parameter modifiers fixture."""
    return fixtures_dir / "modifiers.yml"


@pytest.fixture
def guidance(guidance_file: Path) -> GuidanceDocument:
    """Load the guidance document fixture."""
    return load_guidance_document(guidance_file)


@pytest.fixture
def control_catalog(catalog_file: Path) -> ControlCatalog:
    """Load the control catalog fixture."""
    return load_control_catalog(catalog_file)


@pytest.fixture
def parameters(parameters_file: Path) -> Parameters:
    """Load the parameters fixture."""
    return load_parameters(parameters_file)


@pytest.fixture
def plan(plan_file: Path) -> EvaluationPlan:
    """Load the evaluation plan fixture."""
    return load_evaluation_plan(plan_file)


@pytest.fixture
def modifiers(modifiers_file: Path) -> ParameterModifierSet:
    """Load the parameter modifiers fixture."""
    return load_parameter_modifiers(modifiers_file)


@pytest.fixture
def uuid_factory() -> Callable[[], str]:
    """Return a deterministic UUID factory."""
    return sequential_uuids()


@pytest.fixture
def clock() -> Callable[[], datetime]:
    """Return a clock frozen at FIXED_NOW."""
    return lambda: FIXED_NOW
