"""Tests for validation against the OSCAL JSON schema."""

import pytest
from cac_transpiler.oscal.common import Link
from cac_transpiler.oscal.models import OscalModels
from cac_transpiler.validation.errors import ErrorCodes, ValidationResult
from cac_transpiler.validation.schema_validator import SchemaValidator, load_schema
from jsonschema import Draft202012Validator


def _validate(models: OscalModels) -> ValidationResult:
    result = ValidationResult()
    SchemaValidator().validate(models, result)
    return result


def _codes(result: ValidationResult) -> list[str]:
    return [issue.code for issue in result.issues]


class TestSchema:
    """Tests for the bundled schema."""

    def test_schema_is_valid(self) -> None:
        """Should be a valid Draft 2020-12 schema."""
        Draft202012Validator.check_schema(load_schema())

    def test_document_kinds(self) -> None:
        """Should define the three supported document kinds."""
        assert set(load_schema()["properties"]) == {
            "catalog",
            "profile",
            "component-definition",
        }

    @pytest.mark.parametrize(
        ("definition", "valid", "invalid"),
        [
            ("TokenDatatype", ["ac-1", "osps-qa-07.01", "_x", "Rule_Id"], ["1abc", "-a", "a b"]),
            (
                "UUIDDatatype",
                ["8f1c2a3e-4b5d-4e6f-8a7b-9c0d1e2f3a4b", "8f1c2a3e-4b5d-5e6f-9a7b-9c0d1e2f3a4b"],
                ["8f1c2a3e-4b5d-1e6f-8a7b-9c0d1e2f3a4b", "not-a-uuid"],
            ),
            ("StringDatatype", ["x", "two words"], ["", " ", " padded", "padded "]),
        ],
    )
    def test_datatype_patterns(self, definition: str, valid: list[str], invalid: list[str]) -> None:
        """Should accept and reject values as OSCAL datatypes do."""
        schema = {"$defs": load_schema()["$defs"], "$ref": f"#/$defs/{definition}"}
        validator = Draft202012Validator(schema)

        for value in valid:
            assert validator.is_valid(value), value
        for value in invalid:
            assert not validator.is_valid(value), value


class TestSchemaValidator:
    """Tests for SchemaValidator."""

    @pytest.mark.parametrize("fixture", ["catalog_models", "profile_models", "component_models"])
    def test_generated_documents(self, fixture: str, request: pytest.FixtureRequest) -> None:
        """Should accept generated documents."""
        models: OscalModels = request.getfixturevalue(fixture)
        assert _validate(models).issues == []

    def test_empty_envelope(self) -> None:
        """Should accept an envelope without documents."""
        assert _validate(OscalModels()).issues == []

    def test_invalid_control_id(self, catalog_models: OscalModels) -> None:
        """Should reject a control ID that is not a token."""
        models = catalog_models.model_copy(deep=True)
        assert models.catalog is not None and models.catalog.groups is not None
        controls = models.catalog.groups[0].controls
        assert controls is not None
        controls[0].id = "7 bad id"

        result = _validate(models)

        assert _codes(result) == [ErrorCodes.E300_PATTERN_MISMATCH]
        issue = result.issues[0]
        assert issue.path == "catalog.groups.0.controls.0.id"
        assert issue.message == "'7 bad id' is not a valid token"
        assert issue.context["value"] == "7 bad id"
        assert issue.suggestion is not None

    def test_invalid_profile_selection(self, profile_models: OscalModels) -> None:
        """Should check every selected control ID."""
        models = profile_models.model_copy(deep=True)
        assert models.profile is not None
        selected = next(i for i in models.profile.imports if i.include_controls)
        assert selected.include_controls is not None
        selected.include_controls[0].with_ids = ["ac-1", "1-bad"]

        result = _validate(models)

        assert _codes(result) == [ErrorCodes.E300_PATTERN_MISMATCH]
        assert result.issues[0].path.endswith("include-controls.0.with-ids.1")

    def test_property_name(self, component_models: OscalModels) -> None:
        """Should check property names."""
        models = component_models.model_copy(deep=True)
        assert models.component_definition is not None
        assert models.component_definition.components is not None
        props = models.component_definition.components[0].props
        assert props is not None
        props[0].name = "Rule Id"

        assert _codes(_validate(models)) == [ErrorCodes.E300_PATTERN_MISMATCH]

    def test_invalid_uuids(self, catalog_models: OscalModels) -> None:
        """Should reject malformed UUIDs, including party references."""
        models = catalog_models.model_copy(deep=True)
        assert models.catalog is not None
        models.catalog.uuid = "1234"
        assert models.catalog.metadata.responsible_parties is not None
        models.catalog.metadata.responsible_parties[0].party_uuids = ["nope"]

        result = _validate(models)

        assert _codes(result) == [ErrorCodes.E300_PATTERN_MISMATCH] * 2
        assert {issue.path for issue in result.issues} == {
            "catalog.uuid",
            "catalog.metadata.responsible-parties.0.party-uuids.0",
        }
        assert all("is not a valid UUID" in issue.message for issue in result.issues)

    def test_blank_string(self, catalog_models: OscalModels) -> None:
        """Should reject blank strings."""
        models = catalog_models.model_copy(deep=True)
        assert models.catalog is not None
        models.catalog.metadata.version = "  "

        result = _validate(models)

        assert _codes(result) == [ErrorCodes.E300_PATTERN_MISMATCH]
        assert result.issues[0].path == "catalog.metadata.version"

    def test_empty_list(self, component_models: OscalModels) -> None:
        """Should reject empty lists."""
        models = component_models.model_copy(deep=True)
        assert models.component_definition is not None
        assert models.component_definition.components is not None
        implementation = (models.component_definition.components[0].control_implementations or [])[0]
        implementation.implemented_requirements = []

        result = _validate(models)

        assert _codes(result) == [ErrorCodes.E303_EMPTY_LIST]
        assert result.issues[0].path == (
            "component-definition.components.0.control-implementations.0.implemented-requirements"
        )

    def test_unknown_component_type(self, component_models: OscalModels) -> None:
        """Should reject component types OSCAL does not define."""
        models = component_models.model_copy(deep=True)
        assert models.component_definition is not None
        assert models.component_definition.components is not None
        models.component_definition.components[0].type = "widget"

        result = _validate(models)

        assert _codes(result) == [ErrorCodes.E305_NOT_ALLOWED]
        assert result.issues[0].message == "'widget' is not a valid component type"
        assert result.issues[0].path == "component-definition.components.0.type"

    def test_invalid_href(self, catalog_models: OscalModels) -> None:
        """Should reject links that are not URI references."""
        models = catalog_models.model_copy(deep=True)
        assert models.catalog is not None and models.catalog.groups is not None
        controls = models.catalog.groups[0].controls
        assert controls is not None
        controls[0].links = [Link(href="https://exa mple.com/<x>")]

        result = _validate(models)

        assert _codes(result) == [ErrorCodes.E301_INVALID_FORMAT]
        assert result.issues[0].path == "catalog.groups.0.controls.0.links.0.href"

    def test_missing_required_field(self, catalog_models: OscalModels) -> None:
        """Should report required fields left out of the document."""
        models = catalog_models.model_copy(deep=True)
        assert models.catalog is not None and models.catalog.groups is not None
        controls = models.catalog.groups[0].controls
        assert controls is not None
        controls[0].title = None  # type: ignore[assignment]

        result = _validate(models)

        assert _codes(result) == [ErrorCodes.E302_MISSING_FIELD]
        assert result.issues[0].path == "catalog.groups.0.controls.0"
        assert "'title' is a required property" in result.issues[0].message
