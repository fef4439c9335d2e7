"""Validators for identifiers and references within an OSCAL document."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cac_transpiler.oscal.common import Link, Metadata
from cac_transpiler.validation.base import BaseValidator, iter_documents, iter_fields, iter_models
from cac_transpiler.validation.errors import ErrorCodes, ValidationResult

if TYPE_CHECKING:
    from pydantic import BaseModel

    from cac_transpiler.oscal.models import OscalModels


def collect_targets(document: BaseModel, path: str) -> set[str]:
    """Collect every id and uuid defined in a document."""
    targets: set[str] = set()
    for model_path, model in iter_models(document, path):
        for name, _field_path, value in iter_fields(model, model_path):
            if name in ("id", "uuid") and isinstance(value, str):
                targets.add(value)
    return targets


class UniqueIdValidator(BaseValidator):
    """Validates that ids and UUIDs are unique within each document."""

    def validate(
        self,
        models: OscalModels,
        result: ValidationResult,
    ) -> None:
        """Check for duplicate ids and UUIDs."""
        for kind, document in iter_documents(models):
            seen_ids: dict[str, str] = {}
            seen_uuids: dict[str, str] = {}

            for path, model in iter_models(document, kind):
                for name, field_path, value in iter_fields(model, path):
                    if not isinstance(value, str):
                        continue
                    if name == "id":
                        self._check(
                            value, field_path, seen_ids, ErrorCodes.E100_DUPLICATE_ID, result
                        )
                    elif name == "uuid":
                        self._check(
                            value, field_path, seen_uuids, ErrorCodes.E101_DUPLICATE_UUID, result
                        )

    @staticmethod
    def _check(
        value: str,
        path: str,
        seen: dict[str, str],
        code: str,
        result: ValidationResult,
    ) -> None:
        if value in seen:
            result.add_error(
                code=code,
                message=f"'{value}' is already defined at {seen[value]}",
                path=path,
                suggestion="Each identifier must be unique within the document",
                value=value,
            )
        else:
            seen[value] = path


class LinkReferenceValidator(BaseValidator):
    """Validates that fragment links point into the document.

    Links to other documents cannot be checked here, so unresolved
    fragments are reported as warnings.
    """

    def validate(
        self,
        models: OscalModels,
        result: ValidationResult,
    ) -> None:
        """Check that '#' links resolve to an id or UUID."""
        for kind, document in iter_documents(models):
            targets = collect_targets(document, kind)

            for path, model in iter_models(document, kind):
                if not isinstance(model, Link) or not model.href.startswith("#"):
                    continue
                fragment = model.href[1:]
                if fragment not in targets:
                    result.add_warning(
                        code=ErrorCodes.W001_UNRESOLVED_LINK,
                        message=f"Link '{model.href}' does not resolve within the {kind}",
                        path=f"{path}.href",
                        suggestion="Check the referenced control or resource exists",
                        value=model.href,
                    )


class ResponsiblePartyValidator(BaseValidator):
    """Validates that responsible parties name defined roles and parties."""

    def validate(
        self,
        models: OscalModels,
        result: ValidationResult,
    ) -> None:
        """Check role and party references in metadata."""
        for path, model in iter_models(models):
            if not isinstance(model, Metadata) or not model.responsible_parties:
                continue

            roles = {role.id for role in model.roles or []}
            parties = {party.uuid for party in model.parties or []}

            for index, responsible in enumerate(model.responsible_parties):
                entry_path = f"{path}.responsible-parties.{index}"
                if responsible.role_id not in roles:
                    result.add_error(
                        code=ErrorCodes.E002_UNDEFINED_ROLE,
                        message=f"Responsible party references undefined role '{responsible.role_id}'",
                        path=f"{entry_path}.role-id",
                        suggestion=f"Define '{responsible.role_id}' in metadata roles",
                        value=responsible.role_id,
                    )
                for party_uuid in responsible.party_uuids:
                    if party_uuid not in parties:
                        result.add_error(
                            code=ErrorCodes.E003_UNDEFINED_PARTY,
                            message=f"Responsible party references undefined party '{party_uuid}'",
                            path=f"{entry_path}.party-uuids",
                            suggestion="Define the party in metadata parties",
                            value=party_uuid,
                        )
