"""Guidance document to OSCAL profile transformation."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cac_transpiler.models.guidance import GuidanceDocument, Mapping, MappingReference
from cac_transpiler.oscal.common import UUIDFactory, new_uuid
from cac_transpiler.oscal.profile import Import, Profile, SelectControlById
from cac_transpiler.transform.errors import TranspileError
from cac_transpiler.transform.identifiers import normalize_control_id
from cac_transpiler.transform.metadata import create_metadata

logger = logging.getLogger(__name__)


def build_imports(
    mapping_refs: Sequence[MappingReference],
    shared_guidelines: Sequence[Mapping],
) -> list[Import]:
    """Build profile imports from shared guideline mappings.

    Each mapping reference yields one import of its URL. A shared
    guideline entry selects the normalized identifiers it lists from the
    import of its reference; a later entry for the same reference replaces
    an earlier one. Entries naming an undeclared reference are skipped.

    Args:
    ----
        mapping_refs: Declared mapping references.
        shared_guidelines: Shared guideline entries.

    Returns:
    -------
        Imports, one per mapping reference. Callers should not depend on
        their order.

    """
    imports: dict[str, Import] = {ref.id: Import(href=ref.url) for ref in mapping_refs}

    for mapping in shared_guidelines:
        target = imports.get(mapping.reference_id)
        if target is None:
            logger.debug(
                "Skipping shared guidelines for undeclared mapping reference %s",
                mapping.reference_id,
            )
            continue

        with_ids = [normalize_control_id(identifier) for identifier in mapping.identifiers]
        target.include_controls = [SelectControlById(with_ids=with_ids)]

    return list(imports.values())


def to_oscal_profile(
    guidance: GuidanceDocument,
    uuid_factory: UUIDFactory = new_uuid,
) -> Profile:
    """Create an OSCAL profile from the shared guidelines of a guidance document.

    Raises
    ------
        TranspileError: If the document metadata is malformed.

    """
    try:
        metadata = create_metadata(guidance.metadata, uuid_factory)
    except TranspileError as e:
        raise TranspileError(f"error creating profile metadata: {e}", e.field) from e

    return Profile(
        uuid=uuid_factory(),
        metadata=metadata,
        imports=build_imports(guidance.metadata.mapping_references, guidance.shared_guidelines),
    )
