"""Guidance document to OSCAL catalog transformation."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from cac_transpiler.models.guidance import Category, GuidanceDocument, Guideline
from cac_transpiler.oscal.catalog import Catalog, Control, Group
from cac_transpiler.oscal.common import Link, Part, UUIDFactory, new_uuid
from cac_transpiler.oscal.constants import (
    GUIDANCE_PART,
    ITEM_PART,
    OBJECTIVE_PART,
    REFERENCE_REL,
    RELATED_REL,
    STATEMENT_PART,
)
from cac_transpiler.transform.errors import TranspileError
from cac_transpiler.transform.identifiers import normalize_control_id
from cac_transpiler.transform.metadata import create_metadata
from cac_transpiler.transform.resources import link_resources

logger = logging.getLogger(__name__)


def _guideline_links(guideline: Guideline, id_lookup: Mapping[str, str]) -> list[Link]:
    links = [
        Link(href=f"#{normalize_control_id(also)}", rel=RELATED_REL)
        for also in guideline.see_also
    ]

    for external in guideline.external_references:
        resource_uuid = id_lookup.get(external)
        if resource_uuid is None:
            logger.debug(
                "Guideline %s cites unknown resource %s; skipping link", guideline.id, external
            )
            continue
        links.append(Link(href=f"#{resource_uuid}", rel=REFERENCE_REL))

    return links


def _statement_part(guideline: Guideline, control_id: str) -> Part:
    statement_id = f"{control_id}_smt"
    items: list[Part] = []

    for part in guideline.guideline_parts:
        item_id = f"{statement_id}.{part.id}"
        item = Part(
            name=ITEM_PART,
            id=item_id,
            title=part.title or None,
            prose=part.prose or None,
        )
        if part.recommendations:
            item.parts = [
                Part(
                    name=GUIDANCE_PART,
                    id=f"{item_id}_gdn",
                    prose=" ".join(part.recommendations),
                )
            ]
        items.append(item)

    # Controls always carry a statement, even without sub-statements
    return Part(name=STATEMENT_PART, id=statement_id, parts=items or None)


def guideline_to_control(
    guideline: Guideline,
    id_lookup: Mapping[str, str],
) -> tuple[Control, str]:
    """Convert one guideline to a control.

    Args:
    ----
        guideline: The guideline to convert.
        id_lookup: Resource reference ID to back-matter UUID.

    Returns:
    -------
        Tuple of (control, normalized parent ID). The parent ID is empty
        for top-level guidelines.

    """
    control_id = normalize_control_id(guideline.id)

    parts = [_statement_part(guideline, control_id)]

    if guideline.objective:
        parts.append(Part(name=OBJECTIVE_PART, id=f"{control_id}_obj", prose=guideline.objective))

    if guideline.recommendations:
        parts.append(
            Part(
                name=GUIDANCE_PART,
                id=f"{control_id}_gdn",
                prose=" ".join(guideline.recommendations),
            )
        )

    control = Control(
        id=control_id,
        title=guideline.title,
        links=_guideline_links(guideline, id_lookup) or None,
        parts=parts,
    )
    return control, normalize_control_id(guideline.base_guideline_id)


def build_group(category: Category, id_lookup: Mapping[str, str]) -> Group:
    """Build the control group for a category.

    Top-level guidelines become the group's controls, in document order.
    Every other guideline is nested under its parent when that parent is a
    top-level guideline of the same category, whether it appears before or
    after the child. Guidelines whose parent is not such a control are
    left out.

    Args:
    ----
        category: Category to convert.
        id_lookup: Resource reference ID to back-matter UUID.

    Returns:
    -------
        The control group.

    """
    converted = [guideline_to_control(g, id_lookup) for g in category.guidelines]

    top_level: dict[str, Control] = {}
    for control, parent_id in converted:
        if not parent_id:
            top_level[control.id] = control

    for control, parent_id in converted:
        if not parent_id:
            continue

        parent = top_level.get(parent_id)
        if parent is None:
            logger.debug(
                "Dropping control %s from group %s: parent %s is not a top-level control",
                control.id,
                category.id,
                parent_id,
            )
            continue

        if parent.controls is None:
            parent.controls = []
        parent.controls.append(control)

    return Group(
        id=category.id,
        title=category.title,
        controls=list(top_level.values()) or None,
    )


class GuidanceToCatalogTransformer:
    """Transform guidance documents to OSCAL catalogs.

    Usage:
        transformer = GuidanceToCatalogTransformer()
        catalog = transformer.transform(guidance)
    """

    def __init__(self, uuid_factory: UUIDFactory = new_uuid) -> None:
        """Initialize the transformer.

        Args:
        ----
            uuid_factory: Source of every UUID in the generated catalog.

        """
        self._uuid_factory = uuid_factory

    def transform(self, guidance: GuidanceDocument) -> Catalog:
        """Transform a guidance document to a catalog.

        Args:
        ----
            guidance: Validated guidance document.

        Returns:
        -------
            Catalog with one group per category and cited resources in
            its back-matter.

        Raises:
        ------
            TranspileError: If the document metadata is malformed.

        """
        try:
            metadata = create_metadata(guidance.metadata, self._uuid_factory)
        except TranspileError as e:
            raise TranspileError(f"error creating catalog metadata: {e}", e.field) from e

        back_matter, id_lookup = link_resources(guidance.metadata.resources, self._uuid_factory)

        groups = [build_group(category, id_lookup) for category in guidance.categories]

        return Catalog(
            uuid=self._uuid_factory(),
            metadata=metadata,
            groups=groups or None,
            back_matter=back_matter,
        )


def to_oscal_catalog(
    guidance: GuidanceDocument,
    uuid_factory: UUIDFactory = new_uuid,
) -> Catalog:
    """Create an OSCAL catalog from the guidelines of a guidance document."""
    return GuidanceToCatalogTransformer(uuid_factory).transform(guidance)
