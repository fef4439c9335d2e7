"""Back-matter construction for cited resources."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cac_transpiler.models.guidance import ResourceReference
from cac_transpiler.oscal.common import (
    BackMatter,
    Citation,
    Property,
    Resource,
    ResourceLink,
    UUIDFactory,
    new_uuid,
)
from cac_transpiler.oscal.constants import RESOURCE_ID_PROP, TRESTLE_NAMESPACE

logger = logging.getLogger(__name__)


def format_citation(ref: ResourceReference) -> str:
    """Format the citation text of a resource.

    Examples
    --------
        >>> format_citation(ResourceReference(
        ...     id="SSDF", title="SSDF", issuing_body="NIST",
        ...     publication_date="2022-02-03", url="https://example.com"))
        'NIST. (2022-02-03). *SSDF*. https://example.com'

    """
    return f"{ref.issuing_body}. ({ref.publication_date}). *{ref.title}*. {ref.url}"


def resource_from_reference(ref: ResourceReference, resource_uuid: str) -> Resource:
    """Build the back-matter resource for one reference."""
    return Resource(
        uuid=resource_uuid,
        title=ref.title or None,
        description=ref.description or None,
        props=[Property(name=RESOURCE_ID_PROP, value=ref.id, ns=TRESTLE_NAMESPACE)],
        rlinks=[ResourceLink(href=ref.url)] if ref.url else None,
        citation=Citation(text=format_citation(ref)),
    )


def link_resources(
    refs: Sequence[ResourceReference],
    uuid_factory: UUIDFactory = new_uuid,
) -> tuple[BackMatter | None, dict[str, str]]:
    """Collect references into back-matter and map their IDs to resource UUIDs.

    References sharing an ID are collapsed into the first one. Each
    remaining reference gets one generated UUID.

    Args:
    ----
        refs: Resource references in document order.
        uuid_factory: Source of resource UUIDs.

    Returns:
    -------
        Tuple of (back-matter, lookup from reference ID to resource UUID).
        The back-matter is ``None`` when there are no references.

    """
    resources: list[Resource] = []
    id_lookup: dict[str, str] = {}

    for ref in refs:
        if ref.id in id_lookup:
            logger.debug("Skipping duplicate resource reference %s", ref.id)
            continue
        resource = resource_from_reference(ref, uuid_factory())
        id_lookup[ref.id] = resource.uuid
        resources.append(resource)

    if not resources:
        return None, id_lookup

    return BackMatter(resources=resources), id_lookup
