"""OSCAL metadata construction for guidance-derived documents."""

from __future__ import annotations

from datetime import datetime, timezone

from cac_transpiler.models.common import DATETIME_TEXT_FORMAT
from cac_transpiler.models.guidance import GuidanceMetadata
from cac_transpiler.oscal.common import (
    Metadata,
    Party,
    ResponsibleParty,
    Role,
    UUIDFactory,
    new_uuid,
)
from cac_transpiler.oscal.constants import AUTHOR_ROLE_ID
from cac_transpiler.transform.errors import TranspileError

PUBLICATION_DATE_FORMAT = "%Y-%m-%d"


def _parse_timestamp(value: str, fmt: str, field: str) -> datetime:
    """Parse a metadata date as a UTC timestamp.

    Raises
    ------
        TranspileError: If the value is missing or does not match ``fmt``.

    """
    if not value:
        raise TranspileError(f"missing {field}", field)
    try:
        parsed = datetime.strptime(value, fmt)
    except ValueError as e:
        raise TranspileError(f"invalid {field} {value!r}: {e}", field) from e
    return parsed.replace(tzinfo=timezone.utc)


def create_metadata(
    source: GuidanceMetadata,
    uuid_factory: UUIDFactory = new_uuid,
) -> Metadata:
    """Create OSCAL metadata from guidance document metadata.

    The document author becomes a ``person`` party holding the
    ``author`` role.

    Args:
    ----
        source: Metadata of the guidance document.
        uuid_factory: Source of the party UUID.

    Returns:
    -------
        OSCAL metadata.

    Raises:
    ------
        TranspileError: If ``publication-date`` or ``last-modified`` is
            missing or malformed.

    """
    published = _parse_timestamp(
        source.publication_date, PUBLICATION_DATE_FORMAT, "publication-date"
    )
    last_modified = _parse_timestamp(source.last_modified, DATETIME_TEXT_FORMAT, "last-modified")

    author_role = Role(
        id=AUTHOR_ROLE_ID,
        title="Author",
        description="Author of the guidance document",
    )
    author = Party(uuid=uuid_factory(), type="person", name=source.author or None)

    return Metadata(
        title=source.title,
        published=published,
        last_modified=last_modified,
        version=source.version,
        roles=[author_role],
        parties=[author],
        responsible_parties=[
            ResponsibleParty(role_id=author_role.id, party_uuids=[author.uuid]),
        ],
    )
