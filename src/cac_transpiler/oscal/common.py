"""OSCAL assemblies shared by catalogs, profiles and component definitions."""

from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from cac_transpiler.oscal.constants import OSCAL_VERSION

# Source of "uuid" values; swapped for a deterministic one in tests
UUIDFactory = Callable[[], str]


def new_uuid() -> str:
    """Generate a random (version 4) UUID string for OSCAL identifiers."""
    return str(uuid.uuid4())


class OscalModel(BaseModel):
    """Base for OSCAL output models.

    Fields are declared with their Python names and serialized by alias
    (``back-matter``, ``last-modified``, ...). Unset optional fields are
    ``None`` and left out of the serialized document.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class Property(OscalModel):
    """A name/value pair attached to an OSCAL object."""

    name: str
    value: str
    ns: str | None = None
    class_: Annotated[str | None, Field(default=None, alias="class")]
    remarks: str | None = None


class Link(OscalModel):
    """A reference to a local or remote resource."""

    href: str
    rel: str | None = None
    text: str | None = None


class Part(OscalModel):
    """A partition of a control (statement, guidance, objective, ...)."""

    name: str
    id: str | None = None
    title: str | None = None
    prose: str | None = None
    props: list[Property] | None = None
    parts: list[Part] | None = None


class Role(OscalModel):
    """A function assumed by a party."""

    id: str
    title: str
    description: str | None = None


class Party(OscalModel):
    """A person or organization."""

    uuid: str
    type: str
    name: str | None = None


class ResponsibleParty(OscalModel):
    """Binding of a role to the parties fulfilling it."""

    role_id: Annotated[str, Field(alias="role-id")]
    party_uuids: Annotated[list[str], Field(alias="party-uuids")]


class Metadata(OscalModel):
    """Document metadata common to all OSCAL models."""

    title: str
    published: datetime | None = None
    last_modified: Annotated[datetime, Field(alias="last-modified")]
    version: str
    oscal_version: Annotated[str, Field(default=OSCAL_VERSION, alias="oscal-version")]
    props: list[Property] | None = None
    roles: list[Role] | None = None
    parties: list[Party] | None = None
    responsible_parties: Annotated[
        list[ResponsibleParty] | None,
        Field(default=None, alias="responsible-parties"),
    ]


class ResourceLink(OscalModel):
    """Location of a resource."""

    href: str
    media_type: Annotated[str | None, Field(default=None, alias="media-type")]


class Citation(OscalModel):
    """Bibliographic citation of a resource."""

    text: str


class Resource(OscalModel):
    """A resource cited from within the document."""

    uuid: str
    title: str | None = None
    description: str | None = None
    props: list[Property] | None = None
    citation: Citation | None = None
    rlinks: list[ResourceLink] | None = None


class BackMatter(OscalModel):
    """Resources cited by the document."""

    resources: list[Resource] | None = None
