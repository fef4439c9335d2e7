"""OSCAL catalog model."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from cac_transpiler.oscal.common import BackMatter, Link, Metadata, OscalModel, Part, Property


class Control(OscalModel):
    """A control, optionally owning nested controls (enhancements)."""

    id: str
    class_: Annotated[str | None, Field(default=None, alias="class")]
    title: str
    props: list[Property] | None = None
    links: list[Link] | None = None
    parts: list[Part] | None = None
    controls: list[Control] | None = None


class Group(OscalModel):
    """A group of controls."""

    id: str | None = None
    class_: Annotated[str | None, Field(default=None, alias="class")]
    title: str
    props: list[Property] | None = None
    parts: list[Part] | None = None
    groups: list[Group] | None = None
    controls: list[Control] | None = None


class Catalog(OscalModel):
    """An OSCAL catalog."""

    uuid: str
    metadata: Metadata
    groups: list[Group] | None = None
    controls: list[Control] | None = None
    back_matter: Annotated[BackMatter | None, Field(default=None, alias="back-matter")]
