"""OSCAL profile model."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from cac_transpiler.oscal.common import BackMatter, Metadata, OscalModel


class SelectControlById(OscalModel):
    """Selects controls of an imported resource by ID."""

    with_child_controls: Annotated[str | None, Field(default=None, alias="with-child-controls")]
    with_ids: Annotated[list[str] | None, Field(default=None, alias="with-ids")]


class Import(OscalModel):
    """Import of controls from an external catalog or profile."""

    href: str
    include_all: Annotated[dict[str, str] | None, Field(default=None, alias="include-all")]
    include_controls: Annotated[
        list[SelectControlById] | None,
        Field(default=None, alias="include-controls"),
    ]
    exclude_controls: Annotated[
        list[SelectControlById] | None,
        Field(default=None, alias="exclude-controls"),
    ]


class Profile(OscalModel):
    """An OSCAL profile."""

    uuid: str
    metadata: Metadata
    imports: list[Import]
    back_matter: Annotated[BackMatter | None, Field(default=None, alias="back-matter")]
