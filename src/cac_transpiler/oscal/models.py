"""The OSCAL document envelope and its serialization."""

from __future__ import annotations

import json
from typing import Annotated, Any, Literal

import yaml
from pydantic import Field

from cac_transpiler.oscal.catalog import Catalog
from cac_transpiler.oscal.common import OscalModel
from cac_transpiler.oscal.component import ComponentDefinition
from cac_transpiler.oscal.profile import Profile

OutputFormat = Literal["json", "yaml"]


class OscalModels(OscalModel):
    """Envelope holding the root assembly of an OSCAL document.

    Serialized documents look like ``{"catalog": {...}}``; this model is
    that outer object. Usually exactly one member is set.
    """

    catalog: Catalog | None = None
    profile: Profile | None = None
    component_definition: Annotated[
        ComponentDefinition | None,
        Field(default=None, alias="component-definition"),
    ]

    def document_kinds(self) -> list[str]:
        """Return the aliases of the populated members."""
        kinds: list[str] = []
        if self.catalog is not None:
            kinds.append("catalog")
        if self.profile is not None:
            kinds.append("profile")
        if self.component_definition is not None:
            kinds.append("component-definition")
        return kinds


def to_document(models: OscalModels) -> dict[str, Any]:
    """Convert an envelope to plain JSON-compatible data.

    Args:
    ----
        models: The envelope to convert.

    Returns:
    -------
        Dictionary keyed by OSCAL names with unset fields left out.

    """
    return models.model_dump(mode="json", by_alias=True, exclude_none=True)


def dump_oscal(models: OscalModels, fmt: OutputFormat = "json") -> str:
    """Serialize an envelope as JSON or YAML text.

    Args:
    ----
        models: The envelope to serialize.
        fmt: ``"json"`` (indented by two spaces) or ``"yaml"``.

    Returns:
    -------
        The serialized document.

    """
    document = to_document(models)
    if fmt == "yaml":
        return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"
