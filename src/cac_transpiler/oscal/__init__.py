"""OSCAL 1.1.3 document models produced by the transpiler.

Only the assemblies the transpiler emits are modelled. Models are
Pydantic classes populated by Python field name and serialized by
OSCAL name:

    >>> from cac_transpiler.oscal import OscalModels, dump_oscal
    >>> print(dump_oscal(OscalModels(catalog=catalog)))
"""

from cac_transpiler.oscal.catalog import Catalog, Control, Group
from cac_transpiler.oscal.common import (
    BackMatter,
    Citation,
    Link,
    Metadata,
    OscalModel,
    Part,
    Party,
    Property,
    Resource,
    ResourceLink,
    ResponsibleParty,
    Role,
    UUIDFactory,
    new_uuid,
)
from cac_transpiler.oscal.component import (
    ComponentDefinition,
    ControlImplementation,
    DefinedComponent,
    ImplementedRequirement,
    SetParameter,
)
from cac_transpiler.oscal.models import OscalModels, OutputFormat, dump_oscal, to_document
from cac_transpiler.oscal.profile import Import, Profile, SelectControlById

__all__ = [
    # Shared assemblies
    "BackMatter",
    "Citation",
    "Link",
    "Metadata",
    "OscalModel",
    "Part",
    "Party",
    "Property",
    "Resource",
    "ResourceLink",
    "ResponsibleParty",
    "Role",
    "UUIDFactory",
    "new_uuid",
    # Catalog
    "Catalog",
    "Control",
    "Group",
    # Profile
    "Import",
    "Profile",
    "SelectControlById",
    # Component definition
    "ComponentDefinition",
    "ControlImplementation",
    "DefinedComponent",
    "ImplementedRequirement",
    "SetParameter",
    # Envelope
    "OscalModels",
    "OutputFormat",
    "dump_oscal",
    "to_document",
]
