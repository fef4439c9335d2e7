"""Guidance document to OSCAL transformation module.

This module turns a validated guidance document into an OSCAL catalog
(the locally defined guidelines) or an OSCAL profile (the guidelines
shared with other documents).

The catalog transformation:
    1. Build metadata (dates, author party and role)
    2. Collect cited resources into back-matter
    3. Convert every category into a control group, nesting guidelines
       under their base guideline

Example:
-------
    >>> from cac_transpiler.models import load_guidance_document
    >>> from cac_transpiler.transform import to_oscal_catalog
    >>>
    >>> guidance = load_guidance_document(Path("800-161.yml"))
    >>> catalog = to_oscal_catalog(guidance)
    >>> print(f"Groups: {len(catalog.groups or [])}")

"""

from cac_transpiler.transform.catalog import (
    GuidanceToCatalogTransformer,
    build_group,
    guideline_to_control,
    to_oscal_catalog,
)
from cac_transpiler.transform.errors import TranspileError
from cac_transpiler.transform.identifiers import normalize_control_id
from cac_transpiler.transform.metadata import create_metadata
from cac_transpiler.transform.profile import build_imports, to_oscal_profile
from cac_transpiler.transform.resources import link_resources

__all__ = [
    "GuidanceToCatalogTransformer",
    "TranspileError",
    "build_group",
    "build_imports",
    "create_metadata",
    "guideline_to_control",
    "link_resources",
    "normalize_control_id",
    "to_oscal_catalog",
    "to_oscal_profile",
]
