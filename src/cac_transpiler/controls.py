"""Conversions of guidance documents to OSCAL control documents.

Shortcut for callers that only need the catalog and profile entry points.
"""

from cac_transpiler.transform.catalog import to_oscal_catalog
from cac_transpiler.transform.profile import to_oscal_profile

__all__ = ["to_oscal_catalog", "to_oscal_profile"]
