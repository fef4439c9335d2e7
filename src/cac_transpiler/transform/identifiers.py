"""Identifier normalization for cross-document linking."""

from __future__ import annotations

import re

# A parenthesized qualifier such as the "(2)" in "AC-2(2)"
_QUALIFIER = re.compile(r"\(([^()]*)\)")


def _qualifier_to_suffix(match: re.Match[str]) -> str:
    qualifier = match.group(1).strip()
    if not qualifier or qualifier.startswith("."):
        return qualifier
    return f".{qualifier}"


def normalize_control_id(identifier: str) -> str:
    """Convert a guideline identifier to OSCAL control ID form.

    Lower-cases the identifier and turns each parenthesized qualifier into
    a dot-separated suffix. The empty string maps to itself and marks
    "no parent". Normalizing twice gives the same result as once.

    Args:
    ----
        identifier: Source identifier, e.g. ``"AC-2(1)"``.

    Returns:
    -------
        Normalized identifier, e.g. ``"ac-2.1"``.

    Examples:
    --------
        >>> normalize_control_id("OSPS-QA-07")
        'osps-qa-07'
        >>> normalize_control_id("EX-1(2)")
        'ex-1.2'
        >>> normalize_control_id("AC-2(1)(a)")
        'ac-2.1.a'
        >>> normalize_control_id("")
        ''

    """
    if not identifier:
        return ""
    # Innermost qualifiers first, until no parentheses pair remains
    normalized, count = _QUALIFIER.subn(_qualifier_to_suffix, identifier)
    while count:
        normalized, count = _QUALIFIER.subn(_qualifier_to_suffix, normalized)
    return normalized.strip().lower()
