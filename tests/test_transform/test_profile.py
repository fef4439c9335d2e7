"""Tests for the guidance document to profile transformation."""

from collections.abc import Callable

import pytest
from cac_transpiler.models import GuidanceDocument, Mapping, MappingReference
from cac_transpiler.transform.errors import TranspileError
from cac_transpiler.transform.profile import build_imports, to_oscal_profile


def _ref(ref_id: str) -> MappingReference:
    return MappingReference(id=ref_id, url=f"https://example.com/{ref_id}.json")


class TestBuildImports:
    """Tests for build_imports function."""

    def test_bare_import_per_reference(self) -> None:
        """Should import every mapping reference."""
        imports = build_imports([_ref("A"), _ref("B")], [])

        assert sorted(i.href for i in imports) == [
            "https://example.com/A.json",
            "https://example.com/B.json",
        ]
        assert all(i.include_controls is None for i in imports)

    def test_selects_normalized_ids(self) -> None:
        """Should select the normalized identifiers of shared guidelines."""
        imports = build_imports(
            [_ref("A")],
            [Mapping(reference_id="A", identifiers=["AC-2", "AC-2(1)"])],
        )

        assert imports[0].include_controls is not None
        assert imports[0].include_controls[0].with_ids == ["ac-2", "ac-2.1"]

    def test_last_write_wins(self) -> None:
        """Should replace an earlier selection for the same reference."""
        imports = build_imports(
            [_ref("A")],
            [
                Mapping(reference_id="A", identifiers=["AC-1"]),
                Mapping(reference_id="A", identifiers=["AC-3"]),
            ],
        )

        assert imports[0].include_controls is not None
        assert len(imports[0].include_controls) == 1
        assert imports[0].include_controls[0].with_ids == ["ac-3"]

    def test_undeclared_reference_skipped(self) -> None:
        """Should skip shared guidelines of undeclared references."""
        imports = build_imports([_ref("A")], [Mapping(reference_id="Z", identifiers=["X-1"])])

        assert len(imports) == 1
        assert imports[0].include_controls is None


class TestToOscalProfile:
    """Tests for to_oscal_profile function."""

    def test_fixture_document(
        self, guidance: GuidanceDocument, uuid_factory: Callable[[], str]
    ) -> None:
        """Should convert the shared guidelines of the fixture."""
        profile = to_oscal_profile(guidance, uuid_factory)

        assert profile.metadata.title == "Open Source Project Security Baseline"
        by_href = {i.href: i for i in profile.imports}
        assert len(by_href) == 2
        nist = by_href[
            "https://raw.githubusercontent.com/usnistgov/oscal-content/main/nist.gov/"
            "SP800-53/rev5/json/NIST_SP-800-53_rev5_catalog.json"
        ]
        assert nist.include_controls is not None
        assert nist.include_controls[0].with_ids == ["ac-2", "ac-2.1", "sa-11"]
        assert by_href["https://example.com/800-161/profile.json"].include_controls is None

    def test_invalid_date_wrapped(self, guidance: GuidanceDocument) -> None:
        """Should report metadata errors against the profile."""
        broken = guidance.model_copy(deep=True)
        broken.metadata.last_modified = "yesterday"

        with pytest.raises(TranspileError, match="error creating profile metadata: invalid"):
            to_oscal_profile(broken)
