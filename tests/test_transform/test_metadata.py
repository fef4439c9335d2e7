"""Tests for OSCAL metadata construction."""

from collections.abc import Callable
from datetime import datetime, timezone

import pytest
from cac_transpiler.models import GuidanceMetadata
from cac_transpiler.oscal.constants import AUTHOR_ROLE_ID, OSCAL_VERSION
from cac_transpiler.transform.errors import TranspileError
from cac_transpiler.transform.metadata import create_metadata


def _metadata(**overrides: str) -> GuidanceMetadata:
    values = {
        "title": "Baseline",
        "version": "1.0",
        "author": "OpenSSF",
        "publication_date": "2025-02-25",
        "last_modified": "2025-02-26 08:15:00",
    }
    values.update(overrides)
    return GuidanceMetadata(**values)


class TestCreateMetadata:
    """Tests for create_metadata function."""

    def test_dates_parsed_as_utc(self, uuid_factory: Callable[[], str]) -> None:
        """Should parse both dates as UTC timestamps."""
        metadata = create_metadata(_metadata(), uuid_factory)

        assert metadata.published == datetime(2025, 2, 25, tzinfo=timezone.utc)
        assert metadata.last_modified == datetime(2025, 2, 26, 8, 15, tzinfo=timezone.utc)

    def test_title_version_and_oscal_version(self, uuid_factory: Callable[[], str]) -> None:
        """Should copy title and version and set the OSCAL version."""
        metadata = create_metadata(_metadata(), uuid_factory)

        assert metadata.title == "Baseline"
        assert metadata.version == "1.0"
        assert metadata.oscal_version == OSCAL_VERSION

    def test_author_party(self, uuid_factory: Callable[[], str]) -> None:
        """Should bind the author party to the author role."""
        metadata = create_metadata(_metadata(), uuid_factory)

        assert metadata.roles is not None
        assert metadata.parties is not None
        assert metadata.responsible_parties is not None
        assert metadata.roles[0].id == AUTHOR_ROLE_ID
        party = metadata.parties[0]
        assert party.type == "person"
        assert party.name == "OpenSSF"
        assert metadata.responsible_parties[0].role_id == AUTHOR_ROLE_ID
        assert metadata.responsible_parties[0].party_uuids == [party.uuid]

    def test_invalid_publication_date(self, uuid_factory: Callable[[], str]) -> None:
        """Should raise TranspileError naming the field."""
        with pytest.raises(TranspileError, match="invalid publication-date") as exc_info:
            create_metadata(_metadata(publication_date="25/02/2025"), uuid_factory)

        assert exc_info.value.field == "publication-date"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_missing_last_modified(self, uuid_factory: Callable[[], str]) -> None:
        """Should raise TranspileError for a missing timestamp."""
        with pytest.raises(TranspileError, match="missing last-modified"):
            create_metadata(_metadata(last_modified=""), uuid_factory)
