"""Models for Layer 1 guidance documents."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from cac_transpiler.models.common import DateText, Identifier


class ResourceReference(BaseModel):
    """An external resource cited by guidelines.

    Example:
    -------
        ```yaml
        resources:
          - id: SSDF
            title: Secure Software Development Framework
            issuing-body: NIST
            publication-date: "2022-02-03"
            url: https://csrc.nist.gov/pubs/sp/800/218/final
        ```

    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Annotated[Identifier, Field(min_length=1, description="Reference identifier")]
    title: Annotated[str, Field(default="", description="Resource title")]
    description: Annotated[str, Field(default="", description="Resource description")]
    issuing_body: Annotated[
        str,
        Field(default="", alias="issuing-body", description="Organization that issued it"),
    ]
    publication_date: Annotated[
        DateText,
        Field(default="", alias="publication-date", description="Publication date"),
    ]
    url: Annotated[str, Field(default="", description="Location of the resource")]


class MappingReference(BaseModel):
    """An external document that guidelines can be mapped to."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Annotated[Identifier, Field(min_length=1, description="Mapping reference identifier")]
    title: Annotated[str, Field(default="", description="Referenced document title")]
    version: Annotated[str, Field(default="", description="Referenced document version")]
    description: Annotated[str, Field(default="", description="Reference description")]
    url: Annotated[str, Field(default="", description="Location of the referenced document")]


class Mapping(BaseModel):
    """Identifiers of this document that an external reference also covers.

    Example:
    -------
        ```yaml
        shared-guidelines:
          - reference-id: EXP
            identifiers: [EX-1, EX-1(2)]
        ```

    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    reference_id: Annotated[
        Identifier,
        Field(alias="reference-id", description="ID of a declared mapping reference"),
    ]
    identifiers: Annotated[
        list[Identifier],
        Field(default_factory=list, description="Covered guideline identifiers"),
    ]


class GuidelinePart(BaseModel):
    """A sub-statement of a guideline."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Annotated[Identifier, Field(min_length=1, description="Part identifier")]
    title: Annotated[str, Field(default="", description="Part title")]
    prose: Annotated[str, Field(default="", description="Statement text")]
    recommendations: Annotated[
        list[str],
        Field(default_factory=list, description="Implementation recommendations"),
    ]


class Guideline(BaseModel):
    """A single guideline, optionally nested under a base guideline.

    Example:
    -------
        ```yaml
        - id: OSPS-QA-07.01
          title: Require approvals
          base-guideline-id: OSPS-QA-07
          recommendations:
            - Require at least one approval.
        ```

    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Annotated[Identifier, Field(min_length=1, description="Guideline identifier")]
    title: Annotated[str, Field(default="", description="Guideline title")]
    objective: Annotated[str, Field(default="", description="Assessment objective text")]
    recommendations: Annotated[
        list[str],
        Field(default_factory=list, description="Guidance recommendations"),
    ]
    see_also: Annotated[
        list[Identifier],
        Field(default_factory=list, alias="see-also", description="Related guideline IDs"),
    ]
    external_references: Annotated[
        list[Identifier],
        Field(
            default_factory=list,
            alias="external-references",
            description="IDs of resources in the document metadata",
        ),
    ]
    base_guideline_id: Annotated[
        Identifier,
        Field(
            default="",
            alias="base-guideline-id",
            description="Parent guideline ID (empty for top-level guidelines)",
        ),
    ]
    guideline_parts: Annotated[
        list[GuidelinePart],
        Field(default_factory=list, alias="guideline-parts", description="Sub-statements"),
    ]


class Category(BaseModel):
    """A category of guidelines."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Annotated[Identifier, Field(min_length=1, description="Category identifier")]
    title: Annotated[str, Field(default="", description="Category title")]
    description: Annotated[str, Field(default="", description="Category description")]
    guidelines: Annotated[
        list[Guideline],
        Field(default_factory=list, description="Guidelines in this category"),
    ]


class GuidanceMetadata(BaseModel):
    """Metadata section of a guidance document.

    Dates are kept as text; they are parsed when the document is
    transformed so that a bad date is reported against its field.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Annotated[Identifier, Field(default="", description="Document identifier")]
    title: Annotated[str, Field(min_length=1, description="Document title")]
    description: Annotated[str, Field(default="", description="Document description")]
    author: Annotated[str, Field(default="", description="Document author")]
    version: Annotated[Identifier, Field(default="", description="Document version")]
    publication_date: Annotated[
        DateText,
        Field(default="", alias="publication-date", description="Date in YYYY-MM-DD form"),
    ]
    last_modified: Annotated[
        DateText,
        Field(
            default="",
            alias="last-modified",
            description="Timestamp in 'YYYY-MM-DD HH:MM:SS' form",
        ),
    ]
    resources: Annotated[
        list[ResourceReference],
        Field(default_factory=list, description="Cited external resources"),
    ]
    mapping_references: Annotated[
        list[MappingReference],
        Field(
            default_factory=list,
            alias="mapping-references",
            description="External documents guidelines are mapped to",
        ),
    ]


class GuidanceDocument(BaseModel):
    """Root model for Layer 1 guidance documents."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    metadata: Annotated[GuidanceMetadata, Field(description="Document metadata")]
    categories: Annotated[
        list[Category],
        Field(default_factory=list, description="Guideline categories"),
    ]
    shared_guidelines: Annotated[
        list[Mapping],
        Field(
            default_factory=list,
            alias="shared-guidelines",
            description="Guidelines shared with mapped documents",
        ),
    ]
