"""
Pydantic models for schema.org JSON-LD payloads.

Field names are snake_case; dumps use the schema.org property names via
aliases. Optional properties default to None and are dropped on dump, so a
missing value is omitted instead of being emitted as null or "".
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

SCHEMA_CONTEXT = "https://schema.org"


class SchemaNode(BaseModel):
    """Base for every JSON-LD node."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_dict(self) -> dict[str, Any]:
        """JSON-LD dictionary with schema.org property names."""
        return self.model_dump(by_alias=True, exclude_none=True)


# =============================================================================
# FAQPage
# =============================================================================

class Answer(SchemaNode):
    type_: Literal["Answer"] = Field("Answer", alias="@type")
    text: str = Field(..., description="Answer text, verbatim")


class Question(SchemaNode):
    type_: Literal["Question"] = Field("Question", alias="@type")
    name: str = Field(..., description="Question text, verbatim")
    accepted_answer: Answer = Field(..., alias="acceptedAnswer")


class FAQPageSchema(SchemaNode):
    """FAQPage with one Question per FAQ, in page order."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "@context": "https://schema.org",
                "@type": "FAQPage",
                "mainEntity": [
                    {
                        "@type": "Question",
                        "name": "How accurate is visitor identification?",
                        "acceptedAnswer": {"@type": "Answer", "text": "Up to 70% for B2B traffic."},
                    }
                ],
            }
        }
    )

    context: str = Field(SCHEMA_CONTEXT, alias="@context")
    type_: Literal["FAQPage"] = Field("FAQPage", alias="@type")
    url: str | None = Field(None, description="Canonical URL of the page")
    main_entity: list[Question] = Field(..., alias="mainEntity")


# =============================================================================
# Article / BlogPosting
# =============================================================================

class Person(SchemaNode):
    type_: Literal["Person"] = Field("Person", alias="@type")
    name: str
    job_title: str | None = Field(None, alias="jobTitle")
    url: str | None = None


class ImageObject(SchemaNode):
    type_: Literal["ImageObject"] = Field("ImageObject", alias="@type")
    url: str


class OrganizationSchema(SchemaNode):
    """Organization; carries @context only when emitted standalone."""

    context: str | None = Field(None, alias="@context")
    type_: Literal["Organization"] = Field("Organization", alias="@type")
    name: str
    url: str | None = None
    logo: ImageObject | None = None
    same_as: list[str] | None = Field(None, alias="sameAs")


class WebPageRef(SchemaNode):
    type_: Literal["WebPage"] = Field("WebPage", alias="@type")
    id_: str = Field(..., alias="@id")


class ArticleSchema(SchemaNode):
    """Article (or BlogPosting) metadata for a content page."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "@context": "https://schema.org",
                "@type": "Article",
                "headline": "What is B2B Intent Data? Complete Guide (2026)",
                "description": "A comprehensive guide to B2B intent data.",
                "datePublished": "2026-01-15",
                "dateModified": "2026-02-01",
            }
        }
    )

    context: str = Field(SCHEMA_CONTEXT, alias="@context")
    type_: Literal["Article", "BlogPosting"] = Field("Article", alias="@type")
    headline: str
    description: str | None = None
    author: Person | None = None
    date_published: str | None = Field(None, alias="datePublished")
    date_modified: str | None = Field(None, alias="dateModified")
    image: str | None = None
    publisher: OrganizationSchema | None = None
    main_entity_of_page: WebPageRef | None = Field(None, alias="mainEntityOfPage")
    keywords: str | None = None


# =============================================================================
# BreadcrumbList
# =============================================================================

class ListItem(SchemaNode):
    type_: Literal["ListItem"] = Field("ListItem", alias="@type")
    position: int = Field(..., ge=1, description="1-based position in the trail")
    name: str
    item: str = Field(..., description="Absolute URL")


class BreadcrumbListSchema(SchemaNode):
    context: str = Field(SCHEMA_CONTEXT, alias="@context")
    type_: Literal["BreadcrumbList"] = Field("BreadcrumbList", alias="@type")
    item_list_element: list[ListItem] = Field(..., alias="itemListElement")
