"""
Pydantic v2 response schemas for paginated API payloads.

Field names are snake_case in Python and camelCase on the wire
(``totalPages``, ``hasNext`` ...), matching what JavaScript clients of
list endpoints expect.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pagekit.domain.models.pagination import PaginationLinks, PaginationResult

T = TypeVar("T")

# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------


class _CamelModel(BaseModel):
    """Base model serialising field names as camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ---------------------------------------------------------------------------
# Pagination payloads
# ---------------------------------------------------------------------------


class PaginationMetaSchema(_CamelModel):
    """Pagination metadata included in every list response."""

    page: int = Field(..., ge=1, description="Current page number (1-indexed).")
    limit: int = Field(..., ge=1, description="Items per page.")
    total: int = Field(..., ge=0, description="Total number of items.")
    total_pages: int = Field(..., ge=0, description="Total number of pages.")
    has_next: bool = Field(..., description="Whether a following page exists.")
    has_prev: bool = Field(..., description="Whether a preceding page exists.")
    next_page: int | None = Field(default=None, description="Next page number, if any.")
    prev_page: int | None = Field(default=None, description="Previous page number, if any.")


class PaginationLinksSchema(_CamelModel):
    """Navigation links for a paginated resource."""

    first: str
    last: str
    next: str | None = None
    prev: str | None = None


class PaginatedResponseSchema(_CamelModel, Generic[T]):
    """Envelope returned by list endpoints."""

    data: list[T] = Field(default_factory=list)
    pagination: PaginationMetaSchema
    links: PaginationLinksSchema | None = None


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def to_response(
    result: PaginationResult[Any],
    links: PaginationLinks | None = None,
) -> dict[str, Any]:
    """Render *result* (and optional *links*) as a JSON-ready dict.

    ``links`` is omitted from the payload when not given.
    """
    schema = PaginatedResponseSchema[Any](
        data=result.data,
        pagination=PaginationMetaSchema(**asdict(result.pagination)),
        links=PaginationLinksSchema(**asdict(links)) if links is not None else None,
    )
    payload = schema.model_dump(mode="json", by_alias=True)
    if links is None:
        payload.pop("links")
    return payload
