"""Tests for pagekit.presentation.schemas."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pagekit.application.services.pagination_service import Pagination
from pagekit.presentation.schemas import (
    PaginatedResponseSchema,
    PaginationMetaSchema,
    to_response,
)


class TestPaginationMetaSchema:
    def test_serialises_camel_case(self) -> None:
        schema = PaginationMetaSchema(
            page=1, limit=10, total=5, total_pages=1, has_next=False, has_prev=False
        )
        assert schema.model_dump(by_alias=True) == {
            "page": 1,
            "limit": 10,
            "total": 5,
            "totalPages": 1,
            "hasNext": False,
            "hasPrev": False,
            "nextPage": None,
            "prevPage": None,
        }

    def test_accepts_camel_case_input(self) -> None:
        schema = PaginationMetaSchema.model_validate(
            {"page": 2, "limit": 10, "total": 30, "totalPages": 3, "hasNext": True, "hasPrev": True}
        )
        assert schema.total_pages == 3
        assert schema.has_next is True

    def test_rejects_negative_total(self) -> None:
        with pytest.raises(ValidationError):
            PaginationMetaSchema(
                page=1, limit=10, total=-1, total_pages=0, has_next=False, has_prev=False
            )


class TestToResponse:
    def test_renders_envelope(self, pagination: Pagination, items: list[dict]) -> None:
        result = pagination.paginate(items, {"page": 2, "limit": 3})
        payload = to_response(result)

        assert payload["data"] == [
            {"id": 4, "name": "Item 4"},
            {"id": 5, "name": "Item 5"},
            {"id": 6, "name": "Item 6"},
        ]
        assert payload["pagination"] == {
            "page": 2,
            "limit": 3,
            "total": 100,
            "totalPages": 34,
            "hasNext": True,
            "hasPrev": True,
            "nextPage": 3,
            "prevPage": 1,
        }
        assert "links" not in payload

    def test_includes_links(self, pagination: Pagination) -> None:
        result = pagination.paginate(list(range(20)), {"page": 1, "limit": 10})
        links = pagination.create_links("/items", result.pagination)
        payload = to_response(result, links)

        assert payload["links"] == {
            "first": "/items?page=1&limit=10",
            "last": "/items?page=2&limit=10",
            "next": "/items?page=2&limit=10",
            "prev": None,
        }

    def test_generic_schema_validates_items(self) -> None:
        schema = PaginatedResponseSchema[int].model_validate(
            {
                "data": ["1", 2],
                "pagination": {
                    "page": 1,
                    "limit": 10,
                    "total": 2,
                    "totalPages": 1,
                    "hasNext": False,
                    "hasPrev": False,
                },
            }
        )
        assert schema.data == [1, 2]
        assert schema.links is None
