from __future__ import annotations

from typing import Any


class PaginationError(Exception):
    """Base class for all pagination domain exceptions.

    Carries HTTP-mapping metadata so an API layer can produce
    RFC 9457 Problem Details without knowing exception internals.
    """

    def __init__(
        self,
        detail: str = "",
        *,
        title: str = "Pagination Error",
        status_code: int = 400,
        error_type: str = "about:blank",
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.title = title
        self.status_code = status_code
        self.error_type = error_type


class InvalidPaginationOptionsError(PaginationError):
    def __init__(self, field: str = "", value: Any = None) -> None:
        self.field = field
        self.value = value
        super().__init__(
            detail=f"Invalid value for '{field}': {value!r}",
            title="Invalid Pagination Options",
            status_code=400,
            error_type="urn:pagekit:problems:invalid-options",
        )


class InvalidPaginationConfigError(PaginationError):
    def __init__(self, key: str = "") -> None:
        self.key = key
        super().__init__(
            detail=f"Unknown pagination config key: {key}",
            title="Invalid Pagination Config",
            status_code=400,
            error_type="urn:pagekit:problems:invalid-config",
        )
