"""Pagination metadata and slicing for list-style API responses."""

from pagekit.application.services.pagination_service import Pagination
from pagekit.domain.exceptions import (
    InvalidPaginationConfigError,
    InvalidPaginationOptionsError,
    PaginationError,
)
from pagekit.domain.models import (
    NormalizedOptions,
    PaginationConfig,
    PaginationLinks,
    PaginationMeta,
    PaginationOptions,
    PaginationResult,
    QueryOptions,
    ValidationResult,
)
from pagekit.domain.services.pagination_engine import (
    compute_meta,
    compute_offset,
    format_pagination_response,
    normalize,
    window_page_numbers,
)

# Process-wide convenience instance with the default configuration.
pagination = Pagination()

__all__ = [
    "InvalidPaginationConfigError",
    "InvalidPaginationOptionsError",
    "NormalizedOptions",
    "Pagination",
    "PaginationConfig",
    "PaginationError",
    "PaginationLinks",
    "PaginationMeta",
    "PaginationOptions",
    "PaginationResult",
    "QueryOptions",
    "ValidationResult",
    "compute_meta",
    "compute_offset",
    "format_pagination_response",
    "normalize",
    "pagination",
    "window_page_numbers",
]
