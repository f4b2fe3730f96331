from pagekit.domain.models.pagination import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_LIMIT,
    MIN_LIMIT,
    NormalizedOptions,
    PaginationConfig,
    PaginationLinks,
    PaginationMeta,
    PaginationOptions,
    PaginationResult,
    QueryOptions,
    ValidationResult,
)

__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_PAGE",
    "MAX_LIMIT",
    "MIN_LIMIT",
    "NormalizedOptions",
    "PaginationConfig",
    "PaginationLinks",
    "PaginationMeta",
    "PaginationOptions",
    "PaginationResult",
    "QueryOptions",
    "ValidationResult",
]
