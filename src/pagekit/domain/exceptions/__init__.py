from pagekit.domain.exceptions.pagination_exceptions import (
    InvalidPaginationConfigError,
    InvalidPaginationOptionsError,
    PaginationError,
)

__all__ = [
    "InvalidPaginationConfigError",
    "InvalidPaginationOptionsError",
    "PaginationError",
]
