"""Value objects for pagination requests, metadata and results.

All records are frozen: a configuration change or a new request always
produces a new object, never an in-place mutation.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Generic, TypeVar

from pagekit.domain.exceptions import InvalidPaginationConfigError

T = TypeVar("T")

DEFAULT_PAGE: int = 1
DEFAULT_LIMIT: int = 10
MAX_LIMIT: int = 100
MIN_LIMIT: int = 1


@dataclass(frozen=True)
class PaginationConfig:
    """Defaults and bounds applied when normalizing raw options.

    ``min_limit <= max_limit`` is expected but not enforced.
    """

    default_page: int = DEFAULT_PAGE
    default_limit: int = DEFAULT_LIMIT
    max_limit: int = MAX_LIMIT
    min_limit: int = MIN_LIMIT

    def merged(
        self,
        changes: PaginationConfig | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> PaginationConfig:
        """Return a copy with the supplied fields replaced.

        Fields that are missing or ``None`` keep their current value.
        """
        if isinstance(changes, PaginationConfig):
            changes = changes.as_dict()
        updates = {**(changes or {}), **overrides}

        known = {f.name for f in fields(self)}
        for key in updates:
            if key not in known:
                raise InvalidPaginationConfigError(key=key)

        return replace(self, **{k: v for k, v in updates.items() if v is not None})

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class PaginationOptions:
    """Raw, caller-supplied page/limit; either may be missing or invalid."""

    page: Any = None
    limit: Any = None

    @classmethod
    def coerce(cls, value: Any) -> PaginationOptions:
        """Accept options, a ``page``/``limit`` mapping, any object with
        ``page``/``limit`` attributes (e.g. :class:`NormalizedOptions`), or
        ``None``."""
        if value is None:
            return cls()
        if isinstance(value, PaginationOptions):
            return value
        if isinstance(value, Mapping):
            return cls(page=value.get("page"), limit=value.get("limit"))
        return cls(page=getattr(value, "page", None), limit=getattr(value, "limit", None))


@dataclass(frozen=True)
class NormalizedOptions:
    page: int
    limit: int


@dataclass(frozen=True)
class QueryOptions:
    """Values a caller feeds into its own ``OFFSET`` / ``LIMIT`` query."""

    page: int
    limit: int
    offset: int


@dataclass(frozen=True)
class PaginationMeta:
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool
    next_page: int | None = None
    prev_page: int | None = None


@dataclass(frozen=True)
class PaginationResult(Generic[T]):
    """A page slice together with its navigation metadata."""

    data: list[T]
    pagination: PaginationMeta


@dataclass(frozen=True)
class PaginationLinks:
    first: str
    last: str
    next: str | None = None
    prev: str | None = None


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    errors: list[str]
    normalized: NormalizedOptions
