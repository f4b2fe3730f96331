"""Pure pagination arithmetic.

Normalizes raw page/limit input against a :class:`PaginationConfig`,
derives offsets and navigation metadata, and computes the sliding window
of page numbers shown by a UI pager.  Nothing here holds state.
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Sequence
from decimal import Decimal
from typing import Any, TypeVar

from pagekit.domain.exceptions import InvalidPaginationOptionsError
from pagekit.domain.models.pagination import (
    NormalizedOptions,
    PaginationConfig,
    PaginationMeta,
    PaginationOptions,
    PaginationResult,
)

T = TypeVar("T")

DEFAULT_MAX_VISIBLE: int = 5

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Raw input parsing
# ---------------------------------------------------------------------------


def parse_number(value: Any, field: str = "value") -> int | float | None:
    """Read a raw option as a finite number.

    Returns ``None`` for ``None`` and blank strings (query strings such as
    ``?page=`` arrive that way).  Numeric strings are parsed.  Raises
    :class:`InvalidPaginationOptionsError` for booleans, non-numeric
    strings, NaN, infinities and any other type.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidPaginationOptionsError(field=field, value=value)

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number: int | float = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                raise InvalidPaginationOptionsError(field=field, value=value) from None
    elif isinstance(value, int):
        number = value
    elif isinstance(value, (numbers.Real, Decimal)):
        # Decimal is registered as a Number but not as Real.
        try:
            number = float(value)
        except ValueError:
            raise InvalidPaginationOptionsError(field=field, value=value) from None
    else:
        raise InvalidPaginationOptionsError(field=field, value=value)

    if not math.isfinite(number):
        raise InvalidPaginationOptionsError(field=field, value=value)
    return number


def _supplied(value: Any, field: str) -> int | float | None:
    # Zero counts as "not supplied" so it falls back to the default.
    try:
        number = parse_number(value, field)
    except InvalidPaginationOptionsError:
        logger.debug("Ignoring unreadable pagination option %s=%r", field, value)
        return None
    if number is None or number == 0:
        return None
    return number


# ---------------------------------------------------------------------------
# Core operations
# ---------------------------------------------------------------------------


def normalize(
    options: PaginationOptions | Any = None,
    config: PaginationConfig | None = None,
) -> NormalizedOptions:
    """Turn arbitrary raw options into an always-valid page/limit pair.

    Missing, zero or unreadable values fall back to the configured
    defaults.  The page is truncated and raised to at least 1; the limit
    is truncated and then clamped into ``[min_limit, max_limit]``.  Never
    raises.
    """
    config = config or PaginationConfig()
    raw = PaginationOptions.coerce(options)

    raw_page = _supplied(raw.page, "page")
    raw_limit = _supplied(raw.limit, "limit")
    if raw_page is None:
        raw_page = config.default_page
    if raw_limit is None:
        raw_limit = config.default_limit

    page = max(1, math.floor(raw_page))
    limit = max(config.min_limit, min(config.max_limit, math.floor(raw_limit)))
    return NormalizedOptions(page=page, limit=limit)


def compute_meta(options: NormalizedOptions, total: int) -> PaginationMeta:
    """Derive navigation metadata for *total* items.

    A page past the last one is passed through unchanged; it simply has
    no next page.
    """
    page, limit = options.page, options.limit
    total_pages = math.ceil(total / limit)
    has_next = page < total_pages
    has_prev = page > 1

    return PaginationMeta(
        page=page,
        limit=limit,
        total=total,
        total_pages=total_pages,
        has_next=has_next,
        has_prev=has_prev,
        next_page=page + 1 if has_next else None,
        prev_page=page - 1 if has_prev else None,
    )


def compute_offset(page: int, limit: int) -> int:
    """Zero-based offset suitable for SQL ``OFFSET`` clauses.

    Assumes ``page >= 1``.
    """
    return (page - 1) * limit


def window_page_numbers(
    current_page: int,
    total_pages: int,
    max_visible: int = DEFAULT_MAX_VISIBLE,
) -> list[int]:
    """Contiguous page numbers for a pager, centred on *current_page*.

    Returns ``min(total_pages, max_visible)`` ascending numbers within
    ``[1, total_pages]``.  With an even *max_visible* the window leans
    one step towards the first page.
    """
    if total_pages <= max_visible:
        return list(range(1, total_pages + 1))

    half = max_visible // 2
    start = max(1, current_page - half)
    end = min(total_pages, start + max_visible - 1)

    # Near the end: slide the window back so it stays full.
    if end == total_pages:
        start = max(1, end - max_visible + 1)

    return list(range(start, end + 1))


def format_pagination_response(data: Sequence[T], meta: PaginationMeta) -> PaginationResult[T]:
    return PaginationResult(data=list(data), pagination=meta)
