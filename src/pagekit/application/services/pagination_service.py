"""Pagination application service.

Holds a :class:`PaginationConfig` and composes the pure functions of
:mod:`pagekit.domain.services.pagination_engine` into the operations an
API layer needs: slicing in-memory collections, building metadata and
query parameters, validating raw input and producing navigation links.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from pagekit.domain.exceptions import PaginationError
from pagekit.domain.models.pagination import (
    PaginationConfig,
    PaginationLinks,
    PaginationMeta,
    PaginationOptions,
    PaginationResult,
    QueryOptions,
    ValidationResult,
)
from pagekit.domain.services.pagination_engine import (
    DEFAULT_MAX_VISIBLE,
    compute_meta,
    compute_offset,
    format_pagination_response,
    normalize,
    parse_number,
    window_page_numbers,
)
from pagekit.infrastructure.links import build_page_url
from pagekit.infrastructure.observability.logging_config import get_logger, setup_logging
from pagekit.infrastructure.settings import PaginationSettings, get_settings

T = TypeVar("T")

INVALID_OPTIONS_MESSAGE = "Invalid pagination options"

logger = get_logger(__name__)


class Pagination:
    """Configured pagination engine.

    The configuration record is frozen and replaced wholesale on update,
    so every operation works against a single consistent snapshot.
    """

    def __init__(
        self,
        config: PaginationConfig | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> None:
        self._lock = threading.Lock()
        self._config = PaginationConfig().merged(config, **overrides)

    @classmethod
    def from_settings(
        cls,
        settings: PaginationSettings | None = None,
        *,
        configure_logging: bool = False,
    ) -> Pagination:
        """Build an engine from environment-driven settings.

        With *configure_logging*, the ``pagekit`` loggers are also routed
        using ``settings.log_level`` and ``settings.json_logs``.
        """
        settings = settings or get_settings()
        if configure_logging:
            setup_logging(settings.log_level, json_logs=settings.json_logs)
        return cls(settings.to_config())

    # ------------------------------------------------------------------
    # Collections and metadata
    # ------------------------------------------------------------------

    def paginate(
        self,
        collection: Sequence[T],
        options: PaginationOptions | Mapping[str, Any] | None = None,
    ) -> PaginationResult[T]:
        """Slice *collection* to the requested page and attach metadata.

        A page past the end yields an empty slice, never an error.
        """
        normalized = normalize(options, self._config)
        offset = compute_offset(normalized.page, normalized.limit)
        page_items = collection[offset : offset + normalized.limit]
        meta = compute_meta(normalized, len(collection))
        return format_pagination_response(page_items, meta)

    def create_meta(
        self,
        options: PaginationOptions | Mapping[str, Any] | None,
        total: int,
    ) -> PaginationMeta:
        """Metadata only, for callers that fetched *total* themselves."""
        return compute_meta(normalize(options, self._config), total)

    def get_query_options(
        self,
        options: PaginationOptions | Mapping[str, Any] | None = None,
    ) -> QueryOptions:
        normalized = normalize(options, self._config)
        return QueryOptions(
            page=normalized.page,
            limit=normalized.limit,
            offset=compute_offset(normalized.page, normalized.limit),
        )

    def get_page_numbers(
        self,
        current_page: int,
        total_pages: int,
        max_visible: int = DEFAULT_MAX_VISIBLE,
    ) -> list[int]:
        return window_page_numbers(current_page, total_pages, max_visible)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(
        self,
        options: PaginationOptions | Mapping[str, Any] | None = None,
    ) -> ValidationResult:
        """Check the raw options against the configured bounds.

        Unlike :meth:`paginate`, an explicitly supplied out-of-range value
        is reported instead of being clamped.  ``normalized`` is always
        filled in.  Never raises.
        """
        config = self._config
        raw = PaginationOptions.coerce(options)
        normalized = normalize(raw, config)
        errors: list[str] = []

        page = self._read_raw(raw.page, "page", errors)
        limit = self._read_raw(raw.limit, "limit", errors)

        if page is not None and page < 1:
            errors.append("Page must be greater than 0")

        if limit is not None:
            if limit < config.min_limit:
                errors.append(f"Limit must be at least {config.min_limit}")
            if limit > config.max_limit:
                errors.append(f"Limit cannot exceed {config.max_limit}")

        if errors:
            logger.debug("pagination.validation_failed", errors=errors)

        return ValidationResult(is_valid=not errors, errors=errors, normalized=normalized)

    @staticmethod
    def _read_raw(value: Any, field: str, errors: list[str]) -> int | float | None:
        try:
            return parse_number(value, field)
        except PaginationError as exc:
            logger.debug("pagination.unreadable_option", detail=exc.detail)
            if INVALID_OPTIONS_MESSAGE not in errors:
                errors.append(INVALID_OPTIONS_MESSAGE)
            return None

    # ------------------------------------------------------------------
    # Links
    # ------------------------------------------------------------------

    def create_links(
        self,
        base_url: str,
        meta: PaginationMeta,
        query_params: Mapping[str, Any] | None = None,
    ) -> PaginationLinks:
        """First/last/next/prev URLs for *meta*, carrying *query_params*."""

        def url(page: int) -> str:
            return build_page_url(base_url, page, meta.limit, query_params)

        return PaginationLinks(
            first=url(1),
            last=url(meta.total_pages),
            next=url(meta.next_page) if meta.has_next and meta.next_page is not None else None,
            prev=url(meta.prev_page) if meta.has_prev and meta.prev_page is not None else None,
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def update_config(
        self,
        config: PaginationConfig | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> None:
        """Shallow-merge the supplied fields into the configuration."""
        with self._lock:
            self._config = self._config.merged(config, **overrides)
            current = self._config
        logger.info("pagination.config_updated", **current.as_dict())

    def get_config(self) -> PaginationConfig:
        """Return a copy of the current configuration."""
        return self._config.merged()
