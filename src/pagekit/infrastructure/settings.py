"""Pagination defaults loaded from environment variables via Pydantic."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from pagekit.domain.models.pagination import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_LIMIT,
    MIN_LIMIT,
    PaginationConfig,
)


class PaginationSettings(BaseSettings):
    """Environment overrides for the pagination defaults and bounds."""

    model_config = {"env_prefix": "PAGINATION_", "case_sensitive": False}

    default_page: int = DEFAULT_PAGE
    default_limit: int = DEFAULT_LIMIT
    max_limit: int = MAX_LIMIT
    min_limit: int = MIN_LIMIT

    # Logging, applied by Pagination.from_settings(configure_logging=True)
    log_level: str = "INFO"
    json_logs: bool = True

    def to_config(self) -> PaginationConfig:
        return PaginationConfig(
            default_page=self.default_page,
            default_limit=self.default_limit,
            max_limit=self.max_limit,
            min_limit=self.min_limit,
        )


def get_settings() -> PaginationSettings:
    """Return pagination settings read from the current environment."""
    return PaginationSettings()
