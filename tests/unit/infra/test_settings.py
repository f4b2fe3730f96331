"""Tests for pagekit.infrastructure.settings."""

from __future__ import annotations

import pytest

from pagekit.domain.models.pagination import PaginationConfig
from pagekit.infrastructure.settings import PaginationSettings, get_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DEFAULT_PAGE", "DEFAULT_LIMIT", "MAX_LIMIT", "MIN_LIMIT", "LOG_LEVEL", "JSON_LOGS"):
        monkeypatch.delenv(f"PAGINATION_{name}", raising=False)


class TestPaginationSettings:
    def test_defaults(self) -> None:
        settings = get_settings()
        assert settings.default_page == 1
        assert settings.default_limit == 10
        assert settings.max_limit == 100
        assert settings.min_limit == 1
        assert settings.log_level == "INFO"
        assert settings.json_logs is True

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAGINATION_MAX_LIMIT", "250")
        monkeypatch.setenv("pagination_min_limit", "5")
        settings = get_settings()
        assert settings.max_limit == 250
        assert settings.min_limit == 5

    def test_to_config(self) -> None:
        settings = PaginationSettings(default_page=2, default_limit=20, max_limit=40, min_limit=4)
        assert settings.to_config() == PaginationConfig(
            default_page=2, default_limit=20, max_limit=40, min_limit=4
        )
