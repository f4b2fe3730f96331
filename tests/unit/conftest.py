"""Shared fixtures for unit tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from pagekit.application.services.pagination_service import Pagination
from pagekit.domain.models.pagination import PaginationConfig


@pytest.fixture
def default_config() -> PaginationConfig:
    return PaginationConfig()


@pytest.fixture
def pagination() -> Pagination:
    return Pagination()


@pytest.fixture
def items() -> list[dict]:
    return [{"id": i + 1, "name": f"Item {i + 1}"} for i in range(100)]
