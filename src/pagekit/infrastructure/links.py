"""Query-string and URL building for pagination links."""

from __future__ import annotations

import urllib.parse
from collections.abc import Mapping
from typing import Any


def stringify_query_value(value: Any) -> str:
    """Render a query parameter value as text.

    Booleans become ``true``/``false``, ``None`` an empty string and lists
    or tuples their stringified items joined with commas.
    """
    if isinstance(value, (list, tuple)):
        return ",".join(stringify_query_value(item) for item in value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def build_query_string(params: Mapping[str, Any]) -> str:
    """Form-encode *params* in insertion order (``a=1&b=x+y``)."""
    return urllib.parse.urlencode({str(k): stringify_query_value(v) for k, v in params.items()})


def build_page_url(
    base_url: str,
    page: int,
    limit: int,
    query_params: Mapping[str, Any] | None = None,
) -> str:
    """Append *query_params* followed by ``page`` and ``limit`` to *base_url*.

    ``page`` and ``limit`` win over same-named entries in *query_params*.
    """
    params: dict[str, Any] = {**(query_params or {}), "page": page, "limit": limit}
    return f"{base_url}?{build_query_string(params)}"
