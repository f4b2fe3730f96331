"""
Structured logging for pagekit using structlog.

pagekit logs through two channels: structlog events from the application
service and plain ``logging`` records from the domain engine.  Both live
under the ``pagekit`` logger namespace.  :func:`setup_logging` routes that
namespace only, so an embedding application keeps control of the root
logger.  It is opt-in: ``Pagination.from_settings(configure_logging=True)``
calls it with ``PAGINATION_LOG_LEVEL`` / ``PAGINATION_JSON_LOGS``.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

LOGGER_NAMESPACE: str = "pagekit"


def add_library_name(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Tag every event with the library that emitted it."""
    event_dict.setdefault("library", LOGGER_NAMESPACE)
    return event_dict


def _renderer(json_logs: bool) -> structlog.types.Processor:
    if json_logs:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(
    log_level: str = "INFO",
    *,
    json_logs: bool = True,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """
    Route the ``pagekit`` logger namespace to *stream* (stdout by default).

    Parameters
    ----------
    log_level:
        Severity name; unknown names fall back to ``INFO``.
    json_logs:
        JSON lines when true, human-readable key/value lines otherwise.

    Returns the configured namespace logger.  Calling again replaces the
    previous handler rather than stacking a second one.
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_library_name,  # type: ignore[list-item]
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(json_logs),
            ],
        )
    )

    namespace_logger = logging.getLogger(LOGGER_NAMESPACE)
    namespace_logger.handlers.clear()
    namespace_logger.addHandler(handler)
    namespace_logger.setLevel(numeric_level)
    namespace_logger.propagate = False
    return namespace_logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger for a ``pagekit.*`` module *name*."""
    return structlog.get_logger(name)  # type: ignore[no-any-return]
