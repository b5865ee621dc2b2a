"""
Structured logging for mcp-translations.

Configures structlog once per process and hands out named loggers. Host
processes that already configure structlog can skip ``configure_logging``
entirely; ``get_logger`` works against whatever configuration is active.

Examples:
    >>> from mcp_translations.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", json_format=False)
    >>> logger = get_logger(__name__)
    >>> logger.debug("translation_resolved", key="TOOL_DESCRIPTION", source="env")

    From ``MCP_TRANSLATIONS_LOG_LEVEL`` / ``MCP_TRANSLATIONS_LOG_FORMAT``:

    >>> configure_logging_from_settings()

Tags:
    logging, structlog, observability, mcp-translations
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from .settings import TranslationSettings, get_settings

_SERVICE_NAME = "mcp-translations"


def _add_service_metadata(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service-level metadata to all logs."""
    event_dict.setdefault("service", _SERVICE_NAME)
    return event_dict


def configure_logging(
    level: str = "INFO",
    json_format: bool | None = None,
    service: str = "mcp-translations",
    add_timestamp: bool = True,
) -> None:
    """Configure structured logging for the host process.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: True for JSON, False for console, None for auto (JSON if not tty)
        service: Service name included in every event
        add_timestamp: Include ISO timestamp in logs
    """
    global _SERVICE_NAME
    _SERVICE_NAME = service

    if json_format is None:
        json_format = not sys.stderr.isatty()

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        _add_service_metadata,
    ]

    if add_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_format:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    # stderr keeps stdout free for hosts that speak a protocol over it
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def configure_logging_from_settings(settings: TranslationSettings | None = None) -> None:
    """Configure logging from ``MCP_TRANSLATIONS_LOG_LEVEL`` / ``MCP_TRANSLATIONS_LOG_FORMAT``.

    Args:
        settings: Settings to use; defaults to ``get_settings()``
    """
    settings = settings or get_settings()
    configure_logging(
        level=settings.log_level,
        json_format=settings.log_format == "json",
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger.

    Args:
        name: Logger name (usually __name__)
    """
    return structlog.get_logger(name)


__all__ = [
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
]
