"""Structured logging configuration with structlog."""

from __future__ import annotations

import logging

import structlog

from carbontrack.config import Settings, get_settings


def setup_logging(settings: Settings | None = None) -> None:
    """Configure structlog for JSON or console output.

    Call once from the embedding application's startup. Without explicit
    settings the ``CARBONTRACK_`` environment is used.
    """
    if settings is None:
        settings = get_settings()

    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer() if settings.log_format == "json" else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
