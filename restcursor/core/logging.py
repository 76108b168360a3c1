"""Structured logging configuration: structlog on top of stdlib logging."""

from __future__ import annotations

import logging
import logging.config
import os

import structlog


def setup_logging(level: str | None = None, fmt: str | None = None) -> None:
    """Configure structlog and route the ``restcursor`` logger to stderr.

    Applications embedding the library usually pass *level* and *fmt*
    explicitly; when omitted they fall back to environment variables:
        RESTCURSOR_LOG_LEVEL  - library log level (default: INFO)
        RESTCURSOR_LOG_FORMAT - console | json (default: console)

    Only the ``restcursor`` logger gets a handler, so the host
    application's root logging setup is left alone.
    """
    log_level = (level or os.environ.get("RESTCURSOR_LOG_LEVEL", "INFO")).upper()
    log_format = (fmt or os.environ.get("RESTCURSOR_LOG_FORMAT", "console")).lower()
    if log_format not in ("console", "json"):
        raise ValueError(f"unknown log format {log_format!r}, expected console or json")

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structlog": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": shared_processors,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        renderer,
                    ],
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "structlog",
                },
            },
            "loggers": {
                "restcursor": {
                    "handlers": ["default"],
                    "level": log_level,
                    "propagate": False,
                },
                "httpx": {"level": "WARNING"},
                "httpcore": {"level": "WARNING"},
            },
        }
    )
