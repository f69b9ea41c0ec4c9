"""Structured logging configuration: structlog on top of stdlib logging."""

from __future__ import annotations

import logging.config
import os

import structlog


def _truthy(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def setup_logging(level: str | None = None, fmt: str | None = None) -> None:
    """Configure structlog and stdlib logging to share one stdout handler.

    Arguments override the environment:
        PRINTERHUB_LOG_LEVEL   application log level (default: INFO)
        PRINTERHUB_LOG_FORMAT  console | json (default: console)
        PRINTERHUB_LOG_SQL     1 to echo SQL statements at INFO (default: off)
    """
    log_level = (level or os.environ.get("PRINTERHUB_LOG_LEVEL", "INFO")).upper()
    log_format = (fmt or os.environ.get("PRINTERHUB_LOG_FORMAT", "console")).lower()
    sql_level = "INFO" if _truthy(os.environ.get("PRINTERHUB_LOG_SQL", "0")) else "WARNING"

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: structlog.types.Processor
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
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
                    "stream": "ext://sys.stdout",
                    "formatter": "structlog",
                },
            },
            "root": {"handlers": ["default"], "level": log_level},
            "loggers": {
                "printerhub": {"level": log_level},
                # request.completed from RequestIDMiddleware replaces access lines
                "uvicorn.access": {"level": "WARNING"},
                "uvicorn.error": {"level": "INFO"},
                "sqlalchemy.engine": {"level": sql_level},
                "asyncpg": {"level": "WARNING"},
            },
        }
    )
