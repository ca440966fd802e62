"""structlog configuration for specialremote.

stdout carries the protocol, so every log line goes to stderr.

Two output modes:
- Human (default): console renderer, colored when stderr is a terminal
- JSON: structured JSON lines
"""

from __future__ import annotations

import logging
import sys

import structlog

from . import config


def configure(*, level: int | None = None, json: bool | None = None) -> None:
    """Configure structlog processors and output routing.

    Args:
        level: Logging level for the ``specialremote`` logger. Defaults to
            the configured ``SPECIALREMOTE_LOG_LEVEL``.
        json: Use the JSON renderer instead of the console renderer.
            Defaults to the configured ``SPECIALREMOTE_LOG_JSON``.
    """
    if level is None:
        level = config.log_level()
    if json is None:
        json = config.log_json()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderers: list[structlog.types.Processor]
    if json:
        renderers = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderers = [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *renderers,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("specialremote").setLevel(level)
