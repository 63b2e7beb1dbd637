"""
Logging setup - Skate Score Calculator
skatescore/core/logging_config.py

Configures structlog rendering from LOG_LEVEL / LOG_FORMAT. structlog events
are handed to the stdlib root logger so both streams share one handler.
"""

import logging

import structlog

from skatescore.config import Settings, get_settings


def configure_logging(settings: Settings = None) -> None:
    """Route structlog and stdlib logging through the configured level and renderer."""
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL)

    logging.basicConfig(
        level=level,
        format='%(asctime)s | %(levelname)-8s | %(message)s',
        datefmt='%H:%M:%S',
    )

    if settings.LOG_FORMAT == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
