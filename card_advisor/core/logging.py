"""
Structured logging setup for Card Advisor.

``setup_logging()`` runs once from the application lifespan. Modules log
through ``structlog.get_logger(__name__)`` with snake_case event names and
keyword context; the request ID is bound by the request context middleware
and merged into every line.
"""

import logging
import sys

import structlog

from .config import settings


def setup_logging(log_level: str | None = None, log_format: str | None = None) -> None:
    """
    Configure structlog and the standard library root logger.

    Args:
        log_level: Level name, defaults to settings.log_level
        log_format: "json" or "console", defaults to settings.log_format
    """
    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)

    renderer = (
        structlog.dev.ConsoleRenderer()
        if (log_format or settings.log_format) == "console"
        else structlog.processors.JSONRenderer()
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
        force=True,
    )

    # SQL echo is controlled by settings.debug, not the log level
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
