"""
Logging Configuration

Provides structured logging with JSON format support.
"""

import logging
import structlog
from alumni_hub.config import settings


def configure_logging(log_format: str | None = None, log_level: str | None = None):
    """Configure structured logging"""

    log_format = log_format or settings.LOG_FORMAT
    log_level = log_level or settings.LOG_LEVEL

    shared_processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        renderers = [
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ]
    else:
        # Console logging
        renderers = [structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=shared_processors + renderers,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper()),
    )


def get_logger(name: str):
    """
    Get a logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return structlog.get_logger(name)


# Configure logging on module import
configure_logging()
