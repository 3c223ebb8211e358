"""Logging configuration for the storefront CLI.

Log records go to stderr so they never mix with command output.
STOREFRONT_LOG_LEVEL controls verbosity (default WARNING).
"""

import logging
import os
import sys

import structlog


def configure_logging(level: str | None = None) -> None:
    log_level = (level or os.getenv("STOREFRONT_LOG_LEVEL") or "WARNING").upper()

    handler = logging.StreamHandler(sys.stderr)
    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(log_level)

    # Suppress noisy library loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
