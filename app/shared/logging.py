"""
Logging configuration for the application.

Sets up structured logging with a consistent format.
Logging must not change program behavior.
Withheld failure detail (downstream bodies, unexpected exceptions) is
written to the error logger and never returned to clients, so that logger
always records at least ERROR regardless of the configured level.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO", error_logger: str | None = None) -> None:
    """Configure structured logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
        error_logger: Name of the logger receiving withheld failure detail.
    """
    root_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=root_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    if error_logger:
        logging.getLogger(error_logger).setLevel(min(root_level, logging.ERROR))

    # Suppress noisy third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
