"""Structured logging setup."""

import logging

import structlog


def configure_logging(level: str = "INFO", json_output: bool = False):
    """Configure structured logging.

    Args:
        level: Standard library level name (DEBUG, INFO, ...)
        json_output: Render JSON lines instead of the console format
    """
    logging.basicConfig(level=level.upper(), format="%(message)s")

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
