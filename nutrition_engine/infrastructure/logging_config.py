"""Logging setup shared by the engine's structlog loggers."""

import logging
import sys
from typing import Optional, Union

import structlog

from .config import get_log_format, get_log_level


def configure_logging(
    level: Optional[Union[str, int]] = None,
    fmt: Optional[str] = None,
) -> None:
    """
    Configure stdlib logging and route structlog through it.

    Args:
        level: Level name or number (LOG_LEVEL env var when None)
        fmt: "console" or "json" (LOG_FORMAT env var when None)
    """
    if level is None:
        level = get_log_level()
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    fmt = fmt or get_log_format()

    logging.basicConfig(
        level=level,
        format="%(message)s",
        stream=sys.stdout,
    )
    logging.getLogger().setLevel(level)

    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
    )
