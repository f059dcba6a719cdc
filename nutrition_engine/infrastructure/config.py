"""Configuration utilities for infrastructure layer."""

import os

LOG_FORMATS = ("console", "json")


def get_log_level() -> str:
    """
    Get log level name.

    Returns:
        Upper-cased LOG_LEVEL env var, defaults to "INFO"
    """
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_format() -> str:
    """
    Get log renderer name.

    "console" renders human readable lines, "json" one JSON object per
    event. Unknown values fall back to "console".

    Returns:
        LOG_FORMAT env var, defaults to "console"
    """
    fmt = os.getenv("LOG_FORMAT", "console").lower()
    return fmt if fmt in LOG_FORMATS else "console"
