"""
Logging utilities for applications embedding the client
"""

import logging
from typing import Optional, Union

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Get a logger instance

    Args:
        name: Logger name (typically __name__ from calling module)
        level: Optional logging level (defaults to None to use root logger level)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def setup_logging(level: Union[int, str] = logging.INFO, format_string: Optional[str] = None):
    """
    Configure application-wide logging

    Args:
        level: Logging level or level name such as ClientSettings.log_level
        format_string: Custom format string (optional)
    """
    if isinstance(level, str):
        level = level.upper()

    logging.basicConfig(
        level=level,
        format=format_string or DEFAULT_FORMAT,
        force=True  # Override any existing configuration
    )

    # httpx request logs include the apikey/access_token query params
    logging.getLogger("httpx").setLevel(logging.WARNING)
