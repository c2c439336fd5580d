"""Logging utilities for synods modules."""

import logging
import re


_SID_PATTERN = re.compile(r'(_sid=)[^&\s]+')


def get_logger(name: str) -> logging.Logger:
    """Get a logger that automatically inherits from root logger.

    The logger propagates to the root logger and only gets a default
    level when the root logger has no handlers yet.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logger.setLevel(logging.WARNING)

    return logger


def mask_sid(text: str) -> str:
    """Replace session ids in a URL or query string with asterisks."""
    return _SID_PATTERN.sub(r'\1***', text)


MODULE_LOGGERS = (
    'synods',
    'synods.client',
    'synods.session',
    'synods.request',
    'synods.transport',
    'synods.tasks',
)


def set_level(level: int) -> None:
    """Apply one level to every synods logger."""
    for name in MODULE_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = True
