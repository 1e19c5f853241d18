"""Logging setup for contentfully.

Modules log through ``logging.getLogger(__name__)``; applications call
``configure_logging`` once to attach a handler to the package logger.
"""

import logging
import os
import sys

LOGGER_NAME = 'contentfully'
LOG_LEVEL_ENV = 'CONTENTFULLY_LOG_LEVEL'
LOG_FORMAT = '[%(name)s]: %(message)s'


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a stderr handler to the package logger and set its level.

    Args:
        level: Level name or number. Defaults to $CONTENTFULLY_LOG_LEVEL,
            then WARNING.

    Returns:
        The package logger.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, 'WARNING')
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not any(getattr(h, '_contentfully', False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._contentfully = True
        logger.addHandler(handler)

    return logger

