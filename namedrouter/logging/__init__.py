"""
Logging Package
Structured logging for namedrouter

Loggers live under the ``namedrouter`` namespace so an application can
configure them in one place with LoggerConfig.setup_logger().
"""
from namedrouter.logging.logger_config import (
    LoggerConfig,
    JSONFormatter,
)
import logging
from typing import Optional

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'getLogger',
    'INFO',
    'DEBUG',
    'WARNING',
    'ERROR',
    'CRITICAL',
]

# Export logging levels for convenience
INFO = logging.INFO
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Names outside the package namespace are nested under it, so
    ``getLogger('console')`` returns the ``namedrouter.console`` logger.

    Args:
        name: Logger name (the package logger if None)

    Returns:
        Logger instance

    Example:
        from namedrouter.logging import getLogger
        logger = getLogger(__name__)
        logger.debug("Route registered", extra={'route_name': 'users.show'})
    """
    from namedrouter.defaults import DEFAULT_LOGGER_NAME

    if not name or name == DEFAULT_LOGGER_NAME:
        return logging.getLogger(DEFAULT_LOGGER_NAME)

    if not name.startswith(f'{DEFAULT_LOGGER_NAME}.'):
        name = f'{DEFAULT_LOGGER_NAME}.{name}'

    return logging.getLogger(name)
