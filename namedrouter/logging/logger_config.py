"""
Logging Configuration
Structured logging for route registration and path building
"""
import logging
import logging.handlers
import json
from typing import List, Optional
from datetime import datetime

# Attributes every LogRecord carries; anything else came in through `extra`
_RESERVED_ATTRIBUTES = frozenset(
    logging.LogRecord('', 0, '', 0, '', (), None).__dict__
) | {'message', 'asctime'}


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging

    Outputs one JSON object per record. Values passed through ``extra``
    (e.g. ``route_name``, ``template``) are added as top-level keys.
    """

    def __init__(self, include_fields: Optional[List[str]] = None):
        """
        Initialize JSON formatter

        Args:
            include_fields: Record attributes to include even when they are
                standard LogRecord attributes (e.g. 'process')
        """
        super().__init__()
        self.include_fields = include_fields or []

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON

        Args:
            record: Log record to format

        Returns:
            JSON formatted log string
        """
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        if record.stack_info:
            log_data['stack'] = record.stack_info

        for field in self.include_fields:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRIBUTES:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class LoggerConfig:
    """
    Centralized logging configuration
    """

    TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    @staticmethod
    def setup_logger(
        name: Optional[str] = None,
        format_type: Optional[str] = None,
        file_name: Optional[str] = None,
        max_bytes: Optional[int] = None,
        backup_count: Optional[int] = None,
        stream=None,
    ) -> logging.Logger:
        """
        Setup a logger with a console handler and an optional rotating file

        Args:
            name: Logger name (defaults to the package logger)
            format_type: 'json' or 'text' (defaults to config logging.FORMAT)
            file_name: Log file path (defaults to config logging.FILE, none if unset)
            max_bytes: Max bytes before rotation
            backup_count: Number of rotated files to keep
            stream: Stream for the console handler (defaults to stderr)

        Returns:
            Configured logger

        Example:
            logger = LoggerConfig.setup_logger(format_type='json')
        """
        from namedrouter import defaults
        from namedrouter.support import Config

        name = name or defaults.DEFAULT_LOGGER_NAME
        format_type = format_type or Config.get('logging.FORMAT', defaults.DEFAULT_LOG_FORMAT)
        file_name = file_name or Config.get('logging.FILE')
        if max_bytes is None:
            max_bytes = defaults.DEFAULT_LOG_MAX_BYTES
        if backup_count is None:
            backup_count = defaults.DEFAULT_LOG_BACKUP_COUNT

        app_env = Config.get('app.APP_ENV', defaults.DEFAULT_APP_ENV)

        logger = logging.getLogger(name)
        logger.setLevel(LoggerConfig.get_level_by_environment(app_env))

        # Clear existing handlers so repeated setup does not duplicate output
        logger.handlers.clear()

        if format_type == 'json':
            formatter = JSONFormatter()
        else:
            formatter = logging.Formatter(LoggerConfig.TEXT_FORMAT)

        console_handler = logging.StreamHandler(stream)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if file_name:
            file_handler = logging.handlers.RotatingFileHandler(
                file_name,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        logger.propagate = False

        return logger

    @staticmethod
    def get_level_by_environment(environment: str) -> int:
        """
        Get logging level based on environment

        Args:
            environment: Environment name ('production', 'development', 'testing')

        Returns:
            Logging level
        """
        levels = {
            'production': logging.WARNING,
            'staging': logging.INFO,
            'development': logging.DEBUG,
            'testing': logging.ERROR,
        }
        return levels.get(environment.lower(), logging.INFO)
