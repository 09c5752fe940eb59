"""
Logger Setup
Structured (JSON) or plain text output for the routing layer loggers
"""
import json
import logging
import logging.handlers
from datetime import datetime
from typing import Iterable, Optional

# Attributes every LogRecord carries; anything else came in through extra={...}
_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord('', logging.INFO, '', 0, '', (), None).__dict__
) | {'message', 'asctime'}

TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

ENVIRONMENT_LEVELS = {
    'production': logging.WARNING,
    'staging': logging.INFO,
    'development': logging.DEBUG,
    'testing': logging.ERROR,
}


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record

    Context passed through extra (resource_type, route, authorizer, ...)
    is written as top-level keys next to the standard ones.
    """

    def __init__(self, include_fields: Optional[Iterable[str]] = None):
        super().__init__()
        self.include_fields = list(include_fields or [])

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'location': f"{record.module}:{record.funcName}:{record.lineno}",
        }

        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)
        if record.stack_info:
            entry['stack'] = self.formatStack(record.stack_info)

        for field in self.include_fields:
            entry[field] = getattr(record, field, None)

        entry.update({
            key: value for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRIBUTES
        })

        return json.dumps(entry, default=str)


class LoggerConfig:
    """
    Attaches a single handler to a named logger

    Usage:
        LoggerConfig.setup_logger('larasanic_jsonapi')
        LoggerConfig.setup_logger('larasanic_jsonapi', format_type='text', file_path='storage/logs/json_api.log')
    """

    @staticmethod
    def setup_logger(
        name: str,
        format_type: str = 'json',
        level: Optional[int] = None,
        file_path: Optional[str] = None,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5
    ) -> logging.Logger:
        """
        Args:
            name: Logger name, usually the package name so every module
                logger below it is covered
            format_type: 'json' or 'text'
            level: Defaults to the level for Config 'app.APP_ENV'
            file_path: Write to a rotating file instead of stderr
            max_bytes: Rotate after this many bytes
            backup_count: Rotated files to keep
        """
        from larasanic_jsonapi.support import Config

        if level is None:
            level = LoggerConfig.get_level_by_environment(Config.get('app.APP_ENV', 'local'))

        if file_path:
            handler = logging.handlers.RotatingFileHandler(
                file_path, maxBytes=max_bytes, backupCount=backup_count, encoding='utf-8'
            )
        else:
            handler = logging.StreamHandler()

        handler.setFormatter(JSONFormatter() if format_type == 'json' else logging.Formatter(TEXT_FORMAT))

        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers.clear()
        logger.addHandler(handler)
        # The handler is the only output; the root logger must not repeat it
        logger.propagate = False

        return logger

    @staticmethod
    def get_level_by_environment(environment: str) -> int:
        """INFO unless the environment is one of ENVIRONMENT_LEVELS"""
        return ENVIRONMENT_LEVELS.get(environment.lower(), logging.INFO)
