"""
Logging Package
Structured logging for the JSON:API routing layer
"""
import logging
from typing import Optional

from larasanic_jsonapi.logging.logger_config import LoggerConfig, JSONFormatter

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

INFO = logging.INFO
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL


def _allowed_names():
    from larasanic_jsonapi.support import Config

    handlers = Config.get('app.ALLOWED_LOGGING_HANDLERS', {}) or {}
    return {handler.get('name') for handler in handlers.values() if handler.get('name')}


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Use instead of logging.getLogger

    Dotted module names (getLogger(__name__)) and sanic's loggers are
    returned as asked. A bare name must be listed in
    app.ALLOWED_LOGGING_HANDLERS, otherwise the root logger is returned.

    Example:
        from larasanic_jsonapi.logging import getLogger
        logger = getLogger(__name__)
        logger.info("Registered resource type", extra={'resource_type': 'articles'})
    """
    if name is None or '.' in name:
        return logging.getLogger(name)

    if name not in _allowed_names():
        return logging.getLogger()

    return logging.getLogger(name)
