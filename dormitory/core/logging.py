"""
Application logging.

Module loggers go through the stdlib tree configured in
`dormitory.config.logging`; every record picks up the current request
id and caller id. Account events (logins, password resets) are written
through structlog to the `dormitory.audit` logger.
"""

import logging
import time
from contextvars import ContextVar
from datetime import datetime, timezone
from functools import wraps
from typing import Any, Dict, Optional

import structlog

from dormitory.config.logging import configure_logging
from dormitory.config.settings import settings

request_id: ContextVar[Optional[str]] = ContextVar('request_id', default=None)
user_id: ContextVar[Optional[str]] = ContextVar('user_id', default=None)

SENSITIVE_KEYS = ('password', 'token', 'secret', 'authorization', 'cookie')
AUDIT_LOGGER = 'dormitory.audit'


def redact(data: Dict[str, Any]) -> Dict[str, Any]:
    """Mask values of sensitive keys in place, nested dicts included."""
    for key in list(data):
        if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
            data[key] = '[REDACTED]'
        elif isinstance(data[key], dict):
            redact(data[key])
    return data


def _bind_request_context(logger, method_name, event_dict):
    for name, var in (('request_id', request_id), ('user_id', user_id)):
        value = var.get()
        if value and name not in event_dict:
            event_dict[name] = value
    event_dict['environment'] = settings.ENVIRONMENT
    return event_dict


def _redact_event(logger, method_name, event_dict):
    return redact(event_dict)


def configure_structlog() -> None:
    """Route structlog events through the stdlib handlers."""
    processors = [
        structlog.stdlib.filter_by_level,
        _bind_request_context,
        _redact_event,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt='iso', utc=True),
        structlog.processors.format_exc_info,
    ]
    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.processors.KeyValueRenderer(key_order=['event', 'timestamp']))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


class LoggerAdapter:
    """Stdlib logger that copies the request context into `extra`."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def _log(self, level: int, message: str, *args, **kwargs):
        extra = dict(kwargs.get('extra') or {})
        for name, var in (('request_id', request_id), ('user_id', user_id)):
            value = var.get()
            if value and name not in extra:
                extra[name] = value
        kwargs['extra'] = redact(extra)
        self.logger.log(level, message, *args, **kwargs)

    def debug(self, message: str, *args, **kwargs):
        self._log(logging.DEBUG, message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs):
        self._log(logging.INFO, message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs):
        self._log(logging.WARNING, message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs):
        self._log(logging.ERROR, message, *args, **kwargs)

    def exception(self, message: str, *args, **kwargs):
        kwargs.setdefault('exc_info', True)
        self._log(logging.ERROR, message, *args, **kwargs)


def get_logger(name: Optional[str] = None) -> LoggerAdapter:
    return LoggerAdapter(logging.getLogger(name or 'dormitory'))


def get_audit_logger():
    return structlog.get_logger(AUDIT_LOGGER)


def audit_event(event: str, level: int = logging.INFO, **fields) -> None:
    """
    Record an account event.

    Args:
        event: Short event name, e.g. "login_failed"
        level: stdlib level for the record
        **fields: Event attributes; sensitive keys are masked
    """
    get_audit_logger().log(level, event, **fields)


def log_execution_time(logger_name: Optional[str] = None):
    """Log how long the wrapped call took, and its failure type if it raised."""
    def decorator(func):
        logger = get_logger(logger_name or func.__module__)

        @wraps(func)
        def wrapper(*args, **kwargs):
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(f"{func.__qualname__} failed", extra={
                    'execution_time': round(time.perf_counter() - started, 4),
                    'error_type': type(e).__name__,
                })
                raise
            logger.info(f"{func.__qualname__} finished", extra={
                'execution_time': round(time.perf_counter() - started, 4),
            })
            return result

        return wrapper

    return decorator


def setup_logging():
    configure_logging()
    configure_structlog()
    get_logger(__name__).info("Logging configured", extra={
        'log_level': settings.LOG_LEVEL,
        'log_format': settings.LOG_FORMAT,
        'started_at': datetime.now(timezone.utc).isoformat(),
    })


__all__ = [
    'audit_event',
    'get_audit_logger',
    'get_logger',
    'setup_logging',
    'log_execution_time',
    'LoggerAdapter',
    'redact',
    'request_id',
    'user_id',
]
