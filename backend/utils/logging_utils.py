"""
Structured Logging Utilities

Provides utilities for adding structured context to log messages emitted by
the booking services.
"""

import inspect
import logging
from typing import Any, Dict, Optional
from contextvars import ContextVar
from functools import wraps

from exceptions import ApplicationError


# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})

# Argument names copied into the log context by @log_operation
CONTEXT_KEYS = ("trip_id", "client_id", "page", "page_size")


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Client created", extra={"client_id": client.id_client})
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Merge the request context with call-specific extra fields."""
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return context

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.debug(message, extra=self._add_context(extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.info(message, extra=self._add_context(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.warning(message, extra=self._add_context(extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        self.logger.error(message, extra=self._add_context(extra), exc_info=exc_info)


def set_logging_context(**kwargs):
    """
    Set logging context for the current request/operation.

    Example:
        set_logging_context(request_id="abc-123", operation="assign_client")
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})


def _extract_context(func, args, kwargs) -> Dict[str, Any]:
    """Pick identifier arguments (positional or keyword) out of a call."""
    try:
        bound = inspect.signature(func).bind_partial(*args, **kwargs)
    except TypeError:
        return {}
    return {key: bound.arguments[key] for key in CONTEXT_KEYS if key in bound.arguments}


def log_operation(operation_name: str):
    """
    Decorator to log operation start/end with structured context.

    Expected business failures (ApplicationError other than storage faults)
    are logged as warnings; everything else is logged as an error with
    traceback. The exception is always re-raised.

    Example:
        @log_operation("delete_client")
        def delete_client(self, client_id: int):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)
            context = {"operation": operation_name}
            context.update(_extract_context(func, args, kwargs))

            logger.info(f"Starting {operation_name}", extra=context)
            try:
                result = func(*args, **kwargs)
            except ApplicationError as e:
                context["error"] = e.message
                context["error_type"] = type(e).__name__
                if e.kind.is_client_error():
                    logger.warning(f"Rejected {operation_name}: {e.message}", extra=context)
                else:
                    logger.error(f"Failed {operation_name}", extra=context, exc_info=True)
                raise
            except Exception as e:
                context["error"] = str(e)
                context["error_type"] = type(e).__name__
                logger.error(f"Failed {operation_name}", extra=context, exc_info=True)
                raise
            logger.info(f"Completed {operation_name}", extra=context)
            return result

        return wrapper

    return decorator
