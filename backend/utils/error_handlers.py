"""
Error handling decorators and utilities for API endpoints.

Application exceptions are translated into HTTP responses here and nowhere
else. Storage and unexpected failures are reported with a generic message so
internal details never reach the caller.
"""

import inspect
from functools import wraps
from typing import Callable
from fastapi import HTTPException
import logging

from constants import HTTPStatus, Messages
from exceptions import ApplicationError

logger = logging.getLogger(__name__)


def to_http_exception(operation_name: str, error: ApplicationError) -> HTTPException:
    """
    Convert an application error into an HTTPException.

    Args:
        operation_name: Human-readable name of the operation
        error: Raised application error

    Returns:
        HTTPException with the status code for the error kind
    """
    status_code = error.kind.http_status
    if error.kind.is_client_error():
        logger.warning(f"{operation_name} - {error.kind.value}: {error.message}")
        return HTTPException(status_code=status_code, detail=error.message)

    logger.error(f"{operation_name} - {error.kind.value}: {error.message}", exc_info=error)
    return HTTPException(status_code=status_code, detail=Messages.INTERNAL_ERROR)


def handle_api_errors(operation_name: str):
    """
    Decorator to handle API errors consistently across endpoints.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Trip listing")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.delete("/clients/{id_client}")
        @handle_api_errors("Client deletion")
        def delete_client(...):
            ...
    """
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except ApplicationError as e:
                raise to_http_exception(operation_name, e)
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
                raise
            except Exception as e:
                logger.error(f"{operation_name} - Unexpected error: {e}", exc_info=True)
                raise HTTPException(
                    status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                    detail=Messages.INTERNAL_ERROR
                )

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except ApplicationError as e:
                raise to_http_exception(operation_name, e)
            except HTTPException:
                raise
            except Exception as e:
                logger.error(f"{operation_name} - Unexpected error: {e}", exc_info=True)
                raise HTTPException(
                    status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                    detail=Messages.INTERNAL_ERROR
                )

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
