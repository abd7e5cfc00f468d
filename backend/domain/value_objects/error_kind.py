"""
ErrorKind Value Object

Stable failure categories reported by the booking services.
"""

from enum import Enum

from constants import HTTPStatus


class ErrorKind(str, Enum):
    """
    Tag carried by every application error.

    The API boundary translates the tag into an HTTP status; services never
    deal with status codes directly.
    """

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    PRECONDITION_FAILED = "PRECONDITION_FAILED"
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"

    @property
    def http_status(self) -> int:
        """HTTP status code reported to the caller for this kind."""
        return {
            ErrorKind.INVALID_ARGUMENT: HTTPStatus.BAD_REQUEST,
            ErrorKind.NOT_FOUND: HTTPStatus.NOT_FOUND,
            # Duplicate bookings are reported as a bad request, not 409
            ErrorKind.CONFLICT: HTTPStatus.BAD_REQUEST,
            ErrorKind.PRECONDITION_FAILED: HTTPStatus.BAD_REQUEST,
            ErrorKind.STORAGE_UNAVAILABLE: HTTPStatus.INTERNAL_SERVER_ERROR,
        }[self]

    def is_client_error(self) -> bool:
        """Check if the caller can fix the failure by changing the request."""
        return self is not ErrorKind.STORAGE_UNAVAILABLE
