"""
Custom exception classes for the application.

Each exception carries an ErrorKind tag. Services raise them; only the API
boundary (utils.error_handlers) turns them into HTTP responses.
"""

from domain.value_objects.error_kind import ErrorKind


class ApplicationError(Exception):
    """Base exception for all application errors"""

    kind: ErrorKind = ErrorKind.STORAGE_UNAVAILABLE

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidArgumentError(ApplicationError):
    """Raised when request input fails validation (e.g. pagination bounds)"""

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)


class NotFoundError(ApplicationError):
    """Raised when a referenced client or trip does not exist"""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity: str, entity_id: int, message: str | None = None):
        details = {"entity": entity, "id": entity_id}
        msg = message or f"{entity} not found."
        super().__init__(msg, details)


class ConflictError(ApplicationError):
    """Raised when a client is already assigned to a trip"""

    kind = ErrorKind.CONFLICT

    def __init__(self, client_id: int, trip_id: int, message: str | None = None):
        details = {"client_id": client_id, "trip_id": trip_id}
        msg = message or "Client is already assigned to this trip."
        super().__init__(msg, details)


class PreconditionFailedError(ApplicationError):
    """Raised when a business rule forbids the operation in the current state"""

    kind = ErrorKind.PRECONDITION_FAILED

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, details)


class StorageUnavailableError(ApplicationError):
    """Raised when database operations fail"""

    kind = ErrorKind.STORAGE_UNAVAILABLE

    def __init__(self, operation: str, message: str | None = None):
        details = {"operation": operation}
        super().__init__(message or f"Database operation '{operation}' failed", details)
