"""
Application-wide constants.

This module centralizes all magic strings and numbers used throughout the application
to improve maintainability and reduce duplication.
"""


class ServerConfig:
    """Server configuration constants"""

    HOST = "0.0.0.0"  # Listen on all interfaces
    PORT = 8080
    SERVICE_NAME = "Trip Booking API"
    VERSION = "1.0.0"

    @classmethod
    def url(cls) -> str:
        """Get the full server URL"""
        return f"http://{cls.HOST}:{cls.PORT}"


class PaginationDefaults:
    """Defaults for paginated list endpoints"""

    PAGE = 1


class Messages:
    """User-visible reason strings"""

    ASSIGNED = "Client successfully assigned to the trip."
    INVALID_PAGINATION = "Page and pageSize must be positive integers."
    CLIENT_NOT_FOUND = "Client not found."
    TRIP_NOT_FOUND = "Trip not found."
    CLIENT_HAS_TRIPS = "Client has assigned trips and cannot be deleted."
    ALREADY_ASSIGNED = "Client is already assigned to this trip."
    TRIP_STARTED = "Cannot assign to a trip that has already started."
    INTERNAL_ERROR = "Internal server error"


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404
    CONFLICT = 409
    UNPROCESSABLE_ENTITY = 422

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503
