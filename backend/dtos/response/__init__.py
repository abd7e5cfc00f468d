"""
Response DTOs

DTOs for outgoing API responses. They control exactly which fields of the
ORM models are exposed and under which camelCase names.
"""

from .trip_response import CountryResponse, ClientNameResponse, TripSummary, PagedTripsResponse
from .assignment_response import AssignmentOutcome

__all__ = [
    "CountryResponse",
    "ClientNameResponse",
    "TripSummary",
    "PagedTripsResponse",
    "AssignmentOutcome",
]
