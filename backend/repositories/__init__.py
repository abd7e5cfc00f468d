"""
Repository layer for data access abstraction.

This package contains repository classes that encapsulate database queries
and provide a clean interface for data access operations.
"""

from .base_repository import BaseRepository
from .client_repository import ClientRepository
from .trip_repository import TripRepository
from .client_trip_repository import ClientTripRepository

__all__ = [
    "BaseRepository",
    "ClientRepository",
    "TripRepository",
    "ClientTripRepository",
]
