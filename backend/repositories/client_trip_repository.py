"""
Assignment repository for client-trip booking records.
"""

from sqlalchemy.orm import Session

from models import ClientTrip
from .base_repository import BaseRepository
from .booking_specifications import AssignmentsForClientSpec, AssignmentsForTripSpec


class ClientTripRepository(BaseRepository[ClientTrip]):
    """Repository for ClientTrip (assignment) operations."""

    def __init__(self, db: Session):
        super().__init__(db, ClientTrip)

    def client_has_assignments(self, client_id: int) -> bool:
        """
        Check whether any trip is booked for a client.

        Args:
            client_id: Client primary key

        Returns:
            True if at least one assignment references the client
        """
        return self.any(AssignmentsForClientSpec(client_id))

    def is_assigned(self, client_id: int, trip_id: int) -> bool:
        """
        Check whether a client is already booked onto a trip.

        Args:
            client_id: Client primary key
            trip_id: Trip primary key

        Returns:
            True if the (client, trip) assignment exists
        """
        return self.any(AssignmentsForClientSpec(client_id) & AssignmentsForTripSpec(trip_id))
