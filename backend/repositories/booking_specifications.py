"""
Booking Specifications

Concrete specifications for querying clients, trips and assignments.
"""

from datetime import datetime
from models import Client, ClientTrip, Trip
from .specifications import Specification


class ClientByPeselSpec(Specification[Client]):
    """Specification for the client with a given personal identifier."""

    def __init__(self, pesel: str):
        """
        Initialize specification.

        Args:
            pesel: National personal identifier (exact match)
        """
        self.pesel = pesel

    def is_satisfied_by(self, client: Client) -> bool:
        return client.pesel == self.pesel

    def to_sql_filter(self):
        return Client.pesel == self.pesel


class AssignmentsForClientSpec(Specification[ClientTrip]):
    """Specification for assignments owned by a client."""

    def __init__(self, client_id: int):
        self.client_id = client_id

    def is_satisfied_by(self, assignment: ClientTrip) -> bool:
        return assignment.id_client == self.client_id

    def to_sql_filter(self):
        return ClientTrip.id_client == self.client_id


class AssignmentsForTripSpec(Specification[ClientTrip]):
    """Specification for assignments made on a trip."""

    def __init__(self, trip_id: int):
        self.trip_id = trip_id

    def is_satisfied_by(self, assignment: ClientTrip) -> bool:
        return assignment.id_trip == self.trip_id

    def to_sql_filter(self):
        return ClientTrip.id_trip == self.trip_id


class TripStartedSpec(Specification[Trip]):
    """
    Specification for trips that have already started.

    A trip starting exactly at the reference time counts as started.
    """

    def __init__(self, now: datetime):
        """
        Initialize specification.

        Args:
            now: Reference time (server clock)
        """
        self.now = now

    def is_satisfied_by(self, trip: Trip) -> bool:
        return trip.date_from <= self.now

    def to_sql_filter(self):
        return Trip.date_from <= self.now
