"""
Service Interfaces

Abstract base classes for the booking service layer following Dependency
Inversion Principle. API routes depend on these, so implementations can be
swapped or mocked in tests.
"""

from abc import ABC, abstractmethod

from dtos.request import AssignClientRequest
from dtos.response import AssignmentOutcome, PagedTripsResponse


class ITripLister(ABC):
    """
    Interface for the paginated trip listing.
    """

    @abstractmethod
    def list_trips(self, page: int, page_size: int) -> PagedTripsResponse:
        """
        Get one page of trips, most recent start date first.

        Args:
            page: One-based page number
            page_size: Number of trips per page

        Returns:
            PagedTripsResponse with trip summaries

        Raises:
            InvalidArgumentError: If page or page_size is not positive
            StorageUnavailableError: If the trips cannot be read
        """
        pass


class IClientRemover(ABC):
    """
    Interface for guarded client deletion.
    """

    @abstractmethod
    def delete_client(self, client_id: int) -> None:
        """
        Delete a client that has no booked trips.

        Args:
            client_id: Client primary key

        Raises:
            NotFoundError: If the client does not exist
            PreconditionFailedError: If the client has assigned trips
            StorageUnavailableError: If the deletion cannot be committed
        """
        pass


class IAssignmentCoordinator(ABC):
    """
    Interface for registering a client on a trip.
    """

    @abstractmethod
    def assign_client_to_trip(self, trip_id: int, request: AssignClientRequest) -> AssignmentOutcome:
        """
        Find or create the client identified by request.pesel and book them
        onto the trip.

        Args:
            trip_id: Trip primary key
            request: Client details and optional payment date

        Returns:
            AssignmentOutcome confirming the booking

        Raises:
            ConflictError: If an existing client is already on the trip
            NotFoundError: If the trip does not exist
            PreconditionFailedError: If the trip has already started
            StorageUnavailableError: On any storage failure
        """
        pass
