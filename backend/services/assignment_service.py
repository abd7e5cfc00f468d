"""
Assignment Service

Registers a client on a trip: finds the client by PESEL or creates it, then
books it onto the trip.

The client and the booking are committed separately. A failure after the
client commit (missing trip, trip already started) leaves the new client in
place unless orphan compensation is enabled in config.settings.
"""

from datetime import datetime
from typing import Callable, Tuple
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
import logging

from config.settings import DISCARD_ORPHAN_CLIENTS
from constants import Messages
from dtos.request import AssignClientRequest
from dtos.response import AssignmentOutcome
from exceptions import ConflictError, NotFoundError, PreconditionFailedError, StorageUnavailableError
from models import Client, ClientTrip
from repositories.booking_specifications import TripStartedSpec
from repositories.client_repository import ClientRepository
from repositories.client_trip_repository import ClientTripRepository
from repositories.trip_repository import TripRepository
from services.interfaces import IAssignmentCoordinator
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class AssignmentService(IAssignmentCoordinator):
    """Service coordinating client lookup-or-create and trip booking."""

    def __init__(
        self,
        db: Session,
        clock: Callable[[], datetime] = datetime.now,
        discard_orphan_clients: bool = DISCARD_ORPHAN_CLIENTS
    ):
        """
        Initialize AssignmentService.

        Args:
            db: Database session
            clock: Source of the current server time
            discard_orphan_clients: Delete a client created by this request
                again if the booking fails
        """
        self.db = db
        self.clock = clock
        self.discard_orphan_clients = discard_orphan_clients
        self.client_repo = ClientRepository(db)
        self.trip_repo = TripRepository(db)
        self.client_trip_repo = ClientTripRepository(db)

    @log_operation("assign_client_to_trip")
    def assign_client_to_trip(self, trip_id: int, request: AssignClientRequest) -> AssignmentOutcome:
        try:
            client, created = self._get_or_create_client(request)
            client_id = client.id_client

            # A client created just now cannot be booked on anything yet
            if not created and self.client_trip_repo.is_assigned(client_id, trip_id):
                raise ConflictError(client_id, trip_id, Messages.ALREADY_ASSIGNED)

            try:
                registered_at = self._book(client_id, trip_id, request)
            except Exception:
                if created and self.discard_orphan_clients:
                    self._discard_client(client_id)
                raise
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageUnavailableError("assign_client_to_trip") from e

        return AssignmentOutcome(
            message=Messages.ASSIGNED,
            client_id=client_id,
            trip_id=trip_id,
            client_created=created,
            registered_at=registered_at
        )

    def _get_or_create_client(self, request: AssignClientRequest) -> Tuple[Client, bool]:
        """
        Find the client by PESEL, creating and committing it if absent.

        Returns:
            (client, created) where created is True only if this call
            inserted the client
        """
        client = self.client_repo.get_by_pesel(request.pesel)
        if client is not None:
            return client, False

        client = Client(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            telephone=request.telephone,
            pesel=request.pesel
        )
        self.client_repo.add(client)
        try:
            self.client_repo.commit()
        except IntegrityError as e:
            # Unique index on pesel: another request inserted the same client first
            self.client_repo.rollback()
            client = self.client_repo.get_by_pesel(request.pesel)
            if client is None:
                raise StorageUnavailableError("create_client") from e
            logger.warning(f"Client {client.id_client} was created concurrently, reusing it")
            return client, False

        logger.info(f"Created client {client.id_client}")
        return client, True

    def _book(self, client_id: int, trip_id: int, request: AssignClientRequest) -> datetime:
        """
        Validate the trip and commit the assignment.

        Returns:
            Registration timestamp of the new assignment
        """
        trip = self.trip_repo.get_by_id(trip_id)
        if trip is None:
            raise NotFoundError("Trip", trip_id, Messages.TRIP_NOT_FOUND)

        now = self.clock()
        if TripStartedSpec(now).is_satisfied_by(trip):
            raise PreconditionFailedError(
                Messages.TRIP_STARTED,
                {"trip_id": trip_id, "date_from": trip.date_from.isoformat()}
            )

        self.client_trip_repo.add(ClientTrip(
            id_client=client_id,
            id_trip=trip_id,
            registered_at=now,
            payment_date=request.payment_date
        ))
        try:
            self.client_trip_repo.commit()
        except IntegrityError as e:
            # Composite primary key: a concurrent request booked the same pair
            self.client_trip_repo.rollback()
            if self.client_trip_repo.is_assigned(client_id, trip_id):
                raise ConflictError(client_id, trip_id, Messages.ALREADY_ASSIGNED) from e
            raise StorageUnavailableError("create_assignment") from e

        return now

    def _discard_client(self, client_id: int) -> None:
        """
        Delete a client created earlier in this request.

        Failures are logged and not raised so the original error reaches the
        caller.
        """
        try:
            self.db.rollback()
            orphan = self.client_repo.get_by_id(client_id)
            if orphan is not None:
                self.client_repo.remove(orphan)
                self.client_repo.commit()
                logger.info(f"Discarded client {client_id} after failed assignment")
        except SQLAlchemyError:
            self.db.rollback()
            logger.error(f"Failed to discard orphan client {client_id}", exc_info=True)
