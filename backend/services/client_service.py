"""
Client Service

Guarded deletion of client records.
"""

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from constants import Messages
from exceptions import NotFoundError, PreconditionFailedError, StorageUnavailableError
from repositories.client_repository import ClientRepository
from repositories.client_trip_repository import ClientTripRepository
from services.interfaces import IClientRemover
from utils.logging_utils import StructuredLogger, log_operation

logger = StructuredLogger(__name__)


class ClientService(IClientRemover):
    """Service for client-related business logic."""

    def __init__(self, db: Session):
        self.db = db
        self.client_repo = ClientRepository(db)
        self.client_trip_repo = ClientTripRepository(db)

    @log_operation("delete_client")
    def delete_client(self, client_id: int) -> None:
        """
        Delete a client that has no booked trips.

        A client with at least one assignment is never deleted; nothing is
        staged on the session in that case.
        """
        try:
            client = self.client_repo.get_by_id(client_id)
            if client is None:
                raise NotFoundError("Client", client_id, Messages.CLIENT_NOT_FOUND)

            if self.client_trip_repo.client_has_assignments(client_id):
                raise PreconditionFailedError(
                    Messages.CLIENT_HAS_TRIPS,
                    {"client_id": client_id}
                )

            self.client_repo.remove(client)
            self.client_repo.commit()
        except SQLAlchemyError as e:
            self.client_repo.rollback()
            raise StorageUnavailableError("delete_client") from e

        logger.info("Client deleted", extra={"client_id": client_id})
