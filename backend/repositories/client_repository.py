"""
Client repository for client-specific data access operations.
"""

from typing import Optional
from sqlalchemy.orm import Session

from models import Client
from .base_repository import BaseRepository
from .booking_specifications import ClientByPeselSpec


class ClientRepository(BaseRepository[Client]):
    """Repository for Client model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Client)

    def get_by_pesel(self, pesel: str) -> Optional[Client]:
        """
        Find a client by national personal identifier.

        Args:
            pesel: Personal identifier (exact match)

        Returns:
            Client instance or None if not found
        """
        return self.find_one(ClientByPeselSpec(pesel))
