"""
Trip repository for trip-specific data access operations.
"""

from typing import List
from sqlalchemy.orm import Session, selectinload

from models import Trip, ClientTrip
from .base_repository import BaseRepository


class TripRepository(BaseRepository[Trip]):
    """Repository for Trip model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Trip)

    def get_page_by_start_desc(self, offset: int, limit: int) -> List[Trip]:
        """
        Get one page of trips, most recent start date first.

        Countries and assigned clients are eagerly loaded so that projecting
        the page does not issue a query per trip.

        Args:
            offset: Number of trips to skip
            limit: Maximum number of trips to return

        Returns:
            List of trips with countries and client_trips.client loaded
        """
        return self.db.query(self.model).options(
            selectinload(self.model.countries),
            selectinload(self.model.client_trips).joinedload(ClientTrip.client)
        ).order_by(
            self.model.date_from.desc()
        ).offset(offset).limit(limit).all()
