"""
Trip Service

Paginated, projected read of trips with their countries and assigned clients.
"""

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
import logging

from domain.value_objects.page_request import PageRequest
from dtos.response import ClientNameResponse, CountryResponse, PagedTripsResponse, TripSummary
from exceptions import StorageUnavailableError
from models import Trip
from repositories.trip_repository import TripRepository
from services.interfaces import ITripLister
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class TripService(ITripLister):
    """Service for trip listing."""

    def __init__(self, db: Session):
        """
        Initialize TripService.

        Args:
            db: Database session
        """
        self.db = db
        self.trip_repo = TripRepository(db)

    @log_operation("list_trips")
    def list_trips(self, page: int, page_size: int) -> PagedTripsResponse:
        # Validation happens before any query is issued
        page_request = PageRequest(page=page, page_size=page_size)

        try:
            total_count = self.trip_repo.count()
            if page_request.starts_beyond(total_count):
                # Offsets past the end never reach the database
                trips = []
            else:
                trips = self.trip_repo.get_page_by_start_desc(
                    page_request.offset, page_request.limit_within(total_count)
                )
            summaries = [self._to_summary(trip) for trip in trips]
        except SQLAlchemyError as e:
            raise StorageUnavailableError("list_trips") from e

        logger.debug(f"Listed {len(summaries)} of {total_count} trips (page {page})")

        return PagedTripsResponse(
            page_num=page_request.page,
            page_size=page_request.page_size,
            all_pages=page_request.total_pages(total_count),
            trips=summaries
        )

    @staticmethod
    def _to_summary(trip: Trip) -> TripSummary:
        """Project a trip and its loaded relationships onto a TripSummary."""
        return TripSummary(
            name=trip.name,
            description=trip.description,
            date_from=trip.date_from,
            date_to=trip.date_to,
            max_people=trip.max_people,
            countries=[CountryResponse(name=country.name) for country in trip.countries],
            clients=[
                ClientNameResponse(
                    first_name=assignment.client.first_name,
                    last_name=assignment.client.last_name
                )
                for assignment in trip.client_trips
            ]
        )
