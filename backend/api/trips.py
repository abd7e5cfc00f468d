"""
Trips API endpoints
"""
from fastapi import APIRouter, Depends, Query

from config.settings import DEFAULT_PAGE_SIZE
from constants import PaginationDefaults
from dependencies import get_assignment_service, get_trip_service
from dtos.request import AssignClientRequest
from dtos.response import AssignmentOutcome, PagedTripsResponse
from services.interfaces import IAssignmentCoordinator, ITripLister
from utils.error_handlers import handle_api_errors

router = APIRouter()


@router.get("/trips", response_model=PagedTripsResponse)
@handle_api_errors("Trip listing")
def list_trips(
    page: int = Query(PaginationDefaults.PAGE, description="One-based page number"),
    page_size: int = Query(DEFAULT_PAGE_SIZE, alias="pageSize", description="Trips per page"),
    service: ITripLister = Depends(get_trip_service)
):
    """Paginated trip list, most recent start date first, with countries and clients."""
    return service.list_trips(page, page_size)


@router.post("/trips/{id_trip}/clients", response_model=AssignmentOutcome)
@handle_api_errors("Client assignment")
def assign_client_to_trip(
    id_trip: int,
    request: AssignClientRequest,
    service: IAssignmentCoordinator = Depends(get_assignment_service)
):
    """
    Register a client on a trip.

    The client is looked up by PESEL and created if unknown. Returns 400 if
    the client is already on the trip or the trip has started, 404 if the
    trip does not exist.
    """
    return service.assign_client_to_trip(id_trip, request)
