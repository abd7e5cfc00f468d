"""
Trip Response DTOs

DTOs for the paginated trip listing.
"""

from datetime import datetime
from typing import List
from pydantic import BaseModel, ConfigDict, Field


class CountryResponse(BaseModel):
    """Country projected onto a trip summary."""

    name: str


class ClientNameResponse(BaseModel):
    """Name of a client assigned to a trip."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")


class TripSummary(BaseModel):
    """
    Response DTO for one trip in a listing.

    Carries no identifiers; countries and clients are nested projections.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    date_from: datetime = Field(alias="dateFrom")
    date_to: datetime = Field(alias="dateTo")
    max_people: int = Field(alias="maxPeople")
    countries: List[CountryResponse] = Field(default_factory=list)
    clients: List[ClientNameResponse] = Field(default_factory=list)


class PagedTripsResponse(BaseModel):
    """
    Response DTO for a page of trips.

    all_pages is ceil(total trips / page size).
    """

    model_config = ConfigDict(populate_by_name=True)

    page_num: int = Field(alias="pageNum")
    page_size: int = Field(alias="pageSize")
    all_pages: int = Field(alias="allPages")
    trips: List[TripSummary] = Field(default_factory=list)
