"""
Assignment Response DTOs
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class AssignmentOutcome(BaseModel):
    """Confirmation returned after a client is booked onto a trip."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    client_id: int = Field(alias="clientId")
    trip_id: int = Field(alias="tripId")
    client_created: bool = Field(alias="clientCreated", description="True if the client was created by this request")
    registered_at: datetime = Field(alias="registeredAt")
