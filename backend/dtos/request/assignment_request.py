"""
Assignment Request DTOs

DTOs for trip registration requests.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class AssignClientRequest(BaseModel):
    """
    Request DTO for registering a client on a trip.

    The pesel identifies an existing client; when no client has it, the other
    personal fields are used to create one.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "firstName": "Jan",
                "lastName": "Kowalski",
                "email": "jan.kowalski@example.com",
                "telephone": "+48 600 100 200",
                "pesel": "12345678901",
                "paymentDate": None
            }
        }
    )

    first_name: str = Field(alias="firstName", max_length=120)
    last_name: str = Field(alias="lastName", max_length=120)
    email: str = Field(max_length=120)
    telephone: str = Field(max_length=120)
    pesel: str = Field(min_length=1, max_length=120, description="National personal identifier")
    payment_date: Optional[datetime] = Field(None, alias="paymentDate")
