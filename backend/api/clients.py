"""
Clients API endpoints
"""
from fastapi import APIRouter, Depends, Response

from constants import HTTPStatus
from dependencies import get_client_service
from services.interfaces import IClientRemover
from utils.error_handlers import handle_api_errors

router = APIRouter()


@router.delete("/clients/{id_client}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Client deletion")
def delete_client(id_client: int, service: IClientRemover = Depends(get_client_service)):
    """Delete a client. Clients with booked trips cannot be deleted (400)."""
    service.delete_client(id_client)
    return Response(status_code=HTTPStatus.NO_CONTENT)
