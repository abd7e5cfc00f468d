"""
Dependency injection providers for FastAPI.

Each provider builds a service around the request-scoped database session,
so every request works on its own unit of work. Tests override these (or
database.get_db) through app.dependency_overrides.
"""

from sqlalchemy.orm import Session
from fastapi import Depends
from database import get_db
from services.interfaces import IAssignmentCoordinator, IClientRemover, ITripLister
from services.assignment_service import AssignmentService
from services.client_service import ClientService
from services.trip_service import TripService


def get_trip_service(db: Session = Depends(get_db)) -> ITripLister:
    """
    Factory function for creating TripService instances.

    Args:
        db: Database session (injected)

    Returns:
        ITripLister: Trip listing implementation
    """
    return TripService(db)


def get_client_service(db: Session = Depends(get_db)) -> IClientRemover:
    """
    Factory function for creating ClientService instances.

    Args:
        db: Database session (injected)

    Returns:
        IClientRemover: Client deletion implementation
    """
    return ClientService(db)


def get_assignment_service(db: Session = Depends(get_db)) -> IAssignmentCoordinator:
    """
    Factory function for creating AssignmentService instances.

    Args:
        db: Database session (injected)

    Returns:
        IAssignmentCoordinator: Assignment implementation
    """
    return AssignmentService(db)
