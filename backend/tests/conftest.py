import os
import sys
import tempfile
from datetime import datetime, timedelta
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Keep the application away from the per-user database and log directory
os.environ.setdefault('BOOKING_DATABASE_URL', 'sqlite:///:memory:')
os.environ.setdefault('BOOKING_LOG_DIR', tempfile.mkdtemp(prefix='booking-logs-'))

# Now import after path and environment are set
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, get_db
from models import Client, ClientTrip, Country, Trip


@pytest.fixture
def db_session():
    """Create in-memory database for testing"""
    engine = create_engine(
        'sqlite:///:memory:',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def make_country(db_session):
    """Factory fixture creating committed countries."""
    def _factory(name: str = "Poland") -> Country:
        country = Country(name=name)
        db_session.add(country)
        db_session.commit()
        return country
    return _factory


@pytest.fixture
def make_trip(db_session):
    """Factory fixture creating committed trips starting relative to now."""
    def _factory(
        name: str = "Tatra Hike",
        starts_in: timedelta = timedelta(days=1),
        duration: timedelta = timedelta(days=7),
        max_people: int = 20,
        countries: list | None = None,
    ) -> Trip:
        date_from = datetime.now() + starts_in
        trip = Trip(
            name=name,
            description=f"{name} description",
            date_from=date_from,
            date_to=date_from + duration,
            max_people=max_people,
            countries=countries or [],
        )
        db_session.add(trip)
        db_session.commit()
        return trip
    return _factory


@pytest.fixture
def make_client(db_session):
    """Factory fixture creating committed clients."""
    def _factory(
        pesel: str = "90010112345",
        first_name: str = "Jan",
        last_name: str = "Kowalski",
    ) -> Client:
        client = Client(
            first_name=first_name,
            last_name=last_name,
            email=f"{first_name.lower()}@example.com",
            telephone="600100200",
            pesel=pesel,
        )
        db_session.add(client)
        db_session.commit()
        return client
    return _factory


@pytest.fixture
def make_assignment(db_session):
    """Factory fixture booking a client onto a trip."""
    def _factory(client: Client, trip: Trip, payment_date: datetime | None = None) -> ClientTrip:
        assignment = ClientTrip(
            id_client=client.id_client,
            id_trip=trip.id_trip,
            registered_at=datetime.now(),
            payment_date=payment_date,
        )
        db_session.add(assignment)
        db_session.commit()
        return assignment
    return _factory


@pytest.fixture
def api_client(db_session):
    """FastAPI TestClient whose requests share the test database session."""
    from main import app

    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
