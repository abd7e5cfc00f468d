from sqlalchemy import Column, String, Integer, Text, DateTime, ForeignKey, Table, CheckConstraint, Index
from sqlalchemy.orm import relationship
from database import Base


country_trip = Table(
    'country_trip',
    Base.metadata,
    Column('id_country', Integer, ForeignKey('country.id_country'), primary_key=True),
    Column('id_trip', Integer, ForeignKey('trip.id_trip'), primary_key=True),
)


class Country(Base):
    __tablename__ = 'country'

    id_country = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(120), nullable=False)

    trips = relationship("Trip", secondary=country_trip, back_populates="countries")


class Trip(Base):
    """
    A scheduled travel offering.

    Trips are read-only for the booking API; they are listed with their
    countries and assigned clients and used as assignment targets.
    """
    __tablename__ = 'trip'

    id_trip = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(120), nullable=False)
    description = Column(Text, nullable=False, default='')
    date_from = Column(DateTime, nullable=False)
    date_to = Column(DateTime, nullable=False)
    max_people = Column(Integer, nullable=False)

    countries = relationship("Country", secondary=country_trip, back_populates="trips")
    client_trips = relationship("ClientTrip", back_populates="trip")

    __table_args__ = (
        CheckConstraint("max_people > 0"),
        Index('idx_trip_date_from', 'date_from'),
    )


class Client(Base):
    """
    A person who can be booked onto trips.

    The PESEL (national personal identifier) is the business key; the unique
    index on it is what resolves concurrent creation of the same client.
    """
    __tablename__ = 'client'

    id_client = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(120), nullable=False)
    last_name = Column(String(120), nullable=False)
    email = Column(String(120), nullable=False)
    telephone = Column(String(120), nullable=False)
    pesel = Column(String(120), nullable=False)

    client_trips = relationship("ClientTrip", back_populates="client")

    __table_args__ = (
        Index('uq_client_pesel', 'pesel', unique=True),
    )


class ClientTrip(Base):
    """
    Booking of one client onto one trip.

    The composite primary key allows at most one assignment per
    (client, trip) pair. Rows are never updated once created.
    """
    __tablename__ = 'client_trip'

    id_client = Column(Integer, ForeignKey('client.id_client'), primary_key=True)
    id_trip = Column(Integer, ForeignKey('trip.id_trip'), primary_key=True)
    registered_at = Column(DateTime, nullable=False)
    payment_date = Column(DateTime, nullable=True)

    client = relationship("Client", back_populates="client_trips")
    trip = relationship("Trip", back_populates="client_trips")
