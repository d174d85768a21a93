import uuid
from datetime import UTC, datetime

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base


class Trip(Base):
    __tablename__ = "trips"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4, index=True)
    owner_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    name: Mapped[str] = mapped_column(String(255), default="")
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC), index=True)

    owner = relationship("User", back_populates="trips")
    stops = relationship("TripStop", back_populates="trip", cascade="all, delete-orphan")
    activities = relationship("TripActivity", back_populates="trip", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"<Trip(id={self.id}, owner_id={self.owner_id})>"


class TripStop(Base):
    """A visit to one city within a trip. A trip may visit the same city more than once."""

    __tablename__ = "trip_stops"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    trip_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("trips.id", ondelete="CASCADE"), index=True
    )
    city_id: Mapped[str] = mapped_column(String(255), ForeignKey("cities.id"), index=True)

    trip = relationship("Trip", back_populates="stops")

    def __repr__(self) -> str:
        return f"<TripStop(trip_id={self.trip_id}, city_id={self.city_id})>"


class TripActivity(Base):
    """An activity scheduled within a trip."""

    __tablename__ = "trip_activities"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    trip_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("trips.id", ondelete="CASCADE"), index=True
    )
    activity_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("activities.id"), index=True)

    trip = relationship("Trip", back_populates="activities")

    def __repr__(self) -> str:
        return f"<TripActivity(trip_id={self.trip_id}, activity_id={self.activity_id})>"
