import uuid
from datetime import UTC, datetime

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base


class User(Base):
    """
    Platform user who plans trips.

    Attributes:
        id: Unique UUID primary key
        email: Unique email address (indexed for fast lookups)
        name: User's display name
        role: User role ("user" or "admin")
        created_at: Account creation timestamp (UTC)
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    name: Mapped[str] = mapped_column(String(255))

    # Role: "user" or "admin"
    role: Mapped[str] = mapped_column(String(50), default="user")

    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))

    trips = relationship("Trip", back_populates="owner", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
