from sqlalchemy import CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base


class City(Base):
    """
    Destination city. The primary key is a slug derived from the name (e.g. "new-york").

    Attributes:
        cost_index: Relative cost of staying there, 1 (cheap) to 10 (expensive)
        popularity: Editorial popularity score, 0 to 100
    """

    __tablename__ = "cities"
    __table_args__ = (
        CheckConstraint("cost_index BETWEEN 1 AND 10", name="ck_cities_cost_index"),
        CheckConstraint("popularity BETWEEN 0 AND 100", name="ck_cities_popularity"),
    )

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    country: Mapped[str] = mapped_column(String(255))
    cost_index: Mapped[int] = mapped_column(default=5)
    popularity: Mapped[int] = mapped_column(default=0)
    image_url: Mapped[str | None] = mapped_column(String(500), default=None)

    def __repr__(self) -> str:
        return f"<City(id={self.id}, name={self.name}, country={self.country})>"
