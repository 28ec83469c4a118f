"""Apartment database model."""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

if TYPE_CHECKING:
    from app.models.property import Property
    from app.models.water_meter import WaterMeter


class Apartment(Base):
    """Rentable unit inside a property."""

    __tablename__ = "apartments"

    apartment_id: Mapped[int] = mapped_column(primary_key=True, index=True)
    apartment_number: Mapped[str] = mapped_column(String(20))
    apartment_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))

    # Foreign keys
    property_id: Mapped[int] = mapped_column(ForeignKey("properties.property_id"), index=True)

    # Relationships
    parent_property: Mapped["Property"] = relationship(back_populates="apartments")
    water_meters: Mapped[list["WaterMeter"]] = relationship(
        back_populates="apartment", passive_deletes="all"
    )
