"""Water meter database model."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

if TYPE_CHECKING:
    from app.models.apartment import Apartment
    from app.models.water_reading import WaterReading

METER_NUMBER_MAX_LENGTH = 20


class WaterMeter(Base):
    """Physical water meter installed in one apartment."""

    __tablename__ = "water_meters"

    water_meter_id: Mapped[int] = mapped_column(primary_key=True, index=True)
    meter_number: Mapped[str] = mapped_column(String(METER_NUMBER_MAX_LENGTH))

    # Foreign keys
    apartment_id: Mapped[int] = mapped_column(ForeignKey("apartments.apartment_id"), index=True)

    # Relationships
    apartment: Mapped["Apartment"] = relationship(back_populates="water_meters")
    readings: Mapped[list["WaterReading"]] = relationship(
        back_populates="water_meter", passive_deletes="all"
    )
