"""WaterReading database model - raw cumulative meter readings."""

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

if TYPE_CHECKING:
    from app.models.water_meter import WaterMeter


class WaterReading(Base):
    """Point observation of a water meter's cumulative counter."""

    __tablename__ = "water_readings"

    reading_id: Mapped[int] = mapped_column(primary_key=True, index=True)
    reading_date: Mapped[date] = mapped_column(index=True)

    # Cumulative units since installation
    water_meter_reading: Mapped[Decimal] = mapped_column(Numeric(precision=11, scale=2))

    # Foreign keys
    water_meter_id: Mapped[int] = mapped_column(
        ForeignKey("water_meters.water_meter_id"), index=True
    )

    # Relationships
    water_meter: Mapped["WaterMeter"] = relationship(back_populates="readings")
