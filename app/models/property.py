"""Property database model."""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

if TYPE_CHECKING:
    from app.models.apartment import Apartment


class Property(Base):
    """Property (building) that apartments belong to."""

    __tablename__ = "properties"

    property_id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), index=True)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))

    # Relationships
    apartments: Mapped[list["Apartment"]] = relationship(
        back_populates="parent_property", passive_deletes="all"
    )
