"""Water meter service for business logic."""

import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.models.water_meter import WaterMeter
from app.schemas.water_meter import WaterMeterCreate, WaterMeterUpdate

logger = logging.getLogger(__name__)


def create_water_meter(db: Session, meter_data: WaterMeterCreate) -> WaterMeter:
    """Create a water meter for an apartment.

    The apartment is not looked up first; referential integrity is left to the
    store.
    """
    db_meter = WaterMeter(
        apartment_id=meter_data.apartment_id,
        meter_number=meter_data.meter_number,
    )
    db.add(db_meter)
    db.commit()
    db.refresh(db_meter)
    logger.info(
        "Created water meter %s for apartment %s", db_meter.water_meter_id, db_meter.apartment_id
    )
    return db_meter


def get_water_meter(db: Session, water_meter_id: int) -> WaterMeter:
    """Get a water meter by ID."""
    meter = db.query(WaterMeter).filter(WaterMeter.water_meter_id == water_meter_id).first()
    if not meter:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Water meter not found",
        )
    return meter


def get_water_meters(db: Session) -> list[WaterMeter]:
    """Get all water meters ordered by ID."""
    return db.query(WaterMeter).order_by(WaterMeter.water_meter_id.asc()).all()


def update_water_meter(
    db: Session,
    water_meter_id: int,
    meter_data: WaterMeterUpdate,
) -> WaterMeter:
    """Apply a partial update; fields left out of the payload are untouched."""
    meter = get_water_meter(db, water_meter_id)

    update_data = meter_data.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(meter, field, value)

    db.commit()
    db.refresh(meter)
    logger.info("Updated water meter %s: %s", water_meter_id, sorted(update_data))
    return meter


def delete_water_meter(db: Session, water_meter_id: int) -> None:
    """Delete a water meter. Readings that reference it are left in place."""
    meter = get_water_meter(db, water_meter_id)
    db.delete(meter)
    db.commit()
    logger.info("Deleted water meter %s", water_meter_id)
