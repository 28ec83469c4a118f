"""Water reading service - single and bulk ingestion of raw meter readings."""

import logging

from fastapi import HTTPException, status
from sqlalchemy import Row, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.apartment import Apartment
from app.models.water_meter import WaterMeter
from app.models.water_reading import WaterReading
from app.schemas.water_reading import WaterReadingCreate, WaterReadingUpdate

logger = logging.getLogger(__name__)

READING_NOT_FOUND = "Water reading not found"


def _detail_query():
    """Readings joined with the meter number and apartment number."""
    return (
        select(
            WaterReading.reading_id,
            WaterReading.water_meter_id,
            WaterReading.reading_date,
            WaterReading.water_meter_reading,
            WaterMeter.meter_number,
            Apartment.apartment_number,
        )
        .join(WaterMeter, WaterReading.water_meter_id == WaterMeter.water_meter_id)
        .join(Apartment, WaterMeter.apartment_id == Apartment.apartment_id)
    )


def get_reading_details(db: Session) -> list[Row]:
    """Get all readings with labels, most recent reading date first."""
    query = _detail_query().order_by(WaterReading.reading_date.desc())
    return list(db.execute(query).all())


def get_reading_detail(db: Session, reading_id: int) -> Row:
    """Get one reading with labels."""
    row = db.execute(_detail_query().where(WaterReading.reading_id == reading_id)).first()
    if row is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=READING_NOT_FOUND,
        )
    return row


def get_reading(db: Session, reading_id: int) -> WaterReading:
    """Get a stored reading by ID."""
    reading = db.query(WaterReading).filter(WaterReading.reading_id == reading_id).first()
    if not reading:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=READING_NOT_FOUND,
        )
    return reading


def create_reading(db: Session, reading_data: WaterReadingCreate) -> WaterReading:
    """Record a single water reading."""
    db_reading = WaterReading(
        water_meter_id=reading_data.water_meter_id,
        reading_date=reading_data.reading_date,
        water_meter_reading=reading_data.water_meter_reading,
    )
    db.add(db_reading)
    db.commit()
    db.refresh(db_reading)
    logger.info(
        "Recorded reading %s for water meter %s",
        db_reading.reading_id,
        db_reading.water_meter_id,
    )
    return db_reading


def update_reading(
    db: Session,
    reading_id: int,
    reading_data: WaterReadingUpdate,
) -> WaterReading:
    """Replace the fields of an existing reading."""
    db_reading = get_reading(db, reading_id)

    for field, value in reading_data.model_dump().items():
        setattr(db_reading, field, value)

    db.commit()
    db.refresh(db_reading)
    logger.info("Updated reading %s", reading_id)
    return db_reading


def delete_reading(db: Session, reading_id: int) -> None:
    """Delete a reading."""
    db_reading = get_reading(db, reading_id)
    db.delete(db_reading)
    db.commit()
    logger.info("Deleted reading %s", reading_id)


def create_bulk_readings(
    db: Session,
    readings_data: list[WaterReadingCreate],
) -> list[WaterReading]:
    """Insert a batch of readings in one transaction.

    Every element has already been validated by the request schema, so an
    invalid element never reaches this point. Any store failure rolls the
    whole batch back. The returned readings carry the keys the store actually
    assigned, in payload order.
    """
    if not readings_data:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Request body must be a non-empty array of water readings",
        )

    db_readings = [
        WaterReading(
            water_meter_id=reading.water_meter_id,
            reading_date=reading.reading_date,
            water_meter_reading=reading.water_meter_reading,
        )
        for reading in readings_data
    ]

    try:
        db.add_all(db_readings)
        db.flush()
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Bulk insert of %d water readings rolled back", len(db_readings))
        raise

    for r in db_readings:
        db.refresh(r)

    logger.info(
        "Recorded %d water readings (ids %s..%s)",
        len(db_readings),
        db_readings[0].reading_id,
        db_readings[-1].reading_id,
    )
    return db_readings
