"""Water reading routes - single and bulk ingestion."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.params import RowIdPath
from app.core.database import get_db
from app.schemas.water_reading import (
    DeletedEnvelope,
    WaterReadingBulkEnvelope,
    WaterReadingCreate,
    WaterReadingDetail,
    WaterReadingDetailEnvelope,
    WaterReadingEnvelope,
    WaterReadingListEnvelope,
    WaterReadingResponse,
    WaterReadingUpdate,
)
from app.services import water_reading as reading_service

router = APIRouter(prefix="/water/readings", tags=["water-readings"])


@router.get("", response_model=WaterReadingListEnvelope)
def list_readings(db: Session = Depends(get_db)) -> WaterReadingListEnvelope:
    """List readings with meter and apartment numbers, newest first."""
    rows = reading_service.get_reading_details(db)
    return WaterReadingListEnvelope(
        data=[WaterReadingDetail.model_validate(r, from_attributes=True) for r in rows]
    )


@router.post(
    "",
    response_model=WaterReadingEnvelope,
    status_code=status.HTTP_201_CREATED,
)
def create_reading(
    reading_data: WaterReadingCreate,
    db: Session = Depends(get_db),
) -> WaterReadingEnvelope:
    """Record a single water reading."""
    reading = reading_service.create_reading(db, reading_data)
    return WaterReadingEnvelope(data=WaterReadingResponse.model_validate(reading))


@router.post(
    "/bulk",
    response_model=WaterReadingBulkEnvelope,
    status_code=status.HTTP_201_CREATED,
)
def create_bulk_readings(
    readings_data: list[WaterReadingCreate],
    db: Session = Depends(get_db),
) -> WaterReadingBulkEnvelope:
    """Record a batch of readings; all are stored or none are."""
    readings = reading_service.create_bulk_readings(db, readings_data)
    return WaterReadingBulkEnvelope(
        data=[WaterReadingResponse.model_validate(r) for r in readings]
    )


@router.get("/{reading_id}", response_model=WaterReadingDetailEnvelope)
def get_reading(
    reading_id: RowIdPath, db: Session = Depends(get_db)
) -> WaterReadingDetailEnvelope:
    """Get one reading with meter and apartment numbers."""
    row = reading_service.get_reading_detail(db, reading_id)
    return WaterReadingDetailEnvelope(
        data=WaterReadingDetail.model_validate(row, from_attributes=True)
    )


@router.put("/{reading_id}", response_model=WaterReadingEnvelope)
def update_reading(
    reading_id: RowIdPath,
    reading_data: WaterReadingUpdate,
    db: Session = Depends(get_db),
) -> WaterReadingEnvelope:
    """Replace an existing reading."""
    reading = reading_service.update_reading(db, reading_id, reading_data)
    return WaterReadingEnvelope(data=WaterReadingResponse.model_validate(reading))


@router.delete("/{reading_id}", response_model=DeletedEnvelope)
def delete_reading(
    reading_id: RowIdPath, db: Session = Depends(get_db)
) -> DeletedEnvelope:
    """Delete a reading."""
    reading_service.delete_reading(db, reading_id)
    return DeletedEnvelope(message="Water reading deleted successfully")
