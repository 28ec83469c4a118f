"""Water meter API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.params import RowIdPath
from app.core.database import get_db
from app.schemas.common import MessageResponse
from app.schemas.water_meter import (
    WaterMeterCreate,
    WaterMeterResponse,
    WaterMeterUpdate,
)
from app.services import water_meter as meter_service

router = APIRouter(prefix="/water/meters", tags=["water-meters"])


@router.get("", response_model=list[WaterMeterResponse])
def list_water_meters(db: Session = Depends(get_db)):
    """List all water meters."""
    return meter_service.get_water_meters(db)


@router.post("", response_model=WaterMeterResponse, status_code=status.HTTP_201_CREATED)
def create_water_meter(
    meter_data: WaterMeterCreate,
    db: Session = Depends(get_db),
):
    """Create a water meter for an apartment."""
    return meter_service.create_water_meter(db, meter_data)


@router.get("/{water_meter_id}", response_model=WaterMeterResponse)
def get_water_meter(water_meter_id: RowIdPath, db: Session = Depends(get_db)):
    """Get a water meter by ID."""
    return meter_service.get_water_meter(db, water_meter_id)


@router.put("/{water_meter_id}", response_model=WaterMeterResponse)
def update_water_meter(
    water_meter_id: RowIdPath,
    meter_data: WaterMeterUpdate,
    db: Session = Depends(get_db),
):
    """Partially update a water meter."""
    return meter_service.update_water_meter(db, water_meter_id, meter_data)


@router.delete("/{water_meter_id}", response_model=MessageResponse)
def delete_water_meter(water_meter_id: RowIdPath, db: Session = Depends(get_db)):
    """Delete a water meter."""
    meter_service.delete_water_meter(db, water_meter_id)
    return MessageResponse(message="Water meter deleted successfully")
