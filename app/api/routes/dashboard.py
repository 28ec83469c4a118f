"""Dashboard API routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.water_usage import WaterDashboardEnvelope
from app.services.water_usage import get_water_dashboard

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/water", response_model=WaterDashboardEnvelope)
def water_dashboard(db: Session = Depends(get_db)) -> WaterDashboardEnvelope:
    """Reported month consumption, monthly series and trend percentage."""
    return WaterDashboardEnvelope(data=get_water_dashboard(db))
