"""Water usage reporting routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.water_usage import (
    MeterMonthlyUsage,
    MonthConsumptionEnvelope,
    MonthlySeriesEnvelope,
    WaterReportEnvelope,
)
from app.services import water_report as report_service
from app.services import water_usage as usage_service

router = APIRouter(prefix="/water", tags=["water-usage"])


@router.get("/consumption", response_model=MonthConsumptionEnvelope)
def get_consumption(db: Session = Depends(get_db)) -> MonthConsumptionEnvelope:
    """Consumption for the current month.

    When the current month sums to zero the previous month is reported.
    """
    return MonthConsumptionEnvelope(data=usage_service.get_current_month_consumption(db))


@router.get("/usage/monthly", response_model=MonthlySeriesEnvelope)
def get_monthly_usage(db: Session = Depends(get_db)) -> MonthlySeriesEnvelope:
    """Consumption per calendar month over the trailing lookback window."""
    return MonthlySeriesEnvelope(data=usage_service.get_monthly_consumption(db))


@router.get("/usage/meter-monthly", response_model=MeterMonthlyUsage)
def get_meter_monthly_usage(db: Session = Depends(get_db)) -> MeterMonthlyUsage:
    """Month-to-consumption map for every meter."""
    return MeterMonthlyUsage(data=usage_service.get_meter_monthly_usage(db))


@router.get("/usage/report", response_model=WaterReportEnvelope)
def get_usage_report(db: Session = Depends(get_db)) -> WaterReportEnvelope:
    """Latest reading per apartment with trailing monthly consumption columns."""
    return WaterReportEnvelope(data=report_service.get_water_report(db))
