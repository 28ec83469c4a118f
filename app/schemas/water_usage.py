"""Water usage reporting schemas.

Aggregated payloads use camelCase keys on the wire.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MonthConsumption(CamelModel):
    """Consumption total for one reported calendar month."""

    total_consumption: float
    month: str
    start_date: date
    end_date: date


class MonthlyConsumptionPoint(CamelModel):
    """One point of the monthly consumption series."""

    month: str
    total_consumption: float


class WaterDashboard(CamelModel):
    """Water card of the dashboard."""

    total_consumption: float
    month: str
    series: list[MonthlyConsumptionPoint]
    trend: float | None


class MonthConsumptionEnvelope(BaseModel):
    """Current/previous month consumption in the success envelope."""

    success: bool = True
    data: MonthConsumption


class MonthlySeriesEnvelope(BaseModel):
    """Monthly series in the success envelope."""

    success: bool = True
    data: list[MonthlyConsumptionPoint]


class WaterDashboardEnvelope(BaseModel):
    """Dashboard water card in the success envelope."""

    success: bool = True
    data: WaterDashboard


class MeterMonthlyUsage(BaseModel):
    """Per-meter monthly consumption map: meter id -> month -> consumption."""

    data: dict[int, dict[str, float]]


class ReportMonth(BaseModel):
    """A trailing month column of the reporting table."""

    month: str
    label: str


class ReportCell(ReportMonth):
    """Consumption of one row in one month column, two decimals."""

    consumption: str


class ReportRow(BaseModel):
    """Latest reading of an apartment with its trailing monthly consumption."""

    reading_id: int
    water_meter_id: int
    reading_date: date
    water_meter_reading: Decimal
    meter_number: str
    apartment_id: int
    apartment_number: str
    property_name: str
    monthly_consumption: dict[str, float]
    months: list[ReportCell]


class WaterReport(BaseModel):
    """Reporting table: column headers and rows."""

    months: list[ReportMonth]
    rows: list[ReportRow]


class WaterReportEnvelope(BaseModel):
    """Reporting table in the success envelope."""

    success: bool = True
    data: WaterReport
