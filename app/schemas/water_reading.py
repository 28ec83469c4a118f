"""Water reading Pydantic schemas for request/response validation."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from app.schemas.common import RowId


class WaterReadingCreate(BaseModel):
    """Schema for creating or replacing a single water reading.

    ``water_meter_reading`` must be present; zero is a valid reading.
    """

    water_meter_id: RowId
    reading_date: date
    water_meter_reading: Decimal = Field(ge=0, max_digits=11, decimal_places=2)


class WaterReadingUpdate(WaterReadingCreate):
    """Schema for updating a water reading (all fields required)."""


class WaterReadingResponse(BaseModel):
    """Schema for a stored water reading."""

    reading_id: int
    water_meter_id: int
    reading_date: date
    water_meter_reading: Decimal

    model_config = {"from_attributes": True}


class WaterReadingDetail(WaterReadingResponse):
    """Water reading joined with its meter and apartment labels."""

    meter_number: str
    apartment_number: str


class WaterReadingEnvelope(BaseModel):
    """Single reading wrapped in the success envelope."""

    success: bool = True
    data: WaterReadingResponse


class WaterReadingDetailEnvelope(BaseModel):
    """Single joined reading wrapped in the success envelope."""

    success: bool = True
    data: WaterReadingDetail


class WaterReadingListEnvelope(BaseModel):
    """Joined readings wrapped in the success envelope."""

    success: bool = True
    data: list[WaterReadingDetail]


class WaterReadingBulkEnvelope(BaseModel):
    """Readings created by a bulk insert, in payload order."""

    success: bool = True
    data: list[WaterReadingResponse]


class DeletedEnvelope(BaseModel):
    """Confirmation of a delete."""

    success: bool = True
    message: str
