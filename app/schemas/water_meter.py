"""Water meter Pydantic schemas for request/response validation."""

from pydantic import BaseModel, Field, StrictStr, model_validator

from app.models.water_meter import METER_NUMBER_MAX_LENGTH
from app.schemas.common import StrictRowId


class WaterMeterCreate(BaseModel):
    """Schema for creating a water meter."""

    apartment_id: StrictRowId
    meter_number: StrictStr = Field(min_length=1, max_length=METER_NUMBER_MAX_LENGTH)


class WaterMeterUpdate(BaseModel):
    """Schema for a partial water meter update."""

    apartment_id: StrictRowId | None = None
    meter_number: StrictStr | None = Field(
        default=None, min_length=1, max_length=METER_NUMBER_MAX_LENGTH
    )

    @model_validator(mode="after")
    def check_at_least_one_field(self) -> "WaterMeterUpdate":
        """Ensure at least one field is provided for update."""
        if all(v is None for v in [self.apartment_id, self.meter_number]):
            raise ValueError("No fields provided to update")
        return self


class WaterMeterResponse(BaseModel):
    """Schema for water meter response."""

    water_meter_id: int
    apartment_id: int
    meter_number: str

    model_config = {"from_attributes": True}
