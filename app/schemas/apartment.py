"""Apartment Pydantic schemas."""

from pydantic import BaseModel, Field

from app.schemas.common import RowId


class ApartmentCreate(BaseModel):
    """Schema for creating an apartment."""

    property_id: RowId
    apartment_number: str = Field(min_length=1, max_length=20)
    apartment_type: str | None = Field(default=None, max_length=50)


class ApartmentUpdate(BaseModel):
    """Schema for updating an apartment."""

    property_id: RowId | None = None
    apartment_number: str | None = Field(default=None, min_length=1, max_length=20)
    apartment_type: str | None = Field(default=None, max_length=50)


class ApartmentResponse(BaseModel):
    """Schema for apartment response."""

    apartment_id: int
    property_id: int
    apartment_number: str
    apartment_type: str | None

    model_config = {"from_attributes": True}


class ApartmentCount(BaseModel):
    """Total number of apartments."""

    total: int
