"""Property Pydantic schemas for request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field


class PropertyBase(BaseModel):
    """Base property schema."""

    name: str = Field(min_length=1, max_length=100)


class PropertyCreate(PropertyBase):
    """Schema for creating a new property."""

    address: str | None = None


class PropertyUpdate(BaseModel):
    """Schema for updating a property."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    address: str | None = None


class PropertyResponse(PropertyBase):
    """Schema for property response."""

    property_id: int
    address: str | None
    created_at: datetime

    model_config = {"from_attributes": True}
