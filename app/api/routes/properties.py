"""Property API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.params import RowIdPath
from app.core.database import get_db
from app.schemas.property import PropertyCreate, PropertyResponse, PropertyUpdate
from app.schemas.common import MessageResponse
from app.services import property as property_service

router = APIRouter(prefix="/properties", tags=["properties"])


@router.post("", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED)
def create_property(
    property_data: PropertyCreate,
    db: Session = Depends(get_db),
):
    """Create a new property."""
    return property_service.create_property(db, property_data)


@router.get("", response_model=list[PropertyResponse])
def list_properties(db: Session = Depends(get_db)):
    """List all properties."""
    return property_service.get_properties(db)


@router.get("/{property_id}", response_model=PropertyResponse)
def get_property(property_id: RowIdPath, db: Session = Depends(get_db)):
    """Get a property by ID."""
    return property_service.get_property(db, property_id)


@router.put("/{property_id}", response_model=PropertyResponse)
def update_property(
    property_id: RowIdPath,
    property_data: PropertyUpdate,
    db: Session = Depends(get_db),
):
    """Update a property."""
    return property_service.update_property(db, property_id, property_data)


@router.delete("/{property_id}", response_model=MessageResponse)
def delete_property(property_id: RowIdPath, db: Session = Depends(get_db)):
    """Delete a property."""
    property_service.delete_property(db, property_id)
    return MessageResponse(message="Property deleted successfully")
