"""Apartment API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.params import RowIdPath
from app.core.database import get_db
from app.schemas.apartment import (
    ApartmentCount,
    ApartmentCreate,
    ApartmentResponse,
    ApartmentUpdate,
)
from app.schemas.common import MessageResponse
from app.services import apartment as apartment_service

router = APIRouter(prefix="/apartments", tags=["apartments"])


@router.post("", response_model=ApartmentResponse, status_code=status.HTTP_201_CREATED)
def create_apartment(
    apartment_data: ApartmentCreate,
    db: Session = Depends(get_db),
):
    """Create an apartment."""
    return apartment_service.create_apartment(db, apartment_data)


@router.get("", response_model=list[ApartmentResponse])
def list_apartments(db: Session = Depends(get_db)):
    """List all apartments."""
    return apartment_service.get_apartments(db)


@router.get("/count", response_model=ApartmentCount)
def count_apartments(db: Session = Depends(get_db)) -> ApartmentCount:
    """Total number of apartments."""
    return ApartmentCount(total=apartment_service.count_apartments(db))


@router.get("/{apartment_id}", response_model=ApartmentResponse)
def get_apartment(apartment_id: RowIdPath, db: Session = Depends(get_db)):
    """Get an apartment by ID."""
    return apartment_service.get_apartment(db, apartment_id)


@router.put("/{apartment_id}", response_model=ApartmentResponse)
def update_apartment(
    apartment_id: RowIdPath,
    apartment_data: ApartmentUpdate,
    db: Session = Depends(get_db),
):
    """Update an apartment."""
    return apartment_service.update_apartment(db, apartment_id, apartment_data)


@router.delete("/{apartment_id}", response_model=MessageResponse)
def delete_apartment(apartment_id: RowIdPath, db: Session = Depends(get_db)):
    """Delete an apartment."""
    apartment_service.delete_apartment(db, apartment_id)
    return MessageResponse(message="Apartment deleted successfully")
