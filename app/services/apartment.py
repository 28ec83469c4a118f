"""Apartment service for business logic."""

import logging

from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.apartment import Apartment
from app.schemas.apartment import ApartmentCreate, ApartmentUpdate

logger = logging.getLogger(__name__)


def create_apartment(db: Session, apartment_data: ApartmentCreate) -> Apartment:
    """Create an apartment inside a property."""
    db_apartment = Apartment(**apartment_data.model_dump())
    db.add(db_apartment)
    db.commit()
    db.refresh(db_apartment)
    logger.info("Created apartment %s", db_apartment.apartment_id)
    return db_apartment


def get_apartment(db: Session, apartment_id: int) -> Apartment:
    """Get an apartment by ID."""
    db_apartment = db.query(Apartment).filter(Apartment.apartment_id == apartment_id).first()
    if not db_apartment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Apartment not found",
        )
    return db_apartment


def get_apartments(db: Session) -> list[Apartment]:
    """Get all apartments."""
    return db.query(Apartment).order_by(Apartment.apartment_id).all()


def count_apartments(db: Session) -> int:
    """Count all apartments."""
    return db.query(func.count(Apartment.apartment_id)).scalar() or 0


def update_apartment(
    db: Session,
    apartment_id: int,
    apartment_data: ApartmentUpdate,
) -> Apartment:
    """Update an apartment."""
    db_apartment = get_apartment(db, apartment_id)

    update_data = apartment_data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(db_apartment, field, value)

    db.commit()
    db.refresh(db_apartment)
    return db_apartment


def delete_apartment(db: Session, apartment_id: int) -> None:
    """Delete an apartment."""
    db_apartment = get_apartment(db, apartment_id)
    db.delete(db_apartment)
    db.commit()
    logger.info("Deleted apartment %s", apartment_id)
