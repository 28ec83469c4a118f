"""Property service for business logic."""

import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.models.property import Property
from app.schemas.property import PropertyCreate, PropertyUpdate

logger = logging.getLogger(__name__)


def create_property(db: Session, property_data: PropertyCreate) -> Property:
    """Create a new property."""
    db_property = Property(
        name=property_data.name,
        address=property_data.address,
    )
    db.add(db_property)
    db.commit()
    db.refresh(db_property)
    logger.info("Created property %s", db_property.property_id)
    return db_property


def get_property(db: Session, property_id: int) -> Property:
    """Get a property by ID."""
    db_property = db.query(Property).filter(Property.property_id == property_id).first()
    if not db_property:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Property not found",
        )
    return db_property


def get_properties(db: Session) -> list[Property]:
    """Get all properties."""
    return db.query(Property).order_by(Property.property_id).all()


def update_property(
    db: Session,
    property_id: int,
    property_data: PropertyUpdate,
) -> Property:
    """Update a property."""
    db_property = get_property(db, property_id)

    update_data = property_data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(db_property, field, value)

    db.commit()
    db.refresh(db_property)
    return db_property


def delete_property(db: Session, property_id: int) -> None:
    """Delete a property. Apartments referencing it are not checked."""
    db_property = get_property(db, property_id)
    db.delete(db_property)
    db.commit()
    logger.info("Deleted property %s", property_id)
