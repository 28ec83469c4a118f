"""Shared fixtures: in-memory database and API client."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.main import app
from app.models.apartment import Apartment
from app.models.property import Property
from app.models.water_meter import WaterMeter


# Test database setup
@pytest.fixture
def test_db():
    """Create an in-memory test database."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = testing_session_local()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(test_db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_meter(test_db):
    """Factory: create a property/apartment pair (reused by name) and a meter in it."""
    properties: dict[str, Property] = {}
    apartments: dict[tuple[str, str], Apartment] = {}

    def _make(
        meter_number: str,
        apartment_number: str = "A1",
        property_name: str = "Riverside Court",
    ) -> WaterMeter:
        if property_name not in properties:
            prop = Property(name=property_name)
            test_db.add(prop)
            test_db.flush()
            properties[property_name] = prop
        key = (property_name, apartment_number)
        if key not in apartments:
            apartment = Apartment(
                property_id=properties[property_name].property_id,
                apartment_number=apartment_number,
            )
            test_db.add(apartment)
            test_db.flush()
            apartments[key] = apartment
        meter = WaterMeter(apartment_id=apartments[key].apartment_id, meter_number=meter_number)
        test_db.add(meter)
        test_db.commit()
        test_db.refresh(meter)
        return meter

    return _make
