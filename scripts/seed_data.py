"""Seed script to populate the database with sample data."""

from datetime import date
from decimal import Decimal

from app.core.database import Base, SessionLocal, engine
from app.models.apartment import Apartment
from app.models.property import Property
from app.models.water_meter import WaterMeter
from app.models.water_reading import WaterReading
from app.services.periods import shift_months

MONTHS_OF_HISTORY = 8


def seed_database() -> None:
    """Seed the database with sample data."""
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        # Check if data already exists
        if db.query(Property).first():
            print("Database already has data. Skipping seed.")
            return

        print("Seeding database...")

        property_obj = Property(name="Riverside Court", address="12 River Road")
        db.add(property_obj)
        db.flush()
        print(f"Created property: {property_obj.name} (ID: {property_obj.property_id})")

        meters = []
        for number in ("A1", "A2", "B1"):
            apartment = Apartment(
                property_id=property_obj.property_id,
                apartment_number=number,
                apartment_type="2 bedroom",
            )
            db.add(apartment)
            db.flush()

            meter = WaterMeter(
                apartment_id=apartment.apartment_id,
                meter_number=f"WM-{number}",
            )
            db.add(meter)
            meters.append(meter)
        db.flush()
        print(f"Created {len(meters)} apartments with water meters")

        # Monthly readings on the 28th, oldest first
        first = shift_months(date.today().replace(day=28), -MONTHS_OF_HISTORY)
        readings_count = 0
        for index, meter in enumerate(meters):
            value = Decimal("100.00") * (index + 1)
            for month in range(MONTHS_OF_HISTORY + 1):
                reading_date = shift_months(first, month)
                if reading_date > date.today():
                    break
                db.add(
                    WaterReading(
                        water_meter_id=meter.water_meter_id,
                        reading_date=reading_date,
                        water_meter_reading=value,
                    )
                )
                readings_count += 1
                value += Decimal("8.50") + Decimal(index) * Decimal("2.25") + Decimal(month % 3)

        db.commit()
        print(f"Created {readings_count} water readings")
        print("Seeding complete!")
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
