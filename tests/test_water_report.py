"""Tests for the latest-reading-per-apartment reporting table."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from fastapi.testclient import TestClient

from app.models.water_reading import WaterReading
from app.services.water_report import (
    ReadingRow,
    build_water_report,
    denormalize_readings,
    get_water_report,
    latest_per_apartment,
)


def _add_reading(db, meter, reading_date: date, value: str) -> None:
    db.add(
        WaterReading(
            water_meter_id=meter.water_meter_id,
            reading_date=reading_date,
            water_meter_reading=Decimal(value),
        )
    )
    db.commit()


def _row(apartment_id: int, reading_date: date, reading_id: int) -> ReadingRow:
    return ReadingRow(
        reading_id=reading_id,
        water_meter_id=1,
        reading_date=reading_date,
        water_meter_reading=Decimal("0"),
        meter_number="WM-1",
        apartment_id=apartment_id,
        apartment_number="A1",
        property_name="Riverside Court",
    )


class TestCollapse:
    """Pure join and collapse helpers."""

    def test_tie_keeps_first_encountered(self) -> None:
        rows = [
            _row(1, date(2024, 2, 1), 10),
            _row(1, date(2024, 2, 1), 11),
            _row(2, date(2024, 1, 1), 12),
            _row(1, date(2024, 1, 1), 13),
        ]
        latest = latest_per_apartment(rows)
        assert [r.reading_id for r in latest] == [10, 12]

    def test_later_date_replaces(self) -> None:
        rows = [
            _row(1, date(2024, 1, 1), 1),
            _row(1, date(2024, 3, 1), 2),
        ]
        assert [r.reading_id for r in latest_per_apartment(rows)] == [2]

    def test_unresolvable_readings_dropped(self) -> None:
        prop = SimpleNamespace(property_id=1, name="Riverside Court")
        apartment = SimpleNamespace(apartment_id=5, property_id=1, apartment_number="A1")
        meter = SimpleNamespace(water_meter_id=7, apartment_id=5, meter_number="WM-7")
        orphan_meter = SimpleNamespace(water_meter_id=8, apartment_id=99, meter_number="WM-8")
        readings = [
            SimpleNamespace(
                reading_id=1,
                water_meter_id=7,
                reading_date=date(2024, 1, 1),
                water_meter_reading=Decimal("1"),
            ),
            SimpleNamespace(
                reading_id=2,
                water_meter_id=8,
                reading_date=date(2024, 1, 1),
                water_meter_reading=Decimal("1"),
            ),
            SimpleNamespace(
                reading_id=3,
                water_meter_id=404,
                reading_date=date(2024, 1, 1),
                water_meter_reading=Decimal("1"),
            ),
        ]

        rows = denormalize_readings(readings, [meter, orphan_meter], [apartment], [prop])
        assert len(rows) == 1
        assert isinstance(rows[0], ReadingRow)
        assert rows[0].apartment_id == 5
        assert rows[0].property_name == "Riverside Court"
        assert rows[0].apartment_number == "A1"
        assert rows[0].meter_number == "WM-7"

    def test_missing_property_labelled_unknown(self) -> None:
        apartment = SimpleNamespace(apartment_id=5, property_id=42, apartment_number="A1")
        meter = SimpleNamespace(water_meter_id=7, apartment_id=5, meter_number="WM-7")
        reading = SimpleNamespace(
            reading_id=1,
            water_meter_id=7,
            reading_date=date(2024, 1, 1),
            water_meter_reading=Decimal("1"),
        )
        report = build_water_report(
            [reading], [meter], [apartment], [], {}, today=date(2024, 1, 15), months=2
        )
        assert report.rows[0].property_name == "Unknown"
        assert [c.consumption for c in report.rows[0].months] == ["0.00", "0.00"]


class TestWaterReport:
    """Report built from the store."""

    def test_two_meters_one_apartment_collapse(self, test_db, make_meter) -> None:
        meter_1 = make_meter("WM-1", apartment_number="A1")
        meter_2 = make_meter("WM-2", apartment_number="A1")
        meter_3 = make_meter("WM-3", apartment_number="B1")
        _add_reading(test_db, meter_1, date(2024, 1, 1), "100")
        _add_reading(test_db, meter_1, date(2024, 2, 20), "110.5")
        _add_reading(test_db, meter_2, date(2024, 2, 15), "50")
        _add_reading(test_db, meter_3, date(2024, 2, 1), "10")

        report = get_water_report(test_db, today=date(2024, 3, 10))

        assert [m.month for m in report.months] == [
            "2024-03",
            "2024-02",
            "2024-01",
            "2023-12",
            "2023-11",
            "2023-10",
        ]
        assert report.months[0].label == "Mar 2024"

        assert [r.apartment_number for r in report.rows] == ["A1", "B1"]
        a1 = report.rows[0]
        assert a1.water_meter_id == meter_1.water_meter_id
        assert a1.reading_date == date(2024, 2, 20)
        assert a1.property_name == "Riverside Court"
        assert a1.monthly_consumption == {"2024-02": 10.5}
        assert [c.consumption for c in a1.months] == [
            "0.00",
            "10.50",
            "0.00",
            "0.00",
            "0.00",
            "0.00",
        ]

    def test_endpoint(self, client: TestClient, test_db, make_meter) -> None:
        meter = make_meter("WM-1")
        _add_reading(test_db, meter, date(2024, 1, 1), "100")

        response = client.get("/api/water/usage/report")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert len(body["data"]["months"]) == 6
        assert len(body["data"]["rows"]) == 1
        row = body["data"]["rows"][0]
        assert row["meter_number"] == "WM-1"
        assert all(cell["consumption"] == "0.00" for cell in row["months"])
