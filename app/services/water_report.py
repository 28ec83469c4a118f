"""Water reporting table - latest reading per apartment with trailing months.

Joins readings to meters, apartments and properties on the server, collapses
the result to one row per apartment and pivots the per-meter monthly usage
map into a fixed set of trailing month columns.
"""

import logging
from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from typing import NamedTuple

from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.apartment import Apartment
from app.models.property import Property
from app.models.water_meter import WaterMeter
from app.models.water_reading import WaterReading
from app.schemas.water_usage import ReportCell, ReportMonth, ReportRow, WaterReport
from app.services.periods import month_key, month_label, trailing_months
from app.services.water_usage import get_meter_monthly_usage

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"


class ReadingRow(NamedTuple):
    """A reading resolved to its meter, apartment and property labels."""

    reading_id: int
    water_meter_id: int
    reading_date: date
    water_meter_reading: Decimal
    meter_number: str
    apartment_id: int
    apartment_number: str
    property_name: str


def denormalize_readings(
    readings: Iterable[WaterReading],
    meters: Iterable[WaterMeter],
    apartments: Iterable[Apartment],
    properties: Iterable[Property],
) -> list[ReadingRow]:
    """Resolve reading -> meter -> apartment -> property for every reading.

    Readings whose meter or apartment cannot be resolved are dropped, since
    they cannot be attributed to an apartment.
    """
    meters_by_id = {m.water_meter_id: m for m in meters}
    apartments_by_id = {a.apartment_id: a for a in apartments}
    properties_by_id = {p.property_id: p for p in properties}

    rows = []
    for reading in readings:
        meter = meters_by_id.get(reading.water_meter_id)
        apartment = apartments_by_id.get(meter.apartment_id) if meter else None
        if apartment is None:
            continue
        prop = properties_by_id.get(apartment.property_id)
        rows.append(
            ReadingRow(
                reading_id=reading.reading_id,
                water_meter_id=reading.water_meter_id,
                reading_date=reading.reading_date,
                water_meter_reading=reading.water_meter_reading,
                meter_number=meter.meter_number,
                apartment_id=apartment.apartment_id,
                apartment_number=apartment.apartment_number or UNKNOWN,
                property_name=prop.name if prop else UNKNOWN,
            )
        )
    return rows


def latest_per_apartment(rows: Iterable[ReadingRow]) -> list[ReadingRow]:
    """Keep the row with the latest reading date for each apartment.

    Only a strictly later date replaces the kept row, so on a tie the row
    encountered first stays. Output follows first-seen apartment order.
    """
    latest: dict[int, ReadingRow] = {}
    for row in rows:
        current = latest.get(row.apartment_id)
        if current is None or row.reading_date > current.reading_date:
            latest[row.apartment_id] = row
    return list(latest.values())


def build_water_report(
    readings: Iterable[WaterReading],
    meters: Iterable[WaterMeter],
    apartments: Iterable[Apartment],
    properties: Iterable[Property],
    usage_map: dict[int, dict[str, float]],
    today: date,
    months: int,
) -> WaterReport:
    """Join, collapse and pivot into the reporting table."""
    columns = [
        ReportMonth(month=month_key(first_day), label=month_label(first_day))
        for first_day in trailing_months(today, months)
    ]

    report_rows = []
    for row in latest_per_apartment(denormalize_readings(readings, meters, apartments, properties)):
        monthly = usage_map.get(row.water_meter_id, {})
        cells = [
            ReportCell(
                month=column.month,
                label=column.label,
                consumption=f"{monthly.get(column.month, 0):.2f}",
            )
            for column in columns
        ]
        report_rows.append(
            ReportRow(
                reading_id=row.reading_id,
                water_meter_id=row.water_meter_id,
                reading_date=row.reading_date,
                water_meter_reading=row.water_meter_reading,
                meter_number=row.meter_number,
                apartment_id=row.apartment_id,
                apartment_number=row.apartment_number,
                property_name=row.property_name,
                monthly_consumption=monthly,
                months=cells,
            )
        )

    return WaterReport(months=columns, rows=report_rows)


def get_water_report(db: Session, today: date | None = None) -> WaterReport:
    """Load everything the reporting table needs and build it."""
    readings = (
        db.query(WaterReading)
        .order_by(WaterReading.reading_date.desc(), WaterReading.reading_id.desc())
        .all()
    )
    report = build_water_report(
        readings,
        db.query(WaterMeter).all(),
        db.query(Apartment).all(),
        db.query(Property).all(),
        get_meter_monthly_usage(db),
        today or date.today(),
        settings.REPORT_MONTHS,
    )
    logger.debug("Water report built with %d rows", len(report.rows))
    return report
