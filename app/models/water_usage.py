"""Water usage view - per-meter consumption between consecutive readings.

The view is a selectable rather than a stored database view so that it works
on every backend SQLAlchemy supports with window functions. Each row pairs a
reading with the previous reading of the same meter:

    start_date         previous reading date
    end_date           this reading date
    water_consumption  this reading - previous reading, clamped to 0

The first reading of every meter has no predecessor and produces no row.
"""

from decimal import Decimal

from sqlalchemy import Date, Numeric, case, func, literal, select, type_coerce
from sqlalchemy.sql.expression import Subquery

from app.models.water_reading import WaterReading

CONSUMPTION_TYPE = Numeric(precision=11, scale=2)


def water_usage_view() -> Subquery:
    """Build the usage view as a subquery named ``water_usage``."""
    window = {
        "partition_by": WaterReading.water_meter_id,
        "order_by": (WaterReading.reading_date, WaterReading.reading_id),
    }
    paired = select(
        WaterReading.water_meter_id.label("water_meter_id"),
        func.lag(WaterReading.reading_date, type_=Date).over(**window).label("start_date"),
        WaterReading.reading_date.label("end_date"),
        WaterReading.water_meter_reading.label("current_reading"),
        func.lag(WaterReading.water_meter_reading, type_=CONSUMPTION_TYPE)
        .over(**window)
        .label("previous_reading"),
    ).subquery("paired_readings")

    delta = paired.c.current_reading - paired.c.previous_reading
    consumption = case(
        (delta < 0, literal(Decimal("0"), CONSUMPTION_TYPE)),
        else_=delta,
    )

    return (
        select(
            paired.c.water_meter_id,
            paired.c.start_date,
            paired.c.end_date,
            type_coerce(consumption, CONSUMPTION_TYPE).label("water_consumption"),
        )
        .where(paired.c.previous_reading.is_not(None))
        .subquery("water_usage")
    )
