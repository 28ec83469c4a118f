"""Water usage aggregation over the usage view.

Two reporting policies here are deliberate and observable:

* zero means no data yet: a current month whose consumption sums to exactly
  zero is reported as the previous month instead, even when the zero is real;
* last write wins: in the per-meter monthly map, two usage rows of one meter
  that fall in the same calendar month keep the value of the row processed
  last, they are not summed.
"""

import logging
from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.water_usage import water_usage_view
from app.schemas.water_usage import MonthConsumption, MonthlyConsumptionPoint, WaterDashboard
from app.services.periods import month_bounds, month_key, previous_month, shift_months

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def sum_consumption(db: Session, start_date: date, end_date: date) -> Decimal:
    """Sum consumption of usage rows whose end date is inside the window."""
    usage = water_usage_view()
    query = select(func.coalesce(func.sum(usage.c.water_consumption), 0)).where(
        usage.c.end_date >= start_date,
        usage.c.end_date <= end_date,
    )
    return Decimal(str(db.execute(query).scalar() or 0))


def get_current_month_consumption(db: Session, today: date | None = None) -> MonthConsumption:
    """Consumption of the current calendar month, or of the previous one.

    Falls back to the previous month when the current total is exactly zero.
    """
    today = today or date.today()
    start_date, end_date = month_bounds(today)
    total = sum_consumption(db, start_date, end_date)
    reported = today

    if total == ZERO:
        reported = previous_month(today)
        start_date, end_date = month_bounds(reported)
        logger.debug(
            "No consumption in %s, reporting %s instead", month_key(today), month_key(reported)
        )
        total = sum_consumption(db, start_date, end_date)

    return MonthConsumption(
        total_consumption=float(total),
        month=month_key(reported),
        start_date=start_date,
        end_date=end_date,
    )


def get_monthly_consumption(
    db: Session,
    today: date | None = None,
    lookback_months: int | None = None,
) -> list[MonthlyConsumptionPoint]:
    """Total consumption per calendar month of end date, oldest month first.

    Only usage rows ending within the trailing lookback window are counted.
    """
    today = today or date.today()
    if lookback_months is None:
        lookback_months = settings.USAGE_LOOKBACK_MONTHS
    cutoff = shift_months(today, -lookback_months)

    usage = water_usage_view()
    query = (
        select(usage.c.end_date, usage.c.water_consumption)
        .where(usage.c.end_date >= cutoff)
        .order_by(usage.c.end_date)
    )

    totals: dict[str, Decimal] = {}
    for end_date, consumption in db.execute(query):
        key = month_key(end_date)
        totals[key] = totals.get(key, ZERO) + Decimal(str(consumption or 0))

    return [
        MonthlyConsumptionPoint(month=month, total_consumption=float(total))
        for month, total in sorted(totals.items())
    ]


def compute_trend(series: list[MonthlyConsumptionPoint]) -> float | None:
    """Percentage change between the last two points of a monthly series.

    Returns None with fewer than two points or when the prior point is zero.
    """
    if len(series) < 2:
        return None
    previous = series[-2].total_consumption
    current = series[-1].total_consumption
    if previous == 0:
        return None
    return round((current - previous) / previous * 100, 2)


def build_meter_monthly_map(
    rows: Iterable[tuple[int, date, Decimal | float | None]],
) -> dict[int, dict[str, float]]:
    """Reshape usage rows into meter id -> month -> consumption.

    Rows are processed in the given order; a later row for the same meter and
    month overwrites the earlier one.
    """
    usage_map: dict[int, dict[str, float]] = {}
    for water_meter_id, end_date, consumption in rows:
        usage_map.setdefault(water_meter_id, {})[month_key(end_date)] = float(consumption or 0)
    return usage_map


def get_meter_monthly_usage(db: Session) -> dict[int, dict[str, float]]:
    """Monthly consumption for every meter over its whole history."""
    usage = water_usage_view()
    query = select(
        usage.c.water_meter_id,
        usage.c.end_date,
        usage.c.water_consumption,
    ).order_by(usage.c.water_meter_id, usage.c.end_date.desc())
    return build_meter_monthly_map(tuple(row) for row in db.execute(query).all())


def get_water_dashboard(db: Session, today: date | None = None) -> WaterDashboard:
    """Water card of the dashboard: reported month, trailing series and trend."""
    current = get_current_month_consumption(db, today)
    series = get_monthly_consumption(db, today)
    return WaterDashboard(
        total_consumption=current.total_consumption,
        month=current.month,
        series=series,
        trend=compute_trend(series),
    )
