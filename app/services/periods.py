"""Calendar month helpers used by the water usage reports."""

from calendar import monthrange
from datetime import date

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def month_bounds(check_date: date) -> tuple[date, date]:
    """First and last calendar day of the month containing ``check_date``."""
    month_start = date(check_date.year, check_date.month, 1)
    last_day = monthrange(month_start.year, month_start.month)[1]
    month_end = date(month_start.year, month_start.month, last_day)
    return month_start, month_end


def shift_months(value: date, months: int) -> date:
    """Move ``value`` by a number of calendar months, clamping the day."""
    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(value.day, monthrange(year, month)[1])
    return date(year, month, day)


def previous_month(check_date: date) -> date:
    """First day of the month before the one containing ``check_date``."""
    return shift_months(date(check_date.year, check_date.month, 1), -1)


def month_key(value: date) -> str:
    """``YYYY-MM`` label of a date."""
    return f"{value.year:04d}-{value.month:02d}"


def month_label(value: date) -> str:
    """Display label such as ``Mar 2024``."""
    return f"{MONTH_ABBREVIATIONS[value.month - 1]} {value.year}"


def trailing_months(today: date, count: int) -> list[date]:
    """First days of the last ``count`` months, current month first."""
    current = date(today.year, today.month, 1)
    return [shift_months(current, -offset) for offset in range(count)]
