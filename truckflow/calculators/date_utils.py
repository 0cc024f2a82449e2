"""Date utilities for grouping and filtering loads.

Load and expense dates are stored as loosely formatted strings. This module
turns them into dt.date values and provides the calendar comparisons used by
the revenue groupings and period filters. ISO weeks start on Monday.
"""

import datetime as dt
from typing import Any, Optional

_DATE_FORMATS = [
    "%m/%d/%Y",  # US format: 06/15/2025
    "%Y/%m/%d",  # 2025/06/15
]

PERIOD_UNITS = ("day", "isoWeek", "month", "year")


def parse_date(value: Any) -> Optional[dt.date]:
    """Parse a stored date value into a dt.date.

    Supports:
    - dt.date and dt.datetime instances
    - ISO dates and timestamps: 2025-06-15, 2025-06-15T08:30:00.000Z
    - US format: 06/15/2025

    Args:
        value: Stored date value

    Returns:
        Parsed date, or None when the value is missing or unrecognized

    Example:
        >>> parse_date("2025-06-15T08:30:00.000Z")
        datetime.date(2025, 6, 15)
        >>> parse_date("not a date") is None
        True
    """
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    iso_text = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return dt.datetime.fromisoformat(iso_text).date()
    except ValueError:
        pass

    for fmt in _DATE_FORMATS:
        try:
            return dt.datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    return None


def week_start(date: dt.date) -> dt.date:
    """Return the Monday of the ISO week containing ``date``.

    Example:
        >>> week_start(dt.date(2025, 6, 15))  # Sunday
        datetime.date(2025, 6, 9)
    """
    return date - dt.timedelta(days=date.weekday())


def is_same_period(date: dt.date, reference: dt.date, unit: str) -> bool:
    """Check whether two dates fall in the same calendar period.

    Args:
        date: Date to test
        reference: Date defining the period (usually today)
        unit: One of "day", "isoWeek", "month", "year"

    Returns:
        True if both dates are in the same period

    Raises:
        ValueError: If unit is not a known period unit
    """
    if unit == "day":
        return date == reference
    if unit == "isoWeek":
        return week_start(date) == week_start(reference)
    if unit == "month":
        return (date.year, date.month) == (reference.year, reference.month)
    if unit == "year":
        return date.year == reference.year
    raise ValueError(f"Unknown period unit: {unit}. Must be one of {PERIOD_UNITS}")


def previous_month(date: dt.date) -> dt.date:
    """Return the first day of the month before ``date``'s month."""
    first = date.replace(day=1)
    return (first - dt.timedelta(days=1)).replace(day=1)
