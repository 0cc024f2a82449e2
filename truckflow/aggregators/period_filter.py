"""Period filters for loads and expenses.

Filters keep records whose date falls in the same calendar day, ISO week
(Monday to Sunday), month or year as today. Records without a parseable date
are dropped by every recognized period. An unrecognized period keeps
everything.
"""

import datetime as dt
import logging
from enum import Enum
from typing import Any, Iterable, List, Mapping, Optional

from truckflow.calculators.date_utils import is_same_period, parse_date
from truckflow.calculators.earnings_calculator import as_loads
from truckflow.models.expense import Expense
from truckflow.models.load import Load

logger = logging.getLogger(__name__)


class Period(str, Enum):
    """Named reporting periods."""

    TODAY = "today"
    THIS_WEEK = "thisWeek"
    THIS_MONTH = "thisMonth"
    THIS_YEAR = "thisYear"


PERIOD_UNIT = {
    Period.TODAY.value: "day",
    Period.THIS_WEEK.value: "isoWeek",
    Period.THIS_MONTH.value: "month",
    Period.THIS_YEAR.value: "year",
}

ALL = "all"


def _period_unit(period: Any) -> Optional[str]:
    if isinstance(period, Period):
        period = period.value
    return PERIOD_UNIT.get(period) if isinstance(period, str) else None


def filter_by_period(
    loads: Optional[Iterable[Any]],
    period: Any,
    today: Optional[dt.date] = None,
    date_field: str = "pickup_date",
) -> List[Load]:
    """Filter loads to the ones dated within the current period.

    Args:
        loads: Load records
        period: "today", "thisWeek", "thisMonth" or "thisYear"
        today: Reference date (defaults to the current date)
        date_field: Load field holding the date to compare

    Returns:
        Loads in the period; all loads when the period is not recognized

    Example:
        >>> loads = [{"pickup_date": "2025-06-10"}, {"pickup_date": "2025-05-30"}]
        >>> len(filter_by_period(loads, "thisMonth", today=dt.date(2025, 6, 15)))
        1
    """
    records = as_loads(loads)
    unit = _period_unit(period)
    if unit is None:
        return records

    reference = today or dt.date.today()
    filtered = []
    for load in records:
        date = parse_date(getattr(load, date_field, None))
        if date is not None and is_same_period(date, reference, unit):
            filtered.append(load)

    logger.debug(f"Filtered {len(records)} loads to {len(filtered)} for {period}")
    return filtered


def as_expenses(records: Optional[Iterable[Any]]) -> List[Expense]:
    """Coerce stored expense records into Expense models (None → [])."""
    expenses: List[Expense] = []
    for record in records or []:
        if isinstance(record, Expense):
            expenses.append(record)
        elif isinstance(record, Mapping):
            expenses.append(
                Expense.model_validate({str(k): v for k, v in record.items()})
            )
        else:
            expenses.append(Expense())
    return expenses


def filter_expenses(
    expenses: Optional[Iterable[Any]],
    period: Any = ALL,
    category: Optional[str] = ALL,
    today: Optional[dt.date] = None,
) -> List[Expense]:
    """Filter expenses by category and period.

    Args:
        expenses: Expense records
        period: "all", or one of the Period values (compared on ``date``)
        category: "all"/None for every category, or a category name
        today: Reference date (defaults to the current date)

    Returns:
        Matching expenses
    """
    records = as_expenses(expenses)
    if category and category != ALL:
        records = [e for e in records if e.category == category]

    unit = _period_unit(period)
    if unit is None:
        return records

    reference = today or dt.date.today()
    result = []
    for expense in records:
        date = parse_date(expense.date)
        if date is not None and is_same_period(date, reference, unit):
            result.append(expense)
    return result
