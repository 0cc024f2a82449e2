"""Business metrics calculator.

This module aggregates loads and expenses into the headline numbers shown on
the dashboard: earnings, expenses, net revenue, mileage, per-mile and per-trip
averages, and the deadhead ratio.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional

from truckflow.calculators.earnings_calculator import (
    PayProfileLike,
    as_loads,
    calculate_earnings,
)
from truckflow.models.base import to_decimal
from truckflow.models.expense import Expense

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")


@dataclass
class Metrics:
    """Aggregate business metrics for a set of loads and expenses.

    Attributes:
        total_earnings: Sum of driver earnings over all loads
        total_expenses: Sum of expense amounts
        net_revenue: total_earnings - total_expenses
        total_miles: Sum of loaded miles
        total_deadhead: Sum of deadhead miles
        total_trips: Number of loads
        avg_per_mile: Earnings per loaded mile (0 without miles)
        avg_per_trip: Earnings per load (0 without loads)
        deadhead_ratio: Deadhead share of all miles driven, in percent

    Example:
        >>> metrics = calculate_metrics(
        ...     [{"gross_amount": 1000, "loaded_miles": 400, "deadhead_miles": 100}],
        ...     [{"amount": 250}],
        ...     None,
        ... )
        >>> metrics.net_revenue, metrics.deadhead_ratio
        (Decimal('750'), Decimal('20.0'))
    """

    total_earnings: Decimal
    total_expenses: Decimal
    net_revenue: Decimal
    total_miles: Decimal
    total_deadhead: Decimal
    total_trips: int
    avg_per_mile: Decimal
    avg_per_trip: Decimal
    deadhead_ratio: Decimal


def expense_amount(expense: Any) -> Decimal:
    """Return an expense amount as Decimal (0 when absent or malformed)."""
    if isinstance(expense, Expense):
        return to_decimal(expense.amount)
    if isinstance(expense, Mapping):
        return to_decimal(expense.get("amount"))
    return to_decimal(getattr(expense, "amount", None))


def calculate_metrics(
    loads: Optional[Iterable[Any]],
    expenses: Optional[Iterable[Any]],
    pay_profile: PayProfileLike,
) -> Metrics:
    """Calculate aggregate metrics from loads and expenses.

    Args:
        loads: Load records
        expenses: Expense records (None is treated as no expenses)
        pay_profile: Pay profile used for per-load earnings

    Returns:
        Metrics with all totals and ratios (ratios fall back to 0)
    """
    records = as_loads(loads)

    total_earnings = _ZERO
    total_miles = _ZERO
    total_deadhead = _ZERO
    for load in records:
        total_earnings += calculate_earnings(load, pay_profile)
        total_miles += to_decimal(load.loaded_miles)
        total_deadhead += to_decimal(load.deadhead_miles)

    total_expenses = sum((expense_amount(e) for e in (expenses or [])), _ZERO)
    total_trips = len(records)
    all_miles = total_miles + total_deadhead

    metrics = Metrics(
        total_earnings=total_earnings,
        total_expenses=total_expenses,
        net_revenue=total_earnings - total_expenses,
        total_miles=total_miles,
        total_deadhead=total_deadhead,
        total_trips=total_trips,
        avg_per_mile=total_earnings / total_miles if total_miles > 0 else _ZERO,
        avg_per_trip=total_earnings / total_trips if total_trips > 0 else _ZERO,
        deadhead_ratio=(
            total_deadhead / all_miles * Decimal("100") if all_miles > 0 else _ZERO
        ),
    )

    logger.debug(
        f"Metrics: {total_trips} trips, {total_earnings} earnings, "
        f"{total_expenses} expenses"
    )

    return metrics
