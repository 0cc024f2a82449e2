"""Expense breakdowns for the expenses view."""

from decimal import Decimal
from typing import Any, Dict, Iterable, Optional

from truckflow.aggregators.period_filter import as_expenses
from truckflow.models.base import to_decimal
from truckflow.models.expense import ExpenseCategory


def total_amount(expenses: Optional[Iterable[Any]]) -> Decimal:
    """Sum expense amounts (absent or malformed amounts count as 0)."""
    return sum(
        (to_decimal(e.amount) for e in as_expenses(expenses)), Decimal("0")
    )


def expenses_by_category(expenses: Optional[Iterable[Any]]) -> Dict[str, Decimal]:
    """Sum expense amounts per category.

    Categories appear in the order they are first seen. Expenses without a
    category are counted as "other".

    Example:
        >>> expenses_by_category([
        ...     {"category": "fuel", "amount": 100},
        ...     {"category": "toll", "amount": 12.5},
        ...     {"category": "fuel", "amount": 50},
        ... ])
        {'fuel': Decimal('150'), 'toll': Decimal('12.5')}
    """
    totals: Dict[str, Decimal] = {}
    for expense in as_expenses(expenses):
        category = expense.category or ExpenseCategory.OTHER.value
        totals[category] = totals.get(category, Decimal("0")) + to_decimal(
            expense.amount
        )
    return totals
