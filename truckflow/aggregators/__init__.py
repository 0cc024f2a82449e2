"""Aggregators module for grouping and filtering loads and expenses.

This module provides the analytics groupings (revenue by broker and by
calendar bucket), the dashboard period filters and expense breakdowns.
"""

from truckflow.aggregators.expense_aggregator import expenses_by_category, total_amount
from truckflow.aggregators.period_filter import (
    Period,
    as_expenses,
    filter_by_period,
    filter_expenses,
)
from truckflow.aggregators.revenue_aggregator import (
    UNKNOWN_BROKER,
    RevenueAggregator,
    RevenueBucket,
)

__all__ = [
    "Period",
    "RevenueAggregator",
    "RevenueBucket",
    "UNKNOWN_BROKER",
    "as_expenses",
    "expenses_by_category",
    "filter_by_period",
    "filter_expenses",
    "total_amount",
]
