"""Calculator modules for TruckFlow."""

from truckflow.calculators.date_utils import (
    is_same_period,
    parse_date,
    previous_month,
    week_start,
)
from truckflow.calculators.earnings_calculator import (
    as_load,
    as_loads,
    as_pay_profile,
    calculate_earnings,
    total_earnings,
)
from truckflow.calculators.formatting import format_currency, format_miles
from truckflow.calculators.metrics_calculator import (
    Metrics,
    calculate_metrics,
    expense_amount,
)

__all__ = [
    # date_utils
    "is_same_period",
    "parse_date",
    "previous_month",
    "week_start",
    # earnings_calculator
    "as_load",
    "as_loads",
    "as_pay_profile",
    "calculate_earnings",
    "total_earnings",
    # formatting
    "format_currency",
    "format_miles",
    # metrics_calculator
    "Metrics",
    "calculate_metrics",
    "expense_amount",
]
