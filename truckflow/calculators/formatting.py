"""Display formatting for money and mileage.

Formats match what the dashboard shows: US-style currency with exactly two
decimals and comma-grouped whole miles. Missing or non-numeric values render
as zero instead of failing.
"""

from decimal import (
    ROUND_FLOOR,
    ROUND_HALF_UP,
    Decimal,
    InvalidOperation,
    localcontext,
)
from typing import Any, Optional


def _as_decimal(value: Any) -> Optional[Decimal]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    if number.is_nan():
        return None
    return number


def format_currency(value: Any) -> str:
    """Format a number as US dollars.

    Args:
        value: Amount (int, float, Decimal or numeric string)

    Returns:
        Currency string, "$0.00" for None, NaN or non-numeric input

    Example:
        >>> format_currency(1234.5)
        '$1,234.50'
        >>> format_currency(-42)
        '-$42.00'
        >>> format_currency(None)
        '$0.00'
    """
    number = _as_decimal(value)
    if number is None:
        return "$0.00"

    sign = "-" if number.is_signed() and number != 0 else ""
    if number.is_infinite():
        return f"{sign}$∞"

    # Precision must cover every integer digit plus two decimals
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + 3)
        rounded = abs(number).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    if rounded == 0:
        sign = ""
    return f"{sign}${rounded:,.2f}"


def format_miles(value: Any) -> str:
    """Format miles as a comma-grouped whole number.

    Rounds half up towards positive infinity (2.5 → 3, -2.5 → -2).

    Args:
        value: Miles (int, float, Decimal or numeric string)

    Returns:
        Grouped integer string, "0" for None, NaN or non-numeric input

    Example:
        >>> format_miles(12345.6)
        '12,346'
        >>> format_miles(None)
        '0'
    """
    number = _as_decimal(value)
    if number is None:
        return "0"

    if number.is_infinite():
        return "-∞" if number.is_signed() else "∞"

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + 3)
        rounded = int(
            (number + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR)
        )
    return f"{rounded:,}"
