"""Earnings calculator for loads.

Driver earnings for a load depend on the pay profile:

- owner_operator: full gross, or gross × percentage when 0 < percentage < 100
- solo_per_mile / team_per_mile: loaded miles × rate per mile
- solo_percentage / team_percentage: gross × percentage / 100
- no profile or unknown profile: full gross

Records are coerced at the boundary: missing or malformed numbers count as
zero, so the calculation never fails.
"""

from decimal import Decimal
from typing import Any, Iterable, List, Mapping, Optional, Union

from truckflow.models.base import to_decimal
from truckflow.models.load import Load
from truckflow.models.pay_profile import EarningProfile, PayProfile

LoadLike = Union[Load, Mapping[str, Any]]
PayProfileLike = Union[PayProfile, Mapping[str, Any], None]

_HUNDRED = Decimal("100")


def as_load(record: Any) -> Load:
    """Coerce a stored record into a Load.

    Args:
        record: Load instance, mapping, or anything else (treated as empty)

    Returns:
        Load instance
    """
    if isinstance(record, Load):
        return record
    if isinstance(record, Mapping):
        return Load.model_validate({str(k): v for k, v in record.items()})
    return Load()


def as_loads(records: Optional[Iterable[Any]]) -> List[Load]:
    """Coerce a collection of stored records into Loads (None → [])."""
    if not records:
        return []
    return [as_load(record) for record in records]


def as_pay_profile(settings: PayProfileLike) -> Optional[PayProfile]:
    """Coerce a settings record into a PayProfile, keeping None as None."""
    if settings is None:
        return None
    if isinstance(settings, PayProfile):
        return settings
    if isinstance(settings, Mapping):
        return PayProfile.model_validate({str(k): v for k, v in settings.items()})
    return None


def calculate_earnings(load: LoadLike, pay_profile: PayProfileLike) -> Decimal:
    """Calculate driver earnings for a single load.

    Args:
        load: Load record
        pay_profile: Pay profile / settings record (None means full gross)

    Returns:
        Earnings as Decimal

    Example:
        >>> calculate_earnings(
        ...     {"loaded_miles": 500},
        ...     {"earning_profile": "solo_per_mile", "rate_per_mile": 0.55},
        ... )
        Decimal('275.00')
        >>> calculate_earnings({"gross_amount": 2000}, None)
        Decimal('2000')
    """
    record = as_load(load)
    gross = to_decimal(record.gross_amount)

    profile = as_pay_profile(pay_profile)
    if profile is None:
        return gross

    percentage = to_decimal(profile.percentage_rate)

    if profile.earning_profile == EarningProfile.OWNER_OPERATOR.value:
        if 0 < percentage < _HUNDRED:
            return gross * percentage / _HUNDRED
        return gross

    if profile.is_per_mile:
        return to_decimal(record.loaded_miles) * to_decimal(profile.rate_per_mile)

    if profile.is_percentage:
        return gross * percentage / _HUNDRED

    return gross


def total_earnings(
    loads: Optional[Iterable[Any]], pay_profile: PayProfileLike
) -> Decimal:
    """Sum earnings over a collection of loads."""
    return sum(
        (calculate_earnings(load, pay_profile) for load in as_loads(loads)),
        Decimal("0"),
    )
