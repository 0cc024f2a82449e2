"""Revenue aggregator for analytics breakdowns.

This module groups driver earnings by broker and by calendar bucket (day,
ISO week, month, year) and derives the analytics KPIs built on top of those
groupings: cumulative revenue, top broker share and month-over-month change.
"""

import datetime as dt
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from truckflow.calculators.date_utils import (
    is_same_period,
    parse_date,
    previous_month,
    week_start,
)
from truckflow.calculators.earnings_calculator import (
    PayProfileLike,
    as_loads,
    calculate_earnings,
)
from truckflow.models.load import Load

logger = logging.getLogger(__name__)

Records = Optional[Iterable[Any]]

UNKNOWN_BROKER = "Unknown"

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


@dataclass(frozen=True)
class RevenueBucket:
    """Summed earnings for one grouping key.

    Attributes:
        key: Broker name, or a date key (YYYY-MM-DD, YYYY-MM, YYYY)
        value: Summed earnings for the key
    """

    key: str
    value: Decimal


class RevenueAggregator:
    """Groups load earnings for the analytics views.

    Earnings for every load are computed with the pay profile given at
    construction. Date groupings use ``pickup_date``; loads without a
    parseable pickup date are skipped.

    Example:
        >>> aggregator = RevenueAggregator({"earning_profile": "owner_operator"})
        >>> loads = [
        ...     {"pickup_date": "2025-03-04", "gross_amount": 300},
        ...     {"pickup_date": "2025-01-10", "gross_amount": 100},
        ... ]
        >>> [b.key for b in aggregator.revenue_by_month(loads)]
        ['2025-01', '2025-03']
    """

    def __init__(self, pay_profile: PayProfileLike = None):
        """Initialize the aggregator.

        Args:
            pay_profile: Pay profile used to compute per-load earnings
        """
        self.pay_profile = pay_profile

    def revenue_by_broker(self, loads: Records) -> List[RevenueBucket]:
        """Sum earnings per broker, highest first.

        Loads without a broker are grouped under "Unknown". Brokers with equal
        revenue keep the order in which they first appear.

        Args:
            loads: Load records

        Returns:
            Buckets sorted by descending value
        """
        totals: Dict[str, Decimal] = {}
        for load in as_loads(loads):
            broker = load.broker_name or UNKNOWN_BROKER
            totals[broker] = totals.get(broker, _ZERO) + self._earnings(load)

        buckets = [RevenueBucket(key, value) for key, value in totals.items()]
        buckets.sort(key=lambda b: b.value, reverse=True)

        logger.debug(f"Grouped revenue into {len(buckets)} brokers")
        return buckets

    def revenue_by_day(self, loads: Records) -> List[RevenueBucket]:
        """Sum earnings per pickup day (YYYY-MM-DD), oldest first."""
        return self._group_by_date(loads, lambda d: d.isoformat())

    def revenue_by_week(self, loads: Records) -> List[RevenueBucket]:
        """Sum earnings per ISO week, keyed by the week's Monday (YYYY-MM-DD)."""
        return self._group_by_date(loads, lambda d: week_start(d).isoformat())

    def revenue_by_month(self, loads: Records) -> List[RevenueBucket]:
        """Sum earnings per pickup month (YYYY-MM), oldest first."""
        return self._group_by_date(loads, lambda d: f"{d.year:04d}-{d.month:02d}")

    def revenue_by_year(self, loads: Records) -> List[RevenueBucket]:
        """Sum earnings per pickup year (YYYY), oldest first."""
        return self._group_by_date(loads, lambda d: f"{d.year:04d}")

    @staticmethod
    def cumulative(buckets: Iterable[RevenueBucket]) -> List[RevenueBucket]:
        """Convert per-bucket values into running totals.

        Example:
            >>> a, b = RevenueBucket("a", Decimal(1)), RevenueBucket("b", Decimal(2))
            >>> buckets = [a, b]
            >>> [b.value for b in RevenueAggregator.cumulative(buckets)]
            [Decimal('1'), Decimal('3')]
        """
        running = _ZERO
        result = []
        for bucket in buckets:
            running += bucket.value
            result.append(RevenueBucket(bucket.key, running))
        return result

    def top_broker_share(
        self, loads: Records
    ) -> Tuple[Optional[RevenueBucket], Decimal]:
        """Find the highest-earning broker and its share of total earnings.

        Args:
            loads: Load records

        Returns:
            Tuple of (top broker bucket or None, share in percent)
        """
        records = as_loads(loads)
        brokers = self.revenue_by_broker(records)
        if not brokers:
            return None, _ZERO

        top = brokers[0]
        total = sum((b.value for b in brokers), _ZERO)
        share = top.value / total * _HUNDRED if total > 0 else _ZERO
        return top, share

    def month_over_month_change(
        self, loads: Records, today: Optional[dt.date] = None
    ) -> Decimal:
        """Percent change of this month's earnings against last month's.

        Args:
            loads: Load records
            today: Reference date (defaults to the current date)

        Returns:
            Change in percent, 0 when last month had no earnings
        """
        reference = today or dt.date.today()
        last_month = previous_month(reference)

        current = _ZERO
        previous = _ZERO
        for load in as_loads(loads):
            date = parse_date(load.pickup_date)
            if date is None:
                continue
            if is_same_period(date, reference, "month"):
                current += self._earnings(load)
            elif is_same_period(date, last_month, "month"):
                previous += self._earnings(load)

        if previous <= 0:
            return _ZERO
        return (current - previous) / previous * _HUNDRED

    def _group_by_date(
        self, loads: Records, key_func: Callable[[dt.date], str]
    ) -> List[RevenueBucket]:
        """Sum earnings per date key and sort ascending by key.

        Args:
            loads: Load records
            key_func: Maps a pickup date to its grouping key

        Returns:
            Buckets sorted by key
        """
        totals: Dict[str, Decimal] = {}
        skipped = 0
        for load in as_loads(loads):
            date = parse_date(load.pickup_date)
            if date is None:
                skipped += 1
                continue
            key = key_func(date)
            totals[key] = totals.get(key, _ZERO) + self._earnings(load)

        if skipped:
            logger.debug(f"Skipped {skipped} loads without a pickup date")

        return [RevenueBucket(key, totals[key]) for key in sorted(totals)]

    def _earnings(self, load: Load) -> Decimal:
        return calculate_earnings(load, self.pay_profile)
