"""Tests for period filters."""

import datetime as dt

import pytest

from truckflow.aggregators import Period, filter_by_period, filter_expenses
from truckflow.models import Expense, Load


def ids(records):
    return [r.model_dump().get("id") for r in records]


class TestFilterByPeriod:
    """Test filter_by_period function."""

    def test_today(self, sample_loads):
        """Test only loads picked up today are kept."""
        loads = sample_loads + [{"id": "t1", "pickup_date": "2025-06-18"}]

        result = filter_by_period(loads, "today", today=dt.date(2025, 6, 18))
        assert ids(result) == ["t1"]

    def test_this_week(self, sample_loads, today):
        """Test loads in the current Monday-to-Sunday week are kept."""
        result = filter_by_period(sample_loads, "thisWeek", today=today)
        assert ids(result) == ["a1"]

    def test_this_month(self, sample_loads, today):
        """Test loads in the current month are kept."""
        result = filter_by_period(sample_loads, "thisMonth", today=today)
        assert ids(result) == ["a1", "a2"]

    def test_this_year(self, sample_loads, today):
        """Test loads in the current year are kept."""
        result = filter_by_period(sample_loads, "thisYear", today=today)
        assert ids(result) == ["a1", "a2", "a3"]

    def test_period_enum(self, sample_loads, today):
        """Test Period members are accepted."""
        result = filter_by_period(sample_loads, Period.THIS_MONTH, today=today)
        assert len(result) == 2

    @pytest.mark.parametrize("period", ["all", "lastWeek", "", None, 7])
    def test_unknown_period_keeps_everything(self, sample_loads, period):
        """Test an unrecognized period returns every load."""
        assert len(filter_by_period(sample_loads, period)) == len(sample_loads)

    def test_undated_loads_are_dropped(self, today):
        """Test loads without a parseable date are dropped by every period."""
        loads = [{"id": "x"}, {"id": "y", "pickup_date": "soon"}]

        for period in Period:
            assert filter_by_period(loads, period, today=today) == []

    def test_week_across_month_boundary(self):
        """Test the ISO week can span two months."""
        loads = [{"id": "a", "pickup_date": "2025-06-30"}]

        result = filter_by_period(loads, "thisWeek", today=dt.date(2025, 7, 2))
        assert ids(result) == ["a"]

    def test_other_date_field(self, today):
        """Test filtering on the delivery date."""
        loads = [
            {"id": "a", "pickup_date": "2025-05-31", "delivery_date": "2025-06-01"},
        ]

        assert filter_by_period(loads, "thisMonth", today=today) == []
        result = filter_by_period(
            loads, "thisMonth", today=today, date_field="delivery_date"
        )
        assert ids(result) == ["a"]

    def test_returns_load_models(self, sample_loads, today):
        """Test the result holds Load models."""
        result = filter_by_period(sample_loads, "thisYear", today=today)
        assert all(isinstance(load, Load) for load in result)

    def test_none_loads(self, today):
        """Test None is treated as no loads."""
        assert filter_by_period(None, "thisMonth", today=today) == []


class TestFilterExpenses:
    """Test filter_expenses function."""

    def test_defaults_keep_everything(self, sample_expenses):
        """Test the default filters keep every expense."""
        result = filter_expenses(sample_expenses)

        assert len(result) == 4
        assert all(isinstance(e, Expense) for e in result)

    def test_by_category(self, sample_expenses):
        """Test filtering on a single category."""
        result = filter_expenses(sample_expenses, category="fuel")
        assert ids(result) == ["e1", "e3"]

    def test_by_period(self, sample_expenses, today):
        """Test filtering on the expense date."""
        result = filter_expenses(sample_expenses, period="thisMonth", today=today)
        assert ids(result) == ["e1", "e2"]

    def test_by_category_and_period(self, sample_expenses, today):
        """Test both filters combine."""
        result = filter_expenses(
            sample_expenses, period="thisYear", category="fuel", today=today
        )
        assert ids(result) == ["e1", "e3"]

    def test_today(self, sample_expenses):
        """Test the today period on expenses."""
        result = filter_expenses(
            sample_expenses, period="today", today=dt.date(2025, 6, 17)
        )
        assert ids(result) == ["e1"]

    def test_none_category_keeps_everything(self, sample_expenses):
        """Test a None category does not filter."""
        assert len(filter_expenses(sample_expenses, category=None)) == 4

    def test_undated_expenses_dropped_by_period(self, today):
        """Test expenses without a date are dropped by a period filter."""
        result = filter_expenses([{"amount": 5}], period="thisYear", today=today)
        assert result == []
