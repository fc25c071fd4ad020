"""Unit tests for billing cycle arithmetic"""

import pytest
from datetime import date, timedelta
from budget_gateway.domain.cycles import advance, advance_months
from budget_gateway.domain.models import BillingCycle


def test_advance_monthly_preserves_day():
    assert advance(date(2024, 3, 15), BillingCycle.MONTHLY) == date(2024, 4, 15)


def test_advance_monthly_crosses_year():
    assert advance(date(2023, 12, 31), BillingCycle.MONTHLY) == date(2024, 1, 31)


def test_advance_monthly_clamp_non_leap():
    """Jan 31 clamps to Feb 28, then stays on the 28th"""
    feb = advance(date(2023, 1, 31), BillingCycle.MONTHLY)
    assert feb == date(2023, 2, 28)
    assert advance(feb, BillingCycle.MONTHLY) == date(2023, 3, 28)


def test_advance_monthly_clamp_leap():
    feb = advance(date(2024, 1, 31), BillingCycle.MONTHLY)
    assert feb == date(2024, 2, 29)
    assert advance(feb, BillingCycle.MONTHLY) == date(2024, 3, 29)


def test_advance_monthly_clamp_thirty_day_month():
    assert advance(date(2024, 3, 31), BillingCycle.MONTHLY) == date(2024, 4, 30)


def test_advance_yearly():
    assert advance(date(2024, 7, 1), BillingCycle.YEARLY) == date(2025, 7, 1)


def test_advance_yearly_leap_day_clamps():
    assert advance(date(2024, 2, 29), BillingCycle.YEARLY) == date(2025, 2, 28)


@pytest.mark.parametrize("cycle", list(BillingCycle))
def test_advance_is_strictly_monotonic(cycle):
    """Every day of a leap and a non-leap year moves forward"""
    day = date(2023, 1, 1)
    end = date(2025, 1, 1)
    while day < end:
        assert advance(day, cycle) > day
        day += timedelta(days=1)


def test_advance_months_offsets_from_start():
    """Direct offsets do not inherit an earlier clamp"""
    start = date(2024, 1, 31)
    assert advance_months(start, 0) == start
    assert advance_months(start, 1) == date(2024, 2, 29)
    assert advance_months(start, 2) == date(2024, 3, 31)
