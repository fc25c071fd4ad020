"""Unit tests for urgency classification"""

import pytest
from datetime import date, datetime, timedelta
from decimal import Decimal
from budget_gateway.domain.models import BillingCycle, RecurringObligation, UrgencyBucket
from budget_gateway.domain.urgency import classify, classify_offset, day_offset, group_by_urgency


def test_day_offset_truncates_time_of_day():
    assert day_offset(datetime(2024, 4, 11, 0, 5), datetime(2024, 4, 10, 23, 55)) == 1
    assert day_offset(date(2024, 4, 7), date(2024, 4, 10)) == -3


@pytest.mark.parametrize(
    "offset, bucket",
    [
        (-3, UrgencyBucket.OVERDUE),
        (-1, UrgencyBucket.OVERDUE),
        (0, UrgencyBucket.THIS_WEEK),
        (7, UrgencyBucket.THIS_WEEK),
        (8, UrgencyBucket.NEXT_WEEK),
        (14, UrgencyBucket.NEXT_WEEK),
        (15, UrgencyBucket.THIS_MONTH),
        (30, UrgencyBucket.THIS_MONTH),
        (31, UrgencyBucket.LATER),
    ],
)
def test_classify_offset_thresholds(offset, bucket):
    assert classify_offset(offset) == bucket


def test_classify_uses_dates():
    today = date(2024, 4, 10)
    assert classify(today - timedelta(days=3), today) == UrgencyBucket.OVERDUE
    assert classify(today + timedelta(days=7), today) == UrgencyBucket.THIS_WEEK
    assert classify(today + timedelta(days=31), today) == UrgencyBucket.LATER


def test_buckets_partition_offsets():
    """Consecutive offsets only ever move to the same or a later bucket"""
    order = list(UrgencyBucket)
    previous = classify_offset(-400)
    for offset in range(-399, 400):
        current = classify_offset(offset)
        assert order.index(current) >= order.index(previous)
        previous = current


def test_group_by_urgency_sample(sample_obligations, today):
    groups = group_by_urgency(sample_obligations, today)

    assert list(groups) == list(UrgencyBucket)
    assert [o.id for o in groups[UrgencyBucket.OVERDUE].obligations] == ["gym"]
    assert [o.id for o in groups[UrgencyBucket.THIS_WEEK].obligations] == ["spotify"]
    assert [o.id for o in groups[UrgencyBucket.NEXT_WEEK].obligations] == ["netflix"]
    assert groups[UrgencyBucket.THIS_MONTH].obligations == []
    assert [o.id for o in groups[UrgencyBucket.LATER].obligations] == ["domain"]
    assert groups[UrgencyBucket.OVERDUE].total == Decimal("40.00")
    assert groups[UrgencyBucket.THIS_MONTH].total == Decimal("0")


def test_group_by_urgency_sorted_and_stable(today):
    def sub(id, due):
        return RecurringObligation(
            id=id,
            amount=Decimal("5.00"),
            cycle=BillingCycle.MONTHLY,
            group_key="Other",
            next_due_date=due,
        )

    obligations = [
        sub("c", date(2024, 4, 15)),
        sub("a", date(2024, 4, 11)),
        sub("b", date(2024, 4, 15)),
        sub("d", date(2024, 4, 11)),
    ]
    groups = group_by_urgency(obligations, today)

    assert [o.id for o in groups[UrgencyBucket.THIS_WEEK].obligations] == ["a", "d", "c", "b"]
    assert groups[UrgencyBucket.THIS_WEEK].total == Decimal("20.00")


def test_group_by_urgency_every_obligation_once(sample_obligations, today):
    groups = group_by_urgency(sample_obligations, today)
    grouped = [o.id for group in groups.values() for o in group.obligations]
    assert sorted(grouped) == sorted(o.id for o in sample_obligations)
