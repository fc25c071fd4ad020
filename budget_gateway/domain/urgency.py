"""Urgency classification of obligations by proximity to their due date"""

from typing import Dict, Iterable

from budget_gateway.domain.models import RecurringObligation, UrgencyBucket, UrgencyGroup
from budget_gateway.utils.date_utils import DateLike, as_date, days_between


def day_offset(due_date: DateLike, today: DateLike) -> int:
    """Due date minus today in whole days, both truncated to midnight"""
    return days_between(as_date(today), as_date(due_date))


def classify_offset(offset: int) -> UrgencyBucket:
    """
    Map a day offset to its bucket.

    Thresholds:
    - < 0:     OVERDUE
    - 0 - 7:   THIS_WEEK
    - 8 - 14:  NEXT_WEEK
    - 15 - 30: THIS_MONTH
    - > 30:    LATER
    """
    if offset < 0:
        return UrgencyBucket.OVERDUE
    elif offset <= 7:
        return UrgencyBucket.THIS_WEEK
    elif offset <= 14:
        return UrgencyBucket.NEXT_WEEK
    elif offset <= 30:
        return UrgencyBucket.THIS_MONTH
    else:
        return UrgencyBucket.LATER


def classify(due_date: DateLike, today: DateLike) -> UrgencyBucket:
    return classify_offset(day_offset(due_date, today))


def group_by_urgency(
    obligations: Iterable[RecurringObligation],
    today: DateLike,
) -> Dict[UrgencyBucket, UrgencyGroup]:
    """
    Group obligations into urgency sections for display.

    Classification uses the raw stored due date, not a caught-up one, so a
    stale record shows up as OVERDUE. Every bucket is present in enum order;
    within a bucket obligations ascend by due date with ties kept in input
    order, and total sums their amounts.
    """
    groups = {bucket: UrgencyGroup(bucket=bucket) for bucket in UrgencyBucket}

    # sorted() is stable, which keeps input order for equal due dates
    for obligation in sorted(obligations, key=lambda o: as_date(o.next_due_date)):
        group = groups[classify(obligation.next_due_date, today)]
        group.obligations.append(obligation)
        group.total += obligation.amount

    return groups
