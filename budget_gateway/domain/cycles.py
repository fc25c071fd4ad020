"""Billing cycle arithmetic"""

from datetime import date

from budget_gateway.domain.models import BillingCycle
from budget_gateway.utils.date_utils import add_months, add_years


def advance(due_date: date, cycle: BillingCycle) -> date:
    """
    Move a due date forward by one billing period.

    Month-end dates clamp to the last day of the target month, and the clamp
    only applies to this step: Jan 31 -> Feb 28 -> Mar 28. Feb 29 on a yearly
    cycle lands on Feb 28 in non-leap years.
    """
    if cycle == BillingCycle.MONTHLY:
        return add_months(due_date, 1)
    if cycle == BillingCycle.YEARLY:
        return add_years(due_date, 1)
    raise ValueError(f"Unknown billing cycle: {cycle!r}")


def advance_months(start_date: date, months: int) -> date:
    """Offset directly from start_date, so clamping never accumulates"""
    return add_months(start_date, months)
