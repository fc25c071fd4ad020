"""Catch-up of stale subscription due dates"""

import logging
from datetime import date

from budget_gateway.domain.cycles import advance
from budget_gateway.domain.exceptions import InvalidScheduleError
from budget_gateway.domain.models import BillingCycle
from budget_gateway.utils.date_utils import DateLike, as_date

logger = logging.getLogger(__name__)

# ~100 years, whatever the cycle
MAX_CATCH_UP_MONTHS = 1200

MONTHS_PER_PERIOD = {
    BillingCycle.MONTHLY: 1,
    BillingCycle.YEARLY: 12,
}


def normalize(
    due_date: DateLike,
    cycle: BillingCycle,
    today: DateLike,
    max_months: int = MAX_CATCH_UP_MONTHS,
) -> date:
    """
    Bring a possibly stale due date forward to the first occurrence on/after today.

    Requirements:
    - Returns due_date unchanged when it is already >= today
    - Otherwise advances by whole billing periods until it is >= today
    - Catching up more than max_months of elapsed time (a yearly advance counts
      twelve) means the record is corrupt or absurdly stale, so
      InvalidScheduleError is raised instead of looping on

    Example:
        2024-01-01 monthly, today 2024-04-01 -> 2024-04-01 (three advances)
        2024-01-01 monthly, today 2024-04-10 -> 2024-05-01 (four advances)
    """
    current = as_date(due_date)
    reference = as_date(today)
    step_months = MONTHS_PER_PERIOD[cycle]

    elapsed_months = 0
    while current < reference:
        if elapsed_months + step_months > max_months:
            logger.warning(
                "Schedule catch-up exceeded ceiling",
                extra={
                    "due_date": as_date(due_date).isoformat(),
                    "today": reference.isoformat(),
                    "cycle": cycle.value,
                    "max_months": max_months,
                },
            )
            raise InvalidScheduleError(
                f"Due date {as_date(due_date).isoformat()} is more than "
                f"{max_months} months behind {reference.isoformat()}"
            )
        current = advance(current, cycle)
        elapsed_months += step_months

    return current
