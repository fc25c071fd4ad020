"""Projection of recurring obligations onto a forward window of months"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, Iterator, List

from budget_gateway.domain.cycles import advance
from budget_gateway.domain.exceptions import InvalidProjectionWindowError
from budget_gateway.domain.models import (
    BillingCycle,
    Occurrence,
    Period,
    RecurringCost,
    RecurringObligation,
)
from budget_gateway.domain.schedule import MAX_CATCH_UP_MONTHS, normalize
from budget_gateway.utils.date_utils import DateLike, as_date

CENT = Decimal("0.01")


def window_periods(today: DateLike, window_months: int) -> List[Period]:
    """Months [month(today), month(today) + window_months) in order"""
    if window_months < 1:
        raise InvalidProjectionWindowError(
            f"Projection window must cover at least one month, got {window_months}"
        )

    periods = [Period.of(as_date(today))]
    while len(periods) < window_months:
        periods.append(periods[-1].next())
    return periods


def iter_occurrences(
    obligation: RecurringObligation,
    today: DateLike,
    window_months: int,
    max_months: int = MAX_CATCH_UP_MONTHS,
) -> Iterator[Occurrence]:
    """
    Yield every billing event of an obligation inside the window.

    The stored due date is first caught up to today, so events earlier in the
    current month than today are not projected. The window start is inclusive
    and the end (first day of the month after the window) is exclusive.
    """
    periods = window_periods(today, window_months)
    window_end = periods[-1].next().start

    current = normalize(obligation.next_due_date, obligation.cycle, today, max_months)
    while current < window_end:
        yield Occurrence(
            date=current,
            amount=obligation.amount,
            group_key=obligation.group_key,
            obligation_id=obligation.id,
        )
        current = advance(current, obligation.cycle)


def project(
    obligations: Iterable[RecurringObligation],
    today: DateLike,
    window_months: int,
    max_months: int = MAX_CATCH_UP_MONTHS,
) -> Dict[str, Dict[str, Decimal]]:
    """
    Sum projected billing amounts per month and group key.

    Returns:
        Mapping of period label ("YYYY-MM", chronological) to a mapping of
        group key to summed amount. Every month of the window is present,
        empty months map to an empty dict so charts get a complete axis.
    """
    periods = window_periods(today, window_months)
    buckets: Dict[str, Dict[str, Decimal]] = {period.label: {} for period in periods}

    for obligation in obligations:
        for occurrence in iter_occurrences(obligation, today, window_months, max_months):
            cell = buckets[Period.of(occurrence.date).label]
            cell[occurrence.group_key] = cell.get(occurrence.group_key, Decimal("0")) + occurrence.amount

    return buckets


def group_keys(obligations: Iterable[RecurringObligation]) -> List[str]:
    """Distinct group keys in first-seen order (chart legend)"""
    seen: Dict[str, None] = {}
    for obligation in obligations:
        seen.setdefault(obligation.group_key, None)
    return list(seen)


def monthly_equivalent(obligation: RecurringObligation) -> Decimal:
    """Amount per month, yearly obligations spread over twelve months"""
    if obligation.cycle == BillingCycle.YEARLY:
        return obligation.amount / 12
    return obligation.amount


def annual_equivalent(obligation: RecurringObligation) -> Decimal:
    if obligation.cycle == BillingCycle.MONTHLY:
        return obligation.amount * 12
    return obligation.amount


def recurring_cost(obligations: Iterable[RecurringObligation]) -> RecurringCost:
    """
    Total recurring cost of all obligations.

    monthly is rounded half-up to cents since yearly amounts rarely divide by
    twelve exactly; yearly is exact.
    """
    obligations = list(obligations)
    monthly = sum((monthly_equivalent(o) for o in obligations), Decimal("0"))
    yearly = sum((annual_equivalent(o) for o in obligations), Decimal("0"))
    return RecurringCost(
        monthly=monthly.quantize(CENT, rounding=ROUND_HALF_UP),
        yearly=yearly,
    )

