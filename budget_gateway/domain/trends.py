"""Historical income/expense trend and expense breakdown by category"""

from decimal import Decimal
from typing import Dict, Iterable, List

from budget_gateway.domain.exceptions import InvalidProjectionWindowError
from budget_gateway.domain.models import CategoryTotal, Period, Transaction, TransactionType, TrendPoint
from budget_gateway.utils.date_utils import DateLike, as_date


def trailing_periods(today: DateLike, months: int) -> List[Period]:
    """The last `months` months ending with today's month, oldest first"""
    if months < 1:
        raise InvalidProjectionWindowError(f"Trend window must cover at least one month, got {months}")

    periods = [Period.of(as_date(today))]
    while len(periods) < months:
        periods.append(periods[-1].previous())
    periods.reverse()
    return periods


def monthly_trend(
    transactions: Iterable[Transaction],
    today: DateLike,
    months: int = 6,
) -> Dict[str, TrendPoint]:
    """
    Income and expense totals per month for the trailing window.

    Requirements:
    - Every month of the window present, oldest first, even with no entries
    - Months keyed by "YYYY-MM" so the same month of different years never merges
    - Entries outside the window (older, or after today's month) are ignored

    Returns:
        Mapping of period label to TrendPoint
    """
    points = {period.label: TrendPoint(period=period) for period in trailing_periods(today, months)}

    for txn in transactions:
        point = points.get(Period.of(as_date(txn.date)).label)
        if point is None:
            continue
        if txn.type == TransactionType.INCOME:
            point.income += txn.amount
        else:
            point.expense += txn.amount

    return points


def category_breakdown(transactions: Iterable[Transaction]) -> List[CategoryTotal]:
    """Expense totals per category, largest first (ties keep first-seen order)"""
    totals: Dict[str, Decimal] = {}
    for txn in transactions:
        if txn.type != TransactionType.EXPENSE:
            continue
        totals[txn.category] = totals.get(txn.category, Decimal("0")) + txn.amount

    # sorted() is stable, so equal totals stay in first-seen order
    return [
        CategoryTotal(category=category, amount=amount)
        for category, amount in sorted(totals.items(), key=lambda item: item[1], reverse=True)
    ]
