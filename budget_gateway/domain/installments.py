"""Installment plan generation for split expenses"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Union

from budget_gateway.domain.cycles import advance_months
from budget_gateway.domain.exceptions import InvalidInstallmentAmountError, InvalidInstallmentCountError
from budget_gateway.domain.models import InstallmentLeg, InstallmentPlan

Amount = Union[Decimal, int, float, str]

CENTS_PER_UNIT = 100
CENT = Decimal("0.01")


def to_cents(amount: Amount) -> int:
    """Convert an amount to integer minor units, rounding half-up"""
    # str() first so floats keep their shortest repr instead of binary noise
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    return int((value * CENTS_PER_UNIT).to_integral_value(rounding=ROUND_HALF_UP))


def from_cents(cents: int) -> Decimal:
    return (Decimal(cents) / CENTS_PER_UNIT).quantize(CENT)


def allocate(total_amount: Amount, count: int, start_date: date) -> List[InstallmentLeg]:
    """
    Split a lump-sum expense into monthly installments.

    Requirements:
    - At least 2 legs
    - Legs one calendar month apart, starting at start_date
    - First leg absorbs the rounding remainder so legs sum to the exact total

    Args:
        total_amount: Total expense, rounded to cents before splitting
        count: Number of legs
        start_date: Date of the first leg

    Returns:
        List of InstallmentLeg objects with index, amount and date

    Example:
        100.00 / 3 → [33.34, 33.33, 33.33]
        10000 cents / 3 = 3333 base, remainder 1
        First installment: 3333 + 1 = 3334
    """
    if count < 2:
        raise InvalidInstallmentCountError(f"Installment plans need at least 2 legs, got {count}")

    total_cents = to_cents(total_amount)
    if total_cents <= 0:
        raise InvalidInstallmentAmountError(f"Installment total must be positive, got {total_amount}")

    # Integer cents: no binary floating point residue
    base_cents = total_cents // count
    remainder_cents = total_cents - base_cents * count

    legs = []
    for i in range(count):
        amount_cents = base_cents + (remainder_cents if i == 0 else 0)
        legs.append(
            InstallmentLeg(
                index=i + 1,
                count=count,
                amount=from_cents(amount_cents),
                date=advance_months(start_date, i),
            )
        )

    return legs


def plan_installments(total_amount: Amount, count: int, start_date: date) -> InstallmentPlan:
    """Build an InstallmentPlan with its legs"""
    legs = allocate(total_amount, count, start_date)
    return InstallmentPlan(
        total_amount=from_cents(to_cents(total_amount)),
        count=count,
        start_date=start_date,
        legs=legs,
    )
