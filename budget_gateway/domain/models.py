"""Domain models - pure Python dataclasses representing budgeting entities"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional


class BillingCycle(str, Enum):
    """Recurrence unit of a subscription"""

    MONTHLY = "monthly"
    YEARLY = "yearly"


class TransactionType(str, Enum):
    """Direction of a ledger entry"""

    INCOME = "income"
    EXPENSE = "expense"


class UrgencyBucket(str, Enum):
    """Proximity of a due date to today, in display order"""

    OVERDUE = "overdue"
    THIS_WEEK = "this_week"
    NEXT_WEEK = "next_week"
    THIS_MONTH = "this_month"
    LATER = "later"


@dataclass
class RecurringObligation:
    """Subscription or other recurring bill owned by the caller"""

    id: str
    amount: Decimal
    cycle: BillingCycle
    group_key: str  # usually the category
    next_due_date: date
    name: Optional[str] = None


@dataclass
class Occurrence:
    """Single projected billing event"""

    date: date
    amount: Decimal
    group_key: str
    obligation_id: str


@dataclass(frozen=True)
class Period:
    """Calendar month used as a projection bucket"""

    year: int
    month: int

    @classmethod
    def of(cls, day: date) -> "Period":
        return cls(day.year, day.month)

    @property
    def label(self) -> str:
        # Year is part of the label so windows spanning January never merge months
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def start(self) -> date:
        return date(self.year, self.month, 1)

    def next(self) -> "Period":
        if self.month == 12:
            return Period(self.year + 1, 1)
        return Period(self.year, self.month + 1)

    def previous(self) -> "Period":
        if self.month == 1:
            return Period(self.year - 1, 12)
        return Period(self.year, self.month - 1)

    def contains(self, day: date) -> bool:
        return day.year == self.year and day.month == self.month


@dataclass
class UrgencyGroup:
    """Obligations sharing an urgency bucket, ascending by due date"""

    bucket: UrgencyBucket
    obligations: List[RecurringObligation] = field(default_factory=list)
    total: Decimal = Decimal("0")


@dataclass
class RecurringCost:
    """Normalized cost of all recurring obligations"""

    monthly: Decimal
    yearly: Decimal


@dataclass
class InstallmentLeg:
    """Single dated part of a split expense"""

    index: int  # 1-based
    count: int
    amount: Decimal
    date: date

    def describe(self, description: str) -> str:
        return f"{description} (Installment {self.index}/{self.count})"


@dataclass
class InstallmentPlan:
    """Lump-sum expense split into monthly legs"""

    total_amount: Decimal
    count: int
    start_date: date
    legs: List[InstallmentLeg] = field(default_factory=list)


@dataclass
class Transaction:
    """Ledger entry recorded by the caller"""

    id: str
    amount: Decimal
    type: TransactionType
    category: str
    date: date
    description: str = ""


@dataclass
class TrendPoint:
    """Income and expense booked in one month"""

    period: Period
    income: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")


@dataclass
class CategoryTotal:
    """Expense total for one category"""

    category: str
    amount: Decimal
