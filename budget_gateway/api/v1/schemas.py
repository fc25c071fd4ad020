"""Pydantic schemas for API request/response validation"""

from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from budget_gateway.domain.models import (
    BillingCycle,
    RecurringObligation,
    Transaction,
    TransactionType,
    UrgencyBucket,
)


class ObligationSchema(BaseModel):
    """Recurring obligation as held by the client"""

    id: str = Field(..., min_length=1, description="Obligation identifier")
    name: Optional[str] = None
    amount: Decimal = Field(..., gt=0, description="Amount billed per cycle")
    cycle: BillingCycle
    group_key: str = Field(..., min_length=1, description="Grouping key, usually the category")
    next_due_date: date

    def to_domain(self) -> RecurringObligation:
        return RecurringObligation(
            id=self.id,
            amount=self.amount,
            cycle=self.cycle,
            group_key=self.group_key,
            next_due_date=self.next_due_date,
            name=self.name,
        )


class ProjectionRequest(BaseModel):
    """Request body for POST /v1/obligations/projection"""

    today: date
    window_months: Optional[int] = Field(None, ge=1, le=120, description="Months to project, defaults to settings")
    obligations: List[ObligationSchema] = Field(default_factory=list)


class PeriodTotals(BaseModel):
    """Summed amounts per group key for one month"""

    period: str
    totals: Dict[str, Decimal]


class ProjectionResponse(BaseModel):
    """Response for POST /v1/obligations/projection"""

    window_months: int
    group_keys: List[str]
    periods: List[PeriodTotals]


class UrgencyRequest(BaseModel):
    """Request body for POST /v1/obligations/urgency"""

    today: date
    obligations: List[ObligationSchema] = Field(default_factory=list)


class UrgencyItem(BaseModel):
    """Obligation inside an urgency section"""

    id: str
    name: Optional[str] = None
    amount: Decimal
    group_key: str
    next_due_date: date
    normalized_due_date: Optional[date] = None  # null when too stale to catch up
    day_offset: int


class UrgencyGroupSchema(BaseModel):
    """One urgency section with its total"""

    bucket: UrgencyBucket
    total: Decimal
    obligations: List[UrgencyItem]


class UrgencyResponse(BaseModel):
    """Response for POST /v1/obligations/urgency"""

    groups: List[UrgencyGroupSchema]


class CostRequest(BaseModel):
    """Request body for POST /v1/obligations/cost"""

    obligations: List[ObligationSchema] = Field(default_factory=list)


class CostResponse(BaseModel):
    """Response for POST /v1/obligations/cost"""

    monthly: Decimal
    yearly: Decimal


class InstallmentRequest(BaseModel):
    """Request body for POST /v1/installments"""

    total_amount: Decimal = Field(..., description="Total expense to split")
    count: Optional[int] = Field(None, description="Number of legs, defaults to settings")
    start_date: date
    description: str = ""


class InstallmentLegSchema(BaseModel):
    """Single leg of an installment plan"""

    index: int
    count: int
    amount: Decimal
    date: date
    description: str


class InstallmentPlanResponse(BaseModel):
    """Response for POST /v1/installments"""

    plan_id: str
    total_amount: Decimal
    count: int
    legs: List[InstallmentLegSchema]


class TransactionSchema(BaseModel):
    """Ledger entry as held by the client"""

    id: str = Field(..., min_length=1, description="Transaction identifier")
    amount: Decimal = Field(..., gt=0)
    type: TransactionType
    category: str = Field(..., min_length=1)
    date: date
    description: str = ""

    def to_domain(self) -> Transaction:
        return Transaction(
            id=self.id,
            amount=self.amount,
            type=self.type,
            category=self.category,
            date=self.date,
            description=self.description,
        )


class TrendRequest(BaseModel):
    """Request body for POST /v1/transactions/trend"""

    today: date
    months: Optional[int] = Field(None, ge=1, le=120, description="Months to look back, defaults to settings")
    transactions: List[TransactionSchema] = Field(default_factory=list)


class TrendPointSchema(BaseModel):
    """Income and expense for one month"""

    period: str
    income: Decimal
    expense: Decimal


class TrendResponse(BaseModel):
    """Response for POST /v1/transactions/trend"""

    months: int
    periods: List[TrendPointSchema]


class CategoryBreakdownRequest(BaseModel):
    """Request body for POST /v1/transactions/categories"""

    transactions: List[TransactionSchema] = Field(default_factory=list)


class CategoryTotalSchema(BaseModel):
    category: str
    amount: Decimal


class CategoryBreakdownResponse(BaseModel):
    """Response for POST /v1/transactions/categories, largest first"""

    categories: List[CategoryTotalSchema]
