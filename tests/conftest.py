"""Pytest fixtures for testing"""

import pytest
from datetime import date
from decimal import Decimal
from fastapi.testclient import TestClient
from budget_gateway.api.main import create_app
from budget_gateway.domain.models import BillingCycle, RecurringObligation, Transaction, TransactionType


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def today() -> date:
    """Fixed reference date, never the wall clock"""
    return date(2024, 4, 10)


@pytest.fixture
def sample_obligations() -> list[RecurringObligation]:
    """Household subscriptions spread across cycles and categories"""
    return [
        RecurringObligation(
            id="netflix",
            name="Netflix",
            amount=Decimal("15.99"),
            cycle=BillingCycle.MONTHLY,
            group_key="Entertainment",
            next_due_date=date(2024, 4, 20),
        ),
        RecurringObligation(
            id="spotify",
            name="Spotify",
            amount=Decimal("9.99"),
            cycle=BillingCycle.MONTHLY,
            group_key="Entertainment",
            next_due_date=date(2024, 4, 12),
        ),
        RecurringObligation(
            id="gym",
            name="Gym",
            amount=Decimal("40.00"),
            cycle=BillingCycle.MONTHLY,
            group_key="Health",
            next_due_date=date(2024, 1, 5),  # stale, app not opened for months
        ),
        RecurringObligation(
            id="domain",
            name="Domain renewal",
            amount=Decimal("120.00"),
            cycle=BillingCycle.YEARLY,
            group_key="Software & Apps",
            next_due_date=date(2024, 7, 1),
        ),
    ]


@pytest.fixture
def sample_payload(sample_obligations: list[RecurringObligation]) -> list[dict]:
    """sample_obligations as JSON body entries"""
    return [
        {
            "id": o.id,
            "name": o.name,
            "amount": str(o.amount),
            "cycle": o.cycle.value,
            "group_key": o.group_key,
            "next_due_date": o.next_due_date.isoformat(),
        }
        for o in sample_obligations
    ]


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    """Ledger entries around a year boundary, plus one outside any 6 month window"""

    def txn(id, amount, type, category, day):
        return Transaction(id=id, amount=Decimal(amount), type=type, category=category, date=day)

    return [
        txn("salary-dec", "3000.00", TransactionType.INCOME, "Salary", date(2023, 12, 1)),
        txn("rent-dec", "1200.00", TransactionType.EXPENSE, "Housing", date(2023, 12, 3)),
        txn("food-jan", "85.50", TransactionType.EXPENSE, "Food & Dining", date(2024, 1, 14)),
        txn("salary-jan", "3000.00", TransactionType.INCOME, "Salary", date(2024, 1, 1)),
        txn("rent-jan", "1200.00", TransactionType.EXPENSE, "Housing", date(2024, 1, 3)),
        txn("food-feb", "40.25", TransactionType.EXPENSE, "Food & Dining", date(2024, 2, 20)),
        txn("bonus-apr", "500.00", TransactionType.INCOME, "Bonus", date(2024, 4, 2)),
        # Same month name as food-jan, one year earlier
        txn("food-old", "999.00", TransactionType.EXPENSE, "Food & Dining", date(2023, 1, 14)),
    ]
