"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from snowball_planner.api.main import create_app
from snowball_planner.domain.models import BudgetCategory, BudgetType, Debt, DebtType, Priority, UserData


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def sample_debts() -> list[Debt]:
    """Typical household debt mix"""
    return [
        Debt(
            id="visa",
            name="Visa",
            balance=2500.0,
            minimum_payment=75.0,
            interest_rate=19.99,
            type=DebtType.CREDIT_CARD,
            priority=Priority.MEDIUM,
        ),
        Debt(
            id="car",
            name="Car Loan",
            balance=9000.0,
            minimum_payment=250.0,
            interest_rate=6.5,
            type=DebtType.AUTO_LOAN,
            priority=Priority.MEDIUM,
        ),
        Debt(
            id="store",
            name="Store Card",
            balance=600.0,
            minimum_payment=30.0,
            interest_rate=24.0,
            type=DebtType.CREDIT_CARD,
            priority=Priority.LOW,
        ),
        Debt(
            id="medical",
            name="Medical Bill",
            balance=1200.0,
            minimum_payment=50.0,
            interest_rate=0.0,
            type=DebtType.OTHER,
            priority=Priority.HIGH,
        ),
    ]


@pytest.fixture
def sample_user_data(sample_debts: list[Debt]) -> UserData:
    """Income of $4000 with $3000 committed to expenses leaves $595 extra"""
    return UserData(
        monthly_income=4000.0,
        budget_categories=(
            BudgetCategory(name="Housing (Rent/Mortgage)", amount=1800.0, type=BudgetType.FIXED),
            BudgetCategory(name="Groceries", amount=700.0, type=BudgetType.VARIABLE),
            BudgetCategory(name="Utilities", amount=500.0, type=BudgetType.FIXED),
        ),
        debts=tuple(sample_debts),
    )


@pytest.fixture
def sample_payload() -> dict:
    """JSON body for the plan endpoints"""
    return {
        "monthly_income": 4000,
        "budget_categories": [
            {"name": "Housing (Rent/Mortgage)", "amount": 1800, "type": "fixed"},
            {"name": "Groceries", "amount": 700, "type": "variable"},
        ],
        "debts": [
            {
                "id": "visa",
                "name": "Visa",
                "balance": 2500,
                "minimum_payment": 75,
                "interest_rate": 19.99,
                "type": "credit_card",
                "priority": "medium",
            },
            {
                "id": "medical",
                "name": "Medical Bill",
                "balance": 1200,
                "minimum_payment": 50,
                "interest_rate": 0,
                "type": "other",
                "priority": "high",
            },
        ],
    }
