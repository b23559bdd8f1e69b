"""Budget aggregation - committed expenses and the extra payment pool"""

from typing import List
from snowball_planner.domain.models import BudgetCategory, BudgetSummary, BudgetType, UserData


DEFAULT_CATEGORIES = [
    ("Housing (Rent/Mortgage)", BudgetType.FIXED),
    ("Utilities", BudgetType.FIXED),
    ("Insurance", BudgetType.FIXED),
    ("Transportation", BudgetType.VARIABLE),
    ("Groceries", BudgetType.VARIABLE),
    ("Dining Out", BudgetType.VARIABLE),
    ("Entertainment", BudgetType.VARIABLE),
    ("Personal Care", BudgetType.VARIABLE),
    ("Emergency Fund", BudgetType.FIXED),
]


def default_budget_categories() -> List[BudgetCategory]:
    """Starter categories with zero amounts"""
    return [BudgetCategory(name=name, amount=0.0, type=kind) for name, kind in DEFAULT_CATEGORIES]


def total_expenses(user_data: UserData) -> float:
    return sum(cat.amount for cat in user_data.budget_categories)


def total_minimum_payments(user_data: UserData) -> float:
    return sum(debt.minimum_payment for debt in user_data.debts)


def calculate_extra_payment(user_data: UserData) -> float:
    """
    Surplus available for the snowball after expenses and minimums.

    A deficit clamps to 0; the plan then runs on minimum payments only.
    """
    return max(0.0, user_data.monthly_income - total_expenses(user_data) - total_minimum_payments(user_data))


def summarize_budget(user_data: UserData) -> BudgetSummary:
    """Aggregate figures for display, including the unclamped remainder"""
    expenses = total_expenses(user_data)
    minimums = total_minimum_payments(user_data)
    committed = expenses + minimums

    return BudgetSummary(
        monthly_income=user_data.monthly_income,
        total_expenses=expenses,
        total_minimum_payments=minimums,
        total_committed=committed,
        remaining_income=user_data.monthly_income - committed,
        extra_payment=calculate_extra_payment(user_data),
        total_debt=sum(debt.balance for debt in user_data.debts),
    )
