"""Minimum-payments-only interest baseline"""

from typing import Iterable
from snowball_planner.domain.models import Debt

# Upper bound on simulated months per debt (1000 years)
BASELINE_MAX_MONTHS = 12_000


def minimum_only_interest(debt: Debt, max_months: int = BASELINE_MAX_MONTHS) -> float:
    """
    Interest paid on one debt if it only ever receives its minimum payment.

    Stops accumulating as soon as the minimum no longer reduces the balance:
    either it does not cover the monthly interest (principal <= 0) or the
    payment is too small to move a float balance that large. Such a debt is
    never paid off. max_months bounds the work for payments that are tiny
    relative to the balance.
    """
    balance = debt.balance
    monthly_rate = debt.monthly_rate
    total_interest = 0.0

    for _ in range(max_months):
        if balance <= 0:
            break

        interest = balance * monthly_rate
        principal = min(debt.minimum_payment - interest, balance)

        if principal <= 0:
            break

        # Progress guard: float rounding can swallow a small principal
        new_balance = balance - principal
        if new_balance >= balance:
            break

        total_interest += interest
        balance = new_balance

    return total_interest


def estimate_baseline_interest(debts: Iterable[Debt]) -> float:
    """Sum of minimum-only interest across debts, each simulated independently"""
    return sum(minimum_only_interest(debt) for debt in debts)
