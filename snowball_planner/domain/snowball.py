"""Debt snowball engine - core payoff simulation"""

import logging
from typing import Dict, List, Optional, Sequence, Set
from snowball_planner.domain.models import Debt, DebtSnowballResult, PaymentPlan, UserData
from snowball_planner.domain.budget import calculate_extra_payment
from snowball_planner.domain.ordering import order_debts
from snowball_planner.domain.baseline import estimate_baseline_interest

logger = logging.getLogger(__name__)

MAX_MONTHS = 600  # 50 years


def _find_target(payoff_order: Sequence[Debt], balances: Dict[str, float], closed: Set[str]) -> Optional[Debt]:
    """First debt in the fixed payoff order that still carries a balance"""
    for debt in payoff_order:
        if debt.id not in closed and balances[debt.id] > 0:
            return debt
    return None


def simulate_payoff(
    debts: Sequence[Debt],
    payoff_order: Sequence[Debt],
    extra_payment: float,
    max_months: int = MAX_MONTHS,
) -> tuple[List[PaymentPlan], int, float]:
    """
    Advance month by month until every debt is closed or the month cap is hit.

    Requirements:
    - Every open debt gets its minimum payment, visited in input order
    - The whole extra pool goes to one target: the first open debt in payoff_order,
      chosen once at the start of each month
    - A debt closing rolls its minimum into the pool from the next month on
    - Payments never exceed balance + interest
    - Reaching max_months truncates the plan; it is not an error

    Returns:
        (payment_plans, months_elapsed, total_interest_paid)
    """
    balances: Dict[str, float] = {debt.id: debt.balance for debt in debts}
    closed: Set[str] = set()
    available_extra = extra_payment
    total_interest_paid = 0.0
    payment_plans: List[PaymentPlan] = []

    def is_open(debt: Debt) -> bool:
        return debt.id not in closed and balances[debt.id] > 0

    month = 0
    while month < max_months and any(is_open(debt) for debt in debts):
        month += 1
        target = _find_target(payoff_order, balances, closed)

        for debt in debts:
            if not is_open(debt):
                continue

            balance = balances[debt.id]
            interest_payment = balance * debt.monthly_rate

            total_payment = debt.minimum_payment
            principal_payment = debt.minimum_payment - interest_payment

            if target is not None and debt.id == target.id and available_extra > 0:
                extra_for_debt = min(available_extra, balance - interest_payment)
                total_payment += extra_for_debt
                principal_payment += extra_for_debt
                available_extra -= extra_for_debt

            # Never pay more than what is owed this month
            if total_payment > balance + interest_payment:
                total_payment = balance + interest_payment
                principal_payment = balance

            new_balance = max(0.0, balance - principal_payment)
            is_payoff_month = new_balance == 0

            payment_plans.append(
                PaymentPlan(
                    debt=debt,
                    month=month,
                    payment=total_payment,
                    principal_payment=principal_payment,
                    interest_payment=interest_payment,
                    remaining_balance=new_balance,
                    is_payoff_month=is_payoff_month,
                )
            )

            balances[debt.id] = new_balance
            if is_payoff_month:
                closed.add(debt.id)
                available_extra += debt.minimum_payment
                logger.debug("Debt %s paid off in month %d", debt.id, month)

            total_interest_paid += interest_payment

    if month >= max_months and any(is_open(debt) for debt in debts):
        logger.debug("Payoff simulation truncated at %d months", max_months)

    return payment_plans, month, total_interest_paid


def calculate_debt_snowball(user_data: UserData, max_months: int = MAX_MONTHS) -> DebtSnowballResult:
    """
    Main entry point: order debts, simulate payoff, compare with minimum-only baseline.

    Never raises on degenerate input. A budget deficit runs on minimums only,
    an unpayable debt stays open at the month cap, and an empty debt list
    yields an empty zero-month result.
    """
    debts = list(user_data.debts)
    payoff_order = order_debts(debts)
    extra_payment = calculate_extra_payment(user_data)

    payment_plans, months, total_interest_paid = simulate_payoff(
        debts, payoff_order, extra_payment, max_months=max_months
    )

    baseline_interest = estimate_baseline_interest(debts)

    return DebtSnowballResult(
        payment_plans=payment_plans,
        payoff_order=payoff_order,
        months_to_payoff=months,
        total_interest_saved=baseline_interest - total_interest_paid,
        total_interest_paid=total_interest_paid,
    )
