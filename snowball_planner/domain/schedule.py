"""Month-grouped views over a payoff result for reporting"""

from typing import Dict, List, Optional
from snowball_planner.domain.models import Debt, DebtLine, DebtSnowballResult, MonthlySchedule, PaymentPlan


def group_plans_by_month(result: DebtSnowballResult) -> Dict[int, List[PaymentPlan]]:
    """Single pass over the flat plan list into month -> plans"""
    by_month: Dict[int, List[PaymentPlan]] = {}
    for plan in result.payment_plans:
        by_month.setdefault(plan.month, []).append(plan)
    return by_month


def generate_payment_schedule(result: DebtSnowballResult) -> List[MonthlySchedule]:
    """
    Regroup the engine's flat plan list into one entry per month.

    Every month from 1 to months_to_payoff is present; a month without
    plans reports zero totals.
    """
    by_month = group_plans_by_month(result)

    schedule = []
    for month in range(1, result.months_to_payoff + 1):
        plans = by_month.get(month, [])
        schedule.append(
            MonthlySchedule(
                month=month,
                total_payment=sum(p.payment for p in plans),
                total_principal=sum(p.principal_payment for p in plans),
                total_interest=sum(p.interest_payment for p in plans),
                total_remaining=sum(p.remaining_balance for p in plans),
                debts=[
                    DebtLine(
                        debt_id=p.debt.id,
                        name=p.debt.name,
                        payment=p.payment,
                        principal=p.principal_payment,
                        interest=p.interest_payment,
                        balance=p.remaining_balance,
                        paid_off=p.is_payoff_month,
                    )
                    for p in plans
                ],
            )
        )

    return schedule


def payoff_month(result: DebtSnowballResult, debt_id: str) -> Optional[int]:
    """Month the debt reached zero, or None if it never did"""
    for plan in result.payment_plans:
        if plan.debt.id == debt_id and plan.is_payoff_month:
            return plan.month
    return None


def open_debts(result: DebtSnowballResult) -> List[Debt]:
    """
    Debts whose last plan entry still carries a balance.

    Only non-empty when the simulation stopped at the month cap.
    """
    last_plan: Dict[str, PaymentPlan] = {}
    for plan in result.payment_plans:
        last_plan[plan.debt.id] = plan

    return [
        debt
        for debt in result.payoff_order
        if debt.id in last_plan and last_plan[debt.id].remaining_balance > 0
    ]


def is_truncated(result: DebtSnowballResult) -> bool:
    return bool(open_debts(result))
