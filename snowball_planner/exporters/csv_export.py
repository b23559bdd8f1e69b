"""CSV export of payoff plans for spreadsheet trackers"""

import csv
import io
from typing import Iterable, List

from snowball_planner.domain.budget import summarize_budget
from snowball_planner.domain.models import DebtSnowballResult, UserData
from snowball_planner.domain.schedule import open_debts, payoff_month

SCHEDULE_HEADERS = [
    "month",
    "debt_id",
    "debt_name",
    "payment",
    "principal",
    "interest",
    "remaining_balance",
    "paid_off",
]


def _money(value: float) -> str:
    # Display rounding only; the engine keeps full precision
    return f"{value:.2f}"


def _write_rows(headers: List[str], rows: Iterable[List[str]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerow(headers)
    writer.writerows(rows)
    return buffer.getvalue()


def export_schedule_csv(result: DebtSnowballResult) -> str:
    """One row per payment, chronological, columns fixed by SCHEDULE_HEADERS"""
    rows = (
        [
            str(plan.month),
            plan.debt.id,
            plan.debt.name,
            _money(plan.payment),
            _money(plan.principal_payment),
            _money(plan.interest_payment),
            _money(plan.remaining_balance),
            "yes" if plan.is_payoff_month else "no",
        ]
        for plan in result.payment_plans
    )
    return _write_rows(SCHEDULE_HEADERS, rows)


def export_summary_csv(result: DebtSnowballResult, user_data: UserData) -> str:
    """
    Payoff order with each debt's payoff month, followed by plan totals.

    Debts left open by the month cap report an empty payoff month.
    """
    summary = summarize_budget(user_data)
    unpaid = {debt.id for debt in open_debts(result)}

    rows = []
    for rank, debt in enumerate(result.payoff_order, start=1):
        month = payoff_month(result, debt.id)
        rows.append(
            [
                str(rank),
                debt.id,
                debt.name,
                debt.priority.value,
                _money(debt.balance),
                "" if month is None else str(month),
                "open" if debt.id in unpaid else ("paid" if month is not None else ""),
            ]
        )

    rows.append([])
    rows.append(["total_debt", _money(summary.total_debt)])
    rows.append(["extra_payment", _money(summary.extra_payment)])
    rows.append(["months_to_payoff", str(result.months_to_payoff)])
    rows.append(["total_interest_paid", _money(result.total_interest_paid)])
    rows.append(["total_interest_saved", _money(result.total_interest_saved)])

    return _write_rows(
        ["rank", "debt_id", "debt_name", "priority", "balance", "payoff_month", "status"],
        rows,
    )
