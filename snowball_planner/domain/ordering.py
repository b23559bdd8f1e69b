"""Snowball ordering - priority tier first, then smallest balance"""

from typing import Iterable, List
from snowball_planner.domain.models import Debt


def order_debts(debts: Iterable[Debt]) -> List[Debt]:
    """
    Rank debts for payoff.

    Rules:
    - Higher priority tier first (high=3, medium=2, low=1)
    - Within a tier, smallest balance first (classic snowball)
    - Ties keep input order (sorted() is stable)

    The returned list is a fixed precedence: the simulation skips closed
    entries instead of re-sorting as balances change.
    """
    return sorted(debts, key=lambda d: (-d.priority.rank, d.balance))
