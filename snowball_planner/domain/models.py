"""Domain models - pure Python dataclasses representing the payoff inputs and outputs"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

# Input ceilings enforced by the API schemas and the importers
MAX_AMOUNT = 1_000_000_000
MAX_INTEREST_RATE = 1000.0  # annual percent


class DebtType(str, Enum):
    """Closed set of debt categories"""

    CREDIT_CARD = "credit_card"
    STUDENT_LOAN = "student_loan"
    AUTO_LOAN = "auto_loan"
    MORTGAGE = "mortgage"
    PERSONAL_LOAN = "personal_loan"
    OTHER = "other"


class Priority(str, Enum):
    """Priority tier used to rank debts ahead of balance"""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return PRIORITY_RANK[self]


PRIORITY_RANK = {Priority.HIGH: 3, Priority.MEDIUM: 2, Priority.LOW: 1}


class BudgetType(str, Enum):
    FIXED = "fixed"
    VARIABLE = "variable"


@dataclass(frozen=True)
class Debt:
    """A single liability as submitted by the user"""

    id: str
    name: str
    balance: float
    minimum_payment: float
    interest_rate: float  # annual percentage, 19.99 means 19.99%
    type: DebtType = DebtType.OTHER
    priority: Priority = Priority.MEDIUM

    @property
    def monthly_rate(self) -> float:
        return self.interest_rate / 100 / 12


@dataclass(frozen=True)
class BudgetCategory:
    """Monthly expense line; only the amount feeds the engine"""

    name: str
    amount: float
    type: BudgetType = BudgetType.VARIABLE


@dataclass(frozen=True)
class UserData:
    """Income, budget and debt snapshot handed to the engine"""

    monthly_income: float
    budget_categories: Tuple[BudgetCategory, ...] = ()
    debts: Tuple[Debt, ...] = ()


@dataclass(frozen=True)
class PaymentPlan:
    """One debt's payment in one simulated month"""

    debt: Debt
    month: int
    payment: float
    principal_payment: float
    interest_payment: float
    remaining_balance: float
    is_payoff_month: bool


@dataclass(frozen=True)
class DebtSnowballResult:
    """Complete payoff projection"""

    payment_plans: List[PaymentPlan] = field(default_factory=list)
    payoff_order: List[Debt] = field(default_factory=list)
    months_to_payoff: int = 0
    total_interest_saved: float = 0.0
    total_interest_paid: float = 0.0


@dataclass(frozen=True)
class BudgetSummary:
    """Aggregate budget figures shown alongside a plan"""

    monthly_income: float
    total_expenses: float
    total_minimum_payments: float
    total_committed: float
    remaining_income: float
    extra_payment: float
    total_debt: float

    @property
    def has_deficit(self) -> bool:
        return self.remaining_income < 0


@dataclass(frozen=True)
class DebtLine:
    """Per-debt row inside a monthly schedule entry"""

    debt_id: str
    name: str
    payment: float
    principal: float
    interest: float
    balance: float
    paid_off: bool


@dataclass(frozen=True)
class MonthlySchedule:
    """All payments made in one month, with totals"""

    month: int
    total_payment: float
    total_principal: float
    total_interest: float
    total_remaining: float
    debts: List[DebtLine] = field(default_factory=list)
