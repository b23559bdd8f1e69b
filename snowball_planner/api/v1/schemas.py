"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field, model_validator
from typing import List, Optional

from snowball_planner.domain.models import (
    BudgetCategory,
    BudgetSummary,
    BudgetType,
    Debt,
    DebtSnowballResult,
    DebtType,
    MAX_AMOUNT,
    MAX_INTEREST_RATE,
    MonthlySchedule,
    PaymentPlan,
    Priority,
    UserData,
)


class DebtSchema(BaseModel):
    """Debt as submitted by the client"""

    id: str = Field(..., min_length=1, description="Unique debt identifier")
    name: str = Field(..., description="Display name")
    balance: float = Field(..., ge=0, le=MAX_AMOUNT, description="Current balance")
    minimum_payment: float = Field(..., ge=0, le=MAX_AMOUNT, description="Minimum monthly payment")
    interest_rate: float = Field(..., ge=0, le=MAX_INTEREST_RATE, description="Annual interest rate in percent")
    type: DebtType = DebtType.OTHER
    priority: Priority = Priority.MEDIUM

    def to_domain(self) -> Debt:
        return Debt(
            id=self.id,
            name=self.name,
            balance=self.balance,
            minimum_payment=self.minimum_payment,
            interest_rate=self.interest_rate,
            type=self.type,
            priority=self.priority,
        )

    @classmethod
    def from_domain(cls, debt: Debt) -> "DebtSchema":
        return cls(
            id=debt.id,
            name=debt.name,
            balance=debt.balance,
            minimum_payment=debt.minimum_payment,
            interest_rate=debt.interest_rate,
            type=debt.type,
            priority=debt.priority,
        )


class BudgetCategorySchema(BaseModel):
    """Monthly expense line"""

    name: str
    amount: float = Field(..., ge=0)
    type: BudgetType = BudgetType.VARIABLE

    def to_domain(self) -> BudgetCategory:
        return BudgetCategory(name=self.name, amount=self.amount, type=self.type)


class UserDataRequest(BaseModel):
    """Request body for the plan and budget endpoints"""

    monthly_income: float = Field(..., ge=0, description="Monthly take-home income")
    budget_categories: List[BudgetCategorySchema] = Field(default_factory=list)
    debts: List[DebtSchema] = Field(default_factory=list)

    def to_domain(self) -> UserData:
        return UserData(
            monthly_income=self.monthly_income,
            budget_categories=tuple(cat.to_domain() for cat in self.budget_categories),
            debts=tuple(debt.to_domain() for debt in self.debts),
        )

    @model_validator(mode="after")
    def check_unique_debt_ids(self) -> "UserDataRequest":
        seen = set()
        for debt in self.debts:
            if debt.id in seen:
                raise ValueError(f"Duplicate debt id: {debt.id}")
            seen.add(debt.id)
        return self


class PaymentPlanSchema(BaseModel):
    """Single debt payment in a single month"""

    debt_id: str
    month: int
    payment: float
    principal_payment: float
    interest_payment: float
    remaining_balance: float
    is_payoff_month: bool

    @classmethod
    def from_domain(cls, plan: PaymentPlan) -> "PaymentPlanSchema":
        return cls(
            debt_id=plan.debt.id,
            month=plan.month,
            payment=plan.payment,
            principal_payment=plan.principal_payment,
            interest_payment=plan.interest_payment,
            remaining_balance=plan.remaining_balance,
            is_payoff_month=plan.is_payoff_month,
        )


class BudgetSummaryResponse(BaseModel):
    """Response for POST /v1/budget/summary"""

    monthly_income: float
    total_expenses: float
    total_minimum_payments: float
    total_committed: float
    remaining_income: float
    extra_payment: float
    total_debt: float
    has_deficit: bool

    @classmethod
    def from_domain(cls, summary: BudgetSummary) -> "BudgetSummaryResponse":
        return cls(
            monthly_income=summary.monthly_income,
            total_expenses=summary.total_expenses,
            total_minimum_payments=summary.total_minimum_payments,
            total_committed=summary.total_committed,
            remaining_income=summary.remaining_income,
            extra_payment=summary.extra_payment,
            total_debt=summary.total_debt,
            has_deficit=summary.has_deficit,
        )


class PlanResponse(BaseModel):
    """Response for POST /v1/plan"""

    payment_plans: List[PaymentPlanSchema]
    payoff_order: List[DebtSchema]
    months_to_payoff: int
    total_interest_saved: float
    total_interest_paid: float
    open_debt_ids: List[str]
    budget: BudgetSummaryResponse

    @classmethod
    def from_domain(
        cls, result: DebtSnowballResult, summary: BudgetSummary, open_debt_ids: List[str]
    ) -> "PlanResponse":
        return cls(
            payment_plans=[PaymentPlanSchema.from_domain(p) for p in result.payment_plans],
            payoff_order=[DebtSchema.from_domain(d) for d in result.payoff_order],
            months_to_payoff=result.months_to_payoff,
            total_interest_saved=result.total_interest_saved,
            total_interest_paid=result.total_interest_paid,
            open_debt_ids=open_debt_ids,
            budget=BudgetSummaryResponse.from_domain(summary),
        )


class DebtLineSchema(BaseModel):
    """One debt's row inside a month of the schedule"""

    debt_id: str
    name: str
    payment: float
    principal: float
    interest: float
    balance: float
    paid_off: bool


class MonthlyScheduleSchema(BaseModel):
    """One month of the grouped schedule"""

    month: int
    total_payment: float
    total_principal: float
    total_interest: float
    total_remaining: float
    debts: List[DebtLineSchema]

    @classmethod
    def from_domain(cls, entry: MonthlySchedule) -> "MonthlyScheduleSchema":
        return cls(
            month=entry.month,
            total_payment=entry.total_payment,
            total_principal=entry.total_principal,
            total_interest=entry.total_interest,
            total_remaining=entry.total_remaining,
            debts=[
                DebtLineSchema(
                    debt_id=line.debt_id,
                    name=line.name,
                    payment=line.payment,
                    principal=line.principal,
                    interest=line.interest,
                    balance=line.balance,
                    paid_off=line.paid_off,
                )
                for line in entry.debts
            ],
        )


class ScheduleResponse(BaseModel):
    """Response for POST /v1/plan/schedule"""

    months_to_payoff: int
    duration: str
    months: List[MonthlyScheduleSchema]


class ManualDebtEntry(BaseModel):
    """Loosely validated row from the manual entry form"""

    name: Optional[str] = None
    balance: Optional[float] = Field(None, le=MAX_AMOUNT)
    minimum_payment: Optional[float] = Field(None, le=MAX_AMOUNT)
    interest_rate: Optional[float] = Field(None, le=MAX_INTEREST_RATE)
    type: Optional[str] = None
    priority: Optional[str] = None


class ManualDebtsRequest(BaseModel):
    """Request body for POST /v1/debts/manual"""

    entries: List[ManualDebtEntry]


class DebtsResponse(BaseModel):
    """Normalized debts from an import"""

    count: int
    debts: List[DebtSchema]


class BudgetCategoriesResponse(BaseModel):
    """Response for GET /v1/budget/defaults"""

    categories: List[BudgetCategorySchema]
