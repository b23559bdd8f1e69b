"""Budget endpoints - aggregate figures and default categories"""

from fastapi import APIRouter

from snowball_planner.api.v1.schemas import (
    BudgetCategoriesResponse,
    BudgetCategorySchema,
    BudgetSummaryResponse,
    UserDataRequest,
)
from snowball_planner.domain.budget import default_budget_categories, summarize_budget

router = APIRouter()


@router.post("/budget/summary", response_model=BudgetSummaryResponse)
def get_budget_summary(request_body: UserDataRequest):
    """
    Committed expenses, remaining income and the extra payment pool.

    remaining_income is reported unclamped so the client can warn about a deficit.
    """
    return BudgetSummaryResponse.from_domain(summarize_budget(request_body.to_domain()))


@router.get("/budget/defaults", response_model=BudgetCategoriesResponse)
def get_default_categories():
    categories = [
        BudgetCategorySchema(name=cat.name, amount=cat.amount, type=cat.type)
        for cat in default_budget_categories()
    ]
    return BudgetCategoriesResponse(categories=categories)
