"""POST /v1/plan - Debt snowball payoff endpoints"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from starlette.responses import Response

from snowball_planner.api.v1.schemas import (
    MonthlyScheduleSchema,
    PlanResponse,
    ScheduleResponse,
    UserDataRequest,
)
from snowball_planner.api.dependencies import get_max_months, get_request_id
from snowball_planner.domain.budget import summarize_budget
from snowball_planner.domain.schedule import generate_payment_schedule, open_debts
from snowball_planner.domain.snowball import calculate_debt_snowball
from snowball_planner.exporters.csv_export import export_schedule_csv, export_summary_csv
from snowball_planner.infrastructure.observability.logging import log_plan
from snowball_planner.infrastructure.observability.metrics import record_plan
from snowball_planner.utils.formatting import format_duration

router = APIRouter()


@router.post("/plan", response_model=PlanResponse)
def create_plan(
    request_body: UserDataRequest,
    request: Request,
    max_months: int = Depends(get_max_months),
):
    """
    Compute a snowball payoff plan.

    Flow:
    1. Convert the request into a read-only UserData snapshot
    2. Run the engine (never raises on degenerate input)
    3. Summarize the budget and flag debts left open by the month cap
    4. Record metrics and logs
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        user_data = request_body.to_domain()
        result = calculate_debt_snowball(user_data, max_months=max_months)
        summary = summarize_budget(user_data)
        unpaid = [debt.id for debt in open_debts(result)]

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    if summary.has_deficit:
        logging.warning(
            "Budget deficit, plan uses minimum payments only",
            extra={"request_id": request_id, "remaining_income": summary.remaining_income},
        )

    duration_ms = (time.time() - start_time) * 1000
    record_plan(len(user_data.debts), result.months_to_payoff, bool(unpaid))
    log_plan(
        request_id,
        len(user_data.debts),
        result.months_to_payoff,
        result.total_interest_saved,
        bool(unpaid),
        duration_ms,
    )

    return PlanResponse.from_domain(result, summary, unpaid)


@router.post("/plan/schedule", response_model=ScheduleResponse)
def create_schedule(
    request_body: UserDataRequest,
    max_months: int = Depends(get_max_months),
):
    """
    Compute a plan and return it grouped by month.

    Returns:
        One entry per month with totals and per-debt lines
    """
    result = calculate_debt_snowball(request_body.to_domain(), max_months=max_months)
    schedule = generate_payment_schedule(result)

    return ScheduleResponse(
        months_to_payoff=result.months_to_payoff,
        duration=format_duration(result.months_to_payoff),
        months=[MonthlyScheduleSchema.from_domain(entry) for entry in schedule],
    )


@router.post("/plan/export")
def export_plan(
    request_body: UserDataRequest,
    kind: str = "schedule",
    max_months: int = Depends(get_max_months),
):
    """
    Compute a plan and return it as CSV.

    kind=schedule: one row per payment
    kind=summary: payoff order with payoff months and totals
    """
    user_data = request_body.to_domain()
    result = calculate_debt_snowball(user_data, max_months=max_months)

    if kind == "schedule":
        content = export_schedule_csv(result)
    elif kind == "summary":
        content = export_summary_csv(result, user_data)
    else:
        raise HTTPException(status_code=400, detail="Invalid export kind")

    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="debt-{kind}.csv"'},
    )
