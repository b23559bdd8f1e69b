"""Debt import endpoints - CSV upload, manual entry and template download"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from starlette.responses import Response

from snowball_planner.api.v1.schemas import DebtSchema, DebtsResponse, ManualDebtsRequest
from snowball_planner.api.dependencies import get_max_debts, get_request_id
from snowball_planner.config import settings
from snowball_planner.domain.exceptions import ImportTooLargeError, InvalidDebtDataError
from snowball_planner.importers.csv_import import build_debts_from_entries, parse_debts_csv, template_csv
from snowball_planner.infrastructure.observability.metrics import debts_imported_counter, import_failures_counter

router = APIRouter()


@router.post("/debts/import", response_model=DebtsResponse)
async def import_debts(request: Request, max_debts: int = Depends(get_max_debts)):
    """
    Parse a raw CSV debt schedule (request body, text/csv).

    Returns:
        Normalized debts ready to submit to POST /v1/plan
    """
    request_id = get_request_id(request)

    try:
        # Reject on the declared length before buffering the upload
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > settings.max_import_bytes:
            raise ImportTooLargeError(f"Upload exceeds {settings.max_import_bytes} bytes")

        body = await request.body()
        if len(body) > settings.max_import_bytes:
            raise ImportTooLargeError(f"Upload exceeds {settings.max_import_bytes} bytes")

        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidDebtDataError("CSV must be UTF-8 encoded") from e

        debts = parse_debts_csv(text, max_rows=max_debts)

    except ImportTooLargeError as e:
        import_failures_counter.labels(reason="too_large").inc()
        logging.warning(f"Import rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=413, detail=str(e))

    except InvalidDebtDataError as e:
        import_failures_counter.labels(reason="invalid").inc()
        logging.warning(f"Invalid debt data: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    debts_imported_counter.inc(len(debts))
    return DebtsResponse(count=len(debts), debts=[DebtSchema.from_domain(d) for d in debts])


@router.post("/debts/manual", response_model=DebtsResponse)
def add_manual_debts(request_body: ManualDebtsRequest):
    """Normalize manually entered debts, dropping incomplete rows"""
    debts = build_debts_from_entries(entry.model_dump() for entry in request_body.entries)
    return DebtsResponse(count=len(debts), debts=[DebtSchema.from_domain(d) for d in debts])


@router.get("/debts/template")
def download_template():
    return Response(
        content=template_csv(),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="debt-template.csv"'},
    )
