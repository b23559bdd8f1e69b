"""Debt schedule ingestion from CSV uploads and manual entry"""

import csv
import io
import logging
import math
from typing import Any, Iterable, List, Mapping, Optional, Set

from snowball_planner.domain.exceptions import ImportTooLargeError, InvalidDebtDataError
from snowball_planner.domain.models import MAX_AMOUNT, MAX_INTEREST_RATE, Debt, DebtType, Priority
from snowball_planner.utils.formatting import generate_id

logger = logging.getLogger(__name__)

TEMPLATE_COLUMNS = [
    "id",
    "debtor",
    "name",
    "type",
    "current_amount",
    "minimum_monthly_payment",
    "interest_rate",
    "snowball_priority",
]
REQUIRED_COLUMNS = {"name", "current_amount"}

# Snowball rank numbers from the upload template collapse onto three tiers
PRIORITY_ALIASES = {
    "1": Priority.HIGH,
    "2": Priority.HIGH,
    "3": Priority.MEDIUM,
    "4": Priority.MEDIUM,
    "5": Priority.LOW,
    "6": Priority.LOW,
}

# Legacy labels used by older schedules
TYPE_ALIASES = {
    "overdue bill": DebtType.OTHER,
    "overdue bill for services": DebtType.OTHER,
    "short term financing": DebtType.PERSONAL_LOAN,
    "short term loan": DebtType.PERSONAL_LOAN,
    "intermediate loan": DebtType.AUTO_LOAN,
    "long term loan": DebtType.STUDENT_LOAN,
}


def normalize_priority(value: Any) -> Priority:
    """Map a rank number or tier word onto Priority; unknown values are medium"""
    if isinstance(value, Priority):
        return value
    text = str(value or "").strip().lower()
    if text in PRIORITY_ALIASES:
        return PRIORITY_ALIASES[text]
    try:
        return Priority(text)
    except ValueError:
        return Priority.MEDIUM


def normalize_type(value: Any) -> DebtType:
    """Map a debt type label onto DebtType; unknown values are other"""
    if isinstance(value, DebtType):
        return value
    text = str(value or "").strip().lower()
    if text in TYPE_ALIASES:
        return TYPE_ALIASES[text]
    try:
        return DebtType(text)
    except ValueError:
        return DebtType.OTHER


def parse_amount(value: Any) -> float:
    """Lenient non-negative number parsing; '$1,200.50' and '19.99%' both work"""
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        amount = float(value)
    else:
        cleaned = str(value).strip().replace("$", "").replace(",", "").replace("%", "")
        try:
            amount = float(cleaned)
        except ValueError:
            return 0.0
    if not math.isfinite(amount):
        return 0.0
    return max(0.0, amount)


def _row_to_debt(row: Mapping[str, Optional[str]]) -> Debt:
    debtor = (row.get("debtor") or "").strip()
    name = (row.get("name") or "").strip()

    balance = parse_amount(row.get("current_amount"))
    minimum_payment = parse_amount(row.get("minimum_monthly_payment"))
    interest_rate = parse_amount(row.get("interest_rate"))
    if balance > MAX_AMOUNT or minimum_payment > MAX_AMOUNT:
        raise InvalidDebtDataError(f"Amount for {name!r} exceeds {MAX_AMOUNT}")
    if interest_rate > MAX_INTEREST_RATE:
        raise InvalidDebtDataError(f"Interest rate for {name!r} exceeds {MAX_INTEREST_RATE}%")

    return Debt(
        id=(row.get("id") or "").strip() or generate_id(),
        name=f"{debtor}: {name}" if debtor else name,
        balance=balance,
        minimum_payment=minimum_payment,
        interest_rate=interest_rate,
        type=normalize_type(row.get("type")),
        priority=normalize_priority(row.get("snowball_priority")),
    )


def parse_debts_csv(text: str, max_rows: Optional[int] = None) -> List[Debt]:
    """
    Parse a debt schedule CSV into Debt records.

    Requirements:
    - Header must include name and current_amount (case-insensitive)
    - Rows missing either value are skipped
    - Vocabularies are normalized, never rejected
    - Explicit ids must be unique; blank ids are generated

    Raises:
        InvalidDebtDataError: Empty file, missing required columns, a repeated
            id, or an amount above the accepted ceiling
        ImportTooLargeError: More than max_rows debts
    """
    if not text or not text.strip():
        raise InvalidDebtDataError("CSV file is empty")

    reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff")))
    if reader.fieldnames is None:
        raise InvalidDebtDataError("CSV file has no header row")

    reader.fieldnames = [(column or "").strip().lower() for column in reader.fieldnames]
    missing = REQUIRED_COLUMNS - set(reader.fieldnames)
    if missing:
        raise InvalidDebtDataError(f"CSV is missing required columns: {', '.join(sorted(missing))}")

    debts: List[Debt] = []
    seen_ids: Set[str] = set()
    skipped = 0
    for row in reader:
        if not (row.get("name") or "").strip() or not (row.get("current_amount") or "").strip():
            skipped += 1
            continue

        explicit_id = (row.get("id") or "").strip()
        if explicit_id:
            if explicit_id in seen_ids:
                raise InvalidDebtDataError(f"Duplicate debt id in CSV: {explicit_id}")
            seen_ids.add(explicit_id)

        debts.append(_row_to_debt(row))
        if max_rows is not None and len(debts) > max_rows:
            raise ImportTooLargeError(f"CSV contains more than {max_rows} debts")

    logger.info("Parsed debt CSV", extra={"debts_imported": len(debts), "rows_skipped": skipped})
    return debts


def build_debts_from_entries(entries: Iterable[Mapping[str, Any]]) -> List[Debt]:
    """
    Turn manually entered rows into Debt records.

    Entries without a name, balance or minimum payment are dropped; every
    kept entry gets a fresh id.
    """
    debts = []
    for entry in entries:
        name = str(entry.get("name") or "").strip()
        balance = parse_amount(entry.get("balance"))
        minimum_payment = parse_amount(entry.get("minimum_payment"))
        if not name or not balance or not minimum_payment:
            continue

        debts.append(
            Debt(
                id=generate_id(),
                name=name,
                balance=balance,
                minimum_payment=minimum_payment,
                interest_rate=parse_amount(entry.get("interest_rate")),
                type=normalize_type(entry.get("type")),
                priority=normalize_priority(entry.get("priority")),
            )
        )
    return debts


def template_csv() -> str:
    """Blank upload template with one example row"""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(TEMPLATE_COLUMNS)
    writer.writerow(["", "Chase", "Visa", "credit_card", "2500.00", "75.00", "19.99%", "1"])
    return buffer.getvalue()
