"""Display formatting and id helpers"""

import secrets
import string

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_id(length: int = 9) -> str:
    """Random lowercase alphanumeric id for debts entered without one"""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(length))


def format_currency(amount: float) -> str:
    """USD with thousands separators, e.g. -1234.5 -> -$1,234.50"""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_percentage(rate: float) -> str:
    return f"{rate:.2f}%"


def format_duration(months: int) -> str:
    """Months rendered as 'N years, M months' (years omitted when zero)"""
    years, remaining = divmod(months, 12)
    month_label = "month" if remaining == 1 else "months"
    if years == 0:
        return f"{remaining} {month_label}"
    year_label = "year" if years == 1 else "years"
    return f"{years} {year_label}, {remaining} {month_label}"
