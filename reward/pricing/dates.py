"""
Dates de transaction (format fixe dd-MMM-yyyy, mois anglais, indépendant de la locale)
et règle d'activité des promotions (bornes incluses).
"""
import re
from datetime import date
from typing import Optional

from .errors import InvalidArgument

MONTHS = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}
MONTH_LABELS = {v: k.capitalize() for k, v in MONTHS.items()}

_DATE_RE = re.compile(r"^(\d{2})-([A-Za-z]{3})-(\d{4})$")

INVALID_DATE_MESSAGE = "Invalid 'Transaction Date' format. Must be 'dd-MMM-yyyy'."


def parse_transaction_date(value: Optional[str]) -> date:
    """
    "15-Feb-2025" -> date(2025, 2, 15).
    - Jour sur deux chiffres, mois abrégé anglais (casse ignorée), année sur quatre chiffres.
    - Lève InvalidArgument pour tout autre format ou une date inexistante (31-Feb-2020).
    """
    match = _DATE_RE.match((value or "").strip())
    if not match:
        raise InvalidArgument(INVALID_DATE_MESSAGE, code="invalid_transaction_date")
    day, month_label, year = match.groups()
    month = MONTHS.get(month_label.lower())
    if month is None:
        raise InvalidArgument(INVALID_DATE_MESSAGE, code="invalid_transaction_date")
    try:
        return date(int(year), month, int(day))
    except ValueError:
        raise InvalidArgument(INVALID_DATE_MESSAGE, code="invalid_transaction_date")


def format_transaction_date(value: date) -> str:
    return f"{value.day:02d}-{MONTH_LABELS[value.month]}-{value.year:04d}"


def is_active(promotion, on: date) -> bool:
    # start <= date <= end, bornes incluses
    return promotion.start_date <= on <= promotion.end_date
