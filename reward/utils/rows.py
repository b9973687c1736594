"""
Conversion des lignes brutes Supabase (dict JSON) vers des valeurs typées.
- Les montants passent par str() pour éviter les erreurs d'arrondi des float.
- Les dates acceptent "YYYY-MM-DD" avec ou sans partie horaire.
"""
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, List, Optional
import json

def to_decimal(value: Any, default: Decimal = Decimal("0")) -> Decimal:
    if value is None or value == "":
        return default
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return default

def to_int(value: Any, default: int = 0) -> int:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return default

def to_date(value: Any) -> Optional[date]:
    """2020-01-01, 2020-01-01T00:00:00, 2020-01-01 00:00:00+00 -> date(2020, 1, 1)."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        return None

def to_str_list(value: Any) -> List[str]:
    """
    Liste d'identifiants: tableau Postgres (liste JSON), texte JSON '["PRD01"]' ou "PRD01,PRD02".
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return [str(v).strip() for v in value if str(v).strip()]
    text = str(value).strip()
    if not text:
        return []
    if text.startswith("["):
        try:
            return to_str_list(json.loads(text))
        except ValueError:
            return []
    return [part.strip() for part in text.split(",") if part.strip()]
