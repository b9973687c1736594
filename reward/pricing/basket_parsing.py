"""
Parsing tolérant des champs texte du panier ("UnitPrice", "Quantity").
Toute valeur illisible ou non finie vaut 0 : la ligne reste dans le calcul
mais ne pèse rien, aucune erreur n'est levée.

Les valeurs lisibles mais négatives valent aussi 0 : une ligne négative ferait baisser
le sous-total sans baisser la remise, et la remise pourrait dépasser le sous-total.
"""
import re
from decimal import Decimal, InvalidOperation
from typing import Any

_AMOUNT_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")
_INTEGER_RE = re.compile(r"^[+-]?\d+$")

ZERO = Decimal("0")


def _clean(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def parse_amount(value: Any) -> Decimal:
    """
    "10.00" -> Decimal("10.00"), "1,250.50" -> Decimal("1250.50"), "abc" -> 0, None -> 0.
    Pas de notation exponentielle ni de NaN/Infinity.
    """
    # Séparateur de milliers toléré pour les montants seulement
    text = _clean(value).replace(",", "")
    if not _AMOUNT_RE.match(text):
        return ZERO
    try:
        amount = Decimal(text)
    except InvalidOperation:
        return ZERO
    return amount if amount > 0 else ZERO


def parse_quantity(value: Any) -> int:
    """
    Quantité entière: "2" -> 2, "2.5" -> 0, "1,000" -> 0, "" -> 0.
    """
    text = _clean(value)
    if not _INTEGER_RE.match(text):
        return 0
    qty = int(text)
    return qty if qty > 0 else 0
