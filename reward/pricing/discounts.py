"""
Sélection des remises: la meilleure remise active s'applique à chaque ligne, jamais de cumul.
"""
from datetime import date
from decimal import Decimal
from typing import Iterable, List

from .dates import is_active
from .models import DiscountPromotion, ResolvedLine


def active_discounts(promotions: Iterable[DiscountPromotion], on: date) -> List[DiscountPromotion]:
    # Re-vérifie les dates même si la source a déjà filtré
    return [p for p in promotions or [] if is_active(p, on)]

def best_discount_rate(product_id: str, active: Iterable[DiscountPromotion]) -> Decimal:
    """
    Taux le plus élevé parmi les promotions actives qui listent le produit, 0 sinon.
    """
    best = Decimal("0")
    for promo in active:
        if product_id in promo.eligible_product_ids:
            best = max(best, promo.discount_percent)
    return best

def compute_discount(lines: Iterable[ResolvedLine], on: date, promotions: Iterable[DiscountPromotion]) -> Decimal:
    """
    Montant total de remise pour les lignes résolues à la date donnée.
    - Par ligne: best_rate x line_total.
    - Aucune promotion active -> 0 sans parcourir les lignes.
    """
    active = active_discounts(promotions, on)
    if not active:
        return Decimal("0")

    total = Decimal("0")
    for line in lines:
        rate = best_discount_rate(line.product_id, active)
        if rate > 0:
            total += line.line_total * rate
    return total
