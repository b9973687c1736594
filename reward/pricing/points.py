"""
Calcul des points de fidélité: une seule promotion points par transaction.
- Sélection: points_per_dollar le plus élevé, puis l'identifiant le plus petit (ordre lexicographique).
- Catégorie "Any": points sur la partie entière du total payé.
- Catégorie précise: la remise est recalculée sur les seules lignes de la catégorie,
  les points portent sur la partie entière de ce sous-total remisé.
"""
from datetime import date
from decimal import Decimal, ROUND_DOWN
from typing import Iterable, List, Optional

from .dates import is_active
from .discounts import compute_discount
from .models import DiscountPromotion, PointsPromotion, ResolvedLine

ANY_CATEGORY = "Any"


def active_points_promotions(promotions: Iterable[PointsPromotion], on: date) -> List[PointsPromotion]:
    return [p for p in promotions or [] if is_active(p, on)]

def select_points_promotion(promotions: Iterable[PointsPromotion], on: date) -> Optional[PointsPromotion]:
    active = active_points_promotions(promotions, on)
    if not active:
        return None
    return min(active, key=lambda p: (-p.points_per_dollar, p.id))

def whole_units(amount: Decimal) -> int:
    # Tronque vers zéro: 15.99 -> 15
    return int(amount.to_integral_value(rounding=ROUND_DOWN))

def category_total(
    lines: Iterable[ResolvedLine],
    category: str,
    on: date,
    discount_promotions: Iterable[DiscountPromotion],
) -> Decimal:
    """Sous-total remisé des lignes de la catégorie (mêmes règles de remise que le panier)."""
    category_lines = [line for line in lines if line.category == category]
    if not category_lines:
        return Decimal("0")
    subtotal = sum((line.line_total for line in category_lines), Decimal("0"))
    return subtotal - compute_discount(category_lines, on, discount_promotions)

def compute_points(
    lines: Iterable[ResolvedLine],
    grand_total: Decimal,
    on: date,
    points_promotions: Iterable[PointsPromotion],
    discount_promotions: Iterable[DiscountPromotion] = (),
) -> int:
    """
    Points gagnés pour la transaction (jamais d'erreur, 0 par défaut).
    """
    promotion = select_points_promotion(points_promotions, on)
    if promotion is None:
        return 0

    if promotion.category == ANY_CATEGORY:
        base = grand_total
    else:
        base = category_total(list(lines), promotion.category or "", on, discount_promotions)

    if base <= 0:
        return 0
    return whole_units(base) * promotion.points_per_dollar
