"""
Point d'entrée du moteur de calcul: sous-total, remise, total payé et points.
Fonction pure: reçoit des instantanés (catalogue, promotions) déjà chargés, ne lit ni n'écrit rien.
"""
import logging
from typing import Iterable

from .basket import resolve_basket
from .dates import parse_transaction_date
from .discounts import compute_discount
from .models import (
    DiscountPromotion,
    PointsPromotion,
    Product,
    TransactionRequest,
    TransactionResult,
)
from .points import compute_points

logger = logging.getLogger(__name__)

# module reward.pricing.engine
def calculate(
    request: TransactionRequest,
    products: Iterable[Product],
    discount_promotions: Iterable[DiscountPromotion],
    points_promotions: Iterable[PointsPromotion],
) -> TransactionResult:
    """
    Étapes:
      1) Date de transaction (InvalidArgument si illisible, seule erreur possible)
      2) Résolution du panier -> lignes + sous-total
      3) Remises (meilleure par ligne)
      4) Total payé = sous-total - remise
      5) Points (une seule promotion)
    """
    transaction_date = parse_transaction_date(request.transaction_date)
    discount_promotions = list(discount_promotions or [])

    resolved, total_amount = resolve_basket(request.basket, products)
    discount_applied = compute_discount(resolved, transaction_date, discount_promotions)
    grand_total = total_amount - discount_applied
    points_earned = compute_points(
        resolved,
        grand_total,
        transaction_date,
        points_promotions,
        discount_promotions,
    )

    logger.info(
        "pricing.calculate customer_id=%s date=%s lines=%s resolved=%s total=%s discount=%s points=%s",
        request.customer_id,
        transaction_date.isoformat(),
        len(request.basket),
        len(resolved),
        total_amount,
        discount_applied,
        points_earned,
    )
    return TransactionResult(
        customer_id=request.customer_id,
        loyalty_card=request.loyalty_card,
        transaction_date=request.transaction_date,
        total_amount=total_amount,
        discount_applied=discount_applied,
        grand_total=grand_total,
        points_earned=points_earned,
    )
