"""
Cas d'usage 'promotions': lecture via le cache, décodage vers les modèles du moteur.
"""
from typing import Any, Dict, List, Optional
import logging

from pydantic import ValidationError

from reward.pricing.models import DiscountPromotion, PointsPromotion
from reward.utils.rows import to_date, to_decimal, to_int, to_str_list
from . import repository
from .cache import DISCOUNT_PROMOTIONS_KEY, POINTS_PROMOTIONS_KEY, get_promotion_cache

logger = logging.getLogger(__name__)

def decode_discount_promotion(row: Dict[str, Any]) -> Optional[DiscountPromotion]:
    """
    Ligne 'discount_promotions' -> DiscountPromotion.
    - Ligne ignorée (None + warning) si id/dates manquants ou taux hors [0, 1].
    """
    try:
        return DiscountPromotion(
            id=str(row.get("id") or "").strip(),
            name=row.get("name"),
            start_date=to_date(row.get("start_date")),
            end_date=to_date(row.get("end_date")),
            discount_percent=to_decimal(row.get("discount_percent")),
            eligible_product_ids=to_str_list(row.get("eligible_product_ids")),
        )
    except ValidationError as e:
        logger.warning("promotions.service skipped discount promotion id=%s: %s", row.get("id"), e.error_count())
        return None

def decode_points_promotion(row: Dict[str, Any]) -> Optional[PointsPromotion]:
    """
    Ligne 'points_promotions' -> PointsPromotion (None si invalide).
    """
    try:
        return PointsPromotion(
            id=str(row.get("id") or "").strip(),
            name=row.get("name"),
            start_date=to_date(row.get("start_date")),
            end_date=to_date(row.get("end_date")),
            category=row.get("category"),
            points_per_dollar=to_int(row.get("points_per_dollar")),
        )
    except ValidationError as e:
        logger.warning("promotions.service skipped points promotion id=%s: %s", row.get("id"), e.error_count())
        return None

def get_discount_promotions() -> List[DiscountPromotion]:
    rows = get_promotion_cache().get_or_load(DISCOUNT_PROMOTIONS_KEY, repository.list_discount_promotion_rows)
    return [p for p in (decode_discount_promotion(r) for r in rows) if p is not None]

def get_points_promotions() -> List[PointsPromotion]:
    rows = get_promotion_cache().get_or_load(POINTS_PROMOTIONS_KEY, repository.list_points_promotion_rows)
    return [p for p in (decode_points_promotion(r) for r in rows) if p is not None]

def refresh_promotions() -> None:
    """Vide le cache: la prochaine lecture recharge depuis Supabase."""
    get_promotion_cache().invalidate()
