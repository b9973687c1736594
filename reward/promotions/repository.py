"""
Accès aux données pour la feature 'promotions'.
"""
from typing import List
import logging
import reward.infra.supabase_client as supabase_client
from reward.config import DISCOUNT_PROMOTIONS_TABLE, POINTS_PROMOTIONS_TABLE

logger = logging.getLogger(__name__)

# module reward.promotions.repository
def _select_all(table: str) -> List[dict]:
    try:
        res = supabase_client.get_supabase().table(table).select("*").execute()
        return res.data or []
    except Exception:
        logger.exception("promotions.repository._select_all failed table=%s", table)
        raise

def list_discount_promotion_rows() -> List[dict]:
    """
    Toutes les promotions remise (non filtrées par date, le moteur re-vérifie).
    """
    return _select_all(DISCOUNT_PROMOTIONS_TABLE)

def list_points_promotion_rows() -> List[dict]:
    """
    Toutes les promotions points (non filtrées par date).
    """
    return _select_all(POINTS_PROMOTIONS_TABLE)
