"""
Accès aux données pour la feature 'catalog'.
"""
from typing import List
import logging
import reward.infra.supabase_client as supabase_client
from reward.config import PRODUCTS_TABLE

logger = logging.getLogger(__name__)

# module reward.catalog.repository
def list_product_rows() -> List[dict]:
    """
    Instantané complet de la table products (pas de pagination).
    - Une erreur de lecture est loggée puis relancée: un catalogue vide fausserait le calcul.
    """
    try:
        res = supabase_client.get_supabase().table(PRODUCTS_TABLE).select("*").execute()
        return res.data or []
    except Exception:
        logger.exception("catalog.repository.list_product_rows failed table=%s", PRODUCTS_TABLE)
        raise
