"""
Données de référence (catalogue, promotions) insérées dans Supabase si la table products est vide.

Usage:
    python -m reward.seed

Nécessite SUPABASE_SERVICE_KEY (écritures via le client service-role).
"""
import logging
from typing import Any, Dict, List

from reward.config import PRODUCTS_TABLE, DISCOUNT_PROMOTIONS_TABLE, POINTS_PROMOTIONS_TABLE

logger = logging.getLogger(__name__)

PRODUCTS: List[Dict[str, Any]] = [
    {"product_id": "PRD01", "product_name": "Vortex 95", "category": "Fuel", "unit_price": "1.20"},
    {"product_id": "PRD02", "product_name": "Vortex 98", "category": "Fuel", "unit_price": "1.30"},
    {"product_id": "PRD03", "product_name": "Diesel", "category": "Fuel", "unit_price": "1.10"},
    {"product_id": "PRD04", "product_name": "Twix 55g", "category": "Shop", "unit_price": "2.30"},
    {"product_id": "PRD05", "product_name": "Mars 72g", "category": "Shop", "unit_price": "5.10"},
    {"product_id": "PRD06", "product_name": "SNICKERS 72G", "category": "Shop", "unit_price": "3.40"},
    {"product_id": "PRD07", "product_name": "Bounty 3 63g", "category": "Shop", "unit_price": "6.90"},
    {"product_id": "PRD08", "product_name": "Snickers 50g", "category": "Shop", "unit_price": "4.00"},
]

POINTS_PROMOTIONS: List[Dict[str, Any]] = [
    {"id": "PP001", "name": "New Year Promo", "start_date": "2020-01-01", "end_date": "2020-01-30", "category": "Any", "points_per_dollar": 2},
    {"id": "PP002", "name": "Fuel Promo", "start_date": "2020-02-05", "end_date": "2020-02-15", "category": "Fuel", "points_per_dollar": 3},
    {"id": "PP003", "name": "Shop Promo", "start_date": "2020-03-01", "end_date": "2020-03-20", "category": "Shop", "points_per_dollar": 4},
]

# DP002 sans produit éligible: active mais sans effet
DISCOUNT_PROMOTIONS: List[Dict[str, Any]] = [
    {"id": "DP001", "name": "Fuel Discount Promo", "start_date": "2020-01-01", "end_date": "2020-02-15", "discount_percent": "0.20", "eligible_product_ids": ["PRD02"]},
    {"id": "DP002", "name": "Happy Promo", "start_date": "2020-03-02", "end_date": "2020-03-20", "discount_percent": "0.15", "eligible_product_ids": []},
]


def seed_if_empty(client) -> bool:
    """
    Insère catalogue et promotions si 'products' est vide.
    Retourne True si des données ont été insérées, False sinon.
    Les erreurs Supabase sont propagées (l'appelant décide de les journaliser).
    """
    res = client.table(PRODUCTS_TABLE).select("product_id").limit(1).execute()
    if res.data:
        logger.info("seed skipped: table %s already populated", PRODUCTS_TABLE)
        return False

    client.table(PRODUCTS_TABLE).insert(PRODUCTS).execute()
    client.table(POINTS_PROMOTIONS_TABLE).insert(POINTS_PROMOTIONS).execute()
    client.table(DISCOUNT_PROMOTIONS_TABLE).insert(DISCOUNT_PROMOTIONS).execute()
    logger.info(
        "seed inserted products=%s points_promotions=%s discount_promotions=%s",
        len(PRODUCTS), len(POINTS_PROMOTIONS), len(DISCOUNT_PROMOTIONS),
    )
    return True


if __name__ == "__main__":
    import reward.infra.supabase_client as supabase_client

    logging.basicConfig(level=logging.INFO)
    seed_if_empty(supabase_client.get_service_supabase())
