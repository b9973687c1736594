from typing import Any, Dict, List, Optional
import logging

from pydantic import ValidationError

from reward.pricing.models import Product
from reward.utils.rows import to_decimal
from . import repository

logger = logging.getLogger(__name__)

def decode_product(row: Dict[str, Any]) -> Optional[Product]:
    """
    Ligne 'products' -> Product. Retourne None (ligne ignorée) si product_id est absent.
    """
    product_id = str(row.get("product_id") or row.get("id") or "").strip()
    if not product_id:
        return None
    try:
        return Product(
            product_id=product_id,
            product_name=row.get("product_name") or row.get("name"),
            category=row.get("category"),
            unit_price=to_decimal(row.get("unit_price")),
        )
    except ValidationError:
        logger.warning("catalog.service.decode_product skipped row product_id=%s", product_id)
        return None

def get_catalog() -> List[Product]:
    """
    Catalogue complet, lu à chaque calcul (non mis en cache).
    """
    products: List[Product] = []
    for row in repository.list_product_rows():
        product = decode_product(row)
        if product is not None:
            products.append(product)
    return products