"""
Résolution du panier (pas de DB, pas de cache).
"""
import logging
from decimal import Decimal
from typing import Dict, Iterable, List, Tuple

from .models import BasketLine, Product, ResolvedLine

logger = logging.getLogger(__name__)

# module reward.pricing.basket
def index_products(products: Iterable[Product]) -> Dict[str, Product]:
    """
    Construit {product_id: Product}.
    - En cas de doublon, le premier produit rencontré est conservé.
    """
    by_id: Dict[str, Product] = {}
    for product in products or []:
        by_id.setdefault(product.product_id, product)
    return by_id

def resolve_basket(lines: Iterable[BasketLine], products: Iterable[Product]) -> Tuple[List[ResolvedLine], Decimal]:
    """
    Rattache chaque ligne du panier au catalogue et calcule le sous-total.
    - Ignore silencieusement les lignes dont le produit est inconnu (pas d'erreur).
    - line_total = prix unitaire x quantité (texte parsé, 0 si illisible).
    - Panier vide -> ([], 0).
    """
    catalog = index_products(products)
    resolved: List[ResolvedLine] = []
    subtotal = Decimal("0")
    for line in lines or []:
        product = catalog.get(line.product_id or "")
        if product is None:
            logger.debug("pricing.basket dropped unknown product_id=%s", line.product_id)
            continue
        unit_price = line.unit_price
        quantity = line.quantity
        line_total = unit_price * quantity
        subtotal += line_total
        resolved.append(ResolvedLine(
            product_id=product.product_id,
            category=product.category,
            unit_price=unit_price,
            quantity=quantity,
            line_total=line_total,
        ))
    return resolved, subtotal
