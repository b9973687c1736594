from fastapi import APIRouter, Depends, HTTPException
import logging

from reward.utils.rate_limit import optional_rate_limit
from reward.pricing.schemas import format_money
from . import service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/products", tags=["Catalog API"])

@router.get("", dependencies=[Depends(optional_rate_limit(times=120, seconds=60))])
def list_products():
    """Catalogue complet (prix unitaires en texte à deux décimales)."""
    try:
        products = service.get_catalog()
    except Exception:
        logger.exception("catalog.views.list_products failed")
        raise HTTPException(status_code=500, detail="Erreur lors de la lecture du catalogue")
    return [
        {
            "ProductId": p.product_id,
            "ProductName": p.product_name,
            "Category": p.category,
            "UnitPrice": format_money(p.unit_price),
        }
        for p in products
    ]
