# module reward.promotions.views
from fastapi import APIRouter, Depends, HTTPException, Query
import logging

from reward.utils.rate_limit import optional_rate_limit
from reward.pricing.dates import format_transaction_date, parse_transaction_date
from reward.pricing.discounts import active_discounts
from reward.pricing.errors import InvalidArgument
from reward.pricing.points import active_points_promotions, select_points_promotion
from . import service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/promotions", tags=["Promotions API"])

def _discount_out(p):
    return {
        "Id": p.id,
        "Name": p.name,
        "StartDate": format_transaction_date(p.start_date),
        "EndDate": format_transaction_date(p.end_date),
        "DiscountPercent": str(p.discount_percent),
        "EligibleProductIds": list(p.eligible_product_ids),
    }

def _points_out(p):
    return {
        "Id": p.id,
        "Name": p.name,
        "StartDate": format_transaction_date(p.start_date),
        "EndDate": format_transaction_date(p.end_date),
        "Category": p.category,
        "PointsPerDollar": p.points_per_dollar,
    }

@router.get("/active", dependencies=[Depends(optional_rate_limit(times=120, seconds=60))])
def active_promotions(date: str = Query(..., description="dd-MMM-yyyy")):
    """
    Promotions actives à une date (bornes incluses).
    - SelectedPointsPromotion: celle que le calcul retiendrait (null si aucune).
    - 400 si la date est illisible.
    """
    try:
        on = parse_transaction_date(date)
    except InvalidArgument as e:
        raise HTTPException(status_code=400, detail=e.message)

    try:
        discount_promotions = service.get_discount_promotions()
        points_promotions = service.get_points_promotions()
    except Exception:
        logger.exception("promotions.views.active_promotions failed")
        raise HTTPException(status_code=500, detail="Erreur lors de la lecture des promotions")

    selected = select_points_promotion(points_promotions, on)
    return {
        "Date": format_transaction_date(on),
        "DiscountPromotions": [_discount_out(p) for p in active_discounts(discount_promotions, on)],
        "PointsPromotions": [_points_out(p) for p in active_points_promotions(points_promotions, on)],
        "SelectedPointsPromotion": _points_out(selected) if selected else None,
    }
