"""
Module 'pricing' (feature-first): moteur de calcul et son point d'entrée HTTP.
Réunit parsing du panier, remises, points, adaptateur JSON et service.
"""

from .errors import InvalidArgument
from .models import (
    Product,
    BasketLine,
    ResolvedLine,
    DiscountPromotion,
    PointsPromotion,
    TransactionRequest,
    TransactionResult,
)
from .basket import resolve_basket
from .discounts import compute_discount
from .points import compute_points, select_points_promotion
from .engine import calculate

__all__ = [
    # erreurs
    "InvalidArgument",
    # modèles
    "Product",
    "BasketLine",
    "ResolvedLine",
    "DiscountPromotion",
    "PointsPromotion",
    "TransactionRequest",
    "TransactionResult",
    # moteur
    "resolve_basket",
    "compute_discount",
    "compute_points",
    "select_points_promotion",
    "calculate",
]
