"""
Cas d'usage 'pricing': charge les instantanés (catalogue, promotions) puis délègue au moteur.
Le moteur reste pur; toutes les lectures (Supabase, cache) se font ici, une fois par calcul.
"""
from reward.catalog import service as catalog_service
from reward.promotions import service as promotions_service
from . import engine
from .models import TransactionRequest, TransactionResult

def calculate_transaction(request: TransactionRequest) -> TransactionResult:
    """
    - Catalogue complet (lu à chaque appel)
    - Promotions remise et points (via cache TTL)
    - engine.calculate(...) -> TransactionResult (InvalidArgument propagée à la vue)
    """
    products = catalog_service.get_catalog()
    discount_promotions = promotions_service.get_discount_promotions()
    points_promotions = promotions_service.get_points_promotions()
    return engine.calculate(request, products, discount_promotions, points_promotions)
