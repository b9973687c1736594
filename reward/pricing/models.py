# module reward.pricing.models
"""
Types du moteur de calcul (produits, promotions, panier, résultat).
- Immuables (frozen) : un calcul travaille sur un instantané qui ne bouge pas.
- Montants en Decimal, jamais en float.
- Les champs texte du panier (prix, quantité) sont parsés à la demande, 0 si illisibles.
"""
from datetime import date
from decimal import Decimal
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .basket_parsing import parse_amount, parse_quantity


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_id: str = Field(min_length=1)
    product_name: Optional[str] = None
    category: Optional[str] = None
    unit_price: Decimal = Decimal("0")


class BasketLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_id: Optional[str] = None
    unit_price_text: Optional[str] = None
    quantity_text: Optional[str] = None

    @property
    def unit_price(self) -> Decimal:
        return parse_amount(self.unit_price_text)

    @property
    def quantity(self) -> int:
        return parse_quantity(self.quantity_text)


class ResolvedLine(BaseModel):
    """Ligne du panier rattachée au catalogue (catégorie + sous-total de ligne)."""
    model_config = ConfigDict(frozen=True)

    product_id: str
    category: Optional[str] = None
    unit_price: Decimal
    quantity: int
    line_total: Decimal


class DiscountPromotion(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: Optional[str] = None
    start_date: date
    end_date: date
    # 0.20 pour 20 %
    discount_percent: Decimal = Field(ge=0, le=1)
    # Vide = ne s'applique à aucun produit
    eligible_product_ids: Tuple[str, ...] = ()


class PointsPromotion(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: Optional[str] = None
    start_date: date
    end_date: date
    # "Any" ou une catégorie précise ("Fuel", "Shop", ...)
    category: Optional[str] = None
    points_per_dollar: int = Field(default=0, ge=0)


class TransactionRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    customer_id: Optional[str] = None
    loyalty_card: Optional[str] = None
    transaction_date: Optional[str] = None
    basket: List[BasketLine] = Field(default_factory=list)


class TransactionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    customer_id: Optional[str] = None
    loyalty_card: Optional[str] = None
    transaction_date: Optional[str] = None
    total_amount: Decimal = Decimal("0")
    discount_applied: Decimal = Decimal("0")
    grand_total: Decimal = Decimal("0")
    points_earned: int = 0
