"""
Adaptateur JSON <-> modèles du moteur.
- Clés acceptées en entrée: "CustomerId", "Customer Id", "customer_id" (idem pour les autres champs).
- Prix/quantités reçus en texte (ou nombres JSON convertis en texte), parsés plus tard par le moteur.
- Sortie: montants en texte à deux décimales (arrondi half-up), points en texte.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from .models import BasketLine, TransactionRequest, TransactionResult

CENTS = Decimal("0.01")


def _as_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (dict, list)):
        return None
    # Nombre JSON entier écrit en flottant: 2.0 -> "2"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class BasketItemIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("ProductId", "Product Id", "product_id")
    )
    unit_price: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("UnitPrice", "Unit Price", "unit_price")
    )
    quantity: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("Quantity", "quantity")
    )

    @field_validator("product_id", "unit_price", "quantity", mode="before")
    @classmethod
    def text_fields(cls, v: Any) -> Optional[str]:
        return _as_text(v)

    def to_line(self) -> BasketLine:
        return BasketLine(
            product_id=(self.product_id or "").strip() or None,
            unit_price_text=self.unit_price,
            quantity_text=self.quantity,
        )


class TransactionRequestIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    customer_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("CustomerId", "Customer Id", "customer_id")
    )
    loyalty_card: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("LoyaltyCard", "Loyalty Card", "loyalty_card")
    )
    transaction_date: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("TransactionDate", "Transaction Date", "transaction_date")
    )
    basket: Optional[List[BasketItemIn]] = Field(
        default=None, validation_alias=AliasChoices("Basket", "basket")
    )

    @field_validator("customer_id", "loyalty_card", "transaction_date", mode="before")
    @classmethod
    def text_fields(cls, v: Any) -> Optional[str]:
        return _as_text(v)

    def is_complete(self) -> bool:
        """CustomerId, LoyaltyCard et un panier non vide sont requis par l'API."""
        return bool((self.customer_id or "").strip()) and bool((self.loyalty_card or "").strip()) and bool(self.basket)

    def to_request(self) -> TransactionRequest:
        return TransactionRequest(
            customer_id=self.customer_id,
            loyalty_card=self.loyalty_card,
            transaction_date=self.transaction_date,
            basket=[item.to_line() for item in self.basket or []],
        )


class TransactionResponseOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    customer_id: Optional[str] = Field(default=None, serialization_alias="CustomerId")
    loyalty_card: Optional[str] = Field(default=None, serialization_alias="LoyaltyCard")
    transaction_date: Optional[str] = Field(default=None, serialization_alias="TransactionDate")
    total_amount: str = Field(serialization_alias="TotalAmount")
    discount_applied: str = Field(serialization_alias="DiscountApplied")
    grand_total: str = Field(serialization_alias="GrandTotal")
    points_earned: str = Field(serialization_alias="PointsEarned")

    @classmethod
    def from_result(cls, result: TransactionResult) -> "TransactionResponseOut":
        return cls(
            customer_id=result.customer_id,
            loyalty_card=result.loyalty_card,
            transaction_date=result.transaction_date,
            total_amount=format_money(result.total_amount),
            discount_applied=format_money(result.discount_applied),
            grand_total=format_money(result.grand_total),
            points_earned=str(result.points_earned),
        )

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


def format_money(amount: Decimal) -> str:
    # 2.0000 -> "2.00", 2.005 -> "2.01"
    return str(amount.quantize(CENTS, rounding=ROUND_HALF_UP))
