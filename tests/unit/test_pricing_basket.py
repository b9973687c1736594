from decimal import Decimal

from reward.pricing.basket import index_products, resolve_basket
from reward.pricing.basket_parsing import parse_amount, parse_quantity
from reward.pricing.models import BasketLine, Product


def _line(product_id, price, qty):
    return BasketLine(product_id=product_id, unit_price_text=price, quantity_text=qty)


def test_parse_amount_accepts_plain_and_thousands():
    assert parse_amount("10.00") == Decimal("10.00")
    assert parse_amount(" 5 ") == Decimal("5")
    assert parse_amount(".5") == Decimal("0.5")
    assert parse_amount("1,250.50") == Decimal("1250.50")


def test_parse_amount_invalid_is_zero():
    for raw in ["abc", "", None, "-3", "0", "1e3", "NaN", "Infinity", "12.3.4"]:
        assert parse_amount(raw) == Decimal("0"), raw


def test_parse_quantity_integer_only():
    assert parse_quantity("2") == 2
    assert parse_quantity("+3") == 3
    # Pas de séparateur de milliers pour une quantité
    assert parse_quantity("1,000") == 0
    # Pas de quantités fractionnaires
    assert parse_quantity("2.5") == 0
    assert parse_quantity("-1") == 0
    assert parse_quantity("") == 0
    assert parse_quantity(None) == 0


def test_index_products_keeps_first_duplicate():
    first = Product(product_id="PRD01", category="Fuel", unit_price=Decimal("1.2"))
    second = Product(product_id="PRD01", category="Shop", unit_price=Decimal("9.9"))
    catalog = index_products([first, second])
    assert catalog["PRD01"].category == "Fuel"


def test_resolve_basket_uses_basket_price_and_drops_unknown(products):
    lines = [_line("PRD01", "10.00", "2"), _line("PRD99", "4.00", "1"), _line(None, "1.00", "1")]
    resolved, subtotal = resolve_basket(lines, products)

    assert [r.product_id for r in resolved] == ["PRD01"]
    assert resolved[0].category == "Fuel"
    # Le prix du panier prime sur celui du catalogue (1.20)
    assert resolved[0].line_total == Decimal("20.00")
    assert subtotal == Decimal("20.00")


def test_resolve_basket_unparseable_values_weigh_nothing(products):
    lines = [_line("PRD04", "abc", "3"), _line("PRD05", "5.10", "x"), _line("PRD06", "3.40", "1")]
    resolved, subtotal = resolve_basket(lines, products)

    # Les lignes restent, avec un total nul
    assert len(resolved) == 3
    assert [r.line_total for r in resolved] == [Decimal("0"), Decimal("0"), Decimal("3.40")]
    assert subtotal == Decimal("3.40")


def test_resolve_basket_empty():
    resolved, subtotal = resolve_basket([], [])
    assert resolved == []
    assert subtotal == Decimal("0")


def test_negative_values_weigh_nothing():
    assert parse_amount("-3") == Decimal("0")
    assert parse_amount("-0.01") == Decimal("0")
    assert parse_quantity("-2") == 0
