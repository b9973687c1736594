from datetime import date
from decimal import Decimal

from reward.pricing.models import PointsPromotion, ResolvedLine
from reward.pricing.points import (
    category_total,
    compute_points,
    select_points_promotion,
    whole_units,
)


def _pp(pid, category, ppd, start=date(2020, 1, 1), end=date(2020, 12, 31)):
    return PointsPromotion(id=pid, start_date=start, end_date=end, category=category, points_per_dollar=ppd)


def _resolved(product_id, category, total):
    return ResolvedLine(product_id=product_id, category=category, unit_price=Decimal(total), quantity=1, line_total=Decimal(total))


def test_whole_units_truncates():
    assert whole_units(Decimal("15.99")) == 15
    assert whole_units(Decimal("0.99")) == 0
    assert whole_units(Decimal("8")) == 8


def test_select_highest_rate_then_smallest_id():
    on = date(2020, 6, 1)
    promos = [_pp("PP9", "Any", 2), _pp("PP5", "Fuel", 3), _pp("PP2", "Shop", 3)]
    assert select_points_promotion(promos, on).id == "PP2"
    # L'ordre d'entrée ne change rien
    assert select_points_promotion(list(reversed(promos)), on).id == "PP2"


def test_select_none_when_nothing_active(points_promotions):
    assert select_points_promotion(points_promotions, date(2025, 2, 15)) is None


def test_any_category_uses_grand_total(points_promotions):
    lines = [_resolved("PRD01", "Fuel", "15.00")]
    # PP001 (Any, 2) actif le 10-Jan-2020
    assert compute_points(lines, Decimal("15.00"), date(2020, 1, 10), points_promotions) == 30
    assert compute_points(lines, Decimal("15.99"), date(2020, 1, 10), points_promotions) == 30


def test_category_points_use_discounted_category_lines(points_promotions, discount_promotions):
    lines = [_resolved("PRD02", "Fuel", "10.00"), _resolved("PRD04", "Shop", "5.00")]
    on = date(2020, 2, 10)
    # PP002 (Fuel, 3) + DP001 (20 % sur PRD02): base Fuel = 10 - 2 = 8
    assert category_total(lines, "Fuel", on, discount_promotions) == Decimal("8.0000")
    assert compute_points(lines, Decimal("13.00"), on, points_promotions, discount_promotions) == 24


def test_category_points_zero_without_matching_lines(points_promotions):
    lines = [_resolved("PRD01", "Fuel", "50.00")]
    # PP003 (Shop, 4) actif mais panier 100 % carburant
    assert compute_points(lines, Decimal("50.00"), date(2020, 3, 5), points_promotions) == 0


def test_points_zero_when_no_promotion_or_nothing_paid(points_promotions):
    lines = [_resolved("PRD01", "Fuel", "10.00")]
    assert compute_points(lines, Decimal("10.00"), date(2025, 2, 15), points_promotions) == 0
    assert compute_points([], Decimal("0"), date(2020, 1, 10), points_promotions) == 0
