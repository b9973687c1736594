"""
Module 'promotions' (feature-first): lecture des promotions remise/points via un cache TTL.
"""
from .cache import PromotionCache, build_promotion_cache, get_promotion_cache, set_promotion_cache
from .service import (
    decode_discount_promotion,
    decode_points_promotion,
    get_discount_promotions,
    get_points_promotions,
    refresh_promotions,
)

__all__ = [
    "PromotionCache",
    "build_promotion_cache",
    "get_promotion_cache",
    "set_promotion_cache",
    "decode_discount_promotion",
    "decode_points_promotion",
    "get_discount_promotions",
    "get_points_promotions",
    "refresh_promotions",
]
