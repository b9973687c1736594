"""
Module 'catalog' (feature-first): lecture du catalogue produits.
"""
from .repository import list_product_rows
from .service import decode_product, get_catalog

__all__ = [
    "list_product_rows",
    "decode_product",
    "get_catalog",
]
