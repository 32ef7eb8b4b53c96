"""Catalog Service Models"""

from .base import CatalogBaseModel, utc_now
from .category import Category
from .product import Product

__all__ = [
    "CatalogBaseModel",
    "Category",
    "Product",
    "utc_now",
]
