"""Request and response schemas for Catalog Service"""

from .category import (
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
    CategoryWithProductsResponse,
)
from .product import ProductCreate, ProductResponse, ProductUpdate

__all__ = [
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "CategoryWithProductsResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
]
