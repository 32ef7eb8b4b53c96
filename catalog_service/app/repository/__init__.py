"""Repository layer for Catalog Service"""

from .base import BaseRepository
from .category_repository import CategoryRepository
from .memory import InMemoryCategoryRepository, InMemoryProductRepository
from .product_repository import ProductRepository

__all__ = [
    "BaseRepository",
    "CategoryRepository",
    "ProductRepository",
    "InMemoryCategoryRepository",
    "InMemoryProductRepository",
]
