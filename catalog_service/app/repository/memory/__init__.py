"""
In-memory repository implementations.

Process-lifetime storage; everything is lost when the service stops.
"""

from .base import InMemoryRepository
from .category_store import InMemoryCategoryRepository
from .product_store import InMemoryProductRepository

__all__ = [
    "InMemoryRepository",
    "InMemoryCategoryRepository",
    "InMemoryProductRepository",
]
