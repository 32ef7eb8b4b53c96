"""Product repository contract"""

from abc import abstractmethod
from decimal import Decimal
from typing import List

from ..models.product import Product
from .base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """Product-specific queries on top of the generic CRUD contract"""

    @abstractmethod
    async def get_by_category_id(self, category_id: int) -> List[Product]:
        """Get products referencing ``category_id`` (empty if none)"""

    @abstractmethod
    async def get_active_products(self) -> List[Product]:
        """Get products flagged active"""

    @abstractmethod
    async def search_by_name(self, term: str) -> List[Product]:
        """Case-insensitive substring search on name"""

    @abstractmethod
    async def get_products_in_price_range(
        self, min_price: Decimal, max_price: Decimal
    ) -> List[Product]:
        """Get products priced within ``[min_price, max_price]``"""
