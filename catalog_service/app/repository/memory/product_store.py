"""In-memory product repository"""

from decimal import Decimal
from typing import List

from ...models.base import utc_now
from ...models.product import Product
from ..product_repository import ProductRepository
from .base import InMemoryRepository
from .seed import sample_products


class InMemoryProductRepository(InMemoryRepository[Product], ProductRepository):
    """Product store; category_id is stored as given, never checked here"""

    entity_name = "Product"

    def __init__(self, seed_data: bool = True) -> None:
        super().__init__(sample_products() if seed_data else None)

    def _touch(self, record: Product) -> None:
        record.updated_at = utc_now()

    async def get_by_category_id(self, category_id: int) -> List[Product]:
        return await self._select(lambda p: p.category_id == category_id)

    async def get_active_products(self) -> List[Product]:
        return await self._select(lambda p: p.is_active)

    async def search_by_name(self, term: str) -> List[Product]:
        needle = term.casefold()
        return await self._select(lambda p: needle in p.name.casefold())

    async def get_products_in_price_range(
        self, min_price: Decimal, max_price: Decimal
    ) -> List[Product]:
        return await self._select(lambda p: min_price <= p.price <= max_price)
