"""In-memory category repository"""

from typing import List, Optional

from ...models.category import Category
from ..category_repository import CategoryRepository
from .base import InMemoryRepository
from .seed import sample_categories


class InMemoryCategoryRepository(InMemoryRepository[Category], CategoryRepository):
    """Category store; never cascades anything to products"""

    entity_name = "Category"

    def __init__(self, seed_data: bool = True) -> None:
        super().__init__(sample_categories() if seed_data else None)

    async def get_active_categories(self) -> List[Category]:
        return await self._select(lambda c: c.is_active)

    async def get_category_with_products(self, category_id: int) -> Optional[Category]:
        # The store has no view of products; CategoryService joins them in
        return await self.get_by_id(category_id)

    async def search_by_name(self, term: str) -> List[Category]:
        needle = term.casefold()
        return await self._select(lambda c: needle in c.name.casefold())
