"""Category repository contract"""

from abc import abstractmethod
from typing import List, Optional

from ..models.category import Category
from .base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """Category-specific queries on top of the generic CRUD contract"""

    @abstractmethod
    async def get_active_categories(self) -> List[Category]:
        """Get categories flagged active"""

    @abstractmethod
    async def get_category_with_products(self, category_id: int) -> Optional[Category]:
        """Get a category by id; products are attached by the service layer"""

    @abstractmethod
    async def search_by_name(self, term: str) -> List[Category]:
        """Case-insensitive substring search on name"""
