from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ..models.category import Category
from .product import ProductResponse


class CategoryBase(BaseModel):
    name: str = Field(..., description="Category name, unique ignoring case")
    description: str = ""
    is_active: bool = True


class CategoryCreate(CategoryBase):
    def to_entity(self) -> Category:
        return Category(**self.model_dump())


class CategoryUpdate(CategoryBase):
    id: int = Field(..., description="Must match the ID in the URL")

    def to_entity(self) -> Category:
        return Category(**self.model_dump())


class CategoryResponse(CategoryBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime


class CategoryWithProductsResponse(CategoryResponse):
    products: List[ProductResponse] = []
