from typing import ClassVar, List, Tuple

from pydantic import Field

from .base import CatalogBaseModel
from .product import Product


class Category(CatalogBaseModel):
    MUTABLE_FIELDS: ClassVar[Tuple[str, ...]] = ("name", "description", "is_active")
    TRANSIENT_FIELDS: ClassVar[Tuple[str, ...]] = ("products",)

    name: str = ""
    description: str = ""
    is_active: bool = True

    # Populated by CategoryService.get_category_with_products only
    products: List[Product] = Field(default_factory=list)
