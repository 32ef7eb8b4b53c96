from datetime import datetime
from decimal import Decimal
from typing import ClassVar, Optional, Tuple

from .base import CatalogBaseModel


class Product(CatalogBaseModel):
    MUTABLE_FIELDS: ClassVar[Tuple[str, ...]] = (
        "name",
        "description",
        "price",
        "category_id",
        "is_active",
    )

    name: str = ""
    description: str = ""
    price: Decimal = Decimal("0")
    category_id: int = 0
    is_active: bool = True
    updated_at: Optional[datetime] = None
