from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.product import Product


class ProductBase(BaseModel):
    # Business rules (non-empty name, positive price, known category) are
    # enforced by ProductService so they surface as catalog validation errors
    name: str = Field(..., description="Product name")
    description: str = ""
    price: Decimal = Field(..., description="Product price (must be positive)")
    category_id: int = Field(..., description="ID of an existing category")
    is_active: bool = True


class ProductCreate(ProductBase):
    def to_entity(self) -> Product:
        return Product(**self.model_dump())


class ProductUpdate(ProductBase):
    id: int = Field(..., description="Must match the ID in the URL")

    def to_entity(self) -> Product:
        return Product(**self.model_dump())


class ProductResponse(ProductBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None
