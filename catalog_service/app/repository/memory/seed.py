"""Sample catalog every fresh in-memory store starts with"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import List, Optional

from ...models.base import utc_now
from ...models.category import Category
from ...models.product import Product


def sample_categories(now: Optional[datetime] = None) -> List[Category]:
    now = now or utc_now()
    return [
        Category(
            id=1,
            name="Electronics",
            description="Electronic devices and accessories",
            is_active=True,
            created_at=now - timedelta(days=15),
        ),
        Category(
            id=2,
            name="Books",
            description="Educational and reference books",
            is_active=True,
            created_at=now - timedelta(days=12),
        ),
        Category(
            id=3,
            name="Furniture",
            description="Office and home furniture",
            is_active=False,
            created_at=now - timedelta(days=8),
        ),
    ]


def sample_products(now: Optional[datetime] = None) -> List[Product]:
    now = now or utc_now()
    return [
        Product(
            id=1,
            name="Laptop Pro 15",
            description="High-performance laptop for professionals",
            price=Decimal("1299.99"),
            category_id=1,
            is_active=True,
            created_at=now - timedelta(days=10),
        ),
        Product(
            id=2,
            name="Wireless Mouse",
            description="Ergonomic wireless mouse with precision tracking",
            price=Decimal("49.99"),
            category_id=1,
            is_active=True,
            created_at=now - timedelta(days=8),
        ),
        Product(
            id=3,
            name="Programming Book",
            description="Complete guide to modern software development",
            price=Decimal("39.99"),
            category_id=2,
            is_active=True,
            created_at=now - timedelta(days=5),
        ),
        Product(
            id=4,
            name="Mechanical Keyboard",
            description="Premium mechanical keyboard for coding",
            price=Decimal("159.99"),
            category_id=1,
            is_active=True,
            created_at=now - timedelta(days=3),
        ),
        Product(
            id=5,
            name="Design Patterns Guide",
            description="Essential patterns for software architecture",
            price=Decimal("44.99"),
            category_id=2,
            is_active=False,
            created_at=now - timedelta(days=1),
        ),
    ]
