from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from catalog_service.app.core.exceptions import CatalogValidationError
from catalog_service.app.models.product import Product


def make_product(**overrides) -> Product:
    data = {
        "name": "USB Hub",
        "description": "Seven ports",
        "price": Decimal("24.50"),
        "category_id": 1,
        "is_active": True,
    }
    data.update(overrides)
    return Product(**data)


class TestProductService:
    """Unit tests for ProductService business rules."""

    # Tests for create_product method
    @pytest.mark.asyncio
    async def test_create_product_success(self, product_service):
        created = await product_service.create_product(make_product())

        assert created.id == 6
        assert created.created_at is not None
        assert await product_service.get_product(6) == created

    @pytest.mark.asyncio
    @pytest.mark.parametrize("price", [Decimal("0"), Decimal("-0.01"), Decimal("-10")])
    async def test_create_product_non_positive_price(self, product_service, price):
        with pytest.raises(CatalogValidationError) as exc_info:
            await product_service.create_product(make_product(price=price))

        assert "greater than zero" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_create_product_unknown_category(self, product_service):
        with pytest.raises(CatalogValidationError) as exc_info:
            await product_service.create_product(make_product(category_id=999))

        assert "Category with ID 999 does not exist" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_create_product_inactive_category_is_allowed(self, product_service):
        created = await product_service.create_product(make_product(category_id=3))

        assert created.category_id == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["", "  "])
    async def test_create_product_empty_name(self, product_service, name):
        with pytest.raises(CatalogValidationError) as exc_info:
            await product_service.create_product(make_product(name=name))

        assert "cannot be empty" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_create_product_invalid_skips_store(self, product_service):
        product_service.repository.add = AsyncMock()

        with pytest.raises(CatalogValidationError):
            await product_service.create_product(make_product(price=Decimal("0")))

        product_service.repository.add.assert_not_called()

    # Tests for update_product method
    @pytest.mark.asyncio
    async def test_update_product_success(self, product_service):
        updated = await product_service.update_product(
            make_product(id=2, name="Silent Mouse", price=Decimal("54.00"))
        )

        assert updated.name == "Silent Mouse"
        assert updated.price == Decimal("54.00")
        assert updated.updated_at is not None

    @pytest.mark.asyncio
    async def test_update_product_missing(self, product_service):
        with pytest.raises(CatalogValidationError) as exc_info:
            await product_service.update_product(make_product(id=999))

        assert "Product with ID 999 does not exist" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_update_product_unknown_category(self, product_service):
        with pytest.raises(CatalogValidationError):
            await product_service.update_product(make_product(id=1, category_id=42))

    @pytest.mark.asyncio
    async def test_update_product_non_positive_price(self, product_service):
        with pytest.raises(CatalogValidationError):
            await product_service.update_product(
                make_product(id=1, price=Decimal("0"))
            )

    # Tests for delete_product method
    @pytest.mark.asyncio
    async def test_delete_product(self, product_service):
        assert await product_service.delete_product(5) is True
        assert await product_service.get_product(5) is None

    @pytest.mark.asyncio
    async def test_delete_product_missing(self, product_service):
        with pytest.raises(CatalogValidationError):
            await product_service.delete_product(999)

    # Tests for query methods
    @pytest.mark.asyncio
    async def test_get_products_by_category(self, product_service):
        products = await product_service.get_products_by_category(2)

        assert [p.id for p in products] == [3, 5]

    @pytest.mark.asyncio
    async def test_get_products_by_unknown_category(self, product_service):
        with pytest.raises(CatalogValidationError):
            await product_service.get_products_by_category(999)

    @pytest.mark.asyncio
    async def test_get_products_by_empty_category(self, product_service):
        assert await product_service.get_products_by_category(3) == []

    @pytest.mark.asyncio
    async def test_get_active_products(self, product_service):
        active = await product_service.get_active_products()

        assert [p.id for p in active] == [1, 2, 3, 4]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("term", ["", " ", None])
    async def test_search_blank_term_returns_all(self, product_service, term):
        results = await product_service.search_products(term)

        assert results == await product_service.get_all_products()

    @pytest.mark.asyncio
    async def test_search_by_term(self, product_service):
        results = await product_service.search_products("BOOK")

        assert [p.id for p in results] == [3]

    @pytest.mark.asyncio
    async def test_price_range(self, product_service):
        products = await product_service.get_products_in_price_range(
            Decimal("40"), Decimal("160")
        )

        assert {p.id for p in products} == {2, 4, 5}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "min_price, max_price, message",
        [
            (Decimal("-1"), Decimal("10"), "cannot be negative"),
            (Decimal("0"), Decimal("-5"), "cannot be negative"),
            (Decimal("50"), Decimal("10"), "cannot be greater"),
        ],
    )
    async def test_price_range_invalid(
        self, product_service, min_price, max_price, message
    ):
        product_service.repository.get_products_in_price_range = AsyncMock()

        with pytest.raises(CatalogValidationError) as exc_info:
            await product_service.get_products_in_price_range(min_price, max_price)

        assert message in str(exc_info.value)
        product_service.repository.get_products_in_price_range.assert_not_called()

    @pytest.mark.asyncio
    async def test_price_range_single_point(self, product_service):
        products = await product_service.get_products_in_price_range(
            Decimal("49.99"), Decimal("49.99")
        )

        assert [p.id for p in products] == [2]
