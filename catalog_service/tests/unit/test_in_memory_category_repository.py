import asyncio

import pytest

from catalog_service.app.core.exceptions import RepositoryOperationError
from catalog_service.app.models.category import Category
from catalog_service.app.models.product import Product
from catalog_service.app.repository.memory import InMemoryCategoryRepository


class TestInMemoryCategoryRepository:
    """Unit tests for the seeded category store."""

    @pytest.mark.asyncio
    async def test_seeded_categories(self, category_repository):
        categories = await category_repository.get_all()

        assert [c.id for c in categories] == [1, 2, 3]
        assert [c.name for c in categories] == ["Electronics", "Books", "Furniture"]
        assert categories[2].is_active is False
        assert all(c.created_at is not None for c in categories)

    @pytest.mark.asyncio
    async def test_unseeded_store_is_empty_and_starts_at_one(self):
        repository = InMemoryCategoryRepository(seed_data=False)

        assert await repository.get_all() == []
        created = await repository.add(Category(name="Toys"))
        assert created.id == 1

    @pytest.mark.asyncio
    async def test_get_by_id_missing_returns_none(self, category_repository):
        assert await category_repository.get_by_id(999) is None

    @pytest.mark.asyncio
    async def test_add_assigns_next_id_and_created_at(self, category_repository):
        created = await category_repository.add(
            Category(id=42, name="Garden", description="Outdoor things")
        )

        assert created.id == 4
        assert created.created_at is not None

        stored = await category_repository.get_by_id(created.id)
        assert stored.name == "Garden"
        assert stored.description == "Outdoor things"
        assert stored.is_active is True

    @pytest.mark.asyncio
    async def test_ids_are_never_reused(self, category_repository):
        first = await category_repository.add(Category(name="Garden"))
        assert await category_repository.delete(first.id) is True

        second = await category_repository.add(Category(name="Sports"))
        assert second.id > first.id

    @pytest.mark.asyncio
    async def test_add_does_not_store_transient_products(self, category_repository):
        created = await category_repository.add(
            Category(
                name="Garden",
                products=[Product(id=1, name="Hose", category_id=1)],
            )
        )

        stored = await category_repository.get_by_id(created.id)
        assert stored.products == []

    @pytest.mark.asyncio
    async def test_returned_records_are_detached(self, category_repository):
        category = await category_repository.get_by_id(1)
        category.name = "Changed outside the store"

        stored = await category_repository.get_by_id(1)
        assert stored.name == "Electronics"

    @pytest.mark.asyncio
    async def test_update_copies_mutable_fields_only(self, category_repository):
        original = await category_repository.get_by_id(2)

        updated = await category_repository.update(
            Category(id=2, name="Novels", description="Fiction", is_active=False)
        )

        assert updated.id == 2
        assert updated.name == "Novels"
        assert updated.description == "Fiction"
        assert updated.is_active is False
        assert updated.created_at == original.created_at

    @pytest.mark.asyncio
    async def test_update_unknown_id_raises_operation_error(
        self, category_repository
    ):
        with pytest.raises(RepositoryOperationError) as exc_info:
            await category_repository.update(Category(id=999, name="Ghost"))

        assert "999" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_delete(self, category_repository):
        assert await category_repository.delete(3) is True
        assert await category_repository.exists(3) is False
        assert await category_repository.delete(3) is False

    @pytest.mark.asyncio
    async def test_get_active_categories(self, category_repository):
        active = await category_repository.get_active_categories()

        assert {c.id for c in active} == {1, 2}

    @pytest.mark.asyncio
    async def test_get_category_with_products_does_not_attach(
        self, category_repository
    ):
        category = await category_repository.get_category_with_products(1)

        assert category.id == 1
        assert category.products == []

    @pytest.mark.asyncio
    async def test_search_by_name_is_case_insensitive(self, category_repository):
        results = await category_repository.search_by_name("ELEC")

        assert [c.id for c in results] == [1]
        assert await category_repository.search_by_name("zzz") == []

    @pytest.mark.asyncio
    async def test_concurrent_adds_get_unique_ids(self, category_repository):
        created = await asyncio.gather(
            *(category_repository.add(Category(name=f"Cat {i}")) for i in range(50))
        )

        ids = [c.id for c in created]
        assert len(set(ids)) == 50
        assert min(ids) == 4
        assert len(await category_repository.get_all()) == 53
