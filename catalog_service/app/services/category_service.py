"""Category service for business logic"""

from typing import List, Optional

from ..core.exceptions import (
    CatalogConflictError,
    CatalogServiceError,
    CatalogValidationError,
)
from ..core.setting import get_settings
from ..models.category import Category
from ..repository.category_repository import CategoryRepository
from ..repository.product_repository import ProductRepository
from ..utils.logging import setup_catalog_logging as setup_logging

settings = get_settings()
logger = setup_logging("category_service", log_level=settings.LOG_LEVEL)


class CategoryService:
    """Service class for category business logic.

    Enforces what the store does not: non-empty and case-insensitively unique
    names, and no deletion while products still reference the category.
    """

    def __init__(
        self,
        category_repository: CategoryRepository,
        product_repository: ProductRepository,
    ):
        self.repository = category_repository
        self.product_repository = product_repository

    async def get_all_categories(self) -> List[Category]:
        """Get every category"""
        return await self.repository.get_all()

    async def get_category(
        self, category_id: int, correlation_id: Optional[str] = None
    ) -> Optional[Category]:
        """Get category by ID"""
        category = await self.repository.get_by_id(category_id)
        if not category:
            return None

        logger.info(
            "Category retrieved",
            extra={
                "category_id": category_id,
                "correlation_id": correlation_id,
            },
        )
        return category

    async def get_active_categories(self) -> List[Category]:
        """Get categories flagged active"""
        return await self.repository.get_active_categories()

    async def create_category(
        self, category: Category, correlation_id: Optional[str] = None
    ) -> Category:
        """Create a new category with validation"""
        try:
            self._validate_name(category.name)
            await self._ensure_unique_name(category.name)

            created = await self.repository.add(category)

            logger.info(
                "Category created successfully",
                extra={
                    "category_id": created.id,
                    "category_name": created.name,
                    "correlation_id": correlation_id,
                },
            )
            return created

        except Exception as e:
            self._log_failure("create", e, category.id, correlation_id)
            raise

    async def update_category(
        self, category: Category, correlation_id: Optional[str] = None
    ) -> Category:
        """Update category"""
        try:
            if not await self.repository.exists(category.id):
                raise CatalogValidationError(
                    f"Category with ID {category.id} does not exist"
                )

            self._validate_name(category.name)
            await self._ensure_unique_name(category.name, exclude_id=category.id)

            updated = await self.repository.update(category)

            logger.info(
                "Category updated successfully",
                extra={
                    "category_id": updated.id,
                    "correlation_id": correlation_id,
                },
            )
            return updated

        except Exception as e:
            self._log_failure("update", e, category.id, correlation_id)
            raise

    async def delete_category(
        self, category_id: int, correlation_id: Optional[str] = None
    ) -> bool:
        """Delete category once no product references it"""
        try:
            if not await self.repository.exists(category_id):
                raise CatalogValidationError(
                    f"Category with ID {category_id} does not exist"
                )

            products = await self.product_repository.get_by_category_id(category_id)
            if products:
                raise CatalogConflictError(
                    f"Cannot delete category with ID {category_id} "
                    "because it contains products"
                )

            success = await self.repository.delete(category_id)
            if success:
                logger.info(
                    "Category deleted successfully",
                    extra={
                        "category_id": category_id,
                        "correlation_id": correlation_id,
                    },
                )
            return success

        except Exception as e:
            self._log_failure("delete", e, category_id, correlation_id)
            raise

    async def get_category_with_products(
        self, category_id: int, correlation_id: Optional[str] = None
    ) -> Optional[Category]:
        """Get category with its products attached"""
        category = await self.repository.get_category_with_products(category_id)
        if not category:
            return None

        category.products = await self.product_repository.get_by_category_id(
            category_id
        )

        logger.info(
            "Category retrieved with products",
            extra={
                "category_id": category_id,
                "product_count": len(category.products),
                "correlation_id": correlation_id,
            },
        )
        return category

    async def search_categories(self, search_term: Optional[str]) -> List[Category]:
        """Search categories by name; a blank term lists everything"""
        if not search_term or not search_term.strip():
            return await self.repository.get_all()

        return await self.repository.search_by_name(search_term)

    @staticmethod
    def _validate_name(name: Optional[str]) -> None:
        if not name or not name.strip():
            raise CatalogValidationError("Category name cannot be empty")

    async def _ensure_unique_name(
        self, name: str, exclude_id: Optional[int] = None
    ) -> None:
        wanted = name.casefold()
        for existing in await self.repository.get_all():
            if existing.id != exclude_id and existing.name.casefold() == wanted:
                raise CatalogValidationError(
                    f"A category with the name '{name}' already exists"
                )

    @staticmethod
    def _log_failure(
        operation: str,
        error: Exception,
        category_id: Optional[int],
        correlation_id: Optional[str],
    ) -> None:
        context = {
            "operation": operation,
            "category_id": category_id,
            "correlation_id": correlation_id,
            "error": str(error),
        }
        if isinstance(error, CatalogServiceError):
            logger.warning(f"Category {operation} rejected: {error}", extra=context)
        else:
            logger.error(
                f"Failed to {operation} category: {error}",
                extra=context,
                exc_info=True,
            )
