"""Product service for business logic"""

from decimal import Decimal
from typing import List, Optional

from ..core.exceptions import CatalogServiceError, CatalogValidationError
from ..core.setting import get_settings
from ..models.product import Product
from ..repository.category_repository import CategoryRepository
from ..repository.product_repository import ProductRepository
from ..utils.logging import setup_catalog_logging as setup_logging

settings = get_settings()
logger = setup_logging("product_service", log_level=settings.LOG_LEVEL)


class ProductService:
    """Service class for product business logic"""

    def __init__(
        self,
        product_repository: ProductRepository,
        category_repository: CategoryRepository,
    ):
        self.repository = product_repository
        self.category_repository = category_repository

    async def get_all_products(self) -> List[Product]:
        return await self.repository.get_all()

    async def get_product(
        self, product_id: int, correlation_id: Optional[str] = None
    ) -> Optional[Product]:
        """Get product by ID"""
        product = await self.repository.get_by_id(product_id)
        if not product:
            return None

        logger.info(
            "Product retrieved",
            extra={
                "product_id": product_id,
                "correlation_id": correlation_id,
            },
        )
        return product

    async def get_active_products(self) -> List[Product]:
        return await self.repository.get_active_products()

    async def create_product(
        self, product: Product, correlation_id: Optional[str] = None
    ) -> Product:
        """Create a new product"""
        try:
            await self._ensure_category_exists(product.category_id)
            self._validate_price(product.price)
            if not product.name or not product.name.strip():
                raise CatalogValidationError("Product name cannot be empty")

            created = await self.repository.add(product)

            logger.info(
                "Product created successfully",
                extra={
                    "product_id": created.id,
                    "category_id": created.category_id,
                    "correlation_id": correlation_id,
                },
            )
            return created

        except Exception as e:
            self._log_failure("create", e, product.id, correlation_id)
            raise

    async def update_product(
        self, product: Product, correlation_id: Optional[str] = None
    ) -> Product:
        """Update product"""
        try:
            if not await self.repository.exists(product.id):
                raise CatalogValidationError(
                    f"Product with ID {product.id} does not exist"
                )

            await self._ensure_category_exists(product.category_id)
            self._validate_price(product.price)

            updated = await self.repository.update(product)

            logger.info(
                "Product updated successfully",
                extra={
                    "product_id": updated.id,
                    "correlation_id": correlation_id,
                },
            )
            return updated

        except Exception as e:
            self._log_failure("update", e, product.id, correlation_id)
            raise

    async def delete_product(
        self, product_id: int, correlation_id: Optional[str] = None
    ) -> bool:
        """Delete product"""
        try:
            if not await self.repository.exists(product_id):
                raise CatalogValidationError(
                    f"Product with ID {product_id} does not exist"
                )

            success = await self.repository.delete(product_id)
            if success:
                logger.info(
                    "Product deleted successfully",
                    extra={
                        "product_id": product_id,
                        "correlation_id": correlation_id,
                    },
                )
            return success

        except Exception as e:
            self._log_failure("delete", e, product_id, correlation_id)
            raise

    async def get_products_by_category(self, category_id: int) -> List[Product]:
        """Get products of an existing category"""
        await self._ensure_category_exists(category_id)
        return await self.repository.get_by_category_id(category_id)

    async def search_products(self, search_term: Optional[str]) -> List[Product]:
        """Search products by name; a blank term lists everything"""
        if not search_term or not search_term.strip():
            return await self.repository.get_all()

        return await self.repository.search_by_name(search_term)

    async def get_products_in_price_range(
        self, min_price: Decimal, max_price: Decimal
    ) -> List[Product]:
        """Get products priced within an inclusive range"""
        if min_price < 0 or max_price < 0:
            raise CatalogValidationError("Price values cannot be negative")

        if min_price > max_price:
            raise CatalogValidationError(
                "Minimum price cannot be greater than maximum price"
            )

        return await self.repository.get_products_in_price_range(min_price, max_price)

    async def _ensure_category_exists(self, category_id: int) -> None:
        if not await self.category_repository.exists(category_id):
            raise CatalogValidationError(
                f"Category with ID {category_id} does not exist"
            )

    @staticmethod
    def _validate_price(price: Decimal) -> None:
        if price <= 0:
            raise CatalogValidationError("Product price must be greater than zero")

    @staticmethod
    def _log_failure(
        operation: str,
        error: Exception,
        product_id: Optional[int],
        correlation_id: Optional[str],
    ) -> None:
        context = {
            "operation": operation,
            "product_id": product_id,
            "correlation_id": correlation_id,
            "error": str(error),
        }
        if isinstance(error, CatalogServiceError):
            logger.warning(f"Product {operation} rejected: {error}", extra=context)
        else:
            logger.error(
                f"Failed to {operation} product: {error}",
                extra=context,
                exc_info=True,
            )
