"""
Catalog Service storage management
Owns the process-lifetime in-memory stores for every entity type.
"""

from typing import Any, Dict

from ..repository.category_repository import CategoryRepository
from ..repository.memory import InMemoryCategoryRepository, InMemoryProductRepository
from ..repository.product_repository import ProductRepository
from ..utils.logging import setup_catalog_logging as setup_logging
from .setting import get_settings

logger = setup_logging("catalog_service.storage_manager", log_level=get_settings().LOG_LEVEL)


class CatalogStorageManager:
    """Builds the category and product stores once and hands them out.

    One manager is created per application at startup and attached to
    ``app.state``; request handlers reach the stores through FastAPI
    dependencies rather than module globals.
    """

    def __init__(self, seed_data: bool = True) -> None:
        self.seed_data = seed_data
        self.category_repository: CategoryRepository = InMemoryCategoryRepository(
            seed_data=seed_data
        )
        self.product_repository: ProductRepository = InMemoryProductRepository(
            seed_data=seed_data
        )

        logger.info(
            "Catalog storage initialized",
            extra={
                "operation": "storage_init",
                "seed_data": seed_data,
                "service": "catalog_service",
                "event_type": "storage_ready",
            },
        )

    async def stats(self) -> Dict[str, Any]:
        """Record counts per store, used by the health endpoint."""
        categories = await self.category_repository.get_all()
        products = await self.product_repository.get_all()
        return {
            "categories": len(categories),
            "products": len(products),
            "seed_data": self.seed_data,
        }

    async def close(self) -> None:
        """Log final store sizes; in-memory data is discarded with the process."""
        logger.info(
            "Catalog storage released",
            extra={
                "operation": "storage_close",
                "service": "catalog_service",
                "event_type": "storage_shutdown",
                **await self.stats(),
            },
        )
