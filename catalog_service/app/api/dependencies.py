"""
FastAPI dependency injection for Catalog Service

Provides the services wired to the application's storage manager and the
correlation ID of the current request.
"""

from typing import Optional

from fastapi import Depends, Request

from ..core.storage import CatalogStorageManager
from ..services.category_service import CategoryService
from ..services.product_service import ProductService

# =====================================================
# STORAGE DEPENDENCIES
# =====================================================


def get_storage(request: Request) -> CatalogStorageManager:
    """Provide the storage manager created at application startup"""
    return request.app.state.storage


# =====================================================
# SERVICE DEPENDENCIES
# =====================================================


def get_category_service(
    storage: CatalogStorageManager = Depends(get_storage),
) -> CategoryService:
    """Provide CategoryService bound to the shared stores"""
    return CategoryService(storage.category_repository, storage.product_repository)


def get_product_service(
    storage: CatalogStorageManager = Depends(get_storage),
) -> ProductService:
    """Provide ProductService bound to the shared stores"""
    return ProductService(storage.product_repository, storage.category_repository)


# =====================================================
# REQUEST CONTEXT DEPENDENCIES
# =====================================================


def get_correlation_id(request: Request) -> Optional[str]:
    """Extract correlation ID from request headers or state"""
    correlation_id = (
        request.headers.get("X-Correlation-ID")
        or request.headers.get("correlation-id")
        or request.headers.get("x-request-id")
    )

    # Fallback to request state (set by upstream middleware, if any)
    if not correlation_id:
        correlation_id = getattr(request.state, "correlation_id", None)

    if correlation_id:
        request.state.correlation_id = correlation_id
    return correlation_id


# =====================================================
# COMMON DEPENDENCY ALIASES
# =====================================================

CorrelationIdDep = Depends(get_correlation_id)
StorageDep = Depends(get_storage)
CategoryServiceDep = Depends(get_category_service)
ProductServiceDep = Depends(get_product_service)
